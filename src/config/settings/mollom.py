"""Settings do cliente Mollom.

Credenciais, versão da API, servidores-semente e limites de retry.
Chaves passadas explicitamente ao cliente sempre vencem as settings.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from config.logging.config import VALID_LOG_LEVELS
from mollom.infra.servers.server_pool import DEFAULT_SERVERS

MOLLOM_API_VERSION: str = "1.0"


@dataclass(frozen=True)
class MollomSettings:
    """Configurações do cliente Mollom.

    Attributes:
        public_key: Chave pública do site
        private_key: Chave privada do site (usada só para assinar)
        api_version: Versão da API anexada à URL do servidor
        servers: Servidores usados até o primeiro getServerList
        request_timeout_seconds: Timeout HTTP por chamada
        max_refreshes: Máximo de refreshes da lista por chamada
        log_level: Nível de log do cliente
    """

    # Credenciais
    public_key: str = ""
    private_key: str = ""

    # API
    api_version: str = MOLLOM_API_VERSION
    servers: tuple[str, ...] = DEFAULT_SERVERS

    # Timeouts e retries
    request_timeout_seconds: float = 10.0
    max_refreshes: int = 3

    log_level: str = "INFO"

    @property
    def has_credentials(self) -> bool:
        """Retorna True se as duas chaves estão configuradas."""
        return bool(self.public_key and self.private_key)

    def validate(self) -> list[str]:
        """Valida configurações mínimas.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.public_key:
            errors.append("MOLLOM_PUBLIC_KEY não configurado")

        if not self.private_key:
            errors.append("MOLLOM_PRIVATE_KEY não configurado")

        if not self.servers:
            errors.append("MOLLOM_SERVERS não pode ser vazio")

        if self.request_timeout_seconds <= 0:
            errors.append("MOLLOM_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        if self.max_refreshes < 0:
            errors.append("MOLLOM_MAX_REFRESHES deve ser >= 0")

        if self.log_level.upper() not in VALID_LOG_LEVELS:
            errors.append(f"LOG_LEVEL inválido: {self.log_level}")

        return errors


def _parse_servers(raw: str | None) -> tuple[str, ...]:
    """Converte lista separada por vírgula; vazio mantém o seed padrão."""
    if not raw:
        return DEFAULT_SERVERS
    servers = tuple(item.strip() for item in raw.split(",") if item.strip())
    return servers or DEFAULT_SERVERS


def _load_from_env() -> MollomSettings:
    """Carrega MollomSettings a partir de variáveis de ambiente."""
    return MollomSettings(
        public_key=os.getenv("MOLLOM_PUBLIC_KEY", ""),
        private_key=os.getenv("MOLLOM_PRIVATE_KEY", ""),
        api_version=os.getenv("MOLLOM_API_VERSION", MOLLOM_API_VERSION),
        servers=_parse_servers(os.getenv("MOLLOM_SERVERS")),
        request_timeout_seconds=float(os.getenv("MOLLOM_REQUEST_TIMEOUT_SECONDS", "10")),
        max_refreshes=int(os.getenv("MOLLOM_MAX_REFRESHES", "3")),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )


@lru_cache(maxsize=1)
def get_mollom_settings() -> MollomSettings:
    """Retorna instância cacheada de MollomSettings.

    A cache garante singleton para múltiplas injeções.
    """
    return _load_from_env()
