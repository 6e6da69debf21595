"""Credenciais do site na API Mollom."""

from __future__ import annotations

from dataclasses import dataclass

from mollom.errors import ConfigurationError


@dataclass(frozen=True)
class Credentials:
    """Par de chaves imutável fornecido na construção do cliente.

    Attributes:
        public_key: Chave pública (enviada em toda chamada)
        private_key: Chave privada (usada só para assinar; nunca enviada)
    """

    public_key: str
    private_key: str

    def __post_init__(self) -> None:
        errors = self.validate()
        if errors:
            raise ConfigurationError("; ".join(errors))

    def validate(self) -> list[str]:
        """Retorna lista de erros (vazia = OK)."""
        errors: list[str] = []
        if not isinstance(self.public_key, str) or not self.public_key.strip():
            errors.append("public_key é obrigatória")
        if not isinstance(self.private_key, str) or not self.private_key.strip():
            errors.append("private_key é obrigatória")
        return errors

    def __repr__(self) -> str:
        # private_key fica fora de logs e tracebacks
        return f"Credentials(public_key={self.public_key!r}, private_key='***')"
