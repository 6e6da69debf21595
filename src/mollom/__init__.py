"""Mollom: cliente do serviço de moderação de conteúdo via XML-RPC.

Subpastas:
- bootstrap/: composition root (factories a partir de settings)
- services/: dispatcher (assinatura, rotação de servidores, faults)
- infra/: implementações concretas de IO (transporte, assinatura, pool)
- protocols/: contratos/interfaces
- domain/: credenciais, schemas de argumentos e resultados
- sessions/: token de sessão por instância
- observability/: correlation_id para logs estruturados

Uso:
    from mollom import MollomClient

    client = MollomClient("public", "private")
    check = client.check_content(post_body="texto")
"""

from mollom.client import MollomClient
from mollom.domain.content_check import ContentCheck
from mollom.errors import (
    ArgumentValidationError,
    ConfigurationError,
    EmptyPoolError,
    MollomError,
    NoMoreServersError,
    RemoteFaultError,
    ServerListUnavailableError,
    TransportError,
)

__version__ = "0.1.0"

__all__ = [
    "ArgumentValidationError",
    "ConfigurationError",
    "ContentCheck",
    "EmptyPoolError",
    "MollomClient",
    "MollomError",
    "NoMoreServersError",
    "RemoteFaultError",
    "ServerListUnavailableError",
    "TransportError",
    "__version__",
]
