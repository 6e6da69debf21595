"""Composition root do cliente Mollom.

Monta MollomClient a partir de MollomSettings (variáveis de ambiente) e
liga o logging JSON ao correlation_id do cliente.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.logging import configure_logging
from config.settings import get_mollom_settings
from mollom.client import MollomClient
from mollom.errors import ConfigurationError
from mollom.observability import get_correlation_id

if TYPE_CHECKING:
    from config.settings import MollomSettings
    from mollom.protocols.transport import TransportFactory

logger = logging.getLogger(__name__)


def create_mollom_client(
    settings: MollomSettings | None = None,
    *,
    transport_factory: TransportFactory | None = None,
) -> MollomClient:
    """Cria cliente Mollom a partir das settings.

    Args:
        settings: Settings a usar. Usa get_mollom_settings() se None.
        transport_factory: Transporte alternativo (testes).

    Raises:
        ConfigurationError: Se as settings forem inválidas.
    """
    settings = settings or get_mollom_settings()
    errors = settings.validate()
    if errors:
        logger.error("mollom_settings_invalid", extra={"error_count": len(errors)})
        raise ConfigurationError("; ".join(errors))

    client = MollomClient(
        settings.public_key,
        settings.private_key,
        settings=settings,
        transport_factory=transport_factory,
    )
    logger.info(
        "mollom_client_created",
        extra={"api_version": settings.api_version, "seed_servers": len(settings.servers)},
    )
    return client


def configure_client_logging(settings: MollomSettings | None = None) -> None:
    """Configura logging JSON com o correlation_id do cliente."""
    settings = settings or get_mollom_settings()
    configure_logging(
        level=settings.log_level,
        correlation_id_getter=get_correlation_id,
    )
