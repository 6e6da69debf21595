"""Agregador de settings do cliente Mollom."""

from __future__ import annotations

from config.settings.mollom import (
    MOLLOM_API_VERSION,
    MollomSettings,
    get_mollom_settings,
)

__all__ = [
    "MOLLOM_API_VERSION",
    "MollomSettings",
    "get_mollom_settings",
]
