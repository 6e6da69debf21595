"""Configuração do pytest para o cliente Mollom."""

import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from config.settings import get_mollom_settings  # noqa: E402
from mollom.infra.servers import reset_server_pool  # noqa: E402


@pytest.fixture(autouse=True)
def _isolate_process_state(monkeypatch: pytest.MonkeyPatch):
    """Pool de servidores e settings são singletons do processo: zera entre testes."""
    for var in (
        "MOLLOM_PUBLIC_KEY",
        "MOLLOM_PRIVATE_KEY",
        "MOLLOM_SERVERS",
        "MOLLOM_API_VERSION",
        "MOLLOM_REQUEST_TIMEOUT_SECONDS",
        "MOLLOM_MAX_REFRESHES",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(var, raising=False)
    reset_server_pool()
    get_mollom_settings.cache_clear()
    yield
    reset_server_pool()
    get_mollom_settings.cache_clear()
