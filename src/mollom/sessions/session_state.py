"""Token de sessão do Mollom por instância de cliente.

O servidor devolve um session_id em checkContent/getCaptcha; chamadas
seguintes de feedback/CAPTCHA sobre o mesmo conteúdo precisam enviá-lo.
"""

from __future__ import annotations


class SessionState:
    """Guarda o último session_id recebido. Nunca é limpo explicitamente."""

    __slots__ = ("_token",)

    def __init__(self, token: str | None = None) -> None:
        self._token = token

    def get(self) -> str | None:
        return self._token

    def set(self, token: str | None) -> None:
        self._token = token
