"""Estado de sessão do cliente Mollom."""

from mollom.sessions.session_state import SessionState

__all__ = ["SessionState"]
