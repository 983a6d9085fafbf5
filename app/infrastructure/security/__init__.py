from .session_csrf_token_manager import SessionCsrfTokenManager

__all__ = ["SessionCsrfTokenManager"]
