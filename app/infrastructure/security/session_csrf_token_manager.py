"""CSRF tokens kept in the caller's (signed-cookie) session."""

import hmac
import secrets
from collections.abc import MutableMapping
from typing import Any

from app.application.interfaces import CsrfTokenManager

_SESSION_KEY = "_csrf_tokens"


class SessionCsrfTokenManager(CsrfTokenManager):
    """One random token per intention, stored in the session mapping.

    The mapping is normally ``request.session`` (Starlette SessionMiddleware),
    which scopes tokens to the browser session that received them.
    """

    def __init__(self, session: MutableMapping[str, Any], token_bytes: int = 32):
        self._session = session
        self._token_bytes = token_bytes

    def _tokens(self) -> dict[str, str]:
        tokens = self._session.get(_SESSION_KEY)
        if not isinstance(tokens, dict):
            tokens = {}
            self._session[_SESSION_KEY] = tokens
        return tokens

    def issue(self, intention: str) -> str:
        tokens = self._tokens()
        token = tokens.get(intention)
        if not token:
            token = secrets.token_urlsafe(self._token_bytes)
            tokens[intention] = token
            self._session[_SESSION_KEY] = tokens
        return token

    def verify(self, intention: str, token: str | None) -> bool:
        expected = self._tokens().get(intention)
        if not expected or not token:
            return False
        return hmac.compare_digest(expected.encode("utf-8"), token.encode("utf-8"))
