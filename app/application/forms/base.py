"""Form binding — raw request input → validated values, never raising."""

from collections.abc import Mapping
from typing import Any

from app.application.interfaces import CsrfTokenManager

TOKEN_FIELD = "_token"
INVALID_VALUE = "Cette valeur n'est pas valide."
INVALID_CSRF = "Le jeton CSRF est invalide. Veuillez renvoyer le formulaire."


class Form:
    """Base class for CSRF-protected forms.

    ``handle(None)`` leaves the form unsubmitted; any mapping counts as a
    submission. Subclasses implement ``_bind`` to read their fields and
    record errors with ``add_error``.
    """

    intention: str = "form"

    def __init__(self, csrf: CsrfTokenManager):
        self._csrf = csrf
        self._submitted = False
        self.data: dict[str, Any] = {}
        self.errors: dict[str, list[str]] = {}

    @property
    def token(self) -> str:
        return self._csrf.issue(self.intention)

    def handle(self, raw: Mapping[str, Any] | None) -> None:
        if raw is None:
            return
        self._submitted = True
        self.errors = {}
        if not self._csrf.verify(self.intention, _clean(raw.get(TOKEN_FIELD))):
            self.add_error(TOKEN_FIELD, INVALID_CSRF)
        self._bind(raw)

    def is_submitted(self) -> bool:
        return self._submitted

    def is_valid(self) -> bool:
        return self._submitted and not self.errors

    def add_error(self, field_name: str, message: str) -> None:
        self.errors.setdefault(field_name, []).append(message)

    def _bind(self, raw: Mapping[str, Any]) -> None:
        pass

    def _read_text(self, raw: Mapping[str, Any], field_name: str) -> str | None:
        """Trimmed string value; malformed values are recorded as errors."""
        value = raw.get(field_name)
        if value is None or isinstance(value, str):
            return _clean(value)
        self.add_error(field_name, INVALID_VALUE)
        return None


def _clean(value: Any) -> str | None:
    if not isinstance(value, str):
        return None
    value = value.strip()
    return value or None
