from abc import ABC, abstractmethod


class CsrfTokenManager(ABC):
    """Issues and verifies per-intention CSRF tokens for the caller's session."""

    @abstractmethod
    def issue(self, intention: str) -> str:
        """Return the token for *intention*, creating it on first use."""
        ...

    @abstractmethod
    def verify(self, intention: str, token: str | None) -> bool:
        """True when *token* matches the token issued for *intention*."""
        ...
