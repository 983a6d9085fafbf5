from abc import ABC, abstractmethod

from app.domain.entities import Notification, Severity


class FlashBag(ABC):
    """Queue of one-shot notifications shown on the next rendered view."""

    @abstractmethod
    def push(self, severity: Severity, message: str) -> None:
        ...

    @abstractmethod
    def drain(self) -> list[Notification]:
        """Return the queued notifications and empty the queue."""
        ...
