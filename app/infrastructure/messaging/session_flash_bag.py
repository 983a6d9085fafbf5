"""Flash notifications queued in the session until the next rendered view."""

from collections.abc import MutableMapping
from typing import Any

from app.application.interfaces import FlashBag
from app.domain.entities import Notification, Severity

_SESSION_KEY = "_flashes"


class SessionFlashBag(FlashBag):
    """Stores ``[severity, message]`` pairs so the session stays JSON-serialisable."""

    def __init__(self, session: MutableMapping[str, Any]):
        self._session = session

    def push(self, severity: Severity, message: str) -> None:
        queued = list(self._session.get(_SESSION_KEY, []))
        queued.append([Severity(severity).value, message])
        self._session[_SESSION_KEY] = queued

    def peek(self) -> list[Notification]:
        return [
            Notification(severity=Severity(severity), message=message)
            for severity, message in self._session.get(_SESSION_KEY, [])
        ]

    def drain(self) -> list[Notification]:
        notifications = self.peek()
        self._session.pop(_SESSION_KEY, None)
        return notifications
