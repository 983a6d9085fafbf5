"""Flash notification value objects."""

from dataclasses import dataclass
from enum import Enum


class Severity(str, Enum):
    """Display severity of a flash notification."""

    SUCCESS = "success"
    INFO = "info"
    DANGER = "danger"


@dataclass(frozen=True)
class Notification:
    """One-shot message queued for the next rendered view."""

    severity: Severity
    message: str
