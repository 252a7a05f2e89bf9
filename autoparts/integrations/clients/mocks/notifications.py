"""
Mock notification clients.

LoggingNotifier writes every toast to the log; InMemoryNotifier keeps them
in a list so tests and headless callers can inspect what the user would
have seen.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from autoparts.integrations.contracts.interfaces import Notification, Notifier, Severity

logger = logging.getLogger(__name__)


class LoggingNotifier(Notifier):
    def notify(self, title: str, description: str, severity: Severity = Severity.DEFAULT) -> None:
        level = logging.WARNING if severity == Severity.DESTRUCTIVE else logging.INFO
        logger.log(level, "[%s] %s: %s", severity.value, title, description)


class InMemoryNotifier(Notifier):
    def __init__(self) -> None:
        self.notifications: List[Notification] = []

    def notify(self, title: str, description: str, severity: Severity = Severity.DEFAULT) -> None:
        self.notifications.append(Notification(title=title, description=description, severity=severity))

    @property
    def last(self) -> Optional[Notification]:
        return self.notifications[-1] if self.notifications else None

    def clear(self) -> None:
        self.notifications.clear()
