from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class Severity(str, Enum):
    DEFAULT = "default"
    DESTRUCTIVE = "destructive"


class Routes:
    HOME = "/"
    LOGIN = "/login"
    PROFILE = "/profile"
    ADMIN = "/admin"


# ---------------------------------------------------------------------------
# Shared data models
# ---------------------------------------------------------------------------

@dataclass
class Notification:
    title: str
    description: str
    severity: Severity = Severity.DEFAULT
    created_at: datetime = field(default_factory=datetime.utcnow)


# ---------------------------------------------------------------------------
# Abstract collaborator interfaces
# ---------------------------------------------------------------------------

class Notifier(ABC):
    """Toast surface. Notifications never influence storefront state."""

    @abstractmethod
    def notify(self, title: str, description: str, severity: Severity = Severity.DEFAULT) -> None:
        """Show a user-visible notification."""


class Navigator(ABC):
    """Router used to move between views."""

    @abstractmethod
    def navigate_to(self, route: str) -> None:
        """Switch the visible view to ``route``."""
