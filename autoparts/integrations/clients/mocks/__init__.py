"""
Mock collaborator clients.

These clients stand in for the browser UI without rendering anything.
They are used when:
- The storefront runs headless (scripts, local development)
- Tests need to observe which toasts were shown and where the user was sent

Mock clients follow the SAME interface as a real UI adapter
(autoparts/integrations/contracts/interfaces.py).
"""
from .navigation import InMemoryNavigator
from .notifications import InMemoryNotifier, LoggingNotifier

__all__ = ["InMemoryNavigator", "InMemoryNotifier", "LoggingNotifier"]
