"""
Contracts (data models and interfaces).

This folder defines the shapes the storefront uses to talk to its UI:
- Notification payloads and their severity
- The Notifier and Navigator interfaces
- Route names

Both the mock clients and any real UI adapter must follow these contracts.
"""
from .interfaces import Navigator, Notification, Notifier, Routes, Severity

__all__ = ["Navigator", "Notification", "Notifier", "Routes", "Severity"]
