"""Mock router that records where the user was sent."""

from __future__ import annotations

import logging
from typing import List

from autoparts.integrations.contracts.interfaces import Navigator, Routes

logger = logging.getLogger(__name__)


class InMemoryNavigator(Navigator):
    def __init__(self, start: str = Routes.HOME) -> None:
        self.history: List[str] = [start]

    @property
    def current(self) -> str:
        return self.history[-1]

    def navigate_to(self, route: str) -> None:
        logger.debug("Navigating %s -> %s", self.current, route)
        self.history.append(route)
