"""
Session and mock authentication for the storefront

Holds the single current-user slot and mirrors it to durable storage.
Authentication is a stub: no password is verified. The configured admin
credentials produce the admin account, any other email/password logs in as a
regular user derived from the email address.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

from autoparts.database.storage import KeyValueStorage
from autoparts.utils.config_loader import AuthConfig
from autoparts.utils.id_generator import IdGenerator

from .errors import AccessDeniedError, PersistenceError
from .models import Role, User

logger = logging.getLogger(__name__)


class SessionManager:
    def __init__(
        self,
        storage: KeyValueStorage,
        auth: Optional[AuthConfig] = None,
        storage_key: str = "user",
        id_generator: Optional[IdGenerator] = None,
    ):
        self.storage = storage
        self.auth = auth or AuthConfig()
        self.storage_key = storage_key
        self.ids = id_generator or IdGenerator()
        self._user: Optional[User] = None

    @property
    def current_user(self) -> Optional[User]:
        return self._user

    @property
    def is_authenticated(self) -> bool:
        return self._user is not None

    @property
    def is_admin(self) -> bool:
        return self._user is not None and self._user.role == Role.ADMIN

    def restore(self) -> Optional[User]:
        """Load the persisted user, if any, into the current-user slot."""
        data = self.storage.get_json(self.storage_key)
        if data is None:
            self._user = None
            return None
        try:
            self._user = User.from_dict(data)
        except (KeyError, TypeError, ValueError) as e:
            raise PersistenceError(f"Stored user record is malformed: {e}", key=self.storage_key) from e
        logger.info("Restored session for user_id=%s", self._user.id)
        return self._user

    async def login(self, email: str, password: str) -> User:
        """Log in; never fails on credentials."""
        await asyncio.sleep(self.auth.latency_seconds)

        if email == self.auth.admin_email and password == self.auth.admin_password:
            user = User(id=self.auth.admin_user_id, email=self.auth.admin_email, name=self.auth.admin_name, role=Role.ADMIN)
        else:
            user = User(id=self.auth.regular_user_id, email=email, name=email.split("@")[0], role=Role.USER)

        self._set_user(user)
        logger.info("Login: user_id=%s role=%s", user.id, user.role.value)
        return user

    async def register(self, email: str, password: str, name: str) -> User:
        """Create an account; always succeeds."""
        await asyncio.sleep(self.auth.latency_seconds)

        user = User(id=self.ids.next_id(), email=email, name=name, role=Role.USER)
        self._set_user(user)
        logger.info("Registered user_id=%s", user.id)
        return user

    def logout(self) -> None:
        self.storage.delete(self.storage_key)
        previous = self._user
        self._user = None
        if previous is not None:
            logger.info("Logout: user_id=%s", previous.id)

    def require_user(self) -> User:
        if self._user is None:
            raise AccessDeniedError("Войдите, чтобы открыть профиль")
        return self._user

    def require_admin(self) -> User:
        if self._user is None or self._user.role != Role.ADMIN:
            logger.warning("Admin access denied for user_id=%s", self._user.id if self._user else None)
            raise AccessDeniedError("Требуются права администратора")
        return self._user

    def _set_user(self, user: User) -> None:
        # Persist first: a failed write leaves the slot unchanged.
        self.storage.set_json(self.storage_key, user.to_dict())
        self._user = user
