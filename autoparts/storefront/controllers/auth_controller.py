"""Controller for the login/register page and the profile page."""
from __future__ import annotations

import logging
from typing import List, Optional

from autoparts.error_handler import ERROR_TITLE, ErrorHandler
from autoparts.integrations.contracts.interfaces import Navigator, Notifier, Routes, Severity
from autoparts.storefront.errors import AccessDeniedError, StorefrontError
from autoparts.storefront.models import Order, User
from autoparts.storefront.profile import demo_order_history
from autoparts.storefront.session import SessionManager

logger = logging.getLogger(__name__)


class AuthController:
    def __init__(self, session: SessionManager, notifier: Notifier, navigator: Navigator):
        self.session = session
        self.notifier = notifier
        self.navigator = navigator
        self.errors = ErrorHandler(notifier)
        self.is_loading = False

    async def submit_login(self, email: str, password: str) -> Optional[User]:
        self.is_loading = True
        try:
            user = await self.session.login(email, password)
        except StorefrontError as e:
            logger.warning("Login failed: %s", e)
            self.notifier.notify(ERROR_TITLE, "Неверный email или пароль", Severity.DESTRUCTIVE)
            return None
        finally:
            self.is_loading = False
        self.notifier.notify("Вход выполнен", "Добро пожаловать!")
        self.navigator.navigate_to(Routes.PROFILE)
        return user

    async def submit_register(self, email: str, password: str, name: str) -> Optional[User]:
        self.is_loading = True
        try:
            user = await self.session.register(email, password, name)
        except StorefrontError as e:
            logger.warning("Registration failed: %s", e)
            self.notifier.notify(ERROR_TITLE, "Не удалось создать аккаунт", Severity.DESTRUCTIVE)
            return None
        finally:
            self.is_loading = False
        self.notifier.notify("Регистрация успешна", "Ваш аккаунт создан")
        self.navigator.navigate_to(Routes.PROFILE)
        return user

    def logout(self) -> None:
        try:
            self.session.logout()
        except StorefrontError as e:
            self.errors.handle_exception(e, context={"action": "logout"})
            return
        self.navigator.navigate_to(Routes.HOME)

    def open_profile(self) -> Optional[List[Order]]:
        """Return the order history for the profile page, or redirect to login."""
        try:
            self.session.require_user()
        except AccessDeniedError as e:
            self.navigator.navigate_to(e.redirect_to)
            return None
        return demo_order_history()

    def open_admin(self) -> bool:
        try:
            self.session.require_admin()
        except AccessDeniedError as e:
            self.navigator.navigate_to(e.redirect_to)
            return False
        self.navigator.navigate_to(Routes.ADMIN)
        return True
