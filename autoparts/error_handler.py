"""Error handling helpers that turn storefront failures into notifications."""
from typing import Any, Dict
import logging

from autoparts.integrations.contracts.interfaces import Notifier, Severity
from autoparts.storefront.errors import (
    AccessDeniedError,
    NotFoundError,
    PersistenceError,
    StorefrontError,
    ValidationError,
)

logger = logging.getLogger(__name__)

ERROR_TITLE = "Ошибка"


class ErrorHandler:
    def __init__(self, notifier: Notifier):
        self.notifier = notifier

    def describe(self, exc: Exception) -> str:
        if isinstance(exc, ValidationError):
            return exc.message
        if isinstance(exc, PersistenceError):
            return "Не удалось обратиться к хранилищу данных. Попробуйте позже."
        if isinstance(exc, AccessDeniedError):
            return str(exc)
        if isinstance(exc, NotFoundError):
            return "Запрошенный объект не найден"
        return "Что-то пошло не так. Попробуйте позже."

    def handle_exception(self, exc: Exception, context: Dict[str, Any] = None) -> Dict[str, Any]:
        if isinstance(exc, PersistenceError) or not isinstance(exc, StorefrontError):
            logger.error("Storefront operation failed: %s", exc, exc_info=True)
        else:
            logger.warning("Storefront operation rejected: %s", exc)

        description = self.describe(exc)
        self.notifier.notify(ERROR_TITLE, description, Severity.DESTRUCTIVE)
        return {
            "message": description,
            "metadata": {
                "error": str(exc),
                "error_type": type(exc).__name__,
                "field_errors": dict(getattr(exc, "field_errors", {}) or {}),
                "context": context or {},
            },
        }
