from autoparts.error_handler import ErrorHandler
from autoparts.integrations.clients.mocks import InMemoryNotifier
from autoparts.integrations.contracts.interfaces import Severity
from autoparts.storefront.errors import PersistenceError, ValidationError


def test_validation_error_is_shown_as_destructive_notification():
    notifier = InMemoryNotifier()
    out = ErrorHandler(notifier).handle_exception(ValidationError(field_errors={"name": "Название: обязательное поле"}))

    assert notifier.last.severity == Severity.DESTRUCTIVE
    assert notifier.last.description == "Заполните все обязательные поля"
    assert out["metadata"]["field_errors"] == {"name": "Название: обязательное поле"}
    assert out["metadata"]["error_type"] == "ValidationError"


def test_persistence_error_is_surfaced_not_swallowed(caplog):
    notifier = InMemoryNotifier()
    out = ErrorHandler(notifier).handle_exception(PersistenceError("disk full"), context={"k": "v"})

    assert "хранилищу данных" in out["message"]
    assert "disk full" in out["metadata"]["error"]
    assert out["metadata"]["context"] == {"k": "v"}
    assert len(notifier.notifications) == 1
    assert any(r.levelname == "ERROR" for r in caplog.records)


def test_unexpected_exception_returns_generic_payload():
    notifier = InMemoryNotifier()
    out = ErrorHandler(notifier).handle_exception(Exception("boom"))
    assert out["message"] == "Что-то пошло не так. Попробуйте позже."
    assert "boom" in out["metadata"]["error"]
