"""Pytest fixtures for the storefront state core."""

import pytest

from autoparts.database.local_storage import LocalStorage
from autoparts.integrations.clients.mocks import InMemoryNavigator, InMemoryNotifier
from autoparts.storefront.admin_catalog import AdminProductStore
from autoparts.storefront.errors import PersistenceError
from autoparts.storefront.models import Role, User
from autoparts.storefront.session import SessionManager
from autoparts.utils.config_loader import AuthConfig, StorefrontConfig


@pytest.fixture
def config():
    """Default configuration with the simulated auth latency turned off."""
    return StorefrontConfig(auth=AuthConfig(latency_seconds=0))


@pytest.fixture
def storage():
    """In-memory storage stub for tests."""
    return LocalStorage()


@pytest.fixture
def notifier():
    return InMemoryNotifier()


@pytest.fixture
def navigator():
    return InMemoryNavigator()


@pytest.fixture
def session(storage, config):
    return SessionManager(storage, auth=config.auth)


@pytest.fixture
def admin_user(config):
    auth = config.auth
    return User(id=auth.admin_user_id, email=auth.admin_email, name=auth.admin_name, role=Role.ADMIN)


@pytest.fixture
def admin_session(storage, session, admin_user):
    """Session restored from a persisted admin record."""
    storage.set_json("user", admin_user.to_dict())
    session.restore()
    return session


@pytest.fixture
def admin_store(storage, admin_session):
    return AdminProductStore(storage, admin_session)


class FailingStorage(LocalStorage):
    """Storage whose writes always fail."""

    def set(self, key, value):
        raise PersistenceError("disk full", key=key)


@pytest.fixture
def failing_storage():
    return FailingStorage()
