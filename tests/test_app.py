import pytest

from autoparts.app import build_storefront, create_storage
from autoparts.database.file_storage import FileStorage
from autoparts.database.local_storage import LocalStorage
from autoparts.database.redis_storage import RedisStorage
from autoparts.integrations.contracts.interfaces import Severity
from autoparts.utils.config_loader import StorageConfig


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("STOREFRONT_STORAGE", "STOREFRONT_STORAGE_PATH", "REDIS_URL"):
        monkeypatch.delenv(name, raising=False)


def test_create_storage_follows_config(tmp_path):
    assert isinstance(create_storage(StorageConfig(backend="memory")), LocalStorage)
    file_storage = create_storage(StorageConfig(backend="file", path=str(tmp_path / "s.json")))
    assert isinstance(file_storage, FileStorage)


def test_environment_overrides_backend(monkeypatch, tmp_path):
    monkeypatch.setenv("REDIS_URL", "redis://localhost:6379/0")
    assert isinstance(create_storage(StorageConfig(backend="memory")), RedisStorage)

    monkeypatch.setenv("STOREFRONT_STORAGE", "file")
    monkeypatch.setenv("STOREFRONT_STORAGE_PATH", str(tmp_path / "env.json"))
    storage = create_storage(StorageConfig(backend="memory"))
    assert isinstance(storage, FileStorage)
    assert storage.path == tmp_path / "env.json"


def test_unknown_backend_raises(monkeypatch):
    monkeypatch.setenv("STOREFRONT_STORAGE", "floppy")
    with pytest.raises(ValueError):
        create_storage(StorageConfig())


@pytest.mark.asyncio
async def test_session_survives_restart(tmp_path, config, navigator, notifier):
    config.storage.backend = "file"
    config.storage.path = str(tmp_path / "local_storage.json")

    shop = build_storefront(config, notifier=notifier, navigator=navigator)
    assert shop.session.current_user is None
    await shop.auth.submit_login("admin@autoparts.ru", "admin")
    shop.catalog.add_to_cart(shop.catalog.products[0])
    assert shop.admin.open() is True

    restarted = build_storefront(config, notifier=notifier, navigator=navigator)
    assert restarted.session.is_admin is True
    assert restarted.cart.is_empty
    assert len(restarted.admin_store.load()) == 6


def test_corrupt_user_record_starts_anonymous_and_notifies(config, storage, notifier):
    storage.set("user", "garbage")

    shop = build_storefront(config, storage=storage, notifier=notifier)

    assert shop.session.current_user is None
    assert notifier.last.severity == Severity.DESTRUCTIVE
    assert notifier.last.title == "Ошибка"
    assert storage.get("user") == "garbage"


def test_malformed_user_fields_start_anonymous(config, storage, notifier):
    storage.set_json("user", {"id": 1, "email": "a@b.c"})

    shop = build_storefront(config, storage=storage, notifier=notifier)

    assert shop.session.is_authenticated is False
    assert len(notifier.notifications) == 1
    assert storage.get_json("user") == {"id": 1, "email": "a@b.c"}


def test_controllers_share_the_cart(config, storage):
    shop = build_storefront(config, storage=storage)
    assert shop.catalog.cart is shop.cart
    assert shop.admin.store is shop.admin_store
