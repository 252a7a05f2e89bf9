"""
Storefront application context - main entry point

Builds the storage backend, the session, the cart and the page controllers
once and hands them out as one explicit `Storefront` object instead of
process-wide singletons.
"""

from dotenv import load_dotenv

load_dotenv()

import logging
import os
from dataclasses import dataclass
from typing import Optional

from autoparts.database.storage import KeyValueStorage
from autoparts.error_handler import ErrorHandler
from autoparts.integrations.clients.mocks import InMemoryNavigator, LoggingNotifier
from autoparts.integrations.contracts.interfaces import Navigator, Notifier
from autoparts.storefront.admin_catalog import AdminProductStore
from autoparts.storefront.cart import Cart
from autoparts.storefront.controllers import AdminController, AuthController, CatalogController
from autoparts.storefront.errors import PersistenceError
from autoparts.storefront.session import SessionManager
from autoparts.utils.config_loader import StorageConfig, StorefrontConfig, load_storefront_config
from autoparts.utils.id_generator import IdGenerator

logger = logging.getLogger(__name__)


def create_storage(cfg: StorageConfig) -> KeyValueStorage:
    """Pick the storage backend: environment first, then the config file."""
    backend = os.getenv("STOREFRONT_STORAGE") or ("redis" if os.getenv("REDIS_URL") else cfg.backend)

    if backend == "redis":
        from autoparts.database.redis_storage import RedisStorage

        url = os.getenv("REDIS_URL") or cfg.redis_url
        logger.info("Using Redis storage")
        return RedisStorage(url=url, key_prefix=cfg.key_prefix)

    if backend == "file":
        from autoparts.database.file_storage import FileStorage

        path = os.getenv("STOREFRONT_STORAGE_PATH") or cfg.path
        logger.info("Using file storage at %s", path)
        return FileStorage(path)

    if backend == "memory":
        from autoparts.database.local_storage import LocalStorage

        logger.info("Using in-memory storage")
        return LocalStorage()

    raise ValueError(f"Unknown storage backend: {backend}")


@dataclass
class Storefront:
    config: StorefrontConfig
    storage: KeyValueStorage
    notifier: Notifier
    navigator: Navigator
    session: SessionManager
    cart: Cart
    admin_store: AdminProductStore
    catalog: CatalogController
    auth: AuthController
    admin: AdminController


def build_storefront(
    config: Optional[StorefrontConfig] = None,
    storage: Optional[KeyValueStorage] = None,
    notifier: Optional[Notifier] = None,
    navigator: Optional[Navigator] = None,
) -> Storefront:
    """
    Wire a storefront and restore the persisted session

    An unreadable user record is reported through the notifier and the
    storefront starts anonymous; the record itself is left in storage.
    """
    cfg = config or load_storefront_config()
    store = storage or create_storage(cfg.storage)
    notifier = notifier or LoggingNotifier()
    navigator = navigator or InMemoryNavigator()
    ids = IdGenerator()

    session = SessionManager(store, auth=cfg.auth, storage_key=cfg.keys.user, id_generator=ids)
    try:
        session.restore()
    except PersistenceError as e:
        ErrorHandler(notifier).handle_exception(e, context={"action": "restore"})

    # The cart starts empty on every start; it is never persisted.
    cart = Cart()
    admin_store = AdminProductStore(store, session, storage_key=cfg.keys.products, id_generator=ids)

    return Storefront(
        config=cfg,
        storage=store,
        notifier=notifier,
        navigator=navigator,
        session=session,
        cart=cart,
        admin_store=admin_store,
        catalog=CatalogController(notifier, cart=cart),
        auth=AuthController(session, notifier, navigator),
        admin=AdminController(admin_store, notifier, navigator),
    )
