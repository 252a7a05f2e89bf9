"""
View controllers.

Each controller backs one storefront page: it calls into the state core and
reports outcomes through the Notifier and Navigator collaborators. Core
errors are caught here and shown as notifications, never re-raised.
"""
from .admin_controller import AdminController
from .auth_controller import AuthController
from .catalog_controller import CatalogController

__all__ = ["AdminController", "AuthController", "CatalogController"]
