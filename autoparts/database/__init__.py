"""
Durable key-value storage backends.

Every backend implements `KeyValueStorage` (get / set / delete over string
values) so the storefront can run on an in-memory stand-in, a local JSON file
or Redis without any change to the components that use it.
"""
from .storage import KeyValueStorage
from .local_storage import LocalStorage

__all__ = ["KeyValueStorage", "LocalStorage"]
