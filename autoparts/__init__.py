"""
AutoParts PRO storefront state core.

Catalog filtering, cart pricing, mock authentication and the admin product
store, all persisted through a small key-value storage interface.
"""
