"""
Storefront state core: catalog, cart, session and admin product store.
"""
