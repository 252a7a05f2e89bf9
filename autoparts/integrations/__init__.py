"""
External collaborators of the storefront core.

The core never talks to a UI directly. It is handed a Notifier (toast
surface) and a Navigator (router) that follow the contracts in
integrations/contracts; the clients in integrations/clients/mocks are used
in tests and whenever no UI is attached.
"""
