"""
Errors raised by the async session manager.
"""


class DatabaseNotInitialized(Exception):
    """A session was requested before ``Database.init`` configured the engine."""


class DatabaseTransactionError(Exception):
    """Committing the session failed; the transaction was rolled back."""
