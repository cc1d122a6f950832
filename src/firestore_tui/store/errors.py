"""Store-level exceptions."""


class StoreError(Exception):
    """Base class for failures talking to the document store."""


class StoreConnectionError(StoreError):
    """The store could not be opened at startup."""


class NotFoundError(StoreError, LookupError):
    """A collection or document does not exist."""
