class StoreError(Exception):
    """Raised when the record store rejects or cannot complete an operation."""


class RecordNotFoundError(StoreError):
    """Raised when an update or delete targets a row that does not exist."""
