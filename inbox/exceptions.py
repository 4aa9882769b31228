class NotFoundError(Exception):
    """Raised when a requested row does not exist or is not visible to the caller."""


class RetrievalError(Exception):
    """Raised when the backing store fails while reading data."""
