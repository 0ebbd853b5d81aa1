"""Exception types for threadchain."""


class ThreadchainError(Exception):
    """Base class for all threadchain errors."""

    pass


class ThreadParseError(ThreadchainError, ValueError):
    """Raised when a thread or adapter description cannot be parsed."""

    pass


class InvalidAdapterError(ThreadchainError, ValueError):
    """Raised when an adapter is constructed with two nil ends."""

    pass


class InventoryError(ThreadchainError):
    """Raised when an inventory file is missing, malformed, or invalid."""

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path


class InventoryNotFoundError(InventoryError):
    """Raised when an inventory file does not exist."""

    pass
