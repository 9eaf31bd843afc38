class StorageError(Exception):
    """Base exception for all logo storage errors."""


class StorageNotConfiguredError(StorageError):
    """Raised when an upload is attempted without complete R2 credentials."""


class StorageUploadError(StorageError):
    """Raised when the object write itself fails."""
