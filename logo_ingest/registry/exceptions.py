class RegistryError(Exception):
    """Base exception for all registry-related errors."""


class RegistryLoadError(RegistryError):
    """Raised when the registry source cannot be read or parsed."""


class RegistryFormatError(RegistryLoadError):
    """Raised when the registry JSON does not match the record layout."""


class RegistryWriteError(RegistryError):
    """Raised when the registry cannot be written back to disk."""
