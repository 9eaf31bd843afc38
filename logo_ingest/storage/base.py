from abc import ABC, abstractmethod


class BaseUploader(ABC):
    """Contract for all logo storage adapters."""

    @abstractmethod
    def upload(self, data: bytes, key: str, content_type: str) -> str:
        """Write one object and return its public URL.

        Args:
            data: Raw file content.
            key: Destination object key, e.g. ``logo/000013``.
            content_type: MIME type stored with the object.

        Returns:
            The public URL of the uploaded object.

        Raises:
            StorageError: on configuration or transport failure.
        """
