from logo_ingest.config.settings import Settings
from logo_ingest.storage.base import BaseUploader
from logo_ingest.storage.r2_adapter import R2Uploader


class UploaderFactory:
    """Creates the logo storage adapter from settings."""

    @classmethod
    def create(cls, settings: Settings) -> BaseUploader:
        """An unconfigured R2Uploader is still returned; its uploads fail fast."""
        return R2Uploader(settings.r2_config())
