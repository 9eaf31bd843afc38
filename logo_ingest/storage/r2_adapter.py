from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from logo_ingest.logging.logger import Log
from logo_ingest.storage.base import BaseUploader
from logo_ingest.storage.exceptions import StorageNotConfiguredError, StorageUploadError
from logo_ingest.storage.models import R2Config

CACHE_CONTROL = "public, max-age=31536000"


class R2Uploader(BaseUploader):
    """Uploads logos to Cloudflare R2 through its S3-compatible API.

    One ``put_object`` per call, no retries.
    """

    def __init__(self, config: R2Config | None) -> None:
        self._config = config if config is not None and config.is_complete else None
        self._client: Any = None
        if self._config is not None:
            self._client = boto3.client(
                "s3",
                endpoint_url=self._config.endpoint_url,
                region_name="auto",
                aws_access_key_id=self._config.access_key_id,
                aws_secret_access_key=self._config.secret_access_key,
            )

    @property
    def is_configured(self) -> bool:
        return self._client is not None

    def upload(self, data: bytes, key: str, content_type: str) -> str:
        if self._config is None or self._client is None:
            Log.error("R2 client not configured")
            raise StorageNotConfiguredError("R2 client not configured")

        try:
            self._client.put_object(
                Bucket=self._config.bucket_name,
                Key=key,
                Body=data,
                ContentType=content_type,
                CacheControl=CACHE_CONTROL,
            )
        except (BotoCoreError, ClientError) as exc:
            raise StorageUploadError(f"Failed to upload image to R2: {exc}") from exc

        public_url = self._config.public_url(key)
        Log.info(f"Uploaded: {key} -> {public_url}")
        return public_url
