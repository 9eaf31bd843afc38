from collections.abc import Generator
from unittest.mock import MagicMock, patch

import pytest


@pytest.fixture
def s3_client() -> Generator[MagicMock, None, None]:
    """Stands in for the boto3 S3 client used by R2Uploader."""
    client = MagicMock()
    with patch("logo_ingest.storage.r2_adapter.boto3.client", return_value=client):
        yield client
