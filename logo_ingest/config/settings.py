from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from logo_ingest.storage.models import R2Config


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    log_level: str = "INFO"

    image_directory: Path = Path("./_data/images")
    banks_file_path: Path = Path("./_data/banks.json")
    ci: bool = False

    min_file_size_bytes: int = 1024
    max_file_size_bytes: int = 5 * 1024 * 1024
    ci_max_file_size_bytes: int = 100 * 1024
    supported_formats: list[str] = [".jpg", ".jpeg", ".png", ".gif", ".svg"]

    r2_access_key_id: str = ""
    r2_secret_access_key: str = ""
    r2_account_id: str = ""
    r2_bucket_name: str = ""
    r2_public_domain: str = ""

    @field_validator("supported_formats")
    @classmethod
    def normalize_supported_formats(cls, value: list[str]) -> list[str]:
        """Lower-case each extension and make sure it starts with a dot."""
        formats = (item.strip().lower() for item in value)
        return [f if f.startswith(".") else f".{f}" for f in formats if f]

    def r2_config(self) -> R2Config:
        """Snapshot the storage credentials as a plain value object."""
        return R2Config(
            access_key_id=self.r2_access_key_id,
            secret_access_key=self.r2_secret_access_key,
            account_id=self.r2_account_id,
            bucket_name=self.r2_bucket_name,
            public_domain=self.r2_public_domain,
        )
