from dataclasses import dataclass, fields
from typing import ClassVar

PLACEHOLDER_MARKER = "default-image"
LOGO_KEY_PREFIX = "logo"


def logo_key(code: str) -> str:
    """Destination object key for a bank logo, e.g. ``logo/000013``."""
    return f"{LOGO_KEY_PREFIX}/{code}"


def is_placeholder_icon(url: str) -> bool:
    return PLACEHOLDER_MARKER in url


@dataclass(frozen=True)
class R2Config:
    """Credentials and public domain for the Cloudflare R2 logo bucket."""

    access_key_id: str = ""
    secret_access_key: str = ""
    account_id: str = ""
    bucket_name: str = ""
    public_domain: str = ""

    ENV_NAMES: ClassVar[dict[str, str]] = {
        "access_key_id": "R2_ACCESS_KEY_ID",
        "secret_access_key": "R2_SECRET_ACCESS_KEY",
        "account_id": "R2_ACCOUNT_ID",
        "bucket_name": "R2_BUCKET_NAME",
        "public_domain": "R2_PUBLIC_DOMAIN",
    }

    def missing_fields(self) -> list[str]:
        """Environment variable names of the blank fields."""
        return [self.ENV_NAMES[f.name] for f in fields(self) if not getattr(self, f.name)]

    @property
    def is_complete(self) -> bool:
        return not self.missing_fields()

    @property
    def endpoint_url(self) -> str:
        return f"https://{self.account_id}.r2.cloudflarestorage.com"

    def public_url(self, key: str) -> str:
        return f"{self.public_domain.rstrip('/')}/{key}"

    @property
    def placeholder_icon_url(self) -> str:
        return self.public_url(logo_key(PLACEHOLDER_MARKER))
