import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from logo_ingest.registry.models import InstitutionRecord
from logo_ingest.registry.store import RegistryStore

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


def _bank(code: str, nip_code: str, name: str, icon: str | None = None) -> dict[str, Any]:
    return {"code": code, "nipCode": nip_code, "name": name, "icon": icon}


@pytest.fixture()
def banks_payload() -> list[dict[str, Any]]:
    """A small registry: one bank with a real icon, one with the placeholder, one with none."""
    return [
        _bank("044", "000014", "Access Bank", "https://cdn.example.com/logo/000014"),
        _bank("058", "77", "Guaranty Trust Bank", "https://cdn.example.com/logo/default-image"),
        _bank("10", "000010", "Ecobank"),
    ]


@pytest.fixture()
def registry(banks_payload: list[dict[str, Any]]) -> RegistryStore:
    return RegistryStore(
        [
            InstitutionRecord(
                code=b["code"], nip_code=b["nipCode"], name=b["name"], icon=b["icon"]
            )
            for b in banks_payload
        ]
    )


@pytest.fixture()
def banks_file(tmp_path: Path, banks_payload: list[dict[str, Any]]) -> Path:
    path = tmp_path / "banks.json"
    path.write_text(json.dumps(banks_payload), encoding="utf-8")
    return path


@pytest.fixture()
def image_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "images"
    directory.mkdir()
    return directory


@pytest.fixture()
def write_image(image_dir: Path) -> Callable[[str, int], Path]:
    """Write a PNG-signed file of exactly ``size`` bytes into the image directory."""

    def _write(name: str, size: int = 2048) -> Path:
        path = image_dir / name
        body = PNG_SIGNATURE + b"\x00" * max(size - len(PNG_SIGNATURE), 0)
        path.write_bytes(body[:size])
        return path

    return _write
