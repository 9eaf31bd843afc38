"""Builds InstitutionRecord values from the raw registry JSON."""

from typing import Any

from logo_ingest.registry.exceptions import RegistryFormatError
from logo_ingest.registry.models import InstitutionRecord

_NIP_CODE_KEYS = ("nipCode", "nipBankCode")


def parse_records(payload: Any) -> list[InstitutionRecord]:
    """Validate the decoded registry document and build its records.

    Raises:
        RegistryFormatError: if the document is not a list of institution objects.
    """
    if not isinstance(payload, list):
        raise RegistryFormatError("Registry document must be a JSON array")
    return [_build_record(index, raw) for index, raw in enumerate(payload)]


def record_to_dict(record: InstitutionRecord, icon: str | None) -> dict[str, Any]:
    """Serialize a record back to its JSON layout with the given icon value.

    A record read from the registry is written back with its original keys,
    key order and value types; only ``icon`` changes.
    """
    if record.source:
        return {**record.source, "icon": icon}
    return {
        "code": record.code,
        "nipCode": record.nip_code,
        "name": record.name,
        "icon": icon,
    }


def _build_record(index: int, raw: Any) -> InstitutionRecord:
    if not isinstance(raw, dict):
        raise RegistryFormatError(f"Registry entry {index} must be an object")
    code = _require_code(index, raw, "code")
    nip_code = _require_nip_code(index, raw)
    name = raw.get("name")
    if not name or not isinstance(name, str):
        raise RegistryFormatError(f"Registry entry {index}: 'name' must be a non-empty string")
    icon = raw.get("icon")
    if icon is not None and not isinstance(icon, str):
        raise RegistryFormatError(f"Registry entry {index}: 'icon' must be a string or null")
    return InstitutionRecord(
        code=code,
        nip_code=nip_code,
        name=name,
        icon=icon or None,
        source=dict(raw),
    )


def _require_nip_code(index: int, raw: dict[str, Any]) -> str:
    for key in _NIP_CODE_KEYS:
        if key in raw:
            return _require_code(index, raw, key)
    raise RegistryFormatError(f"Registry entry {index}: missing 'nipCode'")


def _require_code(index: int, raw: dict[str, Any], key: str) -> str:
    value = raw.get(key)
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise RegistryFormatError(
            f"Registry entry {index}: '{key}' must be a string or integer"
        )
    return str(value)
