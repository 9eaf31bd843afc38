import json
from collections import Counter
from pathlib import Path
from typing import Any

from logo_ingest.logging.logger import Log
from logo_ingest.registry.exceptions import RegistryLoadError, RegistryWriteError
from logo_ingest.registry.models import InstitutionRecord
from logo_ingest.registry.parser import parse_records, record_to_dict


class RegistryStore:
    """Single owner of the institution records loaded from the registry JSON.

    Lookups return indexes; icon updates go through ``set_icon`` so that no
    caller holds a detached copy of a record.
    """

    def __init__(self, records: list[InstitutionRecord]) -> None:
        self._records = list(records)
        self._changed = False

    @classmethod
    def load(cls, path: Path) -> "RegistryStore":
        """Read and parse the registry once.

        Raises:
            RegistryLoadError: if the file cannot be read or is malformed.
        """
        try:
            payload = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            Log.warning(f"Could not load banks file: {exc}")
            raise RegistryLoadError(f"Failed to load registry {path}: {exc}") from exc
        store = cls(parse_records(payload))
        Log.info(f"Loaded {len(store)} banks from {path}")
        duplicates = store.duplicate_codes()
        if duplicates:
            Log.warning(
                f"Registry codes shared by more than one bank (first match wins): "
                f"{', '.join(duplicates)}"
            )
        return store

    def __len__(self) -> int:
        return len(self._records)

    @property
    def records(self) -> list[InstitutionRecord]:
        return list(self._records)

    def get(self, index: int) -> InstitutionRecord:
        return self._records[index]

    def find_index(self, code: str) -> int | None:
        """Return the index of the first record whose code or NIP code equals ``code``."""
        for index, record in enumerate(self._records):
            if record.matches(code):
                return index
        return None

    def find_by_code(self, code: str) -> InstitutionRecord | None:
        """Look a bank up by its ``code`` field only."""
        return next((r for r in self._records if r.code == code), None)

    def set_icon(self, index: int, url: str) -> None:
        self._records[index].icon = url
        self._changed = True

    @property
    def has_changes(self) -> bool:
        """True once any icon has been set since the registry was loaded."""
        return self._changed

    def duplicate_codes(self) -> list[str]:
        """Codes that more than one record answers to, in first-seen order."""
        counts: Counter[str] = Counter()
        for record in self._records:
            counts.update({record.code, record.nip_code})
        return [code for code, count in counts.items() if count > 1]

    def to_payload(self, default_icon: str) -> list[dict[str, Any]]:
        """All records as JSON-ready dicts, with ``default_icon`` filling missing icons."""
        return [record_to_dict(r, r.icon or default_icon) for r in self._records]

    def save(self, path: Path, default_icon: str) -> None:
        """Write the current records back to ``path``.

        Raises:
            RegistryWriteError: if the file cannot be written.
        """
        payload = self.to_payload(default_icon)
        try:
            path.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")
        except OSError as exc:
            raise RegistryWriteError(f"Failed to write {path.name}: {exc}") from exc
        Log.info(f"Updated {path} with {len(payload)} banks")
