from dataclasses import dataclass, field
from typing import Any


@dataclass
class InstitutionRecord:
    """One financial institution entry from the registry.

    Only ``icon`` is mutated after loading. ``source`` holds the entry exactly
    as it was read so that saving keeps its keys and value types.
    """

    code: str
    nip_code: str
    name: str
    icon: str | None = None
    source: dict[str, Any] = field(default_factory=dict)

    def matches(self, code: str) -> bool:
        return self.code == code or self.nip_code == code
