"""Tool record model"""
from typing import Any, Dict, Mapping, Optional
from dataclasses import dataclass, field
from enum import Enum

RECORD_FIELDS = ("name", "description", "url", "category")


class RecordOrigin(Enum):
    """Where a record came from"""
    REMOTE = "remote"                # Fetched tool list
    SUPPLEMENTAL = "supplemental"    # Built-in extra tools


@dataclass(eq=False)
class ToolRecord:
    """
    A single catalog entry.

    Only ``name`` is always present. Optional fields are None when the source
    object did not carry them. Records compare by identity: two entries with the
    same name from different origins stay distinct.
    """
    name: str
    description: Optional[str] = None
    url: Optional[str] = None
    category: Optional[str] = None
    origin: RecordOrigin = RecordOrigin.REMOTE
    extra: Dict[str, Any] = field(default_factory=dict)  # Unrecognized keys, in source order

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], origin: RecordOrigin = RecordOrigin.REMOTE) -> "ToolRecord":
        """
        Build a record from a tool-shaped mapping without validating it.

        Missing keys become None (an absent name becomes "", an empty category
        becomes None); present values are coerced to str.
        """
        def _opt(key: str) -> Optional[str]:
            value = data.get(key)
            return None if value is None else str(value)

        return cls(
            name=_opt("name") or "",
            description=_opt("description"),
            url=_opt("url"),
            category=_opt("category") or None,
            origin=origin,
            extra={k: v for k, v in data.items() if k not in RECORD_FIELDS},
        )

    @property
    def has_link(self) -> bool:
        """True when the record has a URL to visit"""
        return bool(self.url)

    def to_dict(self) -> Dict[str, Any]:
        """Fields the record actually has, standard keys first"""
        result: Dict[str, Any] = {"name": self.name}
        for key in RECORD_FIELDS[1:]:
            value = getattr(self, key)
            if value is not None:
                result[key] = value
        result.update(self.extra)
        return result
