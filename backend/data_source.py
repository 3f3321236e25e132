from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping


@dataclass(frozen=True)
class Article:
    """A unit of study content: stable id, display title and body text."""
    id: str
    title: str
    text: str

    def __post_init__(self):
        if not isinstance(self.id, str) or not self.id.strip():
            raise ValueError("Article id must be a non-empty string")

    def to_dict(self) -> Dict[str, str]:
        return {"id": self.id, "title": self.title, "text": self.text}


@dataclass(frozen=True)
class Reference:
    # Shape is owned by whoever populates references; keep it opaque
    id: str
    fields: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self):
        # Read-only copy so the caller's dict cannot change a frozen record
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    def to_dict(self) -> Dict[str, Any]:
        return {**self.fields, "id": self.id}
