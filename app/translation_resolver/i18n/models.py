"""Locale and translation records.

Both records are owned by the persistent store. The resolver only holds
transient copies (and cache entries built from ``to_dict()``).
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class Locale:
    """A language code with its human-readable display name.

    Attributes:
        id: Store-assigned identifier.
        code: Unique locale code (e.g., "en", "fr").
        name: Display name from configuration (e.g., "French").
    """

    id: str
    code: str
    name: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Locale":
        return cls(id=str(data["id"]), code=data["code"], name=data["name"])


@dataclass(frozen=True)
class Translation:
    """A stored rendering of text in one locale.

    A translation without a parent is a root translation: the original text
    in the default locale. A translation with a parent renders the parent's
    text in another locale.

    Attributes:
        id: Store-assigned identifier.
        locale_id: Identifier of the owning Locale.
        locale_code: Code of the owning Locale (denormalized for lookups).
        text: The translated text.
        parent_id: Identifier of the parent root translation, if any.
    """

    id: str
    locale_id: str
    locale_code: str
    text: str
    parent_id: Optional[str] = None

    @property
    def is_root(self) -> bool:
        """True if this translation has no parent."""
        return self.parent_id is None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Translation":
        parent_id = data.get("parent_id")
        return cls(
            id=str(data["id"]),
            locale_id=str(data["locale_id"]),
            locale_code=data["locale_code"],
            text=data["text"],
            parent_id=str(parent_id) if parent_id is not None else None,
        )
