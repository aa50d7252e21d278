"""Data models for lexeme entries and their senses."""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class Sense:
    """One meaning of a lexeme, opened by a \\sn line."""

    sense_number: str
    part_of_speech: str | None = None  # \ps
    gloss: str | None = None  # \ge
    source: str | None = None  # \so
    semantic_domain: str | None = None  # \sd
    definition: str | None = None  # \de

    @property
    def has_searchable_text(self) -> bool:
        """Check if the sense carries a gloss or a definition."""
        return bool(self.gloss) or bool(self.definition)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-ready dict, omitting fields that were never set."""
        data: dict[str, Any] = {"sense_number": self.sense_number}
        for name in ("part_of_speech", "gloss", "source", "semantic_domain", "definition"):
            value = getattr(self, name)
            if value is not None:
                data[name] = value
        return data

    def __str__(self) -> str:
        return f"{self.sense_number}. {self.gloss or self.definition or ''}".rstrip()


@dataclass
class Entry:
    """One lexeme record, opened by a \\lx line."""

    lexeme: str | None
    variants: list[str] = field(default_factory=list)
    primary_dialect_label: str | None = None
    primary_dialect_variant: str | None = None
    senses: list[Sense] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the entry has a lexeme (entries without one are never searched)."""
        return bool(self.lexeme)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-ready dict, omitting dialect fields that were never set."""
        data: dict[str, Any] = {
            "lexeme": self.lexeme,
            "senses": [sense.to_dict() for sense in self.senses],
            "variants": list(self.variants),
        }
        if self.primary_dialect_label is not None:
            data["primary_dialect_label"] = self.primary_dialect_label
        if self.primary_dialect_variant is not None:
            data["primary_dialect_variant"] = self.primary_dialect_variant
        return data

    def __str__(self) -> str:
        return f"{self.lexeme} ({len(self.senses)} senses)"

    def __repr__(self) -> str:
        return f"Entry(lexeme={self.lexeme!r}, senses={len(self.senses)}, variants={self.variants!r})"
