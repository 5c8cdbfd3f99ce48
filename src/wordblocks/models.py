"""Domain model dataclasses and enums for wordblocks."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class MorphemeKind(str, Enum):
    """Position a morpheme takes inside a word."""

    PREFIX = "prefix"
    ROOT = "root"
    SUFFIX = "suffix"


# ---------------------------------------------------------------------------
# Dataclasses
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Components:
    """The prefix/root/suffix breakdown of a word.

    Components refer to morphemes by text only. Nothing guarantees a
    morpheme with the same text and kind is stored.
    """

    root: str
    prefix: str | None = None
    suffix: str | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Components:
        """Build from a ``{"prefix", "root", "suffix"}`` mapping.

        Empty strings count as absent.
        """
        return cls(
            root=data["root"],
            prefix=data.get("prefix") or None,
            suffix=data.get("suffix") or None,
        )

    def parts(self) -> Iterator[tuple[MorphemeKind, str]]:
        """Yield ``(kind, text)`` for each present component, left to right."""
        if self.prefix:
            yield MorphemeKind.PREFIX, self.prefix
        yield MorphemeKind.ROOT, self.root
        if self.suffix:
            yield MorphemeKind.SUFFIX, self.suffix

    def to_dict(self) -> dict[str, str | None]:
        return {"prefix": self.prefix, "root": self.root, "suffix": self.suffix}


@dataclass(frozen=True, slots=True)
class Morpheme:
    """A minimal meaningful word part."""

    id: int
    text: str
    kind: MorphemeKind
    definition: str
    examples: tuple[str, ...]

    @property
    def key(self) -> tuple[str, MorphemeKind]:
        return (self.text, self.kind)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "text": self.text,
            "type": self.kind.value,
            "definition": self.definition,
            "examples": list(self.examples),
        }


@dataclass(frozen=True, slots=True)
class Word:
    """A complete word with its morpheme breakdown."""

    id: int
    word: str
    definition: str
    components: Components

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "word": self.word,
            "definition": self.definition,
            "components": self.components.to_dict(),
        }
