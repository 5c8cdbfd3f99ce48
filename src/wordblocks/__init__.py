"""wordblocks: morpheme and word repository for a word-building tutor."""

from wordblocks.exceptions import (
    ConfigError,
    DataImportError,
    EntityNotFoundError,
    ValidationError,
    WordblocksError,
)
from wordblocks.models import (
    Components,
    Morpheme,
    MorphemeKind,
    Word,
)
from wordblocks.repository import Repository

__all__ = [
    "Components",
    "ConfigError",
    "DataImportError",
    "EntityNotFoundError",
    "Morpheme",
    "MorphemeKind",
    "Repository",
    "ValidationError",
    "Word",
    "WordblocksError",
]
