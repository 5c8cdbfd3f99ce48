"""Custom exception hierarchy for wordblocks."""


class WordblocksError(Exception):
    """Base exception for all wordblocks errors."""


class ValidationError(WordblocksError):
    """Malformed creation payload (missing root, unknown morpheme type)."""


class EntityNotFoundError(WordblocksError):
    """Word or morpheme doesn't exist in the repository."""


class DataImportError(WordblocksError):
    """Failed to load a dataset (malformed YAML, invalid entry)."""

    def __init__(self, message: str, line: int | None = None) -> None:
        self.line = line
        super().__init__(message)


class ConfigError(WordblocksError):
    """Invalid configuration value."""
