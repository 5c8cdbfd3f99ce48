"""YAML loading for morpheme/word datasets.

A dataset file looks like::

    morphemes:
      - text: dis-
        type: prefix
        definition: Means "not"
        examples: [disagree, dislike]
    words:
      - word: disagree
        definition: to have a different opinion
        components: {prefix: dis-, root: agree}
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from wordblocks.exceptions import DataImportError, ValidationError
from wordblocks.validation import parse_morpheme_payload, parse_word_payload

logger = logging.getLogger(__name__)

SEED_RESOURCE = "seed.yaml"


@dataclass
class Dataset:
    """Validated create-arguments ready to feed into a repository."""

    morphemes: List[Dict[str, Any]] = field(default_factory=list)
    words: List[Dict[str, Any]] = field(default_factory=list)
    source_file: Optional[Path] = None


def load_dataset(source: Union[str, Path, Dict[str, Any]]) -> Dataset:
    """Load a dataset from a YAML file, YAML string or dictionary.

    Args:
        source: Path to YAML file, YAML string, or parsed dictionary

    Returns:
        Dataset object

    Raises:
        DataImportError: If the content cannot be parsed or an entry is invalid
        FileNotFoundError: If the file does not exist
    """
    source_path: Optional[Path] = None

    if isinstance(source, dict):
        data = source
    elif isinstance(source, Path) or (isinstance(source, str) and _is_file_path(source)):
        source_path = Path(source)
        if not source_path.exists():
            raise FileNotFoundError(f"File not found: {source_path}")
        try:
            with open(source_path, "r", encoding="utf-8") as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise DataImportError(f"Cannot read {source_path}: {e}") from e
        data = _load_yaml(text)
    else:
        data = _load_yaml(source)

    dataset = _parse_dataset(data)
    dataset.source_file = source_path
    logger.debug(
        f"Parsed dataset with {len(dataset.morphemes)} morphemes, "
        f"{len(dataset.words)} words"
    )
    return dataset


def default_dataset() -> Dataset:
    """Load the reference dataset shipped with the package."""
    text = resources.files("wordblocks.data").joinpath(SEED_RESOURCE).read_text(
        encoding="utf-8"
    )
    return _parse_dataset(_load_yaml(text))


def _is_file_path(s: str) -> bool:
    """Check if a string looks like a file path."""
    if "\n" in s:
        return False
    # Single-line flow YAML, e.g. "{words: [...]}"
    if s.lstrip().startswith(("{", "[")) or ": " in s:
        return False
    if "/" in s or "\\" in s:
        return True
    return s.endswith((".yaml", ".yml"))


def _load_yaml(text: str) -> Dict[str, Any]:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        mark = getattr(e, "problem_mark", None)
        line_num = mark.line + 1 if mark else None
        raise DataImportError(f"Invalid YAML: {e}", line=line_num) from e

    if data is None:
        raise DataImportError("Empty YAML content")
    if not isinstance(data, dict):
        raise DataImportError("YAML root must be a mapping (dictionary)")
    return data


def _parse_dataset(data: Dict[str, Any]) -> Dataset:
    morphemes = _parse_section(data, "morphemes", parse_morpheme_payload)
    words = _parse_section(data, "words", parse_word_payload)
    return Dataset(morphemes=morphemes, words=words)


def _parse_section(data: Dict[str, Any], name: str, parse) -> List[Dict[str, Any]]:
    entries = data.get(name)
    if entries is None:
        return []
    if not isinstance(entries, list):
        raise DataImportError(f"Field '{name}' must be a list")

    parsed = []
    for i, entry in enumerate(entries):
        try:
            parsed.append(parse(entry))
        except ValidationError as e:
            raise DataImportError(f"{name} #{i + 1}: {e}") from e
    return parsed
