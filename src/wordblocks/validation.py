"""Payload validation for data entering the repository from outside.

The repository trusts its input. Anything coming from HTTP bodies or
dataset files passes through these functions first.
"""

from __future__ import annotations

from typing import Any

from wordblocks.exceptions import ValidationError
from wordblocks.models import Components, MorphemeKind

VALID_KINDS = frozenset(k.value for k in MorphemeKind)


def parse_kind(value: Any) -> MorphemeKind:
    """Convert a ``type`` string to a MorphemeKind."""
    if not isinstance(value, str) or value not in VALID_KINDS:
        raise ValidationError(
            f"Invalid morpheme type: {value!r} "
            f"(expected one of {', '.join(sorted(VALID_KINDS))})"
        )
    return MorphemeKind(value)


def parse_morpheme_payload(data: Any) -> dict[str, Any]:
    """Validate a morpheme payload.

    Args:
        data: Mapping with ``text``, ``type`` (or ``kind``), ``definition``
            and optional ``examples``.

    Returns:
        Keyword arguments for ``Repository.create_morpheme``.

    Raises:
        ValidationError: If a field is missing or has the wrong shape.
    """
    if not isinstance(data, dict):
        raise ValidationError("Morpheme data must be a mapping")

    text = _require_text(data, "text")
    kind = parse_kind(data.get("type", data.get("kind")))
    definition = _require_text(data, "definition")

    examples = data.get("examples")
    if examples is None:
        examples = []
    if not isinstance(examples, list) or not all(
        isinstance(e, str) for e in examples
    ):
        raise ValidationError("Field 'examples' must be a list of strings")

    return {
        "text": text,
        "kind": kind,
        "definition": definition,
        "examples": examples,
    }


def parse_word_payload(data: Any) -> dict[str, Any]:
    """Validate a word payload.

    Args:
        data: Mapping with ``word``, ``definition`` and a ``components``
            mapping holding at least ``root``.

    Returns:
        Keyword arguments for ``Repository.create_word``.

    Raises:
        ValidationError: If a field is missing or has the wrong shape.
    """
    if not isinstance(data, dict):
        raise ValidationError("Word data must be a mapping")

    word = _require_text(data, "word")
    definition = data.get("definition")
    if not isinstance(definition, str):
        raise ValidationError("Field 'definition' must be a string")

    components = data.get("components")
    if not isinstance(components, dict):
        raise ValidationError("Field 'components' must be a mapping")
    _require_text(components, "root", prefix="components.")
    for name in ("prefix", "suffix"):
        value = components.get(name)
        if value is not None and not isinstance(value, str):
            raise ValidationError(
                f"Field 'components.{name}' must be a string or null"
            )

    return {
        "word": word,
        "definition": definition,
        "components": Components.from_mapping(components),
    }


def _require_text(data: dict, name: str, prefix: str = "") -> str:
    value = data.get(name)
    if value is None:
        raise ValidationError(f"Missing required field: '{prefix}{name}'")
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(
            f"Field '{prefix}{name}' must be a non-empty string"
        )
    return value
