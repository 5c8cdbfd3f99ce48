"""Repository: the in-memory store of morphemes and words."""

from __future__ import annotations

import functools
import logging
import threading
from collections.abc import Callable, Iterable, Mapping
from pathlib import Path
from typing import Any, TypeVar

from wordblocks import seed as _seed
from wordblocks.exceptions import EntityNotFoundError
from wordblocks.models import Components, Morpheme, MorphemeKind, Word

logger = logging.getLogger(__name__)

_F = TypeVar("_F", bound=Callable[..., Any])

MorphemeKey = tuple[str, MorphemeKind]


def _locked(method: _F) -> _F:
    """Decorator: runs the method while holding the repository lock."""

    @functools.wraps(method)
    def wrapper(self: Repository, *args: Any, **kwargs: Any) -> Any:
        with self._lock:
            return method(self, *args, **kwargs)

    return wrapper  # type: ignore[return-value]


class Repository:
    """Owns every Morpheme and Word record for the life of the process.

    Morphemes are keyed by ``(text, kind)`` and words by their surface
    form. Creating a record under an existing key replaces it, and the id
    counter advances either way. Lookups return ``None`` for missing keys.

    ``seed=False`` starts empty even when ``seed_path`` is given; otherwise
    ``seed_path`` replaces the packaged dataset.
    """

    def __init__(
        self,
        *,
        seed: bool = True,
        seed_path: str | Path | None = None,
    ) -> None:
        self._lock = threading.RLock()
        self._morphemes: dict[MorphemeKey, Morpheme] = {}
        self._words: dict[str, Word] = {}
        self._next_morpheme_id = 1
        self._next_word_id = 1

        if not seed:
            return
        if seed_path is not None:
            self.load(_seed.load_dataset(Path(seed_path)))
        else:
            self.load(_seed.default_dataset())

    @property
    def morpheme_count(self) -> int:
        return len(self._morphemes)

    @property
    def word_count(self) -> int:
        return len(self._words)

    # ------------------------------------------------------------------
    # Bulk loading
    # ------------------------------------------------------------------

    @_locked
    def load(self, dataset: _seed.Dataset) -> tuple[int, int]:
        """Create every morpheme, then every word, from a parsed dataset.

        Returns:
            Number of morphemes and words created.
        """
        for m in dataset.morphemes:
            self.create_morpheme(**m)
        for w in dataset.words:
            self.create_word(**w)
        source = f" from {dataset.source_file}" if dataset.source_file else ""
        logger.info(
            f"Loaded {len(dataset.morphemes)} morphemes and "
            f"{len(dataset.words)} words{source}"
        )
        return len(dataset.morphemes), len(dataset.words)

    # ------------------------------------------------------------------
    # Morpheme operations
    # ------------------------------------------------------------------

    @_locked
    def create_morpheme(
        self,
        text: str,
        kind: MorphemeKind | str,
        definition: str,
        examples: Iterable[str] = (),
    ) -> Morpheme:
        morpheme = Morpheme(
            id=self._next_morpheme_id,
            text=text,
            kind=MorphemeKind(kind),
            definition=definition,
            examples=tuple(examples),
        )
        self._next_morpheme_id += 1

        if morpheme.key in self._morphemes:
            logger.warning(
                f"Replacing morpheme {text!r} ({morpheme.kind.value}) "
                f"with id={morpheme.id}"
            )
        self._morphemes[morpheme.key] = morpheme
        logger.debug(f"Created morpheme {morpheme.id}: {text!r}")
        return morpheme

    @_locked
    def get_morpheme(self, text: str, kind: MorphemeKind | str) -> Morpheme | None:
        try:
            key = (text, MorphemeKind(kind))
        except ValueError:
            return None
        return self._morphemes.get(key)

    def require_morpheme(self, text: str, kind: MorphemeKind | str) -> Morpheme:
        morpheme = self.get_morpheme(text, kind)
        if morpheme is None:
            raise EntityNotFoundError(f"Morpheme not found: {text!r} ({kind})")
        return morpheme

    @_locked
    def list_morphemes_by_kind(self, kind: MorphemeKind | str) -> list[Morpheme]:
        """Return all morphemes of one kind in insertion order."""
        return [m for m in self._morphemes.values() if m.kind == kind]

    # ------------------------------------------------------------------
    # Word operations
    # ------------------------------------------------------------------

    @_locked
    def create_word(
        self,
        word: str,
        definition: str,
        components: Components | Mapping[str, Any],
    ) -> Word:
        if not isinstance(components, Components):
            components = Components.from_mapping(components)

        record = Word(
            id=self._next_word_id,
            word=word,
            definition=definition,
            components=components,
        )
        self._next_word_id += 1

        if word in self._words:
            logger.warning(f"Replacing word {word!r} with id={record.id}")
        self._words[word] = record
        logger.debug(f"Created word {record.id}: {word!r}")
        return record

    @_locked
    def get_word(self, word: str) -> Word | None:
        return self._words.get(word)

    def require_word(self, word: str) -> Word:
        record = self.get_word(word)
        if record is None:
            raise EntityNotFoundError(f"Word not found: {word!r}")
        return record

    @_locked
    def list_words(self, search: str | None = None) -> list[Word]:
        """Return words in creation order.

        Args:
            search: Keep only words containing this text, ignoring case.
                ``None`` or an empty string disables filtering.
        """
        if not search:
            return list(self._words.values())
        needle = search.casefold()
        return [w for w in self._words.values() if needle in w.word.casefold()]

    @_locked
    def resolve_components(
        self, word: str
    ) -> list[tuple[MorphemeKind, str, Morpheme | None]] | None:
        """Look up the morpheme behind each component of a stored word.

        Returns ``None`` if the word is absent. A component with no stored
        morpheme is paired with ``None``.
        """
        record = self._words.get(word)
        if record is None:
            return None
        return [
            (kind, text, self._morphemes.get((text, kind)))
            for kind, text in record.components.parts()
        ]
