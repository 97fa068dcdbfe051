"""
Word Catalog: Read-only Vocabulary Loader.

Loads and indexes catalog words from JSON files:
- A list of word objects, or an object with a "words" list
- Packaged sample catalog (wordquest/data/words.json) via load_default

Features:
- Groups words by category and difficulty
- Skips malformed entries instead of failing the whole load
"""

from __future__ import annotations

import json
import random
from collections.abc import Iterable, Iterator
from pathlib import Path

from loguru import logger

from wordquest.core.errors import CatalogLoadError, NotFoundError
from wordquest.core.models import ALL_CATEGORIES, Difficulty, Word

DEFAULT_CATALOG_PATH = Path(__file__).resolve().parent.parent / "data" / "words.json"


class WordCatalog:
    """
    Immutable collection of catalog words.

    Words keep their load order, which is the order every selector sees
    before applying its own sort.
    """

    def __init__(self, words: Iterable[Word] = ()):
        self._words: dict[int, Word] = {}
        self._by_category: dict[str, list[int]] = {}
        self._by_difficulty: dict[Difficulty, list[int]] = {}

        for word in words:
            self._add(word)

    def _add(self, word: Word) -> bool:
        if word.id in self._words:
            logger.warning(f"Duplicate word id {word.id} ({word.text}) ignored")
            return False

        self._words[word.id] = word
        self._by_category.setdefault(word.category, []).append(word.id)
        self._by_difficulty.setdefault(word.difficulty, []).append(word.id)
        return True

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def from_words(cls, words: Iterable[Word]) -> WordCatalog:
        return cls(words)

    @classmethod
    def load(cls, path: Path | str) -> WordCatalog:
        """
        Load a catalog from a JSON file.

        Args:
            path: JSON file with a list of words or {"words": [...]}

        Returns:
            WordCatalog instance

        Raises:
            CatalogLoadError: if the file cannot be read or parsed
        """
        path = Path(path)
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise CatalogLoadError(f"Failed to load {path}: {e}") from e

        entries = data.get("words", []) if isinstance(data, dict) else data
        if not isinstance(entries, list):
            raise CatalogLoadError(f"Failed to load {path}: expected a list of words")

        catalog = cls()
        skipped = 0

        for entry in entries:
            try:
                word = Word.from_dict(entry)
            except (KeyError, TypeError, ValueError) as e:
                logger.warning(f"Invalid word in {path.name}: {e}")
                skipped += 1
                continue
            catalog._add(word)

        logger.info(
            f"WordCatalog loaded: {len(catalog)} words in {len(catalog.categories())} "
            f"categories from {path.name} ({skipped} skipped)"
        )
        return catalog

    @classmethod
    def load_default(cls) -> WordCatalog:
        """Load the packaged sample catalog."""
        return cls.load(DEFAULT_CATALOG_PATH)

    # -------------------------------------------------------------------------
    # Access
    # -------------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[Word]:
        return iter(self._words.values())

    def __contains__(self, word_id: object) -> bool:
        return word_id in self._words

    def get(self, word_id: int) -> Word:
        """
        Look up a word by id.

        Raises:
            NotFoundError: if the id is not in the catalog
        """
        try:
            return self._words[word_id]
        except KeyError:
            raise NotFoundError(word_id) from None

    def find(self, word_id: int) -> Word | None:
        return self._words.get(word_id)

    def by_category(self, category: str) -> list[Word]:
        """Words in a category; "all" returns the whole catalog."""
        if category == ALL_CATEGORIES:
            return list(self._words.values())
        return [self._words[i] for i in self._by_category.get(category, [])]

    def by_difficulty(self, difficulty: Difficulty) -> list[Word]:
        return [self._words[i] for i in self._by_difficulty.get(difficulty, [])]

    def categories(self) -> list[str]:
        """Sorted distinct category names."""
        return sorted(self._by_category.keys())

    def random_words(
        self,
        count: int,
        category: str | None = None,
        difficulty: Difficulty | None = None,
        rng: random.Random | None = None,
    ) -> list[Word]:
        """
        Random sample of words, optionally filtered.

        Args:
            count: Maximum number of words
            category: Category filter ("all" or None = no filter)
            difficulty: Difficulty filter
            rng: Random source (unseeded generator if None)
        """
        rng = rng or random.Random()
        pool = self.by_category(category or ALL_CATEGORIES)
        if difficulty is not None:
            pool = [w for w in pool if w.difficulty == difficulty]

        rng.shuffle(pool)
        return pool[:count]
