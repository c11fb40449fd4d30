"""
The Kana lexicon.

A lexicon is built once from an ordered list of entries and is read-only
afterwards, so one instance can be shared by any number of translations.
Three indices are derived from the entries:

- canonical form -> meanings
- lowercase English meaning -> canonical form
- canonical form -> word category

Collisions are resolved by construction order: a later entry overwrites an
earlier one in every index. Bracketed meanings (``[object-marker]``) are kept in
the meanings list but are never indexed as English words.
"""
import json
import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterable, List, Optional, Tuple

from kanalang.vocabulary import KANA_VOCABULARY

logger = logging.getLogger(__name__)


class Category(Enum):
    """Grammatical category of a Kana word."""
    ENTITY = "entity"
    ACTION = "action"
    QUALITY = "quality"
    PARTICLE = "particle"
    NUMBER = "number"


def is_placeholder(meaning: str) -> bool:
    """Bracketed meanings describe grammar, they are not translations."""
    return meaning.startswith("[")


@dataclass(frozen=True)
class LexiconEntry:
    """One Kana word with its English meanings in priority order."""

    canonical_form: str
    meanings: Tuple[str, ...]
    category: Category

    def __post_init__(self):
        # Accept any iterable of meanings but store an immutable tuple
        object.__setattr__(self, "meanings", tuple(self.meanings))
        if not self.canonical_form:
            raise ValueError("Lexicon entry needs a canonical form.")
        if not self.meanings:
            raise ValueError(f"Lexicon entry '{self.canonical_form}' has no meanings.")

    @classmethod
    def from_row(cls, kana: str, english: Iterable[str], word_type: str) -> "LexiconEntry":
        return cls(kana, tuple(english), Category(word_type))


class Lexicon:
    """
    Read-only lookup tables over a list of lexicon entries.

    Usage:
        lexicon = build_lexicon(entries)
        lexicon.lookup_by_meaning("Water")   # -> "telo"
        lexicon.lookup_by_canonical("telo")  # -> ("water", "liquid", ...)
        lexicon.category_of("telo")          # -> Category.ENTITY
    """

    def __init__(self, entries: Iterable[LexiconEntry]):
        self._entries: Tuple[LexiconEntry, ...] = tuple(entries)

        by_canonical: Dict[str, Tuple[str, ...]] = {}
        by_meaning: Dict[str, str] = {}
        categories: Dict[str, Category] = {}

        for entry in self._entries:
            by_canonical[entry.canonical_form] = entry.meanings
            categories[entry.canonical_form] = entry.category
            for meaning in entry.meanings:
                if not is_placeholder(meaning):
                    by_meaning[meaning.lower()] = entry.canonical_form

        self.by_canonical_form = MappingProxyType(by_canonical)
        self.by_meaning = MappingProxyType(by_meaning)
        self.categories = MappingProxyType(categories)

    @property
    def entries(self) -> Tuple[LexiconEntry, ...]:
        """Entries in construction order, duplicates included."""
        return self._entries

    def __len__(self) -> int:
        return len(self.by_canonical_form)

    def __contains__(self, word: str) -> bool:
        return word in self.by_canonical_form

    def lookup_by_meaning(self, word: str) -> Optional[str]:
        """Kana word for an English word (case-insensitive, exact)."""
        return self.by_meaning.get(word.lower())

    def lookup_by_canonical(self, word: str) -> Optional[Tuple[str, ...]]:
        """English meanings of a Kana word (case-sensitive, exact)."""
        return self.by_canonical_form.get(word)

    def category_of(self, word: str) -> Optional[Category]:
        return self.categories.get(word)

    def primary_gloss(self, word: str) -> Optional[str]:
        """
        The English rendering of a Kana word.

        Returns the first meaning that is not a bracketed placeholder, or None
        if the word is unknown or only has placeholder meanings.
        """
        meanings = self.lookup_by_canonical(word)
        if not meanings:
            return None
        for meaning in meanings:
            if not is_placeholder(meaning):
                return meaning
        return None

    def words_in(self, category: Category) -> List[str]:
        """Kana words of a category, sorted alphabetically."""
        return sorted(word for word, cat in self.categories.items() if cat is category)


def build_lexicon(entries: Iterable[LexiconEntry]) -> Lexicon:
    """Build a lexicon. Never fails: duplicates are resolved by last-wins."""
    lexicon = Lexicon(entries)
    logger.debug(
        f"Built lexicon: {len(lexicon.entries)} entries, "
        f"{len(lexicon)} words, {len(lexicon.by_meaning)} English meanings"
    )
    return lexicon


def load_entries(path) -> List[LexiconEntry]:
    """
    Load extra lexicon entries from a JSON file.

    The file holds either a list of word objects or ``{"words": [...]}``, where
    each word object looks like::

        {"kana": "soweli", "english": ["animal", "beast"], "type": "entity"}

    Raises:
        ValueError: If the file is not valid JSON or a word object is malformed.
    """
    path = Path(path)
    with open(path, 'r', encoding='utf-8') as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid lexicon file {path}: {e}") from e

    words = data.get('words') if isinstance(data, dict) else data
    if not isinstance(words, list):
        raise ValueError(f"Invalid lexicon file {path}: expected a list of words")

    entries = []
    for i, word in enumerate(words):
        try:
            english = word['english']
            if isinstance(english, str):
                english = [english]
            entries.append(LexiconEntry.from_row(word['kana'], english, word['type']))
        except (KeyError, TypeError, ValueError) as e:
            raise ValueError(f"Invalid lexicon entry #{i} in {path}: {e}") from e

    logger.info(f"Loaded {len(entries)} lexicon entries from {path}")
    return entries


DEFAULT_ENTRIES: Tuple[LexiconEntry, ...] = tuple(
    LexiconEntry.from_row(kana, english, word_type)
    for kana, english, word_type in KANA_VOCABULARY
)

DEFAULT_LEXICON = build_lexicon(DEFAULT_ENTRIES)
