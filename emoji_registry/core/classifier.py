"""
classifier.py
Recognises fully-qualified Unicode emoji and restores the canonical form of
partially-qualified or unqualified ones.

Both tables are built once and never modified afterwards, so an
EmojiClassifier can be shared between threads without locking.
"""

from __future__ import annotations
from functools import lru_cache
from types import MappingProxyType
from typing import FrozenSet, Iterable, Mapping, Optional, Sequence

from emoji_registry.core.qualification import build_qualification_map
from emoji_registry.core.reference_table import build_canonical, load_canonical


class EmojiClassifier:
    """
    Read-only view over the canonical emoji set and the variant -> canonical map.
    Use from_file()/from_lines() rather than building the tables by hand.
    """

    __slots__ = ("_canonical", "_qualification")

    def __init__(self, canonical: Sequence[str]):
        # canonical order is kept for the qualification build, then dropped
        canonical = tuple(canonical)
        self._canonical: FrozenSet[str] = frozenset(canonical)
        self._qualification: Mapping[str, str] = MappingProxyType(
            build_qualification_map(canonical)
        )

    @classmethod
    def from_lines(cls, lines: Iterable[str], source: Optional[str] = None) -> "EmojiClassifier":
        return cls(build_canonical(lines, source=source))

    @classmethod
    def from_file(cls, path: Optional[str] = None) -> "EmojiClassifier":
        """Build from an emoji-test.txt file; the bundled copy when path is None."""
        return cls(load_canonical(path))

    # lookups -------------------------------------------------------------------
    def is_unicode_emoji(self, text: str) -> bool:
        """True only for an exact canonical sequence; no prefix or partial matches."""
        return text in self._canonical

    def fully_qualify(self, text: str) -> str:
        """
        The canonical form of `text` if it is a known variant, otherwise `text`
        itself (already canonical, or not an emoji at all).
        """
        return self._qualification.get(text, text)

    # introspection -------------------------------------------------------------
    @property
    def canonical(self) -> FrozenSet[str]:
        return self._canonical

    @property
    def qualification_map(self) -> Mapping[str, str]:
        return self._qualification

    def __len__(self) -> int:
        return len(self._canonical)

    def __contains__(self, text: object) -> bool:
        return text in self._canonical

    def __repr__(self):
        return f"<EmojiClassifier canonical={len(self._canonical)} variants={len(self._qualification)}>"


@lru_cache(maxsize=1)
def default_classifier() -> EmojiClassifier:
    """Classifier over the bundled emoji-test.txt, built on first use."""
    return EmojiClassifier.from_file()


def is_unicode_emoji(text: str) -> bool:
    return default_classifier().is_unicode_emoji(text)


def fully_qualify(text: str) -> str:
    return default_classifier().fully_qualify(text)
