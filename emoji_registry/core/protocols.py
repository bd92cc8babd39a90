# emoji_registry/core/protocols.py
"""
Protocol interfaces for the collaborators the registry depends on.

The registry only needs "something that returns raw emoji records" and
"something that cleans a string", so tests can hand in plain functions,
no-op sanitizers or loaders that fail on purpose.
"""

from __future__ import annotations

from typing import Iterable, Optional, Protocol, Sequence, Tuple, Union, runtime_checkable

# (name, locator) or (name, locator, tags); tags may be None
RawEmoji = Union[
    Tuple[str, str],
    Tuple[str, str, Optional[Sequence[str]]],
]


@runtime_checkable
class EmojiLoader(Protocol):
    """Produces the raw emoji records for one reload. May raise OSError/ValueError."""

    def __call__(self) -> Iterable[RawEmoji]:
        ...


@runtime_checkable
class Sanitizer(Protocol):
    """Pure str -> str cleanup applied to names and locators before storage."""

    def __call__(self, text: str) -> str:
        ...
