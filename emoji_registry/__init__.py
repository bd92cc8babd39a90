r"""
emoji_registry

Custom emoji registry plus Unicode emoji recognition/normalization.

    >>> from emoji_registry import is_unicode_emoji, fully_qualify
    >>> is_unicode_emoji("\u263a\ufe0f")
    True
    >>> fully_qualify("\u263a") == "\u263a\ufe0f"
    True
"""

from .core import (
    EmojiClassifier,
    EmojiEntry,
    EmojiRegistry,
    EmojiRegistryError,
    ReferenceDataError,
    ReloadError,
    default_classifier,
    fully_qualify,
    is_unicode_emoji,
    unqualified_variants,
)
from .loader import DirectoryLoader
from .sanitize import strip_tags

__all__ = [
    "EmojiClassifier",
    "EmojiEntry",
    "EmojiRegistry",
    "EmojiRegistryError",
    "ReferenceDataError",
    "ReloadError",
    "default_classifier",
    "fully_qualify",
    "is_unicode_emoji",
    "unqualified_variants",
    "DirectoryLoader",
    "strip_tags",
]

__version__ = "0.1.0"
