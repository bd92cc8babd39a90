"""
emoji_registry.core

Emoji tables and the custom emoji registry.
Contains:
 - reference table builder (emoji-test.txt -> canonical sequences)
 - qualification map builder (variant -> canonical)
 - EmojiClassifier (is_unicode_emoji / fully_qualify)
 - EmojiRegistry (reloadable name -> locator table)
"""

from .errors import EmojiRegistryError, ReferenceDataError, ReloadError
from .reference_table import build_canonical, load_canonical, regional_indicators
from .qualification import build_qualification_map, unqualified_variants
from .classifier import EmojiClassifier, default_classifier, fully_qualify, is_unicode_emoji
from .registry import EmojiEntry, EmojiRegistry

__all__ = [
    "EmojiRegistryError",
    "ReferenceDataError",
    "ReloadError",
    "build_canonical",
    "load_canonical",
    "regional_indicators",
    "build_qualification_map",
    "unqualified_variants",
    "EmojiClassifier",
    "default_classifier",
    "fully_qualify",
    "is_unicode_emoji",
    "EmojiEntry",
    "EmojiRegistry",
]
