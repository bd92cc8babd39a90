"""
errors.py
Exception types raised by the emoji tables and the registry.

Lookups never raise: an unknown name or an unrecognised string is an ordinary
return value (None / False / the input unchanged).
"""

from typing import Optional


class EmojiRegistryError(Exception):
    """Base class for all errors raised by emoji_registry."""


class ReferenceDataError(EmojiRegistryError):
    """
    The Unicode reference dataset could not be read or parsed.
    Raised while building the classifier tables; there is no fallback table.
    """

    def __init__(self, message: str, source: Optional[str] = None, lineno: Optional[int] = None):
        self.source = source
        self.lineno = lineno
        where = ""
        if source is not None:
            where = f"{source}:{lineno}: " if lineno is not None else f"{source}: "
        super().__init__(f"{where}{message}")


class ReloadError(EmojiRegistryError):
    """A registry reload failed; the previously published table is still in place."""
