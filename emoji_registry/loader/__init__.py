# emoji_registry/loader/__init__.py
# Loaders that produce (name, locator, tags) records for EmojiRegistry.reload()

from .directory_loader import DirectoryLoader, parse_manifest_line

__all__ = ["DirectoryLoader", "parse_manifest_line"]
