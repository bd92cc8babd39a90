"""
registry.py
In-memory registry of custom emoji (short name -> image locator + tags).

The table is never edited in place. load() builds a complete new table off to
the side and publishes it with a single reference swap, so readers never take
a lock and always see one whole snapshot: the one before a reload or the one
after it.
"""

from __future__ import annotations
import threading
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, List, Mapping, Optional, Tuple

from emoji_registry.core.errors import ReloadError
from emoji_registry.core.protocols import EmojiLoader, RawEmoji, Sanitizer
from emoji_registry.sanitize import strip_tags
from emoji_registry.utils.logger_utils import log

EmojiRow = Tuple[str, str, FrozenSet[str]]  # (name, locator, tags)


@dataclass(frozen=True)
class EmojiEntry:
    """One custom emoji as stored in the registry."""
    name: str
    locator: str
    tags: FrozenSet[str] = field(default_factory=frozenset)
    sanitized_name: str = ""
    sanitized_locator: str = ""

    @classmethod
    def build(cls, raw: RawEmoji, sanitizer: Sanitizer = strip_tags) -> "EmojiEntry":
        """
        Build an entry from a loader record: (name, locator) or
        (name, locator, tags). Missing or None tags become an empty set.
        """
        if not isinstance(raw, (tuple, list)) or len(raw) not in (2, 3):
            raise ValueError(f"emoji record must be (name, locator[, tags]), got {raw!r}")
        name, locator = raw[0], raw[1]
        tags = raw[2] if len(raw) == 3 else None
        if not isinstance(name, str) or not isinstance(locator, str):
            raise ValueError(f"emoji name and locator must be strings, got {raw!r}")
        if isinstance(tags, str):
            tags = [tags]
        if tags is not None and (
            not isinstance(tags, (list, tuple, set, frozenset))
            or not all(isinstance(t, str) for t in tags)
        ):
            raise ValueError(f"emoji tags must be a collection of strings, got {tags!r}")
        return cls(
            name=name,
            locator=locator,
            tags=frozenset(tags or ()),
            sanitized_name=_sanitize(sanitizer, name),
            sanitized_locator=_sanitize(sanitizer, locator),
        )

    def row(self) -> EmojiRow:
        return (self.name, self.locator, self.tags)


def _sanitize(sanitizer: Sanitizer, value: str) -> str:
    # a failing sanitizer stores "" rather than the raw, possibly unsafe, value
    try:
        return sanitizer(value)
    except Exception as e:
        log.warning(f"[EmojiRegistry] sanitizer failed on {value!r}, storing empty string: {e}")
        return ""


_EMPTY: Mapping[str, EmojiEntry] = MappingProxyType({})


class EmojiRegistry:
    """
    Registry of custom emoji, rebuilt wholesale from a loader.
    Public API:
      reload() / load(records) / clear()
      get(name) / exists(name) / entry(name) / list_all()
    Readers are lock free. Writers (load, clear) are serialized by one lock
    that only guards the swap; reload() additionally serializes whole reloads
    so concurrent calls never interleave.
    """

    def __init__(
        self,
        loader: Optional[EmojiLoader] = None,
        sanitizer: Sanitizer = strip_tags,
    ):
        self._loader = loader
        self._sanitizer = sanitizer
        self._table: Mapping[str, EmojiEntry] = _EMPTY
        self._swap_lock = threading.Lock()
        self._reload_lock = threading.Lock()

    # Writers -------------------------------------------------------------------
    def load(self, records: Iterable[RawEmoji]) -> int:
        """
        Replace the whole table with `records`. A later record with the same
        name overwrites an earlier one. Malformed records raise ValueError and
        leave the current table untouched. Returns the number of entries.
        """
        fresh: Dict[str, EmojiEntry] = {}
        for raw in records:
            entry = EmojiEntry.build(raw, self._sanitizer)
            fresh[entry.name] = entry

        table = MappingProxyType({name: fresh[name] for name in sorted(fresh)})
        self._publish(table)
        return len(table)

    def reload(self) -> int:
        """
        Fetch fresh records from the loader and load them.
        Raises ReloadError if the loader fails or returns bad records; the
        previous table stays published in that case.
        """
        with self._reload_lock:
            if self._loader is None:
                raise ReloadError("no emoji loader configured")
            try:
                records = list(self._loader())
                count = self.load(records)
            except Exception as e:
                log.error(f"[EmojiRegistry] reload failed, keeping {len(self._table)} entries: {e}")
                raise ReloadError(f"emoji reload failed: {e}") from e
        log.info(f"[EmojiRegistry] loaded {count} emoji")
        return count

    def clear(self) -> None:
        """Drop every entry."""
        self._publish(_EMPTY)

    def start(self, background: bool = False) -> Optional[threading.Thread]:
        """
        Initial load at service start. With background=True the reload runs in
        a daemon thread (readers see an empty table until it finishes) and the
        thread is returned; a failure there is logged, not raised.
        """
        if not background:
            self.reload()
            return None

        def _initial_load():
            try:
                self.reload()
            except ReloadError:
                # already logged by reload(); the table just stays empty
                return

        t = threading.Thread(target=_initial_load, name="emoji-initial-load", daemon=True)
        t.start()
        return t

    def _publish(self, table: Mapping[str, EmojiEntry]) -> None:
        with self._swap_lock:
            self._table = table

    # Readers -------------------------------------------------------------------
    def get(self, name: str) -> Optional[str]:
        """Locator of emoji `name`, or None if unknown."""
        entry = self._table.get(name)
        return entry.locator if entry is not None else None

    def exists(self, name: str) -> bool:
        return self.get(name) is not None

    def entry(self, name: str) -> Optional[EmojiEntry]:
        return self._table.get(name)

    def list_all(self) -> List[EmojiRow]:
        """All (name, locator, tags) rows of the current snapshot, ordered by name."""
        snapshot = self._table
        return [e.row() for e in snapshot.values()]

    def snapshot(self) -> Mapping[str, EmojiEntry]:
        """The current read-only table; it never changes once handed out."""
        return self._table

    def __len__(self) -> int:
        return len(self._table)

    def __contains__(self, name: object) -> bool:
        return name in self._table

    def __repr__(self):
        return f"<EmojiRegistry entries={len(self._table)}>"
