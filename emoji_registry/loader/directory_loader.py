# emoji_registry/loader/directory_loader.py
"""
Filesystem loader for custom emoji.

Layout under the emoji root:

    emoji/
      blobcat.png              -> ("blobcat", "/emoji/blobcat.png", ["Custom"])
      blobs/                   pack "blobs"
        emoji.txt              optional manifest
        blobfox.png
      party/                   pack without manifest: every image, recursively
        parrot.gif

Manifest lines are "name, relative/path.png[, tag, ...]"; blank lines and
lines starting with "#" are ignored. Pack emoji are tagged "pack:<dir>".
"""

from __future__ import annotations
import os
from typing import Iterable, List, Optional, Sequence, Tuple

from emoji_registry.utils.logger_utils import log
from emoji_registry.utils.threaded_runner import run_parallel

Record = Tuple[str, str, List[str]]

MANIFEST = "emoji.txt"
DEFAULT_EXTENSIONS = (".png", ".gif", ".jpg", ".jpeg", ".svg", ".webp")


class DirectoryLoader:
    """Callable loader: DirectoryLoader(root)() -> [(name, locator, tags), ...]."""

    def __init__(
        self,
        root: str,
        base_url: str = "/emoji",
        extensions: Iterable[str] = DEFAULT_EXTENSIONS,
        default_tag: str = "Custom",
        max_workers: int = 4,
    ):
        self.root = os.path.abspath(root)
        self.base_url = base_url.rstrip("/")
        self.extensions = tuple(e.lower() if e.startswith(".") else "." + e.lower() for e in extensions)
        self.default_tag = default_tag
        self.max_workers = max_workers

    @classmethod
    def from_config(cls, cfg) -> "DirectoryLoader":
        return cls(
            cfg.get("emoji_dir"),
            base_url=cfg.get("base_url", "/emoji"),
            extensions=cfg.get("extensions", DEFAULT_EXTENSIONS),
            default_tag=cfg.get("default_tag", "Custom"),
        )

    def __call__(self) -> List[Record]:
        return self.load()

    # scanning ----------------------------------------------------------------------
    def load(self) -> List[Record]:
        """
        Scan the root. Raises OSError if the root is missing or unreadable;
        a pack that fails to scan fails the whole load.
        """
        if not os.path.isdir(self.root):
            raise FileNotFoundError(f"emoji directory not found: {self.root}")

        loose: List[Record] = []
        packs: List[str] = []
        with os.scandir(self.root) as it:
            for ent in sorted(it, key=lambda e: e.name):
                if ent.name.startswith("."):
                    continue
                if ent.is_dir():
                    packs.append(ent.path)
                elif ent.is_file() and self._is_image(ent.name):
                    loose.append(self._record(ent.path, [self.default_tag]))

        results = run_parallel(
            [lambda p=p: self.load_pack(p) for p in packs], max_workers=self.max_workers
        )
        out = loose
        for recs in results:
            out.extend(recs)
        log.debug(f"[DirectoryLoader] {len(out)} emoji from {len(packs)} packs in {self.root}")
        return out

    def load_pack(self, pack_dir: str) -> List[Record]:
        pack_tag = "pack:" + os.path.basename(pack_dir)
        manifest = os.path.join(pack_dir, MANIFEST)
        if os.path.isfile(manifest):
            return self._load_manifest(pack_dir, manifest, pack_tag)

        out: List[Record] = []
        for dirpath, dirnames, filenames in os.walk(pack_dir):
            dirnames[:] = sorted(d for d in dirnames if not d.startswith("."))
            for fname in sorted(filenames):
                if self._is_image(fname):
                    out.append(self._record(os.path.join(dirpath, fname), [pack_tag]))
        return out

    def _load_manifest(self, pack_dir: str, manifest: str, pack_tag: str) -> List[Record]:
        out: List[Record] = []
        with open(manifest, "r", encoding="utf-8") as f:
            for lineno, line in enumerate(f, start=1):
                parsed = parse_manifest_line(line)
                if parsed is None:
                    if line.strip() and not line.lstrip().startswith("#"):
                        log.warning(f"[DirectoryLoader] {manifest}:{lineno}: skipped malformed line")
                    continue
                name, rel_path, tags = parsed
                path = os.path.normpath(os.path.join(pack_dir, rel_path.lstrip("/")))
                if os.path.relpath(path, self.root).split(os.sep)[0] == os.pardir:
                    log.warning(f"[DirectoryLoader] {manifest}:{lineno}: path escapes emoji root, skipped")
                    continue
                out.append((name, self._locator(path), [pack_tag] + tags))
        return out

    # helpers --------------------------------------------------------------------
    def _is_image(self, fname: str) -> bool:
        return os.path.splitext(fname)[1].lower() in self.extensions

    def _locator(self, path: str) -> str:
        rel = os.path.relpath(path, self.root).replace(os.sep, "/")
        return f"{self.base_url}/{rel}"

    def _record(self, path: str, tags: Sequence[str]) -> Record:
        name = os.path.splitext(os.path.basename(path))[0]
        return (name, self._locator(path), list(tags))


def parse_manifest_line(line: str) -> Optional[Tuple[str, str, List[str]]]:
    """Split "name, path[, tags...]"; None for blanks, comments and short lines."""
    stripped = line.strip()
    if not stripped or stripped.startswith("#"):
        return None
    fields = [f.strip() for f in stripped.split(",")]
    if len(fields) < 2 or not fields[0] or not fields[1]:
        return None
    return fields[0], fields[1], [t for t in fields[2:] if t]
