"""
cli.py - inspection tool for the emoji tables and the custom emoji directory
Commands:
- check TEXT      is TEXT a fully-qualified emoji, and what is its canonical form
- variants TEXT   every VS16 spelling derived from TEXT
- list            load the configured emoji directory and print it
- get NAME        locator of one custom emoji
- stats           table sizes and build time
Uses Rich for tables and formatting.
"""

import argparse
import sys
import time
from typing import List, Optional

from rich.console import Console
from rich.table import Table
from rich import box
from rich.markup import escape

from emoji_registry.core.classifier import EmojiClassifier
from emoji_registry.core.errors import EmojiRegistryError
from emoji_registry.core.qualification import unqualified_variants
from emoji_registry.core.registry import EmojiRegistry
from emoji_registry.loader.directory_loader import DirectoryLoader
from emoji_registry.utils.config_manager import Config
from emoji_registry.utils.logger_utils import configure_logging

console = Console()


def codepoints(text: str) -> str:
    """'U+263A U+FE0F' style rendering so invisible selectors show up."""
    return " ".join(f"U+{ord(ch):04X}" for ch in text)


class CLI:
    """Runs one subcommand against the configured tables."""

    def __init__(self, cfg: Config):
        self.cfg = cfg
        configure_logging(cfg)
        self._classifier: Optional[EmojiClassifier] = None
        self.build_time = 0.0

    @property
    def classifier(self) -> EmojiClassifier:
        if self._classifier is None:
            t0 = time.perf_counter()
            self._classifier = EmojiClassifier.from_file(self.cfg.get("reference_data"))
            self.build_time = time.perf_counter() - t0
        return self._classifier

    def registry(self) -> EmojiRegistry:
        reg = EmojiRegistry(loader=DirectoryLoader.from_config(self.cfg))
        reg.reload()
        return reg

    # commands ------------------------------------------------------------------
    def check(self, text: str) -> int:
        clf = self.classifier
        qualified = clf.fully_qualify(text)
        table = Table(box=box.SIMPLE, show_header=False)
        table.add_row("input", f"{escape(text)}  [dim]{codepoints(text)}[/dim]")
        table.add_row("is emoji", "[green]yes[/green]" if clf.is_unicode_emoji(text) else "[red]no[/red]")
        table.add_row("qualified", f"{escape(qualified)}  [dim]{codepoints(qualified)}[/dim]")
        console.print(table)
        return 0

    def variants(self, text: str) -> int:
        canonical = self.classifier.fully_qualify(text)
        table = Table(title=f"variants of {codepoints(canonical)}", box=box.SIMPLE)
        table.add_column("variant")
        table.add_column("codepoints", style="dim")
        for v in unqualified_variants(canonical):
            table.add_row(escape(v), codepoints(v))
        console.print(table)
        return 0

    def list_emoji(self) -> int:
        reg = self.registry()
        table = Table(title=f"{len(reg)} custom emoji", box=box.SIMPLE)
        table.add_column("name", style="cyan")
        table.add_column("locator")
        table.add_column("tags", style="magenta")
        for name, locator, tags in reg.list_all():
            table.add_row(escape(name), escape(locator), escape(", ".join(sorted(tags))))
        console.print(table)
        return 0

    def get(self, name: str) -> int:
        locator = self.registry().get(name)
        if locator is None:
            console.print(f"[red]no such emoji:[/red] {escape(name)}")
            return 1
        console.print(escape(locator))
        return 0

    def stats(self) -> int:
        clf = self.classifier
        table = Table(box=box.SIMPLE, show_header=False)
        table.add_row("canonical sequences", str(len(clf)))
        table.add_row("qualification variants", str(len(clf.qualification_map)))
        table.add_row("build time", f"{self.build_time * 1000:.1f} ms")
        console.print(table)
        return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="emoji-registry", description="Inspect emoji tables")
    parser.add_argument("--config", default="emoji_registry.json", help="JSON config file")
    sub = parser.add_subparsers(dest="command", required=True)
    p = sub.add_parser("check", help="classify and fully-qualify TEXT")
    p.add_argument("text")
    p = sub.add_parser("variants", help="list VS16 variants of TEXT")
    p.add_argument("text")
    sub.add_parser("list", help="list custom emoji from emoji_dir")
    p = sub.add_parser("get", help="locator of a custom emoji")
    p.add_argument("name")
    sub.add_parser("stats", help="table sizes and build time")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    cli = CLI(Config(args.config))
    try:
        if args.command == "check":
            return cli.check(args.text)
        if args.command == "variants":
            return cli.variants(args.text)
        if args.command == "list":
            return cli.list_emoji()
        if args.command == "get":
            return cli.get(args.name)
        return cli.stats()
    except EmojiRegistryError as e:
        console.print(f"[red]error:[/red] {escape(str(e))}")
        return 2


if __name__ == "__main__":
    sys.exit(main())
