# reference_table.py
# Builds the set of canonical (fully-qualified) emoji sequences from Unicode's
# emoji-test.txt data.
# Line format:  <hex codepoints> ; <status> # <emoji> <version> <name>
# Only "fully-qualified" records are kept. The 26 regional indicator symbols
# are appended since emoji-test.txt lists them only as parts of flags.

from __future__ import annotations
import os
from typing import Iterable, List, Optional, Tuple

from emoji_registry.core.errors import ReferenceDataError
from emoji_registry.utils.logger_utils import log

FULLY_QUALIFIED = "fully-qualified"

REGIONAL_INDICATOR_FIRST = 0x1F1E6
REGIONAL_INDICATOR_LAST = 0x1F1FF

BUNDLED_EMOJI_TEST = os.path.join(
    os.path.dirname(os.path.dirname(__file__)), "data", "emoji-test.txt"
)

CanonicalSequences = Tuple[str, ...]


def regional_indicators() -> List[str]:
    """The 26 single-codepoint regional indicator sequences, A through Z."""
    return [chr(cp) for cp in range(REGIONAL_INDICATOR_FIRST, REGIONAL_INDICATOR_LAST + 1)]


def parse_line(line: str, source: Optional[str] = None, lineno: Optional[int] = None) -> Optional[str]:
    """
    Return the codepoint sequence a single emoji-test.txt line describes, or
    None if the line is blank, a comment, or not a fully-qualified record.
    """
    stripped = line.lstrip("\ufeff").strip()
    if not stripped or stripped.startswith("#"):
        return None

    codepoints, sep, rest = stripped.partition(";")
    if not sep:
        raise ReferenceDataError(f"missing ';' field separator: {stripped!r}", source, lineno)

    status = rest.split("#", 1)[0].strip()
    if status != FULLY_QUALIFIED:
        return None

    tokens = codepoints.split()
    if not tokens:
        raise ReferenceDataError("record has no codepoints", source, lineno)

    chars = []
    for tok in tokens:
        try:
            cp = int(tok, 16)
        except ValueError as e:
            raise ReferenceDataError(f"invalid codepoint {tok!r}", source, lineno) from e
        # surrogates are not scalar values
        if cp < 0 or cp > 0x10FFFF or 0xD800 <= cp <= 0xDFFF:
            raise ReferenceDataError(f"codepoint out of range {tok!r}", source, lineno)
        chars.append(chr(cp))
    return "".join(chars)


def build_canonical(lines: Iterable[str], source: Optional[str] = None) -> CanonicalSequences:
    """
    Build the canonical sequences in dataset order, without duplicates, with
    the regional indicators appended at the end.
    The order matters: it decides which canonical sequence claims a variant
    when two of them collide in the qualification map.
    """
    seen = {}
    for lineno, line in enumerate(lines, start=1):
        seq = parse_line(line, source, lineno)
        if seq is not None:
            seen.setdefault(seq, None)

    for ri in regional_indicators():
        seen.setdefault(ri, None)

    return tuple(seen)


def load_canonical(path: Optional[str] = None) -> CanonicalSequences:
    """Read and parse an emoji-test.txt file (the bundled copy by default)."""
    path = path or BUNDLED_EMOJI_TEST
    try:
        with open(path, "r", encoding="utf-8-sig") as f:
            with log.time_block("reference table"):
                table = build_canonical(f, source=path)
    except (OSError, UnicodeDecodeError) as e:
        raise ReferenceDataError(f"cannot read reference data: {e}", path) from e
    log.debug(f"reference table: {len(table)} canonical sequences from {path}")
    return table
