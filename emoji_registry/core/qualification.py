"""
qualification.py
Derives every partially-qualified and unqualified spelling of the canonical
emoji and maps each one back to its fully-qualified form.

U+FE0F (VARIATION SELECTOR-16) asks for emoji presentation of the preceding
character. Fully-qualified sequences carry all of them; text in the wild often
drops some or all. For a canonical sequence with k selectors every one of the
2**k keep/drop choices is generated, e.g. for heart on fire
(U+2764 U+FE0F U+200D U+1F525) the variant U+2764 U+200D U+1F525 maps back
to the canonical sequence.
k is small (at most 2 in the Unicode 15.1 data), so the full table stays in the low
thousands of entries.
"""

from __future__ import annotations
from typing import Dict, Iterable, List

from emoji_registry.utils.logger_utils import log

VS16 = "\uFE0F"

QualificationMap = Dict[str, str]


def _combinations(codepoints: List[str]) -> List[List[str]]:
    """
    Keep-or-drop every VS16 in `codepoints`, leaving everything else in place.
    Walks left to right: a plain codepoint is prepended to each result for the
    remainder, a VS16 forks each result into "without" and "with".
    """
    if not codepoints:
        return [[]]

    head, tail = codepoints[0], codepoints[1:]
    rest = _combinations(tail)
    if head == VS16:
        out: List[List[str]] = []
        for combo in rest:
            out.append(combo)
            out.append([VS16] + combo)
        return out
    return [[head] + combo for combo in rest]


def unqualified_variants(sequence: str) -> List[str]:
    """
    All 2**k spellings of `sequence` obtained by dropping any subset of its
    k VS16 codepoints. The sequence itself is included.
    """
    return ["".join(combo) for combo in _combinations(list(sequence))]


def build_qualification_map(canonical: Iterable[str]) -> QualificationMap:
    """
    Map each variant to the canonical sequence it was derived from.

    Canonical sequences are processed in the given order and the first one to
    produce a variant keeps it; later collisions are dropped. A canonical
    sequence is never stored as a key for itself.
    """
    table: QualificationMap = {}
    collisions = 0
    with log.time_block("qualification map"):
        for seq in canonical:
            if VS16 not in seq:
                continue
            for variant in unqualified_variants(seq):
                if variant == seq:
                    continue
                if variant in table:
                    if table[variant] != seq:
                        collisions += 1
                    continue
                table[variant] = seq

    if collisions:
        log.debug(f"qualification map: {collisions} variant collisions kept first canonical")
    log.debug(f"qualification map: {len(table)} variants")
    return table
