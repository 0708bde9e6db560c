"""Instruction normalization.

Pipeline shape:
- trim and lowercase
- expand prescription shorthand ("bid", "q8h", ...) as whole words
- make sure the text ends with a "." sentinel
- collapse whitespace

The result is what the lexer consumes. Normalizing twice is a no-op.
"""

from __future__ import annotations
import re
from typing import Mapping

from .vocab import ABBREVIATIONS


def compile_abbreviations(table: Mapping[str, str]) -> re.Pattern[str]:
    """Build one alternation that only matches shorthand as a whole word.

    Longer keys come first so "q.d." wins over a shorter overlapping key.
    Lookarounds are used instead of \\b because some keys end in ".".
    """
    keys = sorted(table, key=len, reverse=True)
    alternation = "|".join(re.escape(k) for k in keys)
    return re.compile(rf"(?<!\w)(?:{alternation})(?!\w)")


_ABBREV_RE = compile_abbreviations(ABBREVIATIONS)
_SPACE_RE = re.compile(r"\s+")


def expand_abbreviations(text: str) -> str:
    return _ABBREV_RE.sub(lambda m: ABBREVIATIONS[m.group(0)], text)


def normalize_instruction(text: str) -> str:
    """Normalize one raw instruction for tokenization.

    Never raises; empty input is rejected by the caller beforehand.
    """
    cur = text.strip().lower()
    cur = expand_abbreviations(cur)
    if not cur.endswith("."):
        cur += " ."
    return _SPACE_RE.sub(" ", cur).strip()
