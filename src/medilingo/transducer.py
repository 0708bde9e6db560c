"""Taglish output generation.

A single left-to-right pass substitutes each token with its lexicon entry,
then one repair step inserts a particle so the sentence reads naturally:

    take 1 tablet daily   -> Uminom ng isang tableta araw-araw.
    apply patch daily     -> Ipahid ang patch araw-araw.

Input must already be accepted by the grammar; nothing here raises.
"""

from __future__ import annotations
import re
from typing import Mapping, Sequence

from .lexer import Token, TokenType
from .vocab import TRANSLATIONS

INTERVAL_PREFIX = "every"
_NUMERAL_RE = re.compile(r"\d+(?:\.\d+)?")
_TRAILING_SPACE_RE = re.compile(r"\s+\.$")


def translate_word(word: str, table: Mapping[str, str] = TRANSLATIONS) -> str:
    return table.get(word.lower(), word)


def translate_interval(phrase: str, table: Mapping[str, str] = TRANSLATIONS) -> str:
    """Translate "every N <period>" piece by piece; the count stays a numeral."""
    pieces = []
    for piece in phrase.split():
        if _NUMERAL_RE.fullmatch(piece):
            pieces.append(piece)
        else:
            pieces.append(translate_word(piece, table))
    return " ".join(pieces)


def translate_token(tok: Token, table: Mapping[str, str] = TRANSLATIONS) -> str:
    if tok.type is TokenType.FREQUENCY and tok.value.lower().startswith(INTERVAL_PREFIX):
        return translate_interval(tok.value, table)
    return translate_word(tok.value, table)


def _first_index(tokens: Sequence[Token], token_type: TokenType) -> int:
    for i, tok in enumerate(tokens):
        if tok.type is token_type:
            return i
    return -1


def insert_particle(parts: list[str], tokens: Sequence[Token]) -> list[str]:
    """Insert "ang" before a bare unit, or "ng" before a quantity.

    Positions are token indices; PERIOD is only ever last so dropping it
    does not shift anything before it.
    """
    out = list(parts)
    qty = _first_index(tokens, TokenType.QUANTITY)
    if qty == -1:
        unit = _first_index(tokens, TokenType.UNIT)
        if unit > 0:
            out.insert(unit, "ang")
    elif qty > 0:
        out.insert(qty, "ng")
    return out


def assemble(parts: Sequence[str]) -> str:
    sentence = " ".join(parts)
    sentence = sentence[:1].upper() + sentence[1:] + "."
    return _TRAILING_SPACE_RE.sub(".", sentence)


def transduce(tokens: Sequence[Token]) -> str:
    """Render a validated token sequence as one Taglish sentence."""
    parts = [translate_token(t) for t in tokens if t.type is not TokenType.PERIOD]
    return assemble(insert_particle(parts, tokens))
