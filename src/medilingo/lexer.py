"""Lexical tokenization of normalized instructions.

Tokens are recognized by an ordered table of pattern rules. Each rule is
tried against the start of the unconsumed text and the FIRST one that
matches wins; table order is the only tie-break, not match length.

Ordering matters:
- ROUTE verbs come first so they are never read as anything else
- QUANTITY comes before UNIT so numerals and number words stay quantities
- FREQUENCY phrases ("every 8 hours", "as needed") are matched whole

Text that no rule recognizes becomes an INVALID token; tokenizing never
raises.
"""

from __future__ import annotations
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class TokenType(Enum):
    ROUTE = "ROUTE"
    QUANTITY = "QUANTITY"
    UNIT = "UNIT"
    FREQUENCY = "FREQUENCY"
    PERIOD = "PERIOD"
    INVALID = "INVALID"

    @property
    def label(self) -> str:
        return self.value.lower()


@dataclass(frozen=True)
class Token:
    type: TokenType
    value: str

    def __str__(self) -> str:
        return f"{self.type.value}({self.value!r})"


@dataclass(frozen=True)
class PatternRule:
    """Recognizes one token type at the start of the remaining text."""
    type: TokenType
    pattern: re.Pattern[str]

    def match(self, text: str, pos: int = 0) -> Optional[str]:
        """Return the matched prefix of ``text[pos:]``, or None."""
        m = self.pattern.match(text, pos)
        if m is None or not m.group(0):
            return None
        return m.group(0)


def _rule(token_type: TokenType, regex: str) -> PatternRule:
    return PatternRule(token_type, re.compile(regex, re.IGNORECASE))


PATTERN_TABLE: tuple[PatternRule, ...] = (
    _rule(
        TokenType.ROUTE,
        r"(?:take|apply|consume|administer|use|insert|swallow|inhale)\b",
    ),
    _rule(
        TokenType.QUANTITY,
        r"(?:a|an|one|two|three|four|five|six|seven|eight|nine|ten|half|\d+(?:\.\d+)?)\b",
    ),
    _rule(
        TokenType.UNIT,
        r"(?:tablet|capsule|pill|ml|milliliter|tablespoon|teaspoon|drop|spray|puff"
        r"|application|lozenge|patch|sachet|unit|mcg|mg)s?\b",
    ),
    _rule(
        TokenType.FREQUENCY,
        r"(?:every\s\d+\s(?:hours?|days?|weeks?|months?)|every day|daily"
        r"|once a day|twice a day|three times a day|four times a day|twice weekly"
        r"|as needed|before meals|after meals|with meals|at bedtime|immediately"
        r"|in the morning|in the afternoon|at night)\b",
    ),
    _rule(TokenType.PERIOD, r"\."),
)


def _invalid_word(text: str, pos: int) -> str:
    """Next whitespace-delimited word, leaving a trailing "." for PERIOD."""
    end = pos
    while end < len(text) and not text[end].isspace():
        end += 1
    word = text[pos:end]
    if len(word) > 1 and word.endswith("."):
        word = word[:-1]
    return word


def _skip_space(text: str, pos: int) -> int:
    while pos < len(text) and text[pos].isspace():
        pos += 1
    return pos


def tokenize(text: str) -> list[Token]:
    """Split a normalized instruction into typed tokens."""
    tokens: list[Token] = []
    pos = _skip_space(text, 0)
    while pos < len(text):
        for rule in PATTERN_TABLE:
            value = rule.match(text, pos)
            if value is not None:
                tokens.append(Token(rule.type, value))
                break
        else:
            value = _invalid_word(text, pos)
            tokens.append(Token(TokenType.INVALID, value))
        pos = _skip_space(text, pos + len(value))
    return tokens
