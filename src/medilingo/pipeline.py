"""Dosage-instruction pipeline.

Pipeline shape:
- reject empty input
- normalize -> tokenize -> validate -> transduce

Two entry points over the same stages:
- simplify_instruction() returns the sentence or raises a MedilingoError
- translate() never raises for pipeline failures; it returns a
  TranslationResult carrying either the sentence or the error
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from .errors import EmptyInputError, MedilingoError
from .grammar import validate
from .lexer import Token, tokenize
from .normalize import normalize_instruction
from .transducer import transduce


@dataclass(frozen=True)
class TranslationResult:
    input: str
    text: Optional[str] = None
    error: Optional[MedilingoError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def message(self) -> str:
        """The translation on success, the diagnostic otherwise."""
        if self.error is not None:
            return str(self.error)
        return self.text or ""


def lex_instruction(text: str) -> list[Token]:
    """Normalize and tokenize without validating."""
    if not text or not text.strip():
        raise EmptyInputError()
    return tokenize(normalize_instruction(text))


def simplify_instruction(text: str) -> str:
    """Translate one English dosage instruction into Taglish.

    Raises:
        EmptyInputError, UnrecognizedTermError, UnexpectedTokenError,
        IncompleteInstructionError
    """
    tokens = lex_instruction(text)
    validate(tokens)
    return transduce(tokens)


def translate(text: str) -> TranslationResult:
    """Like simplify_instruction(), but reports failure as a value."""
    try:
        return TranslationResult(input=text, text=simplify_instruction(text))
    except MedilingoError as ex:
        return TranslationResult(input=text, error=ex)
