"""Errors raised by the dosage-instruction pipeline.

Every error carries a short ``kind`` tag so callers that receive a
TranslationResult can branch on the failure without isinstance chains.
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .grammar import State
    from .lexer import Token, TokenType


class MedilingoError(Exception):
    """Base error for this package."""

    kind = "error"


class EmptyInputError(MedilingoError):
    """Raised before any processing when the instruction is empty."""

    kind = "empty_input"

    def __init__(self) -> None:
        super().__init__("Input cannot be empty.")


class UnrecognizedTermError(MedilingoError):
    """Raised when the lexer could not classify a word."""

    kind = "unrecognized_term"

    def __init__(self, term: str) -> None:
        self.term = term
        super().__init__(f'Unknown term: "{term}". Please use simpler terms.')


class UnexpectedTokenError(MedilingoError):
    """Raised when a token is not allowed in the current grammar state."""

    kind = "unexpected_token"

    def __init__(self, state: "State", expected: str, token: "Token") -> None:
        self.state = state
        self.expected = expected
        self.token = token
        super().__init__(
            f"Invalid sequence. {state.position}, expected {expected}, "
            f"but got {token.type.label} ({token.value!r})."
        )


class IncompleteInstructionError(MedilingoError):
    """Raised when the instruction ends before the grammar accepts it."""

    kind = "incomplete_instruction"

    def __init__(self, last_state: "State") -> None:
        self.last_state = last_state
        super().__init__(
            "Incomplete instruction. The instruction seems to be missing parts. "
            f"Last valid part was a {last_state.slot_name}."
        )

    @property
    def last_category(self) -> Optional["TokenType"]:
        """Token type of the last filled slot, None if nothing matched."""
        return self.last_state.category


class InputLengthError(MedilingoError):
    """Raised by the command-line shell for out-of-range instructions."""

    kind = "input_length"

    def __init__(self, length: int, minimum: int, maximum: int) -> None:
        self.length = length
        self.minimum = minimum
        self.maximum = maximum
        if length < minimum:
            msg = "Please enter a dosage instruction."
        else:
            msg = "Instruction is too long."
        super().__init__(f"{msg} (got {length} characters, allowed {minimum}-{maximum})")
