"""Grammar validation with a deterministic finite automaton.

Accepted shape:

    ROUTE [QUANTITY] UNIT [FREQUENCY ["as needed"]*] PERIOD

The transition table is keyed on (state, token type). The only
value-sensitive edge is the FREQUENCY self-loop, which is taken for the
phrase "as needed" alone, so "every 4 hours as needed" passes but
"every 4 hours daily" does not.
"""

from __future__ import annotations
from enum import Enum
from types import MappingProxyType
from typing import Iterable, Mapping, Optional

from .errors import IncompleteInstructionError, UnexpectedTokenError, UnrecognizedTermError
from .lexer import Token, TokenType


class State(Enum):
    START = "START"
    AFTER_ROUTE = "AFTER_ROUTE"
    AFTER_QUANTITY = "AFTER_QUANTITY"
    AFTER_UNIT = "AFTER_UNIT"
    AFTER_FREQUENCY = "AFTER_FREQUENCY"
    ACCEPT = "ACCEPT"

    @property
    def category(self) -> Optional[TokenType]:
        """Token type that filled the slot this state comes after."""
        return _CATEGORY[self]

    @property
    def slot_name(self) -> str:
        cat = self.category
        return cat.label if cat is not None else "start"

    @property
    def position(self) -> str:
        return _POSITION[self]


_CATEGORY: Mapping[State, Optional[TokenType]] = MappingProxyType({
    State.START: None,
    State.AFTER_ROUTE: TokenType.ROUTE,
    State.AFTER_QUANTITY: TokenType.QUANTITY,
    State.AFTER_UNIT: TokenType.UNIT,
    State.AFTER_FREQUENCY: TokenType.FREQUENCY,
    State.ACCEPT: TokenType.PERIOD,
})

_POSITION: Mapping[State, str] = MappingProxyType({
    State.START: "At the start",
    State.AFTER_ROUTE: "After a route",
    State.AFTER_QUANTITY: "After a quantity",
    State.AFTER_UNIT: "After a unit",
    State.AFTER_FREQUENCY: "After a frequency",
    State.ACCEPT: "After the end of the instruction",
})

EXPECTED: Mapping[State, str] = MappingProxyType({
    State.START: "a route (e.g., 'take', 'apply')",
    State.AFTER_ROUTE: "a quantity (e.g., '1', 'one') or a unit (e.g., 'tablet')",
    State.AFTER_QUANTITY: "a unit (e.g., 'tablet')",
    State.AFTER_UNIT: "a frequency (e.g., 'daily') or the end of the instruction",
    State.AFTER_FREQUENCY: "'as needed' or the end of the instruction",
    State.ACCEPT: "nothing more",
})

TRANSITIONS: Mapping[tuple[State, TokenType], State] = MappingProxyType({
    (State.START, TokenType.ROUTE): State.AFTER_ROUTE,
    (State.AFTER_ROUTE, TokenType.QUANTITY): State.AFTER_QUANTITY,
    (State.AFTER_ROUTE, TokenType.UNIT): State.AFTER_UNIT,
    (State.AFTER_QUANTITY, TokenType.UNIT): State.AFTER_UNIT,
    (State.AFTER_UNIT, TokenType.FREQUENCY): State.AFTER_FREQUENCY,
    (State.AFTER_UNIT, TokenType.PERIOD): State.ACCEPT,
    (State.AFTER_FREQUENCY, TokenType.PERIOD): State.ACCEPT,
})

REPEATABLE_FREQUENCY = "as needed"


def transition(state: State, token: Token) -> Optional[State]:
    """Next state for ``token``, or None when the move is not allowed."""
    if (
        state is State.AFTER_FREQUENCY
        and token.type is TokenType.FREQUENCY
        and token.value.lower() == REPEATABLE_FREQUENCY
    ):
        return State.AFTER_FREQUENCY
    return TRANSITIONS.get((state, token.type))


def run(tokens: Iterable[Token]) -> State:
    """Feed tokens through the automaton and return the final state.

    Raises:
        UnrecognizedTermError: on the first INVALID token.
        UnexpectedTokenError: on a token the current state does not allow.
        IncompleteInstructionError: when the "." sentinel arrives early.
    """
    state = State.START
    for tok in tokens:
        if tok.type is TokenType.INVALID:
            raise UnrecognizedTermError(tok.value)
        nxt = transition(state, tok)
        if nxt is None:
            if tok.type is TokenType.PERIOD and state is not State.ACCEPT:
                raise IncompleteInstructionError(state)
            raise UnexpectedTokenError(state, EXPECTED[state], tok)
        state = nxt
    return state


def validate(tokens: Iterable[Token]) -> None:
    """Check that a token sequence is a complete instruction.

    Raises:
        UnrecognizedTermError, UnexpectedTokenError, IncompleteInstructionError
    """
    final = run(tokens)
    if final is not State.ACCEPT:
        raise IncompleteInstructionError(final)
