"""Tokenization of package license expressions."""
from __future__ import annotations

from enum import Enum
from typing import NamedTuple

from license_auditor.constants import (
    DISJUNCTION_MARKER,
    GROUP_CLOSE_MARKER,
    GROUP_OPEN_MARKER,
)


class TokenKind(Enum):
    """Kinds of tokens in a license expression."""

    LITERAL = "literal"
    DISJUNCTION = "disjunction"
    GROUP_OPEN = "group_open"
    GROUP_CLOSE = "group_close"


class Token(NamedTuple):
    """A single whitespace-separated token of a license expression.

    Attributes:
        kind: What the token means to the classifier.
        value: The token text as it appeared in the expression.
    """

    kind: TokenKind
    value: str


_MARKERS: dict[str, TokenKind] = {
    DISJUNCTION_MARKER: TokenKind.DISJUNCTION,
    GROUP_OPEN_MARKER: TokenKind.GROUP_OPEN,
    GROUP_CLOSE_MARKER: TokenKind.GROUP_CLOSE,
}


def tokenize(expression: str) -> list[Token]:
    """Split a license expression into tagged tokens.

    Anything that is not a known marker is a license literal, including
    malformed or unfamiliar operators.

    Args:
        expression: Raw license expression, e.g. ``"GPL-2+ || ( MIT )"``.

    Returns:
        Tokens in expression order. Empty for a blank expression.
    """
    return [
        Token(_MARKERS.get(word, TokenKind.LITERAL), word)
        for word in expression.split()
    ]
