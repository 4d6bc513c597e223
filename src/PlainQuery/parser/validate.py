"""Structural checks over the flat token stream."""

from __future__ import annotations

from typing import Sequence

from PlainQuery.core.errors import EmptyQuery, MalformedQuery, UnbalancedBraces
from PlainQuery.core.tokens import Token, TokenKind


def check_braces(tokens: Sequence[Token]) -> None:
    """Ensure every `(` has a matching `)`.

    Raises:
        UnbalancedBraces: If a `)` closes nothing or a `(` is left open.
    """
    depth = 0
    for token in tokens:
        if token.kind is TokenKind.OPEN:
            depth += 1
        elif token.kind is TokenKind.CLOSE:
            depth -= 1
            if depth < 0:
                raise UnbalancedBraces("Unexpected ')' with no open group")
    if depth != 0:
        raise UnbalancedBraces(f"{depth} group(s) left open")


def check_content(tokens: Sequence[Token]) -> None:
    """Ensure at least one searchable term is present.

    Raises:
        EmptyQuery: If the stream holds only operators and parentheses.
    """
    if not any(token.kind is TokenKind.TERM for token in tokens):
        raise EmptyQuery()


def _ends_operand(token: Token) -> bool:
    return token.kind in (TokenKind.TERM, TokenKind.CLOSE)


def _starts_operand(token: Token) -> bool:
    return token.kind in (TokenKind.TERM, TokenKind.OPEN) or token.is_op("not")


def insert_implicit_and(tokens: Sequence[Token]) -> list[Token]:
    """Insert the `and` implied between adjacent operands.

    `apple banana` reads as `apple and banana`, as does `apple (banana)` and
    `apple not banana`.

    Args:
        tokens: Validated token stream.

    Returns:
        Token stream with explicit conjunctions.

    Raises:
        MalformedQuery: If an operator or `(` is followed by something that
            cannot start an operand, or the query ends with an operator.
    """
    out: list[Token] = []
    for token in tokens:
        if out:
            previous = out[-1]
            if _ends_operand(previous):
                if _starts_operand(token):
                    out.append(Token.from_text("and"))
            elif not _starts_operand(token):
                raise MalformedQuery(f"Unexpected '{token.text}' after '{previous.text}'")
        out.append(token)

    if out and out[-1].kind is TokenKind.OP:
        raise MalformedQuery(f"Query ends with operator '{out[-1].text}'")
    return out
