"""Lexical tokens and the tokenizer.

Splits a plain-English query on whitespace unless the text is wrapped in
single or double quotes. Every flushed buffer is stripped down to letters,
digits and parentheses; quoted phrases always come out wrapped in double
quotes.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable

_QUOTES = frozenset({'"', "'"})
_OPERATORS = frozenset({"and", "or", "not"})
_RE_WS = re.compile(r"\s+")


class TokenKind(str, Enum):
    """Lexical classification of a token."""

    TERM = "term"
    OPEN = "open"
    CLOSE = "close"
    OP = "op"


@dataclass(frozen=True, slots=True)
class Token:
    """A classified lexical unit.

    Attributes:
        kind: Token classification.
        text: Token text. Operators are lower-cased, terms keep their case.
    """

    kind: TokenKind
    text: str

    @classmethod
    def from_text(cls, text: str | None) -> Token:
        """Classify raw token text.

        Args:
            text: Raw token text. None is treated as an empty term.

        Returns:
            A new token.
        """
        data = text or ""
        lowered = data.lower()
        if lowered == "(":
            return cls(TokenKind.OPEN, data)
        if lowered == ")":
            return cls(TokenKind.CLOSE, data)
        if lowered in _OPERATORS:
            return cls(TokenKind.OP, lowered)
        return cls(TokenKind.TERM, data)

    def is_op(self, name: str | None = None) -> bool:
        """Return True if this is an operator, optionally a specific one."""
        if self.kind is not TokenKind.OP:
            return False
        return name is None or self.text == name

    def __str__(self) -> str:
        return f"{self.kind.value}:{self.text}"


def strip_punctuation(text: str) -> str:
    """Reduce a buffer to alphanumerics and parentheses.

    A buffer that starts and ends with the same quote character is treated as
    a phrase and re-wrapped in double quotes, even when nothing is left
    inside it. A lone quote character counts as such a buffer, so `"` and
    `'$$'` both become the empty phrase `""`.

    Args:
        text: Raw buffer.

    Returns:
        Cleaned text, or an empty string when nothing searchable remains.
    """
    if not text:
        return ""

    quoted = text[0] in _QUOTES and text[0] == text[-1]

    cleaned = "".join(ch if ch.isalnum() or ch in "()" else " " for ch in text)
    cleaned = _RE_WS.sub(" ", cleaned).strip()

    if quoted:
        return f'"{cleaned}"'
    return cleaned


def tokenize(text: str) -> list[Token]:
    """Split query text into classified tokens.

    An unmatched opening quote swallows the rest of the input into one token.

    Args:
        text: Query text.

    Returns:
        Tokens in input order.
    """
    tokens: list[Token] = []

    def flush(buffer: str) -> None:
        cleaned = strip_punctuation(buffer)
        if cleaned:
            tokens.append(Token.from_text(cleaned))

    delimiter = ""
    buffer = ""
    for char in text:
        if not delimiter:
            if char in _QUOTES:
                flush(buffer)
                delimiter = char
                buffer = char
            elif char == " ":
                flush(buffer)
                buffer = ""
            else:
                buffer += char
        elif char == delimiter:
            flush(buffer + char)
            buffer = ""
            delimiter = ""
        else:
            buffer += char

    flush(buffer)
    return tokens


def expand_parens(tokens: Iterable[Token]) -> list[Token]:
    """Split terms that still carry parentheses into separate tokens.

    `apple()` survives tokenizing as one term because the parentheses were not
    space separated; here it becomes `apple`, `(`, `)`.
    """
    out: list[Token] = []
    for token in tokens:
        if token.kind is TokenKind.TERM and ("(" in token.text or ")" in token.text):
            padded = token.text.replace("(", " ( ").replace(")", " ) ")
            out.extend(tokenize(padded))
        else:
            out.append(token)
    return out
