"""Query translation errors.

Every failure raised while parsing a query derives from `QueryError`, so a
caller can catch the whole family or one specific kind.
"""

from __future__ import annotations


class QueryError(ValueError):
    """Base class for errors raised while translating a query."""

    default_message = "Invalid query"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class EmptyQuery(QueryError):
    """No searchable term remains once punctuation and operators are removed."""

    default_message = "Query contains no searchable terms"


class UnbalancedBraces(QueryError):
    """The query's parentheses do not pair up."""

    default_message = "Query has unbalanced parentheses"


class MalformedQuery(QueryError):
    """An operator is missing an operand or appears where it is not allowed.

    Examples are `apple and and banana`, `apple not` and `and apple`.
    """

    default_message = "Query is malformed"
