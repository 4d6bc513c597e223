"""Translation service turning plain-English queries into Lucene syntax."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping, Optional

from PlainQuery.core.errors import QueryError
from PlainQuery.core.models import TranslationResult
from PlainQuery.parser import parse_query
from PlainQuery.renderers.lucene import render_query
from PlainQuery.utils.log import log


@dataclass(frozen=True, slots=True)
class QueryTranslator:
    """Translate plain-English boolean queries for one field layout.

    Example:
        >>> QueryTranslator("content", boosts={"title": "^10"}).translate("apple")
        'content:apple title:apple^10'

    Attributes:
        field: Primary field searched by every term.
        similarity: Suffix appended to every term, e.g. `~0.6`. Applied verbatim.
        boosts: Extra field name to boost suffix, e.g. `{"title": "^10"}`.
            Applied verbatim, in mapping order.
    """

    field: str
    similarity: Optional[str] = None
    boosts: Mapping[str, str] = dataclasses.field(default_factory=dict)

    def __post_init__(self) -> None:
        if not isinstance(self.field, str) or not self.field.strip():
            raise ValueError("field must be a non-empty string")
        object.__setattr__(self, "boosts", MappingProxyType(dict(self.boosts)))

    def translate(self, text: str) -> str:
        """Translate one query.

        Args:
            text: Plain-English query such as `apple not banana or cherry`.

        Returns:
            Lucene query text.

        Raises:
            EmptyQuery: If no searchable term remains.
            UnbalancedBraces: If the parentheses do not pair up.
            MalformedQuery: If an operator is missing an operand.
        """
        tree = parse_query(text)
        output = render_query(
            tree,
            field=self.field,
            similarity=self.similarity,
            boosts=self.boosts,
        )
        log.debug("Translated %r -> %r", text, output)
        return output

    def translate_many(self, queries: Iterable[str]) -> list[TranslationResult]:
        """Translate several queries, recording failures instead of raising.

        Args:
            queries: Query texts.

        Returns:
            One result per query, in input order.
        """
        results: list[TranslationResult] = []
        for query in queries:
            try:
                output = self.translate(query)
            except QueryError as error:
                log.warning("Translation failed: query=%r error=%s", query, type(error).__name__)
                results.append(
                    TranslationResult(
                        query=query,
                        error=type(error).__name__,
                        message=str(error),
                    )
                )
                continue
            results.append(TranslationResult(query=query, output=output))
        return results
