"""Command implementations for PlainQuery CLI.

Encapsulates the work behind each command, separated from CLI parameter
handling and output formatting.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from PlainQuery.core.models import TranslationResult
from PlainQuery.core.nodes import describe
from PlainQuery.parser import parse_query
from PlainQuery.services.translate import QueryTranslator
from PlainQuery.utils.log import log


def read_query_file(path: Path) -> list[str]:
    """Read one query per line, skipping blank lines and `#` comments."""
    queries: list[str] = []
    for line in path.read_text(encoding="utf-8").splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        queries.append(line)
    return queries


@dataclass(slots=True)
class TranslateCommand:
    """Translate a batch of queries with one configured translator."""

    translator: QueryTranslator

    def execute(self, queries: Sequence[str]) -> list[TranslationResult]:
        """Translate every query, isolating failures per query.

        Returns:
            One result per query, in input order.
        """
        log.info(
            "Translating %d quer%s field=%s similarity=%s boosts=%s",
            len(queries),
            "y" if len(queries) == 1 else "ies",
            self.translator.field,
            self.translator.similarity,
            dict(self.translator.boosts),
        )
        results = self.translator.translate_many(queries)
        failed = sum(1 for result in results if not result.ok)
        if failed:
            log.info("Translated %d, failed %d", len(results) - failed, failed)
        return results


@dataclass(slots=True)
class TreeCommand:
    """Show the normalized query tree for one query."""

    def execute(self, query: str) -> str:
        """Parse the query and return its tree in debugging form.

        Raises:
            QueryError: If the query cannot be parsed.
        """
        return describe(parse_query(query))
