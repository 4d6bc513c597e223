from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, slots=True)
class TranslationResult:
    """Outcome of translating one query.

    Attributes:
        query: The input query text.
        output: Translated query, or None when translation failed.
        error: Error kind (e.g. "MalformedQuery") when translation failed.
        message: Human-readable error message when translation failed.
    """

    query: str
    output: Optional[str] = None
    error: Optional[str] = None
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None
