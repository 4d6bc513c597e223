"""Translation service layer for PlainQuery.

Provides the query translator and a factory that builds it from
application configuration.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from PlainQuery.services.translate import QueryTranslator

if TYPE_CHECKING:
    from PlainQuery.config import AppConfig


def create_translator(config: AppConfig) -> QueryTranslator:
    """Create a translator from the configured field layout.

    Args:
        config: Application configuration containing translator settings.

    Returns:
        Configured QueryTranslator instance.
    """
    return QueryTranslator(
        field=config.translator.field,
        similarity=config.translator.similarity,
        boosts=config.translator.boosts,
    )


__all__ = [
    "QueryTranslator",
    "create_translator",
]
