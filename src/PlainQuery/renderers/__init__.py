"""Output renderers.

`lucene` serializes query trees into Lucene / Solr syntax; `console` and
`json` format translation results for the command line.
"""

from __future__ import annotations

from typing import Sequence

from PlainQuery.core.models import TranslationResult
from PlainQuery.renderers.console import render_text
from PlainQuery.renderers.json import dump_json, render_json
from PlainQuery.renderers.lucene import boostable_leaves, render_node, render_query


def render_results(results: Sequence[TranslationResult], output_format: str) -> str:
    """Format translation results for the configured output format.

    Raises:
        ValueError: If the format is unknown.
    """
    if output_format == "json":
        return dump_json(results)
    if output_format == "text":
        return render_text(results, echo_query=len(results) > 1)
    raise ValueError(f"Unsupported output format: {output_format}")


__all__ = [
    "boostable_leaves",
    "dump_json",
    "render_json",
    "render_node",
    "render_query",
    "render_results",
    "render_text",
]
