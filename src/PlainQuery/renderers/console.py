"""Console text output renderers."""

from __future__ import annotations

from typing import Iterable

from PlainQuery.core.models import TranslationResult


def render_text(results: Iterable[TranslationResult], *, echo_query: bool = True) -> str:
    """Render translation results into a text block, one line per query.

    Args:
        results: Translation results.
        echo_query: Prefix each line with the input query and `=>`.

    Returns:
        A formatted string ready to be printed.
    """
    lines: list[str] = []
    for result in results:
        body = result.output if result.ok else f"[{result.error}] {result.message}"
        lines.append(f"{result.query} => {body}" if echo_query else str(body))
    return "\n".join(lines)
