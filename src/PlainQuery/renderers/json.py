"""JSON output renderers."""

from __future__ import annotations

import json
from typing import Iterable

from PlainQuery.core.models import TranslationResult


def render_json(results: Iterable[TranslationResult]) -> list[dict]:
    """Render translation results into JSON-serializable Python objects.

    Failed translations carry `error` and `message`; successful ones carry
    `output`.
    """
    out: list[dict] = []
    for result in results:
        d: dict = {"query": result.query}
        if result.ok:
            d["output"] = result.output
        else:
            d["error"] = result.error
            d["message"] = result.message
        out.append(d)
    return out


def dump_json(results: Iterable[TranslationResult]) -> str:
    """Serialize translation results to an indented JSON document."""
    return json.dumps(render_json(results), ensure_ascii=False, indent=2)
