"""Translator domain configuration: target field layout and suffixes."""

from __future__ import annotations

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping

from PlainQuery.config.common import (
    expect_optional_str,
    expect_str,
    expect_str_mapping,
    get_optional_value,
    get_required_value,
    get_section,
)

_RE_FIELD_NAME = re.compile(r"^[A-Za-z_][\w.\-]*$")


@dataclass(frozen=True, slots=True)
class TranslatorConfig:
    """Field layout used when serializing queries.

    Attributes:
        field: Primary field searched by every term.
        similarity: Optional suffix appended to every term, e.g. `~0.6`.
        boosts: Extra field name to boost suffix, e.g. `title: "^10"`.
    """

    field: str
    similarity: str | None
    boosts: Mapping[str, str]


def load_translator(raw: Mapping[str, Any]) -> TranslatorConfig:
    """Load translator config from the `translator` section.

    Raises:
        TypeError: If config types are invalid.
        ValueError: If required keys are missing.
    """
    section = get_section(raw, "translator", required=True)
    return TranslatorConfig(
        field=expect_str(get_required_value(section, "field", "translator.field"), "translator.field").strip(),
        similarity=expect_optional_str(
            get_optional_value(section, "similarity", None),
            "translator.similarity",
        ),
        boosts=MappingProxyType(
            expect_str_mapping(get_optional_value(section, "boosts", None), "translator.boosts")
        ),
    )


def check_translator(config: TranslatorConfig) -> None:
    """Validate translator domain constraints.

    Suffix contents are passed through verbatim and are not checked.

    Raises:
        ValueError: If a field name is empty or not a plain identifier.
    """
    if not config.field:
        raise ValueError("translator.field must not be empty")
    for name in (config.field, *config.boosts):
        if not _RE_FIELD_NAME.match(name):
            raise ValueError(f"Invalid field name in translator config: {name!r}")
