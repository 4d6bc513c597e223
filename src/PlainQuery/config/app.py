from __future__ import annotations

"""Application config orchestration and YAML loading entrypoints."""

from dataclasses import dataclass, replace
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

import yaml

from PlainQuery.config.output import OutputConfig, check_output, load_output
from PlainQuery.config.runtime import RuntimeConfig, check_runtime, load_runtime
from PlainQuery.config.translator import TranslatorConfig, check_translator, load_translator

DEFAULT_CONFIG_YAML = """
log:
  level: WARNING
  to_file: false
  dir: log

translator:
  field: content
  similarity: null
  boosts: {}

output:
  format: text
"""


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application root configuration."""

    runtime: RuntimeConfig
    translator: TranslatorConfig
    output: OutputConfig


def parse_config_dict(raw: Mapping[str, Any]) -> AppConfig:
    """Parse normalized mapping into AppConfig."""
    runtime = load_runtime(raw)
    translator = load_translator(raw)
    output = load_output(raw)

    check_runtime(runtime)
    check_translator(translator)
    check_output(output)

    return AppConfig(runtime=runtime, translator=translator, output=output)


def load_config(path: Path) -> AppConfig:
    """Load a YAML config file without merging built-in defaults."""
    return parse_config_dict(parse_yaml(path.read_text(encoding="utf-8")))


def load_config_with_defaults(
    config_path: Path | None = None,
    *,
    _defaults_text: str = DEFAULT_CONFIG_YAML,
) -> AppConfig:
    """Load config by merging built-in defaults and an optional override file."""
    base = parse_yaml(_defaults_text)
    if config_path is None:
        return parse_config_dict(base)
    override = parse_yaml(config_path.read_text(encoding="utf-8"))
    return parse_config_dict(merge_config_dicts(base, override))


def apply_overrides(
    config: AppConfig,
    *,
    field: str | None = None,
    similarity: str | None = None,
    boosts: Mapping[str, str] | None = None,
    output_format: str | None = None,
    log_level: str | None = None,
) -> AppConfig:
    """Return a copy of config with command-line overrides applied.

    Arguments left as None keep the configured value. Boosts given on the
    command line replace the configured boosts entirely.
    """
    translator = config.translator
    if field is not None or similarity is not None or boosts is not None:
        translator = replace(
            translator,
            field=field.strip() if field is not None else translator.field,
            similarity=similarity if similarity is not None else translator.similarity,
            boosts=MappingProxyType(dict(boosts)) if boosts is not None else translator.boosts,
        )
        check_translator(translator)

    output = config.output
    if output_format is not None:
        output = replace(output, format=output_format.lower())
        check_output(output)

    runtime = config.runtime
    if log_level is not None:
        runtime = replace(runtime, level=log_level.upper())
        check_runtime(runtime)

    return AppConfig(runtime=runtime, translator=translator, output=output)


def parse_yaml(text: str) -> dict[str, Any]:
    """Parse raw YAML text into a mapping."""
    data = yaml.safe_load(text) or {}
    if not isinstance(data, Mapping):
        raise ValueError("Config root must be a mapping/object")
    return dict(data)


def merge_config_dicts(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Deep-merge two config mappings."""
    merged: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in merged and isinstance(merged[key], Mapping) and isinstance(value, Mapping):
            merged[key] = merge_config_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged
