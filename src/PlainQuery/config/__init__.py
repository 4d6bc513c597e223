from __future__ import annotations

"""Public configuration API for PlainQuery."""

from PlainQuery.config.app import (
    DEFAULT_CONFIG_YAML,
    AppConfig,
    apply_overrides,
    load_config,
    load_config_with_defaults,
    merge_config_dicts,
    parse_config_dict,
    parse_yaml,
)
from PlainQuery.config.output import OutputConfig
from PlainQuery.config.runtime import RuntimeConfig
from PlainQuery.config.translator import TranslatorConfig

__all__ = [
    "RuntimeConfig",
    "TranslatorConfig",
    "OutputConfig",
    "AppConfig",
    "DEFAULT_CONFIG_YAML",
    "apply_overrides",
    "load_config",
    "load_config_with_defaults",
    "merge_config_dicts",
    "parse_config_dict",
    "parse_yaml",
]
