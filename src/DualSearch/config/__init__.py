from __future__ import annotations

"""Public configuration API for DualSearch."""

from DualSearch.config.app import (
    DEFAULT_CONFIG_PATH,
    AppConfig,
    load_config,
    load_config_with_defaults,
    merge_config_dicts,
    parse_config_dict,
)
from DualSearch.config.candidates import CandidatesConfig
from DualSearch.config.mode import ModeConfig
from DualSearch.config.output import OutputConfig
from DualSearch.config.runtime import RuntimeConfig

__all__ = [
    "RuntimeConfig",
    "ModeConfig",
    "CandidatesConfig",
    "OutputConfig",
    "AppConfig",
    "DEFAULT_CONFIG_PATH",
    "load_config",
    "load_config_with_defaults",
    "merge_config_dicts",
    "parse_config_dict",
]
