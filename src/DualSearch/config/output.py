"""Output domain configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from DualSearch.config.common import expect_choice, get_optional_value, get_section

_ALLOWED_FORMATS = {"console", "json"}


@dataclass(frozen=True, slots=True)
class OutputConfig:
    """Output configuration."""

    format: str


def load_output(raw: Mapping[str, Any]) -> OutputConfig:
    """Load output domain config from raw mapping.

    Raises:
        TypeError: If config types are invalid.
        ValueError: If the format is unknown.
    """
    section = get_section(raw, "output", required=False)
    return OutputConfig(
        format=expect_choice(get_optional_value(section, "format", "console"), "output.format", _ALLOWED_FORMATS),
    )
