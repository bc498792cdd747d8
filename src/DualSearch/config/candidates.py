"""Candidate source configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from DualSearch.config.common import (
    expect_choice,
    expect_optional_str,
    get_optional_value,
    get_section,
)
from DualSearch.sources.registry import supported_provider_names

_ALLOWED_SOURCES = frozenset(supported_provider_names())


@dataclass(frozen=True, slots=True)
class CandidatesConfig:
    """Store validated candidate provider settings."""

    source: str
    path: str | None


def load_candidates(raw: Mapping[str, Any]) -> CandidatesConfig:
    """Load candidate provider configuration from raw mapping.

    Raises:
        TypeError: If config types are invalid.
        ValueError: If the source is not registered.
    """
    section = get_section(raw, "candidates", required=False)
    return CandidatesConfig(
        source=expect_choice(get_optional_value(section, "source", "builtin"), "candidates.source", _ALLOWED_SOURCES),
        path=expect_optional_str(get_optional_value(section, "path", None), "candidates.path"),
    )


def check_candidates(config: CandidatesConfig) -> None:
    """Validate candidate provider constraints.

    Raises:
        ValueError: If the file source has no path.
    """
    if config.source == "file" and not (config.path or "").strip():
        raise ValueError("candidates.path is required when candidates.source=file")
