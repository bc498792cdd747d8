"""Provider registry and builders for candidate sources."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from DualSearch.config import AppConfig
    from DualSearch.sources.base import CandidateProvider

ProviderBuilder = Callable[["AppConfig"], "CandidateProvider"]


def build_provider(source_name: str, *, config: AppConfig) -> CandidateProvider:
    """Build a candidate provider from its registered name.

    Args:
        source_name: Provider identifier from ``candidates.source``.
        config: Parsed application configuration.

    Returns:
        Initialized provider.

    Raises:
        ValueError: If ``source_name`` is not registered.
    """
    builder = _provider_builders().get(source_name)
    if builder is None:
        raise ValueError(f"Unsupported provider in config.candidates.source: {source_name}")
    return builder(config)


def supported_provider_names() -> tuple[str, ...]:
    """Return all provider names that can be built by the registry."""
    return tuple(_provider_builders().keys())


def _provider_builders() -> dict[str, ProviderBuilder]:
    return {
        "builtin": _build_builtin_provider,
        "file": _build_file_provider,
    }


def _build_builtin_provider(config: AppConfig) -> CandidateProvider:
    del config
    from DualSearch.sources.builtin import builtin_provider

    return builtin_provider()


def _build_file_provider(config: AppConfig) -> CandidateProvider:
    from DualSearch.sources.file import FileCandidateProvider

    if not config.candidates.path:
        raise ValueError("candidates.path is required when candidates.source=file")
    return FileCandidateProvider(Path(config.candidates.path))
