"""Service layer for DualSearch.

Provides the mode controller, the search session that drives it, and a
factory that wires both from configuration.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from DualSearch.services.controller import Detection, ModeController
from DualSearch.services.session import SearchSession, SearchView
from DualSearch.services.timer import Clock, DeferredTimer

if TYPE_CHECKING:
    from DualSearch.config import AppConfig


def create_search_session(config: AppConfig, clock: Clock | None = None) -> SearchSession:
    """Create a search session from configuration.

    Args:
        config: Application configuration.
        clock: Optional clock for the notification timer (defaults to monotonic time).

    Returns:
        Session wired to the configured candidate provider. The idle panel is
        populated from the built-in demo workspace.
    """
    from DualSearch.sources.builtin import RECENT_ITEMS, SUGGESTIONS
    from DualSearch.sources.registry import build_provider

    timer = DeferredTimer(clock) if clock is not None else DeferredTimer()
    controller = ModeController(
        default_mode=config.mode.default,
        detection=config.mode.detection,
        notification_seconds=config.mode.notification_seconds,
        timer=timer,
    )
    provider = build_provider(config.candidates.source, config=config)
    return SearchSession(
        controller=controller,
        provider=provider,
        suggestions=SUGGESTIONS,
        recent=RECENT_ITEMS,
    )


__all__ = [
    "Detection",
    "DeferredTimer",
    "ModeController",
    "SearchSession",
    "SearchView",
    "create_search_session",
]
