"""Search session: turns input events into render-ready view snapshots."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from DualSearch.core.matcher import match
from DualSearch.core.models import AiEcho, Candidate, MatchResult, Mode, Notification
from DualSearch.services.controller import ModeController
from DualSearch.sources.base import CandidateProvider
from DualSearch.utils.log import log

PLACEHOLDERS = {
    Mode.AI: "Ask for anything",
    Mode.KEYWORD: "Search everywhere",
}
TOGGLE_LABELS = {
    Mode.AI: "AI",
    Mode.KEYWORD: "Traditional",
}


@dataclass(frozen=True, slots=True)
class SearchView:
    """Snapshot of everything the presentation layer renders.

    Attributes:
        mode: Active mode.
        query: Current query text.
        is_open: Whether the results surface is shown.
        placeholder: Input placeholder for the active mode.
        toggle_label: Label of the mode toggle button.
        notification: Visible "switched to" notification, if any.
        echo: AI prompt entry (AI mode with a non-empty query).
        matches: Typeahead matches (keyword mode with a non-empty query).
        suggestions: Idle-panel prompt suggestions (open, empty query).
        recent: Idle-panel recent items (open, empty query).
    """

    mode: Mode
    query: str
    is_open: bool
    placeholder: str
    toggle_label: str
    notification: Notification | None = None
    echo: AiEcho | None = None
    matches: Sequence[MatchResult] = ()
    suggestions: Sequence[str] = ()
    recent: Sequence[Candidate] = ()

    @property
    def is_idle(self) -> bool:
        return self.is_open and not self.query.strip()


@dataclass(slots=True)
class SearchSession:
    """Owns a mode controller and a candidate provider for one search widget."""

    controller: ModeController
    provider: CandidateProvider
    suggestions: tuple[str, ...] = ()
    recent: tuple[Candidate, ...] = ()

    def type(self, text: str) -> SearchView:
        """Handle a text-change event with the full current input."""
        self.controller.on_query_change(text)
        return self.view()

    def toggle(self) -> SearchView:
        self.controller.on_explicit_toggle()
        return self.view()

    def submit(self) -> SearchView:
        self.controller.on_submit()
        return self.view()

    def focus(self) -> SearchView:
        self.controller.on_focus()
        return self.view()

    def close(self) -> SearchView:
        self.controller.on_close()
        return self.view()

    def view(self) -> SearchView:
        """Project current controller state into a fresh view.

        Matches are recomputed from scratch on every call.
        """
        controller = self.controller
        mode = controller.mode
        query = controller.query
        base = dict(
            mode=mode,
            query=query,
            is_open=controller.is_open,
            placeholder=PLACEHOLDERS[mode],
            toggle_label=TOGGLE_LABELS[mode],
            notification=controller.notification,
        )
        if not controller.is_open:
            return SearchView(**base)
        if not query.strip():
            return SearchView(**base, suggestions=self.suggestions, recent=self.recent)
        if mode is Mode.AI:
            return SearchView(**base, echo=AiEcho(text=query))

        candidates = self.provider.list_candidates(query)
        matches = match(query, candidates)
        log.debug(
            "Typeahead: provider=%s query=%r candidates=%d matches=%d",
            getattr(self.provider, "name", "unknown"),
            query,
            len(candidates),
            len(matches),
        )
        return SearchView(**base, matches=tuple(matches))
