"""Command implementations for the DualSearch CLI.

Encapsulates the business logic of each command, separated from click
parameter handling and output formatting.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable

from DualSearch.core.classifier import Verdict, classify
from DualSearch.core.matcher import match
from DualSearch.core.models import MatchResult
from DualSearch.renderers import OutputWriter
from DualSearch.renderers.console import render_match
from DualSearch.services.session import SearchSession, SearchView
from DualSearch.sources.base import CandidateProvider
from DualSearch.utils.log import log

SESSION_EVENTS = (":toggle", ":focus", ":close", ":submit", ":quit")


@dataclass(slots=True)
class ClassifyCommand:
    """Classify free text and report the verdict."""

    echo: Callable[[str], None]

    def execute(self, text: str) -> Verdict:
        verdict = classify(text)
        self.echo(
            f"{verdict.mode.value}\treason={verdict.reason.value}\t"
            f"signals={verdict.match_count}:{','.join(verdict.signals) or '-'}"
        )
        return verdict


@dataclass(slots=True)
class MatchCommand:
    """Run the typeahead matcher against the configured provider."""

    provider: CandidateProvider
    echo: Callable[[str], None]

    def execute(self, query: str) -> list[MatchResult]:
        candidates = self.provider.list_candidates(query)
        results = match(query, candidates)
        log.debug("Matched %d of %d candidates", len(results), len(candidates))
        for result in results:
            self.echo(render_match(result))
        if not results:
            self.echo("No results")
        return results


@dataclass(slots=True)
class SessionCommand:
    """Replay input lines as widget events and write every resulting view.

    Plain lines are text-change events carrying the whole line. Lines in
    ``SESSION_EVENTS`` map to the matching session event; ``:quit`` stops.
    With ``per_char`` a plain line is fed one keystroke at a time.
    """

    session: SearchSession
    output_writer: OutputWriter
    per_char: bool = False

    def execute(self, lines: Iterable[str]) -> int:
        """Process events until input ends or ``:quit``.

        Returns:
            Number of events handled.
        """
        handled = 0
        self.output_writer.write_view(self.session.focus())
        for raw in lines:
            line = raw.rstrip("\r\n")
            command = line.strip().lower()
            if command == ":quit":
                break
            for view in self._dispatch(line, command):
                self.output_writer.write_view(view)
                handled += 1
        log.debug("Session finished after %d events", handled)
        return handled

    def _dispatch(self, line: str, command: str) -> list[SearchView]:
        if command == ":toggle":
            return [self.session.toggle()]
        if command == ":focus":
            return [self.session.focus()]
        if command == ":close":
            return [self.session.close()]
        if command == ":submit":
            return [self.session.submit()]
        if self.per_char and line:
            return [self.session.type(line[: end + 1]) for end in range(len(line))]
        return [self.session.type(line)]
