"""JSON output renderers.

Renders a `SearchView` into JSON-serializable objects.
"""

from __future__ import annotations

import json

import click

from DualSearch.core.models import Candidate, MatchResult
from DualSearch.renderers.base import OutputWriter
from DualSearch.services.session import SearchView


def _candidate_dict(candidate: Candidate) -> dict:
    return {
        "kind": candidate.kind.value,
        "label": candidate.label,
        "secondary_text": candidate.secondary_text,
    }


def _match_dict(result: MatchResult) -> dict:
    d = _candidate_dict(result.candidate)
    d["field"] = result.field
    d["highlights"] = [[span.start, span.end] for span in result.highlight_spans]
    return d


def render_json(view: SearchView) -> dict:
    """Render a view into a JSON-serializable dict.

    Only the payload matching the view state is included: ``echo`` in AI
    mode, ``matches`` in keyword mode, ``suggestions``/``recent`` when idle.
    """
    d: dict = {
        "mode": view.mode.value,
        "query": view.query,
        "open": view.is_open,
        "placeholder": view.placeholder,
        "notification": view.notification.text if view.notification else None,
    }
    if not view.is_open:
        return d
    if view.is_idle:
        d["suggestions"] = list(view.suggestions)
        d["recent"] = [_candidate_dict(item) for item in view.recent]
    elif view.echo is not None:
        d["echo"] = view.echo.text
    else:
        d["matches"] = [_match_dict(result) for result in view.matches]
    return d


class JsonOutputWriter(OutputWriter):
    """Write one JSON document per view (JSON Lines)."""

    def write_view(self, view: SearchView) -> None:
        click.echo(json.dumps(render_json(view), ensure_ascii=False))
