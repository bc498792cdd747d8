"""Console text output renderers.

Renders a `SearchView` into human-friendly text with highlighted matches.
"""

from __future__ import annotations

from typing import Callable

import click

from DualSearch.core.matcher import highlight_segments
from DualSearch.core.models import MatchResult
from DualSearch.renderers.base import OutputWriter
from DualSearch.services.session import SearchView

Emphasis = Callable[[str], str]


def _bold(chunk: str) -> str:
    return click.style(chunk, bold=True, underline=True)


def render_match(result: MatchResult, emphasize: Emphasis = _bold) -> str:
    """Render one match as ``[kind] label - secondary`` with emphasis applied."""
    candidate = result.candidate
    label = candidate.label
    secondary = candidate.secondary_text
    styled = "".join(
        emphasize(chunk) if highlighted else chunk
        for chunk, highlighted in highlight_segments(result.text, result.highlight_spans)
    )
    if result.field == "label":
        label = styled
    else:
        secondary = styled
    line = f"[{candidate.kind.value}] {label}"
    if secondary:
        line += f" - {secondary}"
    return line


def render_text(view: SearchView, emphasize: Emphasis = _bold) -> str:
    """Render a view into a text block.

    Args:
        view: View snapshot.
        emphasize: Function wrapping highlighted chunks.

    Returns:
        A formatted string ready to be printed.
    """
    lines: list[str] = []
    if view.notification is not None:
        lines.append(f"* {view.notification.text}")
    lines.append(f"mode: {view.toggle_label}  |  {view.query or view.placeholder}")

    if not view.is_open:
        return "\n".join(lines) + "\n"

    if view.is_idle:
        if view.suggestions:
            lines.append("Suggestions")
            lines.extend(f"  {item}" for item in view.suggestions)
        if view.recent:
            lines.append("Recent")
            lines.extend(f"  [{item.kind.value}] {item.label}" for item in view.recent)
    elif view.echo is not None:
        lines.append(f"  Ask AI: {view.echo.text}")
    elif view.matches:
        lines.extend(f"  {render_match(result, emphasize)}" for result in view.matches)
    else:
        lines.append("  No results")
    return "\n".join(lines) + "\n"


class ConsoleOutputWriter(OutputWriter):
    """Write views to the terminal."""

    def __init__(self, color: bool | None = None) -> None:
        self.color = color

    def write_view(self, view: SearchView) -> None:
        click.echo(render_text(view), nl=False, color=self.color)
