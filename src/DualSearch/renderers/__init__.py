"""Output renderers for search views.

Exports the OutputWriter base for new formats and a factory that picks a
writer from configuration.
"""

from __future__ import annotations

from DualSearch.config import AppConfig
from DualSearch.renderers.base import OutputWriter
from DualSearch.renderers.console import ConsoleOutputWriter, render_match, render_text
from DualSearch.renderers.json import JsonOutputWriter, render_json


def create_output_writer(config: AppConfig) -> OutputWriter:
    """Create output writer based on config.

    Raises:
        ValueError: If the configured format has no writer.
    """
    if config.output.format == "console":
        return ConsoleOutputWriter()
    if config.output.format == "json":
        return JsonOutputWriter()
    raise ValueError(f"No output writer for format: {config.output.format}")


__all__ = [
    "OutputWriter",
    "ConsoleOutputWriter",
    "JsonOutputWriter",
    "render_json",
    "render_match",
    "render_text",
    "create_output_writer",
]
