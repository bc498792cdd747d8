"""Tests for console and JSON view renderers."""

import sys
import unittest
from dataclasses import replace
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from DualSearch.config import load_config
from DualSearch.renderers import ConsoleOutputWriter, JsonOutputWriter, create_output_writer, render_json, render_text
from DualSearch.services import create_search_session


def _mark(chunk: str) -> str:
    return f"<{chunk}>"


class _Clock:
    def __call__(self) -> float:
        return 0.0


class TestRenderers(unittest.TestCase):
    def setUp(self) -> None:
        self.config = load_config(REPO_ROOT / "config" / "default.yml")
        self.session = create_search_session(self.config, clock=_Clock())

    def test_text_highlights_label(self) -> None:
        text = render_text(self.session.type("eng"), emphasize=_mark)
        self.assertIn("[channel] #<eng>ineering - Platform, infra and release coordination", text)
        self.assertIn("[user] Maya Chen - <Eng>ineering Manager", text)
        self.assertTrue(text.startswith("mode: Traditional  |  eng"))

    def test_text_ai_echo_and_notification(self) -> None:
        text = render_text(self.session.type("Where is the Acme org chart?"), emphasize=_mark)
        lines = text.splitlines()
        self.assertEqual(lines[0], "* Switched to AI Q&A mode")
        self.assertIn("  Ask AI: Where is the Acme org chart?", lines)

    def test_text_idle_and_no_results(self) -> None:
        idle = render_text(self.session.focus())
        self.assertIn("Suggestions", idle)
        self.assertIn("  [file] Project Gizmo PRD", idle)
        self.assertIn("No results", render_text(self.session.type("zzzz")))

    def test_json_keyword(self) -> None:
        data = render_json(self.session.type("#eng"))
        self.assertEqual(data["mode"], "keyword")
        self.assertEqual(data["matches"][0]["label"], "#engineering")
        self.assertEqual(data["matches"][0]["field"], "label")
        self.assertEqual(data["matches"][0]["highlights"], [[0, 4]])
        self.assertNotIn("echo", data)

    def test_json_echo(self) -> None:
        data = render_json(self.session.type("Draft an out of office plan"))
        self.assertEqual(data["mode"], "ai")
        self.assertEqual(data["echo"], "Draft an out of office plan")
        self.assertEqual(data["notification"], "Switched to AI Q&A mode")
        self.assertNotIn("matches", data)

    def test_json_closed(self) -> None:
        self.session.type("eng")
        data = render_json(self.session.close())
        self.assertEqual(data, {
            "mode": "keyword",
            "query": "",
            "open": False,
            "placeholder": "Search everywhere",
            "notification": None,
        })

    def test_writer_factory(self) -> None:
        self.assertIsInstance(create_output_writer(self.config), ConsoleOutputWriter)
        json_config = replace(self.config, output=replace(self.config.output, format="json"))
        self.assertIsInstance(create_output_writer(json_config), JsonOutputWriter)


if __name__ == "__main__":
    unittest.main()
