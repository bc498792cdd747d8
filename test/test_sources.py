"""Tests for candidate providers and the provider registry."""

import sys
import tempfile
import unittest
from dataclasses import replace
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from DualSearch.config import load_config
from DualSearch.core.models import Candidate, CandidateKind
from DualSearch.sources.base import StaticCandidateProvider
from DualSearch.sources.builtin import CANDIDATES, builtin_provider
from DualSearch.sources.file import FileCandidateProvider, load_candidates, parse_candidates
from DualSearch.sources.registry import build_provider, supported_provider_names

FIXTURE = REPO_ROOT / "config" / "test" / "candidates.yml"


class TestFileCandidateProvider(unittest.TestCase):
    def test_loads_fixture(self) -> None:
        candidates = load_candidates(FIXTURE)
        self.assertEqual(
            candidates[0],
            Candidate(CandidateKind.CHANNEL, "#engineering", "Platform, infra and release coordination"),
        )
        self.assertEqual(candidates[2], Candidate(CandidateKind.FILE, "budget-2026.xlsx"))

    def test_provider_loads_once(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "candidates.yml"
            path.write_text("- {kind: user, label: Maya Chen}\n", encoding="utf-8")
            provider = FileCandidateProvider(path)
            first = provider.list_candidates("maya")
            path.write_text("[]\n", encoding="utf-8")
            self.assertEqual(provider.list_candidates("chen"), first)
            self.assertEqual(len(first), 1)

    def test_empty_file_is_empty_list(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "empty.yml"
            path.write_text("", encoding="utf-8")
            self.assertEqual(load_candidates(path), ())

    def test_parse_errors_name_the_entry(self) -> None:
        with self.assertRaisesRegex(TypeError, "candidates must be a list"):
            parse_candidates({"kind": "user"})
        with self.assertRaisesRegex(TypeError, "candidates\\[0\\] must be an object"):
            parse_candidates(["#general"])
        with self.assertRaisesRegex(ValueError, "candidates\\[1\\]\\.label"):
            parse_candidates([{"kind": "user", "label": "a"}, {"kind": "user"}])
        with self.assertRaisesRegex(ValueError, "candidates\\[0\\]\\.kind"):
            parse_candidates([{"kind": "emoji", "label": ":tada:"}])
        with self.assertRaisesRegex(TypeError, "candidates\\[0\\]\\.secondary_text"):
            parse_candidates([{"kind": "file", "label": "a.pdf", "secondary_text": 3}])

    def test_kind_is_case_insensitive(self) -> None:
        parsed = parse_candidates([{"kind": "Channel", "label": "#general"}])
        self.assertIs(parsed[0].kind, CandidateKind.CHANNEL)


class TestRegistry(unittest.TestCase):
    def setUp(self) -> None:
        self.config = load_config(REPO_ROOT / "config" / "default.yml")

    def test_supported_names(self) -> None:
        self.assertEqual(supported_provider_names(), ("builtin", "file"))

    def test_builtin(self) -> None:
        provider = build_provider("builtin", config=self.config)
        self.assertEqual(provider.name, "builtin")
        self.assertEqual(tuple(provider.list_candidates("anything")), CANDIDATES)

    def test_file(self) -> None:
        config = replace(
            self.config,
            candidates=replace(self.config.candidates, source="file", path=str(FIXTURE)),
        )
        provider = build_provider("file", config=config)
        self.assertIsInstance(provider, FileCandidateProvider)
        self.assertEqual(len(provider.list_candidates("")), 3)

    def test_file_without_path(self) -> None:
        with self.assertRaisesRegex(ValueError, "candidates\\.path"):
            build_provider("file", config=self.config)

    def test_unknown(self) -> None:
        with self.assertRaisesRegex(ValueError, "Unsupported provider"):
            build_provider("slack", config=self.config)


class TestStaticProvider(unittest.TestCase):
    def test_ignores_query(self) -> None:
        provider = builtin_provider()
        self.assertIs(provider.list_candidates("a"), provider.list_candidates("b"))
        self.assertEqual(StaticCandidateProvider(candidates=()).name, "static")


if __name__ == "__main__":
    unittest.main()
