"""Tests for layered config parsing and validation."""

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from DualSearch.config import load_config, load_config_with_defaults, parse_config_dict
from DualSearch.core.models import Mode
from DualSearch.services.controller import Detection


def _base_raw_config() -> dict:
    return {
        "log": {"level": "INFO", "to_file": False, "dir": "log"},
        "mode": {"default": "keyword", "detection": "keystroke", "notification_seconds": 3.0},
        "candidates": {"source": "builtin", "path": None},
        "output": {"format": "console"},
    }


class TestConfigLayering(unittest.TestCase):
    def test_parse_success_nested_access(self) -> None:
        cfg = parse_config_dict(_base_raw_config())
        self.assertEqual(cfg.runtime.level, "INFO")
        self.assertEqual(cfg.mode.default, Mode.KEYWORD)
        self.assertEqual(cfg.mode.detection, Detection.KEYSTROKE)
        self.assertEqual(cfg.mode.notification_seconds, 3.0)
        self.assertEqual(cfg.candidates.source, "builtin")
        self.assertEqual(cfg.output.format, "console")

    def test_optional_sections_default(self) -> None:
        raw = {"log": {"level": "debug", "to_file": False, "dir": "log"}}
        cfg = parse_config_dict(raw)
        self.assertEqual(cfg.runtime.level, "DEBUG")
        self.assertEqual(cfg.mode.default, Mode.KEYWORD)
        self.assertEqual(cfg.candidates.source, "builtin")
        self.assertEqual(cfg.output.format, "console")

    def test_choices_are_case_insensitive(self) -> None:
        raw = _base_raw_config()
        raw["mode"]["default"] = "AI"
        raw["mode"]["detection"] = "Submit"
        cfg = parse_config_dict(raw)
        self.assertEqual(cfg.mode.default, Mode.AI)
        self.assertEqual(cfg.mode.detection, Detection.SUBMIT)

    def test_missing_log_section(self) -> None:
        raw = _base_raw_config()
        del raw["log"]
        with self.assertRaisesRegex(ValueError, "log"):
            parse_config_dict(raw)

    def test_unknown_mode_error_contains_key(self) -> None:
        raw = _base_raw_config()
        raw["mode"]["default"] = "hybrid"
        with self.assertRaisesRegex(ValueError, "mode\\.default"):
            parse_config_dict(raw)

    def test_notification_seconds_type_and_range(self) -> None:
        raw = _base_raw_config()
        raw["mode"]["notification_seconds"] = "3"
        with self.assertRaisesRegex(TypeError, "mode\\.notification_seconds"):
            parse_config_dict(raw)
        raw["mode"]["notification_seconds"] = 0
        with self.assertRaisesRegex(ValueError, "mode\\.notification_seconds"):
            parse_config_dict(raw)

    def test_integer_seconds_accepted(self) -> None:
        raw = _base_raw_config()
        raw["mode"]["notification_seconds"] = 2
        self.assertEqual(parse_config_dict(raw).mode.notification_seconds, 2.0)

    def test_unknown_candidate_source(self) -> None:
        raw = _base_raw_config()
        raw["candidates"]["source"] = "slack"
        with self.assertRaisesRegex(ValueError, "candidates\\.source"):
            parse_config_dict(raw)

    def test_file_source_requires_path(self) -> None:
        raw = _base_raw_config()
        raw["candidates"]["source"] = "file"
        with self.assertRaisesRegex(ValueError, "candidates\\.path"):
            parse_config_dict(raw)

    def test_unknown_output_format(self) -> None:
        raw = _base_raw_config()
        raw["output"]["format"] = "html"
        with self.assertRaisesRegex(ValueError, "output\\.format"):
            parse_config_dict(raw)

    def test_bad_log_level(self) -> None:
        raw = _base_raw_config()
        raw["log"]["level"] = "LOUD"
        with self.assertRaisesRegex(ValueError, "log\\.level"):
            parse_config_dict(raw)

    def test_default_file_loads(self) -> None:
        cfg = load_config(REPO_ROOT / "config" / "default.yml")
        self.assertEqual(cfg.mode.default, Mode.KEYWORD)
        self.assertEqual(cfg.mode.notification_seconds, 3.0)

    def test_override_merges_over_defaults(self) -> None:
        cfg = load_config_with_defaults(
            REPO_ROOT / "config" / "test" / "file_source.yml",
            default_path=REPO_ROOT / "config" / "default.yml",
        )
        self.assertEqual(cfg.mode.default, Mode.AI)
        self.assertEqual(cfg.mode.detection, Detection.KEYSTROKE)
        self.assertEqual(cfg.candidates.source, "file")
        self.assertEqual(cfg.candidates.path, "config/test/candidates.yml")
        self.assertEqual(cfg.output.format, "json")
        self.assertEqual(cfg.runtime.level, "INFO")


if __name__ == "__main__":
    unittest.main()
