"""Tests for the lexical pattern library."""

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from DualSearch.core.patterns import (
    COMMAND_WORDS,
    DEFAULT_LIBRARY,
    QUESTION_WORDS,
    PatternLibrary,
    SignalKind,
    presence_signal,
)


def _signal(kind: SignalKind):
    signal = DEFAULT_LIBRARY.get(kind)
    assert signal is not None
    return signal


class TestPatternLibrary(unittest.TestCase):
    def test_library_has_all_kinds_in_order(self) -> None:
        self.assertEqual(
            [signal.kind for signal in DEFAULT_LIBRARY],
            [
                SignalKind.QUESTION_OPENER,
                SignalKind.COMMAND_OPENER,
                SignalKind.PRONOUN,
                SignalKind.ARTICLE,
                SignalKind.PREPOSITION,
            ],
        )

    def test_every_question_word_opens(self) -> None:
        signal = _signal(SignalKind.QUESTION_OPENER)
        for word in QUESTION_WORDS:
            with self.subTest(word=word):
                self.assertTrue(signal.test(f"{word} anything"))
                self.assertTrue(signal.test(f"{word.upper()} anything"))

    def test_every_command_word_opens(self) -> None:
        signal = _signal(SignalKind.COMMAND_OPENER)
        for word in COMMAND_WORDS:
            with self.subTest(word=word):
                self.assertTrue(signal.test(f"{word.capitalize()} the roadmap"))

    def test_openers_only_fire_at_start(self) -> None:
        question = _signal(SignalKind.QUESTION_OPENER)
        command = _signal(SignalKind.COMMAND_OPENER)
        self.assertFalse(question.test("budget what"))
        self.assertFalse(command.test("roadmap draft"))
        self.assertTrue(question.test("   why not"))

    def test_whole_words_only(self) -> None:
        self.assertFalse(_signal(SignalKind.COMMAND_OPENER).test("showcase slides"))
        self.assertFalse(_signal(SignalKind.QUESTION_OPENER).test("island trip"))
        self.assertFalse(_signal(SignalKind.ARTICLE).test("banana"))
        self.assertFalse(_signal(SignalKind.PREPOSITION).test("interview notes"))
        self.assertFalse(_signal(SignalKind.PRONOUN).test("museum"))

    def test_presence_signals_fire_anywhere(self) -> None:
        self.assertTrue(_signal(SignalKind.PRONOUN).test("notes for MY team"))
        self.assertTrue(_signal(SignalKind.PRONOUN).test("I'm out"))
        self.assertTrue(_signal(SignalKind.ARTICLE).test("roadmap an overview"))
        self.assertTrue(_signal(SignalKind.PREPOSITION).test("launch during Q3"))

    def test_contraction_after_opener(self) -> None:
        self.assertTrue(_signal(SignalKind.QUESTION_OPENER).test("What's new"))

    def test_library_rejects_duplicate_kinds(self) -> None:
        with self.assertRaises(ValueError):
            PatternLibrary(
                (
                    presence_signal(SignalKind.ARTICLE, ("a",)),
                    presence_signal(SignalKind.ARTICLE, ("the",)),
                )
            )


if __name__ == "__main__":
    unittest.main()
