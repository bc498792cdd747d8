"""Lexical signals used to tell natural-language queries from keyword searches.

Each signal is a case-insensitive, whole-word predicate over a string.
Opener signals only look at the first word; presence signals fire when the
word appears anywhere.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Final, Iterator, Sequence


class SignalKind(str, Enum):
    QUESTION_OPENER = "question_opener"
    COMMAND_OPENER = "command_opener"
    PRONOUN = "pronoun"
    ARTICLE = "article"
    PREPOSITION = "preposition"


QUESTION_WORDS: Final[tuple[str, ...]] = (
    "what", "where", "when", "why", "who", "how",
    "can", "could", "would", "will", "should",
    "is", "are", "do", "does", "did", "has", "have", "had",
)
COMMAND_WORDS: Final[tuple[str, ...]] = (
    "find", "search", "show", "tell", "help", "get", "create",
    "make", "write", "draft", "analyze", "explain", "suggest",
)
PRONOUNS: Final[tuple[str, ...]] = ("me", "my", "i", "we", "our", "us", "you", "your")
ARTICLES: Final[tuple[str, ...]] = ("a", "an", "the")
PREPOSITIONS: Final[tuple[str, ...]] = (
    "in", "on", "at", "to", "for", "with", "by", "about", "between",
    "among", "through", "over", "under", "during", "after", "before",
)

_OPENER_KINDS = frozenset({SignalKind.QUESTION_OPENER, SignalKind.COMMAND_OPENER})


@dataclass(frozen=True, slots=True)
class PatternSignal:
    """A named lexical rule.

    Attributes:
        kind: Signal category.
        words: Vocabulary the rule looks for.
        pattern: Compiled case-insensitive regex implementing the rule.
    """

    kind: SignalKind
    words: tuple[str, ...]
    pattern: re.Pattern[str]

    @property
    def name(self) -> str:
        return self.kind.value

    @property
    def is_opener(self) -> bool:
        return self.kind in _OPENER_KINDS

    def test(self, text: str) -> bool:
        """Return whether ``text`` exhibits this signal."""
        return self.pattern.search(text) is not None


def _alternation(words: Sequence[str]) -> str:
    # Longest first so "does" is not shadowed by "do".
    return "|".join(re.escape(w) for w in sorted(words, key=len, reverse=True))


def opener_signal(kind: SignalKind, words: Sequence[str]) -> PatternSignal:
    """Build a signal that fires when the first word is in ``words``."""
    pattern = re.compile(rf"^\s*(?:{_alternation(words)})\b", re.IGNORECASE)
    return PatternSignal(kind=kind, words=tuple(words), pattern=pattern)


def presence_signal(kind: SignalKind, words: Sequence[str]) -> PatternSignal:
    """Build a signal that fires when any word in ``words`` appears."""
    pattern = re.compile(rf"\b(?:{_alternation(words)})\b", re.IGNORECASE)
    return PatternSignal(kind=kind, words=tuple(words), pattern=pattern)


class PatternLibrary:
    """Fixed, ordered collection of pattern signals."""

    __slots__ = ("_signals",)

    def __init__(self, signals: Sequence[PatternSignal]) -> None:
        self._signals: tuple[PatternSignal, ...] = tuple(signals)
        kinds = [s.kind for s in self._signals]
        if len(set(kinds)) != len(kinds):
            raise ValueError("PatternLibrary signals must have unique kinds")

    def __iter__(self) -> Iterator[PatternSignal]:
        return iter(self._signals)

    def __len__(self) -> int:
        return len(self._signals)

    def get(self, kind: SignalKind) -> PatternSignal | None:
        for signal in self._signals:
            if signal.kind is kind:
                return signal
        return None


DEFAULT_LIBRARY: Final[PatternLibrary] = PatternLibrary(
    (
        opener_signal(SignalKind.QUESTION_OPENER, QUESTION_WORDS),
        opener_signal(SignalKind.COMMAND_OPENER, COMMAND_WORDS),
        presence_signal(SignalKind.PRONOUN, PRONOUNS),
        presence_signal(SignalKind.ARTICLE, ARTICLES),
        presence_signal(SignalKind.PREPOSITION, PREPOSITIONS),
    )
)
