"""Natural-language vs. keyword query classifier.

The policy is evaluated in a fixed priority order, first match wins:

1. the query opens with a question word or a command verb;
2. a pronoun is present and at least two signals fired in total;
3. the query has three or more words and at least three signals fired;
4. otherwise it is a keyword search.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from DualSearch.core.models import Mode
from DualSearch.core.patterns import DEFAULT_LIBRARY, PatternSignal, SignalKind

_OPENERS = (SignalKind.QUESTION_OPENER, SignalKind.COMMAND_OPENER)
PRONOUN_MIN_SIGNALS = 2
DENSITY_MIN_WORDS = 3
DENSITY_MIN_SIGNALS = 3


class VerdictReason(str, Enum):
    EMPTY = "empty"
    OPENER = "opener"
    PRONOUN = "pronoun"
    DENSITY = "density"
    KEYWORD = "keyword"


@dataclass(frozen=True, slots=True)
class Verdict:
    """Classification result for a single query.

    Attributes:
        is_natural_language: True when the query reads like a question or instruction.
        match_count: Number of signals that fired.
        reason: Which policy step decided the verdict.
        signals: Names of the fired signals, in library order.
    """

    is_natural_language: bool
    match_count: int
    reason: VerdictReason
    signals: tuple[str, ...] = ()

    @property
    def mode(self) -> Mode:
        return Mode.AI if self.is_natural_language else Mode.KEYWORD


def word_count(text: str) -> int:
    """Count whitespace-delimited, non-empty tokens."""
    return len(text.split())


def classify(text: str, library: Iterable[PatternSignal] = DEFAULT_LIBRARY) -> Verdict:
    """Classify ``text`` as natural-language or keyword-style.

    Args:
        text: Raw query text.
        library: Signals to evaluate. Defaults to the built-in pattern library.

    Returns:
        A fresh verdict. Empty or whitespace-only input returns a keyword
        verdict without evaluating any signal.
    """
    trimmed = text.strip()
    if not trimmed:
        return Verdict(is_natural_language=False, match_count=0, reason=VerdictReason.EMPTY)

    fired: list[PatternSignal] = [signal for signal in library if signal.test(trimmed)]
    fired_kinds = {signal.kind for signal in fired}
    match_count = len(fired)
    names = tuple(signal.name for signal in fired)

    if any(kind in fired_kinds for kind in _OPENERS):
        reason = VerdictReason.OPENER
    elif SignalKind.PRONOUN in fired_kinds and match_count >= PRONOUN_MIN_SIGNALS:
        reason = VerdictReason.PRONOUN
    elif word_count(trimmed) >= DENSITY_MIN_WORDS and match_count >= DENSITY_MIN_SIGNALS:
        reason = VerdictReason.DENSITY
    else:
        return Verdict(is_natural_language=False, match_count=match_count, reason=VerdictReason.KEYWORD, signals=names)

    return Verdict(is_natural_language=True, match_count=match_count, reason=reason, signals=names)
