from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence


class Mode(str, Enum):
    """Active interpretation strategy for the query."""

    AI = "ai"
    KEYWORD = "keyword"

    def flipped(self) -> Mode:
        return Mode.KEYWORD if self is Mode.AI else Mode.AI


class CandidateKind(str, Enum):
    CHANNEL = "channel"
    USER = "user"
    MESSAGE = "message"
    FILE = "file"


@dataclass(frozen=True, slots=True)
class Candidate:
    """A searchable item supplied by a candidate provider.

    Attributes:
        kind: What the item is (channel, user, message, file).
        label: Primary display text. Channel labels usually carry a leading `#`.
        secondary_text: Optional second line (topic, title, message excerpt).
    """

    kind: CandidateKind
    label: str
    secondary_text: Optional[str] = None


@dataclass(frozen=True, slots=True)
class HighlightSpan:
    """Half-open `[start, end)` character range inside an annotated text."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.end <= self.start:
            raise ValueError(f"Invalid highlight span: ({self.start}, {self.end})")

    def __len__(self) -> int:
        return self.end - self.start


@dataclass(frozen=True, slots=True)
class MatchResult:
    """A candidate retained by the typeahead matcher.

    Attributes:
        candidate: The matched candidate.
        field: Which candidate text the spans index: "label" or "secondary_text".
        highlight_spans: Sorted, non-overlapping spans inside that text.
    """

    candidate: Candidate
    field: str
    highlight_spans: Sequence[HighlightSpan]

    @property
    def text(self) -> str:
        """Return the candidate text the highlight spans refer to."""
        if self.field == "label":
            return self.candidate.label
        return self.candidate.secondary_text or ""


@dataclass(frozen=True, slots=True)
class AiEcho:
    """Prompt entry shown instead of typeahead results in AI mode."""

    text: str


@dataclass(frozen=True, slots=True)
class Notification:
    """Transient "switched to X mode" message.

    Attributes:
        text: Message to display.
        mode: Mode that was switched into.
        expires_at: Clock reading after which the notification is hidden.
        visible: False once the expiry timer has fired.
    """

    text: str
    mode: Mode
    expires_at: float
    visible: bool = True
