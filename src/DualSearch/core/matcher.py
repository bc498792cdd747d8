"""Typeahead matcher: substring filtering and highlight spans."""

from __future__ import annotations

from typing import Iterable, Sequence

from DualSearch.core.models import Candidate, CandidateKind, HighlightSpan, MatchResult

CHANNEL_PREFIX = "#"


def find_ignore_case(text: str, needle: str, start: int = 0) -> int:
    """Return the first index of ``needle`` in ``text`` ignoring case, or -1.

    Offsets always index the original ``text``, even for characters whose
    lower-case form has a different length.
    """
    size = len(needle)
    if size == 0 or size > len(text) - start:
        return -1
    lowered = needle.lower()
    if len(lowered) == size and len(text.lower()) == len(text):
        return text.lower().find(lowered, start)
    for idx in range(start, len(text) - size + 1):
        if text[idx : idx + size].lower() == lowered:
            return idx
    return -1


def _label_offset(candidate: Candidate, query: str) -> int:
    """Number of leading label characters hidden from matching."""
    if (
        candidate.kind is CandidateKind.CHANNEL
        and not query.startswith(CHANNEL_PREFIX)
        and candidate.label.startswith(CHANNEL_PREFIX)
    ):
        return len(CHANNEL_PREFIX)
    return 0


def match_candidate(query: str, candidate: Candidate) -> MatchResult | None:
    """Match a single candidate against ``query``.

    Returns:
        A MatchResult anchored to the first field that contains the query
        (label before secondary text), or None when neither does.
    """
    if not query.strip():
        return None

    index = find_ignore_case(candidate.label, query, _label_offset(candidate, query))
    if index >= 0:
        return MatchResult(
            candidate=candidate,
            field="label",
            highlight_spans=(HighlightSpan(index, index + len(query)),),
        )

    if candidate.secondary_text:
        index = find_ignore_case(candidate.secondary_text, query)
        if index >= 0:
            return MatchResult(
                candidate=candidate,
                field="secondary_text",
                highlight_spans=(HighlightSpan(index, index + len(query)),),
            )
    return None


def match(query: str, candidates: Iterable[Candidate]) -> list[MatchResult]:
    """Filter ``candidates`` by case-insensitive substring containment.

    Args:
        query: Current query text. Empty or whitespace-only yields no results.
        candidates: Candidates in display order.

    Returns:
        Match results in input order.
    """
    if not query.strip():
        return []
    results: list[MatchResult] = []
    for candidate in candidates:
        result = match_candidate(query, candidate)
        if result is not None:
            results.append(result)
    return results


def highlight_segments(text: str, spans: Sequence[HighlightSpan]) -> list[tuple[str, bool]]:
    """Split ``text`` into ``(chunk, highlighted)`` pairs for rendering.

    Spans outside the text are clipped; empty chunks are dropped.
    """
    segments: list[tuple[str, bool]] = []
    cursor = 0
    for span in sorted(spans, key=lambda s: s.start):
        start = max(span.start, cursor)
        end = min(span.end, len(text))
        if start >= end:
            continue
        if start > cursor:
            segments.append((text[cursor:start], False))
        segments.append((text[start:end], True))
        cursor = end
    if cursor < len(text):
        segments.append((text[cursor:], False))
    return segments
