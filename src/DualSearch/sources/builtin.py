"""Built-in demo workspace: candidates plus idle-panel suggestions and recents."""

from __future__ import annotations

from typing import Final

from DualSearch.core.models import Candidate, CandidateKind
from DualSearch.sources.base import StaticCandidateProvider

SUGGESTIONS: Final[tuple[str, ...]] = (
    "Help me make the most of my day",
    "@Sales Coach Prep me for my Greenleaf Intro call in 1 hour",
    "Draft an out of office plan for my upcoming PTO",
)

RECENT_ITEMS: Final[tuple[Candidate, ...]] = (
    Candidate(CandidateKind.CHANNEL, "Design Moves", "#design-moves"),
    Candidate(CandidateKind.MESSAGE, "Where is the Acme org chart?"),
    Candidate(CandidateKind.FILE, "Project Gizmo PRD", "Canvas"),
    Candidate(CandidateKind.MESSAGE, "Reorg announcements", "#announcements"),
)

CANDIDATES: Final[tuple[Candidate, ...]] = (
    Candidate(CandidateKind.CHANNEL, "#general", "Company-wide announcements and work-based matters"),
    Candidate(CandidateKind.CHANNEL, "#engineering", "Platform, infra and release coordination"),
    Candidate(CandidateKind.CHANNEL, "#design-moves", "Design reviews and critiques"),
    Candidate(CandidateKind.CHANNEL, "#sales-greenleaf", "Greenleaf account team"),
    Candidate(CandidateKind.USER, "Maya Chen", "Engineering Manager"),
    Candidate(CandidateKind.USER, "Jordan Alvarez", "Account Executive, Sales"),
    Candidate(CandidateKind.USER, "Priya Natarajan", "Product Designer"),
    Candidate(CandidateKind.MESSAGE, "Latest matching message", "#general"),
    Candidate(CandidateKind.MESSAGE, "Q3 budget review moved to Thursday", "#finance"),
    Candidate(CandidateKind.MESSAGE, "Acme org chart is pinned in #people-ops"),
    Candidate(CandidateKind.FILE, "document.pdf"),
    Candidate(CandidateKind.FILE, "Project Gizmo PRD", "Canvas"),
    Candidate(CandidateKind.FILE, "Acme org chart.pdf", "Shared by Maya Chen"),
    Candidate(CandidateKind.FILE, "Engineering onboarding.docx"),
)


def builtin_provider() -> StaticCandidateProvider:
    return StaticCandidateProvider(candidates=CANDIDATES, name="builtin")
