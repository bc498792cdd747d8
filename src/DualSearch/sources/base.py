"""Candidate provider protocol and in-memory implementation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Sequence

from DualSearch.core.models import Candidate


class CandidateProvider(Protocol):
    """Supplies the ordered candidates the typeahead matcher filters."""

    name: str

    def list_candidates(self, query: str) -> Sequence[Candidate]:
        """Return candidates to match ``query`` against."""
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class StaticCandidateProvider:
    """Provider over a fixed candidate tuple; ignores the query."""

    candidates: tuple[Candidate, ...]
    name: str = "static"

    def list_candidates(self, query: str) -> Sequence[Candidate]:
        del query
        return self.candidates
