"""YAML file candidate provider."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Sequence

import yaml

from DualSearch.config.common import expect_str, get_optional_value, get_required_value
from DualSearch.core.models import Candidate, CandidateKind
from DualSearch.utils.log import log

_KINDS = {kind.value: kind for kind in CandidateKind}


class FileCandidateProvider:
    """Load candidates once from a YAML list of mappings.

    Expected shape::

        - kind: channel
          label: "#engineering"
          secondary_text: Platform team
        - kind: file
          label: roadmap.pdf
    """

    name = "file"

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        self._candidates: tuple[Candidate, ...] | None = None

    def list_candidates(self, query: str) -> Sequence[Candidate]:
        del query
        if self._candidates is None:
            self._candidates = load_candidates(self.path)
            log.info("Loaded %d candidates from %s", len(self._candidates), self.path)
        return self._candidates


def load_candidates(path: Path) -> tuple[Candidate, ...]:
    """Read and validate candidates from a YAML file.

    Raises:
        TypeError: If the file or an entry has the wrong shape.
        ValueError: If an entry is missing a key or has an unknown kind.
    """
    data = yaml.safe_load(path.read_text(encoding="utf-8")) or []
    return parse_candidates(data)


def parse_candidates(data: Any, config_key: str = "candidates") -> tuple[Candidate, ...]:
    """Parse a raw list into candidates, naming the offending key on error."""
    if not isinstance(data, list):
        raise TypeError(f"{config_key} must be a list")
    return tuple(_parse_candidate(item, f"{config_key}[{idx}]") for idx, item in enumerate(data))


def _parse_candidate(item: Any, config_key: str) -> Candidate:
    if not isinstance(item, dict):
        raise TypeError(f"{config_key} must be an object")
    kind_raw = expect_str(get_required_value(item, "kind", f"{config_key}.kind"), f"{config_key}.kind")
    kind = _KINDS.get(kind_raw.strip().lower())
    if kind is None:
        raise ValueError(f"{config_key}.kind must be one of {sorted(_KINDS)}")
    label = expect_str(get_required_value(item, "label", f"{config_key}.label"), f"{config_key}.label")
    secondary = get_optional_value(item, "secondary_text", None)
    if secondary is not None:
        secondary = expect_str(secondary, f"{config_key}.secondary_text")
    return Candidate(kind=kind, label=label, secondary_text=secondary)
