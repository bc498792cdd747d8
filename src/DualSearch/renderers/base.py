"""Base class for view output writers.

Separates the session control flow from how a view reaches the user.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from DualSearch.services.session import SearchView


class OutputWriter(ABC):
    """Abstract base class for view writers."""

    @abstractmethod
    def write_view(self, view: SearchView) -> None:
        """Write one view snapshot.

        Args:
            view: Snapshot produced by a search session event.
        """
