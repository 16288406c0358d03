"""Abstract report store interface.

The CLI depends on BaseStore, not on a concrete backend, so where rendered
review records end up can change without touching CLI code.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path


class BaseStore(ABC):
    """Persistence layer for rendered review records."""

    @abstractmethod
    def save(self, file_name: str, text: str) -> Path:
        """Persist a rendered report and return where it was written."""

    def close(self) -> None:
        """Release any resources held by the store.

        Optional — subclasses that need cleanup should override this.
        Default is a no-op so callers can always call close() safely.
        """
