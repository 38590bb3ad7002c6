"""Currently selected star — the only mutable state in a session."""

import logging
from dataclasses import dataclass

from hrdiagram.models import StarCatalog

logger = logging.getLogger(__name__)


def default_selection(catalog: StarCatalog) -> str | None:
    """First name in lexicographic order, or None for an empty catalog."""
    names = catalog.names()
    return names[0] if names else None


@dataclass
class SelectionState:
    """Holds the selected star by name (a key into the catalog, not a copy).

    Any string is accepted. A name the catalog does not know is kept as-is and
    simply produces an empty detail view.
    """

    name: str | None = None

    @classmethod
    def initial(cls, catalog: StarCatalog) -> "SelectionState":
        return cls(name=default_selection(catalog))

    def select(self, name: str | None) -> bool:
        """Set the selection. Returns True if it changed."""
        if name == self.name:
            return False
        self.name = name
        return True

    def resolves_in(self, catalog: StarCatalog) -> bool:
        found = catalog.find(self.name) is not None
        if not found:
            logger.info("Selected star %r is not in the catalog", self.name)
        return found
