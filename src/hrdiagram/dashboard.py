"""Per-session view wiring with an explicit dependency list per view.

The catalog is shared and never changes; the selection is the only input a
user can change. Each view is recomputed only when one of its inputs changed.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable

from hrdiagram.models import StarCatalog
from hrdiagram.renderers.detail import detail_fields
from hrdiagram.renderers.plotly_hr import render_hr_chart
from hrdiagram.renderers.table import table_frame
from hrdiagram.selection import SelectionState

logger = logging.getLogger(__name__)

VIEW_DEPENDENCIES: dict[str, frozenset[str]] = {
    "detail": frozenset({"selection"}),
    "chart": frozenset({"catalog"}),
    "table": frozenset({"catalog"}),
}


@dataclass(frozen=True)
class SelectStar:
    """User picked a star in the selector."""

    name: str | None


class DashboardSession:
    """One user's view of the shared catalog."""

    def __init__(
        self,
        catalog: StarCatalog,
        selection: SelectionState | None = None,
        lang: str = "en",
    ) -> None:
        self.catalog = catalog
        self.selection = selection if selection is not None else SelectionState.initial(catalog)
        self.lang = lang
        self._views: dict[str, Any] = {}
        self._builders: dict[str, Callable[[], Any]] = {
            "detail": lambda: detail_fields(self.catalog, self.selection.name, self.lang),
            "chart": lambda: render_hr_chart(self.catalog, self.lang),
            "table": lambda: table_frame(self.catalog),
        }

    def view(self, name: str) -> Any:
        """Return the named view, building it if it is stale or not built yet."""
        if name not in self._views:
            logger.debug("Building %s view", name)
            self._views[name] = self._builders[name]()
        return self._views[name]

    def invalidate(self, changed: str) -> tuple[str, ...]:
        """Drop every cached view that depends on `changed`. Returns their names."""
        stale = tuple(v for v, deps in VIEW_DEPENDENCIES.items() if changed in deps)
        for v in stale:
            self._views.pop(v, None)
        return stale

    def dispatch(self, event: object) -> tuple[str, ...]:
        """Apply a user event and return the names of the views it invalidated.

        Raises:
            TypeError: For an event type this session does not handle.
        """
        if isinstance(event, SelectStar):
            if not self.selection.select(event.name):
                return ()
            self.selection.resolves_in(self.catalog)
            return self.invalidate("selection")
        raise TypeError(f"Unsupported event: {event!r}")
