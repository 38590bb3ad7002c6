"""Data model definitions — explicit boundaries between load, enrich, and render layers."""

import math
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class RawStar:
    """One row of the stars CSV. Measurements only, nothing derived yet."""

    name: str
    alt_name: str | None
    spectral_type: str  # Free-form code ("G2V", "M5.5Ve", "DA2"); may be ""
    temperature: float  # Effective temperature (K); NaN if missing
    radius: float  # Solar radii; NaN if missing
    luminosity: float  # Solar luminosities; NaN if missing
    color_index: float  # B−V colour index; NaN if missing


@dataclass(frozen=True)
class SpectralClassInfo:
    """Description of a spectral class, keyed by its type code ("O", "B", ...)."""

    type_code: str
    description: str


@dataclass(frozen=True)
class StarRecord:
    """A single enriched star. Read-only input to every renderer."""

    name: str
    alt_name: str | None
    spectral_type: str
    temperature: float
    radius: float
    luminosity: float
    color_index: float
    spectral_initial: str  # First character of spectral_type, "" if empty
    log_luminosity: float  # log10(luminosity); NaN for luminosity <= 0
    description: str | None  # None when no spectral class matched
    tooltip_label: str  # Hover text, "<br>"-separated lines


@dataclass(frozen=True)
class StarCatalog:
    """The enriched table. Built once per load and shared by every session."""

    stars: tuple[StarRecord, ...]  # Input order
    classes: tuple[SpectralClassInfo, ...]
    stars_path: Path | None = None
    classes_path: Path | None = None

    def __len__(self) -> int:
        return len(self.stars)

    def names(self) -> tuple[str, ...]:
        """Distinct star names in lexicographic order, as shown in the selector."""
        return tuple(sorted({s.name for s in self.stars}))

    def find(self, name: str | None) -> StarRecord | None:
        """Return the first star named `name` in input order, or None."""
        if name is None:
            return None
        return next((s for s in self.stars if s.name == name), None)

    def temperature_domain(self) -> tuple[float, float] | None:
        """(min, max) over finite temperatures; None if there are none."""
        temps = [s.temperature for s in self.stars if math.isfinite(s.temperature)]
        if not temps:
            return None
        return min(temps), max(temps)


@dataclass(frozen=True)
class DetailField:
    """One (label, value) line of the detail panel."""

    label: str
    value: str


@dataclass(frozen=True)
class ChartPoint:
    """A star projected onto the H-R diagram. Pure data, no plotting objects."""

    name: str
    x: float  # B−V colour index
    y: float  # log10 luminosity; NaN when undefined
    size: float  # Marker diameter (px)
    color: str  # "rgb(r, g, b)"
    hover: str

    @property
    def has_x(self) -> bool:
        return math.isfinite(self.x)

    @property
    def has_y(self) -> bool:
        return math.isfinite(self.y)
