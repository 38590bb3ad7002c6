"""Data layer — CSV loading, spectral class join, and derived-field enrichment."""

import logging
import math
from collections.abc import Iterable
from pathlib import Path

import pandas as pd

from hrdiagram.models import RawStar, SpectralClassInfo, StarCatalog, StarRecord

logger = logging.getLogger(__name__)

STAR_COLUMNS = ("name", "spect_type", "temp", "R", "L", "bv_color")
CLASS_COLUMNS = ("Type", "Description")

UNDEFINED = "NaN"  # Rendered in place of an undefined number
MISSING_TEXT = "NA"  # Rendered in place of a missing alt name
LINE_BREAK = "<br>"


class DataLoadError(Exception):
    """A data source is missing, unreadable, or lacks required columns."""


def _read_csv(path: str | Path, required: tuple[str, ...], kind: str) -> pd.DataFrame:
    """Read a CSV as strings and check that `required` columns are present."""
    path = Path(path)
    if not path.is_file():
        raise DataLoadError(f"{kind} file not found: {path}")
    try:
        df = pd.read_csv(path, dtype=str, keep_default_na=False, encoding="utf-8")
    except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError, OSError) as e:
        raise DataLoadError(f"Cannot read {kind} file {path}: {e}") from e

    # Short rows come back as NaN even with keep_default_na=False
    df = df.fillna("")
    df.columns = [str(c).strip() for c in df.columns]
    missing = [c for c in required if c not in df.columns]
    if missing:
        raise DataLoadError(
            f"{kind} file {path} is missing required column(s): {', '.join(missing)}"
        )
    return df


def _optional_text(value: str) -> str | None:
    value = value.strip()
    if not value or value == MISSING_TEXT:
        return None
    return value


def load_stars(path: str | Path) -> tuple[RawStar, ...]:
    """Load the stars CSV.

    Required columns: ``name, spect_type, temp, R, L, bv_color``. ``alt_name``
    is optional. Numeric cells that cannot be parsed become NaN, so a
    malformed row still loads.

    Raises:
        DataLoadError: On a missing/unreadable file or missing columns.
    """
    df = _read_csv(path, STAR_COLUMNS, "Stars")

    numeric = {
        col: pd.to_numeric(df[col].str.strip(), errors="coerce").astype(float)
        for col in ("temp", "R", "L", "bv_color")
    }
    alt_names = df["alt_name"] if "alt_name" in df.columns else [""] * len(df)

    stars = tuple(
        RawStar(
            name=name.strip(),
            alt_name=_optional_text(alt),
            spectral_type=spect.strip(),
            temperature=float(temp),
            radius=float(radius),
            luminosity=float(lum),
            color_index=float(bv),
        )
        for name, alt, spect, temp, radius, lum, bv in zip(
            df["name"],
            alt_names,
            df["spect_type"],
            numeric["temp"],
            numeric["R"],
            numeric["L"],
            numeric["bv_color"],
        )
    )
    logger.info("Loaded %d stars from %s", len(stars), path)
    return stars


def load_spectral_classes(path: str | Path) -> tuple[SpectralClassInfo, ...]:
    """Load the spectral class CSV (columns ``Type, Description``).

    Raises:
        DataLoadError: On a missing/unreadable file or missing columns.
    """
    df = _read_csv(path, CLASS_COLUMNS, "Spectral class")
    classes = tuple(
        SpectralClassInfo(type_code=code.strip(), description=desc.strip())
        for code, desc in zip(df["Type"], df["Description"])
    )
    logger.info("Loaded %d spectral classes from %s", len(classes), path)
    return classes


def spectral_initial(spectral_type: str) -> str:
    """First character of the spectral type; "" when the type is empty."""
    return spectral_type[:1]


def log_luminosity(luminosity: float) -> float:
    """log10 of luminosity, or NaN when it is not strictly positive."""
    if math.isnan(luminosity) or luminosity <= 0:
        return math.nan
    return math.log10(luminosity)


def format_2dp(value: float) -> str:
    """Round to 2 decimals and print the shortest form ("5778", "-2.77", "1.5").

    NaN prints as "NaN"; infinities as "Inf" / "-Inf".
    """
    if math.isnan(value):
        return UNDEFINED
    if math.isinf(value):
        return "Inf" if value > 0 else "-Inf"
    rounded = round(value, 2)
    if rounded == int(rounded):
        return str(int(rounded))
    return repr(rounded)


def tooltip_label(raw: RawStar, log_l: float) -> str:
    """Hover label for a star. Lines are joined with "<br>" in a fixed order."""
    return LINE_BREAK.join(
        [
            f"Name: {raw.name}",
            f"Alt: {raw.alt_name if raw.alt_name is not None else MISSING_TEXT}",
            f"Spectral Type: {raw.spectral_type}",
            f"Temp: {format_2dp(raw.temperature)} K",
            f"Radius: {format_2dp(raw.radius)} R☉",
            f"Log Luminosity: {format_2dp(log_l)} L☉",
            f"Color Index (B–V): {format_2dp(raw.color_index)}",
        ]
    )


def enrich(
    stars: Iterable[RawStar], classes: Iterable[SpectralClassInfo]
) -> tuple[StarRecord, ...]:
    """Join spectral class descriptions and derive display fields.

    Left-outer join on the spectral initial: every input star is kept, in
    input order. Stars whose class is unknown get ``description=None``.
    When a type code appears more than once, the first description wins.

    Args:
        stars: Raw star rows.
        classes: Spectral class lookup rows.

    Returns:
        Enriched records, one per input star.
    """
    descriptions: dict[str, str] = {}
    for info in classes:
        descriptions.setdefault(info.type_code, info.description)

    records: list[StarRecord] = []
    for raw in stars:
        initial = spectral_initial(raw.spectral_type)
        description = descriptions.get(initial)
        if description is None:
            logger.warning(
                "No spectral class description for %r (type %r)",
                raw.name,
                raw.spectral_type,
            )
        log_l = log_luminosity(raw.luminosity)
        if math.isnan(log_l):
            logger.warning(
                "Log luminosity undefined for %r (L=%s)", raw.name, raw.luminosity
            )
        records.append(
            StarRecord(
                name=raw.name,
                alt_name=raw.alt_name,
                spectral_type=raw.spectral_type,
                temperature=raw.temperature,
                radius=raw.radius,
                luminosity=raw.luminosity,
                color_index=raw.color_index,
                spectral_initial=initial,
                log_luminosity=log_l,
                description=description,
                tooltip_label=tooltip_label(raw, log_l),
            )
        )
    return tuple(records)


def build_catalog(stars_path: str | Path, classes_path: str | Path) -> StarCatalog:
    """Top-level entry point: load both CSVs and return the enriched catalog.

    Raises:
        DataLoadError: If either source cannot be loaded.
    """
    raw_stars = load_stars(stars_path)
    classes = load_spectral_classes(classes_path)
    return StarCatalog(
        stars=enrich(raw_stars, classes),
        classes=classes,
        stars_path=Path(stars_path),
        classes_path=Path(classes_path),
    )
