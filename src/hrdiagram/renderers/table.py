"""Data table projection for the sortable grid."""

import pandas as pd

from hrdiagram.i18n import t
from hrdiagram.models import StarCatalog

TABLE_COLUMNS = ("name", "alt_name", "spect_type", "temp", "R", "log_L", "bv_color")
_NUMERIC_COLUMNS = ("temp", "R", "log_L", "bv_color")


def table_frame(catalog: StarCatalog) -> pd.DataFrame:
    """Build the grid rows: fixed columns, 2dp numbers, brightest first.

    Sorted descending by log_L with a stable sort, so ties keep input order.
    Undefined log_L rows go last. The catalog itself is not touched; the grid
    widget sorts and searches its own copy.
    """
    df = pd.DataFrame(
        {
            "name": [s.name for s in catalog.stars],
            "alt_name": [s.alt_name for s in catalog.stars],
            "spect_type": [s.spectral_type for s in catalog.stars],
            "temp": [s.temperature for s in catalog.stars],
            "R": [s.radius for s in catalog.stars],
            "log_L": [s.log_luminosity for s in catalog.stars],
            "bv_color": [s.color_index for s in catalog.stars],
        },
        columns=list(TABLE_COLUMNS),
    )
    for col in _NUMERIC_COLUMNS:
        df[col] = df[col].astype(float).round(2)

    df = df.sort_values("log_L", ascending=False, kind="mergesort", na_position="last")
    return df.reset_index(drop=True)


def column_labels(lang: str = "en") -> dict[str, str]:
    """Display headers for the grid, keyed by column."""
    return {col: t(f"col_{col}", lang) for col in TABLE_COLUMNS}
