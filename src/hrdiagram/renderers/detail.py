"""Detail panel projection for the selected star."""

import html

from hrdiagram.i18n import t
from hrdiagram.models import DetailField, StarCatalog
from hrdiagram.pipeline import MISSING_TEXT, format_2dp


def detail_fields(
    catalog: StarCatalog, name: str | None, lang: str = "en"
) -> tuple[DetailField, ...]:
    """Project the star named `name` into ordered (label, value) pairs.

    Uses the first match in input order. Returns an empty tuple when nothing
    matches; the caller shows a placeholder instead.

    Args:
        catalog: The enriched catalog.
        name: Selected star name.
        lang: Language code for labels.

    Returns:
        Fields in display order, numbers rounded to 2 decimals.
    """
    star = catalog.find(name)
    if star is None:
        return ()

    return (
        DetailField(t("detail_name", lang), star.name),
        DetailField(t("detail_alt_name", lang), star.alt_name or MISSING_TEXT),
        DetailField(t("detail_spectral_type", lang), star.spectral_type),
        DetailField(t("detail_temperature", lang), f"{format_2dp(star.temperature)} K"),
        DetailField(t("detail_radius", lang), f"{format_2dp(star.radius)} R☉"),
        DetailField(
            t("detail_log_luminosity", lang), f"{format_2dp(star.log_luminosity)} L☉"
        ),
        DetailField(t("detail_color_index", lang), format_2dp(star.color_index)),
        DetailField(
            t("detail_type_info", lang),
            star.description if star.description is not None else t("no_description", lang),
        ),
    )


def render_detail_html(fields: tuple[DetailField, ...]) -> str:
    """Join fields as "<strong>Label:</strong> value" lines for st.markdown."""
    return "<br>".join(
        f"<strong>{html.escape(f.label)}:</strong> {html.escape(f.value)}" for f in fields
    )
