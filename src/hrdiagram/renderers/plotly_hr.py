"""Plotly interactive H-R diagram renderer.

x = B−V colour index, y = log10 luminosity. Marker size follows radius and
marker colour follows temperature. Supports wheel zoom and drag panning.
"""

import math

import numpy as np
import plotly.graph_objects as go
from plotly.colors import sample_colorscale

from hrdiagram.i18n import t
from hrdiagram.models import ChartPoint, StarCatalog

_BG = "#000000"
_TEXT_COLOR = "#ffffff"
NEUTRAL_COLOR = "rgb(128, 128, 128)"  # Stars without a temperature

# blue → green → yellow → orange → red over [min temp, max temp]
HR_COLORSCALE = [
    [0.0, "rgb(0, 0, 255)"],
    [0.25, "rgb(0, 255, 0)"],
    [0.5, "rgb(255, 255, 0)"],
    [0.75, "rgb(255, 165, 0)"],
    [1.0, "rgb(255, 0, 0)"],
]

MIN_MARKER_SIZE = 6.0
MAX_MARKER_SIZE = 30.0
_UNDEFINED_OFFSET = 0.5  # Axis units below the lowest defined value


def temperature_fraction(
    temperature: float, domain: tuple[float, float] | None
) -> float | None:
    """Position of `temperature` in the domain, in [0, 1]. None if unknown."""
    if domain is None or not math.isfinite(temperature):
        return None
    lo, hi = domain
    if hi <= lo:
        return 0.0
    return min(1.0, max(0.0, (temperature - lo) / (hi - lo)))


def temperature_color(temperature: float, domain: tuple[float, float] | None) -> str:
    fraction = temperature_fraction(temperature, domain)
    if fraction is None:
        return NEUTRAL_COLOR
    return sample_colorscale(HR_COLORSCALE, [fraction])[0]


def marker_sizes(radii: np.ndarray) -> np.ndarray:
    """Map radii to marker diameters; area grows with radius.

    Non-finite or non-positive radii get the minimum size.
    """
    radii = np.asarray(radii, dtype=float)
    valid = np.isfinite(radii) & (radii > 0)
    if not valid.any():
        return np.full(radii.shape, MIN_MARKER_SIZE)
    r_max = radii[valid].max()
    with np.errstate(invalid="ignore"):
        fraction = np.where(valid, radii / r_max, 0.0)
    return MIN_MARKER_SIZE + (MAX_MARKER_SIZE - MIN_MARKER_SIZE) * np.sqrt(
        np.clip(fraction, 0.0, 1.0)
    )


def project_points(catalog: StarCatalog) -> tuple[ChartPoint, ...]:
    """Project every star onto the diagram, in catalog order. Nothing is dropped."""
    domain = catalog.temperature_domain()
    sizes = marker_sizes(np.array([s.radius for s in catalog.stars], dtype=float))
    return tuple(
        ChartPoint(
            name=s.name,
            x=s.color_index,
            y=s.log_luminosity,
            size=float(size),
            color=temperature_color(s.temperature, domain),
            hover=s.tooltip_label,
        )
        for s, size in zip(catalog.stars, sizes)
    )


def pinned_floor(values: list[float]) -> float:
    finite = [v for v in values if math.isfinite(v)]
    return (min(finite) if finite else 0.0) - _UNDEFINED_OFFSET


def render_hr_chart(catalog: StarCatalog, lang: str = "en") -> go.Figure:
    """Render the catalog as an interactive Plotly H-R diagram.

    Stars with an undefined coordinate (e.g. log luminosity of a zero
    luminosity) are drawn in a separate trace, pinned just below the lowest
    defined value on that axis with an open triangle marker.

    Args:
        catalog: The enriched catalog.
        lang: Language code for titles and labels.

    Returns:
        Plotly Figure object.
    """
    points = project_points(catalog)
    defined = [p for p in points if p.has_x and p.has_y]
    undefined = [p for p in points if not (p.has_x and p.has_y)]

    star_trace = go.Scatter(
        x=[p.x for p in defined],
        y=[p.y for p in defined],
        mode="markers",
        marker=dict(
            size=[p.size for p in defined],
            color=[p.color for p in defined],
            opacity=0.75,
            line=dict(width=0),
        ),
        hovertext=[p.hover for p in defined],
        hoverinfo="text",
        name=t("trace_stars", lang),
    )
    traces = [star_trace]

    if undefined:
        x_floor = pinned_floor([p.x for p in points])
        y_floor = pinned_floor([p.y for p in points])
        traces.append(
            go.Scatter(
                x=[p.x if p.has_x else x_floor for p in undefined],
                y=[p.y if p.has_y else y_floor for p in undefined],
                mode="markers",
                marker=dict(
                    size=[p.size for p in undefined],
                    color=[p.color for p in undefined],
                    symbol="triangle-down-open",
                    opacity=0.9,
                ),
                hovertext=[p.hover for p in undefined],
                hoverinfo="text",
                name=t("trace_undefined", lang),
            )
        )

    # Colour bar only: an invisible trace carrying the continuous scale
    domain = catalog.temperature_domain()
    if domain is not None:
        traces.append(
            go.Scatter(
                x=[None],
                y=[None],
                mode="markers",
                marker=dict(
                    colorscale=HR_COLORSCALE,
                    cmin=domain[0],
                    cmax=domain[1],
                    color=[domain[0]],
                    showscale=True,
                    colorbar=dict(
                        title=dict(text=t("colorbar_title", lang)),
                        tickfont=dict(color=_TEXT_COLOR),
                    ),
                ),
                hoverinfo="skip",
                showlegend=False,
            )
        )

    fig = go.Figure(data=traces)
    fig.update_layout(
        title=dict(text=t("chart_title", lang), font=dict(size=16)),
        paper_bgcolor=_BG,
        plot_bgcolor=_BG,
        font=dict(color=_TEXT_COLOR, family="Arial"),
        showlegend=bool(undefined),
        legend=dict(orientation="h", y=-0.15),
        height=580,
        dragmode="pan",
        hovermode="closest",
        xaxis=dict(title=dict(text=t("axis_x", lang)), gridcolor="#333333", zeroline=False),
        yaxis=dict(title=dict(text=t("axis_y", lang)), gridcolor="#333333", zeroline=False),
    )

    # st.plotly_chart call also requires config={"scrollZoom": True}
    fig._config = {"scrollZoom": True, "displaylogo": False}  # type: ignore[attr-defined]

    return fig
