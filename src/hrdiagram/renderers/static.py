"""Matplotlib static PNG renderer."""

from pathlib import Path

import matplotlib.pyplot as plt
from matplotlib.figure import Figure
from matplotlib.lines import Line2D

from hrdiagram.i18n import t
from hrdiagram.models import StarCatalog
from hrdiagram.renderers.plotly_hr import pinned_floor, project_points

_ROOT = Path(__file__).parent.parent.parent.parent


def _to_mpl_color(rgb: str) -> tuple[float, float, float]:
    """Convert an "rgb(r, g, b)" string (0-255) to a matplotlib tuple (0-1)."""
    parts = rgb[rgb.index("(") + 1 : rgb.index(")")].split(",")
    r, g, b = (float(p) / 255.0 for p in parts[:3])
    return (r, g, b)


def render_static_chart(catalog: StarCatalog, chart_size: int = 10) -> Figure:
    """Render the catalog as a static H-R diagram.

    Uses the same point projection as the Plotly chart, so sizes, colours and
    the pinned position of undefined points match.

    Args:
        catalog: The enriched catalog.
        chart_size: Output image width in inches.

    Returns:
        matplotlib Figure object.
    """
    points = project_points(catalog)
    x_floor = pinned_floor([p.x for p in points])
    y_floor = pinned_floor([p.y for p in points])

    fig, ax = plt.subplots(figsize=(chart_size, chart_size * 0.6))
    fig.patch.set_facecolor("black")
    ax.set_facecolor("black")

    defined = [p for p in points if p.has_x and p.has_y]
    undefined = [p for p in points if not (p.has_x and p.has_y)]

    # Plotly size is a diameter in px; matplotlib s is an area in pt²
    if defined:
        ax.scatter(
            [p.x for p in defined],
            [p.y for p in defined],
            s=[(p.size * 0.75) ** 2 for p in defined],
            c=[_to_mpl_color(p.color) for p in defined],
            alpha=0.75,
            linewidths=0,
        )
    if undefined:
        ax.scatter(
            [p.x if p.has_x else x_floor for p in undefined],
            [p.y if p.has_y else y_floor for p in undefined],
            s=[(p.size * 0.75) ** 2 for p in undefined],
            facecolors="none",
            edgecolors=[_to_mpl_color(p.color) for p in undefined],
            marker="v",
        )
        ax.legend(
            handles=[
                Line2D(
                    [], [], marker="v", linestyle="", markerfacecolor="none",
                    markeredgecolor="white", label=t("trace_undefined", "en"),
                )
            ],
            facecolor="black",
            labelcolor="white",
        )

    ax.set_title(t("chart_title", "en"), color="white", fontsize=16, fontweight="bold")
    ax.set_xlabel(t("axis_x", "en"), color="white", fontsize=12)
    ax.set_ylabel(t("axis_y", "en"), color="white", fontsize=12)
    ax.tick_params(colors="white")
    for spine in ax.spines.values():
        spine.set_color("#555555")

    return fig


def save_static_chart(catalog: StarCatalog, output_path: Path | None = None) -> Path:
    """Save the catalog's H-R diagram as a PNG file.

    Args:
        catalog: The enriched catalog.
        output_path: Destination path. Defaults to results/hr_diagram.png.

    Returns:
        Path to the saved file.
    """
    if output_path is None:
        output_path = _ROOT / "results" / "hr_diagram.png"

    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig = render_static_chart(catalog)
    fig.savefig(output_path, facecolor="black")
    plt.close(fig)
    return output_path
