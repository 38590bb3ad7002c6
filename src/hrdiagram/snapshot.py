"""Save a static PNG of the H-R diagram.

Data paths come from HRD_STARS_CSV / HRD_CLASSES_CSV (or the bundled sample):
    uv run python src/hrdiagram/snapshot.py
"""

from hrdiagram.config import load_settings
from hrdiagram.logging_config import setup_logging
from hrdiagram.pipeline import build_catalog
from hrdiagram.renderers.static import save_static_chart

settings = load_settings()
logger = setup_logging(settings.log_level)

catalog = build_catalog(settings.stars_csv, settings.classes_csv)
path = save_static_chart(catalog)
logger.info("Saved: %s", path)
