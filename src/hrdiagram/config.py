"""Runtime settings read from the environment (and a .env file, if present)."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

_ROOT = Path(__file__).parent.parent.parent

DEFAULT_STARS_CSV = _ROOT / "resources" / "near_stars.csv"
DEFAULT_CLASSES_CSV = _ROOT / "resources" / "star_types.csv"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    stars_csv: Path
    classes_csv: Path
    log_level: str  # One of _LOG_LEVELS
    lang: str | None  # "en" / "ko"; None = detect from the browser


def load_settings() -> Settings:
    """Build Settings from HRD_* environment variables.

    Variables:
        HRD_STARS_CSV: Path to the stars CSV (default: bundled sample).
        HRD_CLASSES_CSV: Path to the spectral class CSV (default: bundled sample).
        HRD_LOG_LEVEL: Logging level name (default: INFO).
        HRD_LANG: Force UI language ("en" or "ko").
    """
    load_dotenv()

    log_level = os.environ.get("HRD_LOG_LEVEL", "INFO").strip().upper()
    if log_level not in _LOG_LEVELS:
        logging.getLogger(__name__).warning(
            "Unknown HRD_LOG_LEVEL %r, using INFO", log_level
        )
        log_level = "INFO"

    lang = os.environ.get("HRD_LANG", "").strip().lower() or None
    if lang not in (None, "en", "ko"):
        lang = "en"

    return Settings(
        stars_csv=Path(os.environ.get("HRD_STARS_CSV") or DEFAULT_STARS_CSV),
        classes_csv=Path(os.environ.get("HRD_CLASSES_CSV") or DEFAULT_CLASSES_CSV),
        log_level=log_level,
        lang=lang,
    )
