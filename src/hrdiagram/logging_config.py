"""Console logging setup shared by the app and the snapshot script."""

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Attach a console handler to the package logger.

    Safe to call on every Streamlit rerun: the handler is added only once.

    Args:
        level: Logging level name ("DEBUG", "INFO", ...).

    Returns:
        The "hrdiagram" logger.
    """
    logger = logging.getLogger("hrdiagram")
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(handler)

    return logger
