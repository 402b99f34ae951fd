"""
Logging setup - one call at startup, then `logging.getLogger(__name__)` everywhere.
"""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

_configured = False


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger once. Later calls only adjust the level."""
    global _configured
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    if not _configured:
        logging.basicConfig(level=numeric_level, format=LOG_FORMAT)
        _configured = True

    logging.getLogger().setLevel(numeric_level)
    logging.getLogger("satrecruit").setLevel(numeric_level)
