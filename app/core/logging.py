"""
Logging setup.

Engine modules log through ``logging.getLogger(__name__)``; this module
only wires the root handler once, at application start-up.
"""

import logging

_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configure the root logger.  Unknown level names fall back to INFO."""
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        numeric = logging.INFO
    logging.basicConfig(level=numeric, format=_FORMAT)
    logging.getLogger("app").setLevel(numeric)
