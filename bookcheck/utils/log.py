"""
Logging setup for test runs.

Mirrors the service-side convention: one basicConfig call driven by
settings.log_level, module loggers everywhere else.
"""

import logging

from bookcheck.config import Settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(settings: Settings) -> None:
    """Configure the root logger from settings.log_level."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format=LOG_FORMAT,
    )
    # httpx logs every request at INFO; ours are logged by the transport
    logging.getLogger("httpx").setLevel(logging.WARNING)
