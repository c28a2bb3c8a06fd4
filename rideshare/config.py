"""Runtime configuration for the ride sharing demonstration."""

import os
import logging
from dotenv import load_dotenv

load_dotenv()

LOG_LEVEL = os.getenv("RIDESHARE_LOG_LEVEL", "WARNING").upper()
REPORT_TITLE = os.getenv("RIDESHARE_REPORT_TITLE", "RIDE SHARING SYSTEM - PYTHON VERSION")

# Banner width used across the report
BANNER_WIDTH = 40


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Set up logging to stderr so the report on stdout stays clean."""
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
