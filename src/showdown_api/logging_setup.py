"""Logging configuration shared by the web and command-line entry points."""

import logging
import sys


def setup_logging(level: str | int = logging.INFO) -> None:
    """Set up logging for the application."""
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stderr)
        ],
        force=True
    )

    # Werkzeug logs every request at INFO
    logging.getLogger('werkzeug').setLevel(logging.WARNING)
