"""Root logger setup for the upload API."""

import logging
import sys


def setup_logging(level: str = "INFO") -> None:
    """
    Configures the root logger for the application.
    Called once from create_app(); repeated calls only adjust the level.
    """
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s - %(name)s - [%(levelname)s] - %(message)s",
        stream=sys.stdout,
    )
    logging.getLogger().setLevel(level.upper())
    # Silence noisy libraries
    logging.getLogger("multipart").setLevel(logging.WARNING)
    logging.getLogger("python_multipart").setLevel(logging.WARNING)
