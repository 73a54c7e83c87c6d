"""
Utility Functions Module for Auto Tagger

Functions:
    setup_logging: Configures application logging
"""

import logging


def setup_logging(level: str = "INFO") -> None:
    """Configure logging for the application.

    Args:
        level: Level name such as "DEBUG" or "INFO"; unknown names fall back to INFO
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
