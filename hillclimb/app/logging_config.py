# hillclimb/app/logging_config.py
"""
Logging setup for the command-line and viewer entrypoints.

Library modules only create loggers; call configure_logging() once from main.
"""

import logging
import sys


def configure_logging(level: int = logging.INFO) -> None:
    root = logging.getLogger()

    # leave an existing configuration alone
    if root.handlers:
        return

    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    ))
    root.addHandler(handler)
    root.setLevel(level)
