"""
Shared helpers.
"""
import logging
import sys

from comparison_center.core import config

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d - %(message)s"


def get_logger(name: str) -> logging.Logger:
    """
    Return a logger writing to stdout at the configured LOG_LEVEL.

    The handler is attached once to the package root logger, so every module
    calling get_logger(__name__) shares it.
    """
    root = logging.getLogger("comparison_center")
    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        root.addHandler(handler)
        root.setLevel(config.LOG_LEVEL)
        root.propagate = False
    if name == "__main__" or not name.startswith("comparison_center"):
        name = f"comparison_center.{name}"
    return logging.getLogger(name)
