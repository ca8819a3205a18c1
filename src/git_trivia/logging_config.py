"""
Logging for git-trivia.

Only the ``git_trivia`` logger tree is configured. Records go to stderr
through a rich handler, so they never mix with reports on stdout, and
libraries that log through the root logger are left alone.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

_ROOT_LOGGER = "git_trivia"

_LEVELS = {
    "quiet": logging.ERROR,
    "normal": logging.WARNING,
    "verbose": logging.DEBUG,
}


def setup_logging(verbosity: str = "normal") -> logging.Logger:
    """
    Attach a rich stderr handler to the ``git_trivia`` logger.

    Calling it again replaces the handler, so every CLI invocation starts
    from the same state.

    Args:
        verbosity: "quiet" (errors only), "normal" (warnings) or
            "verbose" (debug records with their source location)

    Returns:
        The configured ``git_trivia`` logger
    """
    level = _LEVELS.get(verbosity, logging.WARNING)
    verbose = level == logging.DEBUG

    handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        markup=False,
        show_time=verbose,
        show_level=True,
        show_path=verbose,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s" if verbose else "%(message)s"))

    logger = logging.getLogger(_ROOT_LOGGER)
    for old in list(logger.handlers):
        logger.removeHandler(old)
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Logger for ``name`` inside the ``git_trivia`` tree (``__name__`` works as is)."""
    if name is None:
        return logging.getLogger(_ROOT_LOGGER)
    if not name.startswith(_ROOT_LOGGER):
        name = f"{_ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
