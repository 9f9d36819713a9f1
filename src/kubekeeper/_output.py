"""Shared terminal output: the stderr console and debug logging setup."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

# kubectl owns stdout, everything kubekeeper prints goes to stderr
err_console = Console(stderr=True, highlight=False)

_PACKAGE_LOGGER = "kubekeeper"


def configure_logging(*, debug: bool) -> None:
    """Route kubekeeper's logs to stderr, at DEBUG level when *debug* is set."""
    package_logger = logging.getLogger(_PACKAGE_LOGGER)
    package_logger.setLevel(logging.DEBUG if debug else logging.WARNING)
    if not any(isinstance(h, RichHandler) for h in package_logger.handlers):
        package_logger.addHandler(
            RichHandler(console=err_console, show_time=False, show_path=False)
        )
