"""Confirmer protocol and the interactive terminal implementation."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol, runtime_checkable

import click
from rich.markup import escape

from kubekeeper._output import err_console

if TYPE_CHECKING:
    from rich.console import Console

logger = logging.getLogger(__name__)


@runtime_checkable
class Confirmer(Protocol):
    """Asks the operator whether the current context is the intended one."""

    def confirm(self, context: str, namespace: str) -> bool:
        """Return ``True`` only on an explicit confirmation."""
        ...


class TerminalConfirmer:
    """Single-keystroke confirmation on the controlling terminal.

    Satisfies the :class:`Confirmer` protocol.  The question goes to stderr
    so that piping kubectl's stdout stays clean.  Only ``y`` confirms;
    anything else, including a failed read, declines.
    """

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or err_console

    def confirm(self, context: str, namespace: str) -> bool:
        self._print_question(context, namespace)
        try:
            answer = self._read_key()
        except (EOFError, KeyboardInterrupt, OSError) as exc:
            logger.debug("Could not read confirmation: %r", exc)
            self._console.print()
            return False

        # The key is read without echo, show it and end the prompt line
        self._console.print(escape(answer) if answer.isprintable() else "")
        return answer == "y"

    def _print_question(self, context: str, namespace: str) -> None:
        target = escape(f"{context}:{namespace}")
        self._console.print(
            f"Really run command in [bold bright_yellow]{target}[/]? "
            'Press "y" to continue. Anything else will exit. ',
            end="",
        )

    @staticmethod
    def _read_key() -> str:
        """Blocking single-key read from the terminal."""
        return click.getchar()
