"""KubectlClient — the few kubectl calls the wrapper needs.

Everything runs synchronously and without timeout: if kubectl hangs, so
does the wrapper.  A kubectl that cannot be started, or whose output cannot
be decoded, raises :class:`~kubekeeper.errors.KubectlError`.
"""

from __future__ import annotations

import logging
import os
import subprocess
from typing import TYPE_CHECKING, NoReturn

from kubekeeper.errors import KubectlError

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)

DEFAULT_NAMESPACE = "default"


class KubectlClient:
    """Thin wrapper around the kubectl executable.

    Satisfies the :class:`~kubekeeper.core.engine.NativeCommandProbe`
    protocol.
    """

    def __init__(self, binary: str = "kubectl") -> None:
        self._binary = binary
        self._native_commands: str | None = None

    def run(self, *args: str) -> str:
        """Run kubectl with *args* and return its decoded stdout."""
        logger.debug("Running %s %s", self._binary, " ".join(args))
        try:
            proc = subprocess.run(
                [self._binary, *args],
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                check=False,
            )
        except OSError as exc:
            raise KubectlError(f"cannot execute {self._binary}: {exc}") from exc

        try:
            return proc.stdout.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise KubectlError(f"undecodable output from {self._binary} {' '.join(args)}") from exc

    def current_context(self) -> str:
        """Name of the current context, empty if none is set."""
        return self.run("config", "current-context").strip()

    def current_namespace(self) -> str:
        """Namespace of the current context, ``default`` if unset."""
        namespace = self.run("config", "view", "--minify", "--output=jsonpath={..namespace}")
        return namespace or DEFAULT_NAMESPACE

    def is_native(self, token: str) -> bool:
        """Whether *token* looks like a native kubectl subcommand.

        Searches *token* in the output of kubectl's own completion for an
        empty subcommand.  Plain substring search: the output also carries a
        trailing ``:4`` completion directive, and a token contained in a
        longer subcommand name matches too.
        """
        if self._native_commands is None:
            self._native_commands = self.run("__completeNoDesc", "")
        return token in self._native_commands

    def exec(self, args: Sequence[str], *, context: str | None = None) -> NoReturn:
        """Replace the current process with kubectl.

        When *context* is given, ``--context=<context>`` is put in front of
        *args*.  An empty context makes kubectl use its current one.
        """
        argv = [self._binary]
        if context is not None:
            argv.append(f"--context={context}")
        argv.extend(args)

        logger.debug("Executing %s", argv)
        try:
            os.execvp(self._binary, argv)
        except OSError as exc:
            raise KubectlError(f"cannot execute {self._binary}: {exc}") from exc
