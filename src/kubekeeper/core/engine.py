"""DecisionEngine — what to do before handing a command over to kubectl.

Pure logic apart from two read-only collaborators: the freshness cache and
the probe telling native kubectl subcommands from plugins.  The engine
returns three independent answers (validate? record? amend?) and the reason
for them; acting on the answers is the caller's job.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from kubekeeper.core.rules import command_in, context_in

if TYPE_CHECKING:
    from collections.abc import Sequence

    from kubekeeper.core.cache import FreshnessCache
    from kubekeeper.core.rules import RuleSet

logger = logging.getLogger(__name__)

# Cobra's hidden dynamic completion commands, see spf13/cobra completions.go
COMPLETION_MARKER = "__complete"
CONTEXT_FLAG = "--context"


@dataclass(frozen=True)
class Decision:
    """Actions to take for one invocation, with the reason for them."""

    validate: bool
    record: bool
    amend: bool
    reason: str


@runtime_checkable
class NativeCommandProbe(Protocol):
    """Tells whether a subcommand is built into kubectl."""

    def is_native(self, token: str) -> bool:
        """Return ``True`` if *token* names a native kubectl subcommand."""
        ...


class DecisionEngine:
    """Combine the rule set and the freshness cache into a :class:`Decision`."""

    def __init__(
        self,
        rule_set: RuleSet,
        cache: FreshnessCache,
        probe: NativeCommandProbe,
    ) -> None:
        self._rules = rule_set
        self._cache = cache
        self._probe = probe

    def decide(self, context: str, command: str, own_args: Sequence[str]) -> Decision:
        """Decide whether to validate, record and amend.

        *command* is the invocation's arguments joined by single spaces and
        *own_args* the arguments themselves.

        Resolution order, first match wins:
        1. empty command, completion probe or explicit ``--context``: do nothing.
        2. included context: validate unless the command is excluded.
        3. included command: validate unless the context is excluded.
        4. excluded context or command: skip.
        5. context recently validated: skip, but refresh the record.
        6. otherwise validate.
        """
        if not command:
            return _skip("command is empty")

        if command.startswith(COMPLETION_MARKER):
            return _skip("command is cobra dynamic completion")

        if any(arg.startswith(CONTEXT_FLAG) for arg in own_args):
            return _skip("context option is already provided")

        amend = self._is_amendable(command)
        validate, record, reason = self._evaluate(context, command)

        decision = Decision(validate=validate, record=record, amend=amend, reason=reason)
        logger.debug(
            "Decided validate=%s record=%s amend=%s reason=%r",
            decision.validate,
            decision.record,
            decision.amend,
            decision.reason,
        )
        return decision

    def _is_amendable(self, command: str) -> bool:
        """Whether ``--context`` may be injected in front of *command*.

        Global options can only precede native subcommands, so a leading
        option means a native command.  Plugins reject injected options.
        """
        if command.startswith("-"):
            return True
        first_token = command.split(" ", 1)[0]
        return self._probe.is_native(first_token)

    def _evaluate(self, context: str, command: str) -> tuple[bool, bool, str]:
        include = self._rules.include
        exclude = self._rules.exclude

        if context_in(context, include.context):
            if command_in(command, exclude.command):
                return False, False, "context is included and command is excluded"
            return True, True, "context is included and command is not excluded"

        if command_in(command, include.command):
            if context_in(context, exclude.context):
                return False, False, "command is included and context is excluded"
            return True, True, "command is included and context is not excluded"

        if context_in(context, exclude.context):
            return False, False, "context is excluded and command is not included"

        if command_in(command, exclude.command):
            return False, False, "command is excluded and context is not included"

        if self._cache.is_fresh(context):
            return False, True, "context has already been validated earlier"

        return True, True, "fallback to default behavior"


def _skip(reason: str) -> Decision:
    logger.debug("Skipping all actions: %s", reason)
    return Decision(validate=False, record=False, amend=False, reason=reason)
