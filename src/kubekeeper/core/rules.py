"""Include/exclude rule tables for contexts and commands.

``include`` lists what always deserves a confirmation (sensitive contexts,
mutating commands).  ``exclude`` lists what never does (local sandboxes,
read-only commands).  How the four lists combine is decided by
:class:`~kubekeeper.core.engine.DecisionEngine`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from kubekeeper.core.pattern import matches
from kubekeeper.errors import RulesConfigError

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path


class Rules(BaseModel):
    """Context glob patterns and command prefixes of one table."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    context: list[str] = Field(default_factory=list, description="Context glob patterns.")
    command: list[str] = Field(default_factory=list, description="Command prefixes.")


def _default_include() -> Rules:
    return Rules(
        context=["*fed*", "*prod*"],
        command=["apply", "delete", "edit", "label", "scale"],
    )


def _default_exclude() -> Rules:
    return Rules(
        context=["kind-*", "minikube"],
        command=[
            "api-resources",
            "api-versions",
            "cluster-info",
            "completion",
            "config current-context",
            "config get-clusters",
            "config get-contexts",
            "config view",
            "describe",
            "diff",
            "explain",
            "get",
            "help",
            "logs",
            "options",
            "top",
            "version",
        ],
    )


class RuleSet(BaseModel):
    """The ``include`` and ``exclude`` tables, constant for a whole run."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    include: Rules = Field(
        default_factory=_default_include,
        description="Contexts and commands that always require validation.",
    )
    exclude: Rules = Field(
        default_factory=_default_exclude,
        description="Contexts and commands that never require validation.",
    )


def default_rule_set() -> RuleSet:
    """Return the built-in rule set."""
    return RuleSet()


def context_in(context: str, patterns: Iterable[str]) -> bool:
    """Return ``True`` iff *context* matches at least one glob in *patterns*."""
    return any(matches(context, pattern) for pattern in patterns)


def command_in(command: str, prefixes: Iterable[str]) -> bool:
    """Return ``True`` iff *command* starts with at least one of *prefixes*."""
    return any(command.startswith(prefix) for prefix in prefixes)


def load_rule_set(path: Path) -> RuleSet:
    """Read a YAML rules file on top of the built-in defaults.

    A table (``include`` or ``exclude``) present in the file replaces the
    default table as a whole; a missing or empty (null) table keeps its default.

    Raises:
        RulesConfigError: On read errors, YAML errors or schema violations.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise RulesConfigError(f"Cannot read {path}: {exc}") from exc

    try:
        data: Any = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise RulesConfigError(f"YAML parse error: {exc}") from exc

    if data is None:
        return default_rule_set()
    if not isinstance(data, dict):
        raise RulesConfigError("Rules file must be a mapping")

    # A bare "include:" key is the same as no include table at all
    data = {key: value for key, value in data.items() if value is not None}

    try:
        return RuleSet.model_validate(data)
    except ValidationError as exc:
        raise RulesConfigError(str(exc)) from exc
