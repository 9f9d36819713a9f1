"""Decision core — pattern matching, rule tables, freshness cache, engine."""

from kubekeeper.core.cache import FreshnessCache
from kubekeeper.core.engine import Decision, DecisionEngine, NativeCommandProbe
from kubekeeper.core.pattern import WILDCARD, matches
from kubekeeper.core.rules import (
    Rules,
    RuleSet,
    command_in,
    context_in,
    default_rule_set,
    load_rule_set,
)

__all__ = [
    "WILDCARD",
    "Decision",
    "DecisionEngine",
    "FreshnessCache",
    "NativeCommandProbe",
    "RuleSet",
    "Rules",
    "command_in",
    "context_in",
    "default_rule_set",
    "load_rule_set",
    "matches",
]
