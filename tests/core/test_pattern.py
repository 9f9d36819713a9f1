"""Tests for context glob matching."""

import pytest

from kubekeeper.core.pattern import WILDCARD, matches

_CONTEXT = "kube-production-1"


class TestLiteralPatterns:
    def test_exact_match(self) -> None:
        assert matches(_CONTEXT, _CONTEXT) is True

    @pytest.mark.parametrize(
        "pattern",
        [
            "kube-production-2",
            "kube-staging-1",
            "mesos-production-1",
            "kube-production-123",
            "kube-prod",
            "extra-kube-production-1",
            "production-1",
        ],
    )
    def test_no_partial_match(self, pattern: str) -> None:
        assert matches(_CONTEXT, pattern) is False

    def test_case_sensitive(self) -> None:
        assert matches("Prod", "prod") is False
        assert matches("prod", "*PROD*") is False

    def test_empty_pattern_matches_only_empty_context(self) -> None:
        assert matches("", "") is True
        assert matches(_CONTEXT, "") is False
        assert matches("a", "") is False


class TestSingleWildcard:
    @pytest.mark.parametrize(
        "pattern",
        [
            "*",
            "*-production-1",
            "kube-*-1",
            "kube-prod*",
            "*kube-production-1",
            "kube-product*ion-1",
            "kube-production-1*",
        ],
    )
    def test_matches(self, pattern: str) -> None:
        assert matches(_CONTEXT, pattern) is True

    @pytest.mark.parametrize("pattern", ["*-staging-1", "kube-*-2", "kube-staging*"])
    def test_does_not_match(self, pattern: str) -> None:
        assert matches(_CONTEXT, pattern) is False

    def test_empty_context(self) -> None:
        assert matches("", WILDCARD) is True

    def test_wildcard_matches_empty_run(self) -> None:
        assert matches("minikube", "mini*kube") is True
        assert matches("kind-", "kind-*") is True


class TestMultipleWildcards:
    @pytest.mark.parametrize(
        "pattern",
        [
            "kube-prod*-*",
            "*prod*",
            "**prod**",
            "***",
            "*" * len(_CONTEXT),
            "*" * (len(_CONTEXT) + 3),
        ],
    )
    def test_matches(self, pattern: str) -> None:
        assert matches(_CONTEXT, pattern) is True

    def test_contains_other_string(self) -> None:
        assert matches(_CONTEXT, "*staging*") is False

    def test_empty_context(self) -> None:
        assert matches("", "***") is True
        assert matches("", "*prod*") is False

    def test_backtracks_past_false_start(self) -> None:
        # The first "ab" is a false start for "*abc"
        assert matches("ababc", "*abc") is True
        assert matches("aaab", "*aab") is True
        assert matches("abcabd", "*abc") is False

    def test_literal_after_last_wildcard_must_end_context(self) -> None:
        assert matches("prod-east-1", "*prod*east") is False
        assert matches("prod-east", "*prod*east") is True


class TestProperties:
    _SAMPLES = ["", "a", "minikube", "kind-dev", _CONTEXT, "fed-eu/west", "***"]

    def test_self_match(self) -> None:
        for s in self._SAMPLES:
            assert matches(s, s) is True, s

    def test_lone_wildcard_matches_everything(self) -> None:
        for s in self._SAMPLES:
            assert matches(s, WILDCARD) is True, s

    def test_repeated_wildcards_collapse(self) -> None:
        pairs = [
            ("**", "*"),
            ("kube-***-1", "kube-*-1"),
            ("**prod**", "*prod*"),
            ("a**b", "a*b"),
        ]
        for s in [*self._SAMPLES, "ab", "axxb", "kube--1"]:
            for repeated, collapsed in pairs:
                assert matches(s, repeated) == matches(s, collapsed), (s, repeated)
