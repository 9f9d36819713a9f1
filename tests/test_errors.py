"""Tests for the error hierarchy."""

from kubekeeper.errors import (
    KubectlError,
    KubekeeperError,
    RulesConfigError,
    ValidationAbortedError,
)


class TestErrorHierarchy:
    def test_kubectl_error_is_kubekeeper_error(self) -> None:
        assert issubclass(KubectlError, KubekeeperError)

    def test_rules_config_error_is_kubekeeper_error(self) -> None:
        assert issubclass(RulesConfigError, KubekeeperError)

    def test_validation_aborted_is_kubekeeper_error(self) -> None:
        assert issubclass(ValidationAbortedError, KubekeeperError)


class TestKubectlError:
    def test_message_with_detail(self) -> None:
        err = KubectlError("not found")
        assert "not found" in str(err)
        assert err.detail == "not found"

    def test_message_without_detail(self) -> None:
        assert str(KubectlError()) == "kubectl error"


class TestValidationAbortedError:
    def test_attributes(self) -> None:
        err = ValidationAbortedError("prod-east", "web")
        assert err.context == "prod-east"
        assert err.namespace == "web"
        assert "prod-east:web" in str(err)
