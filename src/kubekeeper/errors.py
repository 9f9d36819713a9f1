"""Shared error types for kubekeeper."""


class KubekeeperError(Exception):
    """Base error for all kubekeeper failures."""


class KubectlError(KubekeeperError):
    """kubectl could not be launched or produced output we cannot read."""

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__("kubectl error" + (f": {detail}" if detail else ""))


class RulesConfigError(KubekeeperError):
    """Raised when a rules file fails parsing or validation."""


class ValidationAbortedError(KubekeeperError):
    """The operator did not confirm the current context."""

    def __init__(self, context: str, namespace: str) -> None:
        self.context = context
        self.namespace = namespace
        super().__init__(f"Context not confirmed: {context}:{namespace}")
