"""kubekeeper CLI entrypoint.

``kubekeeper`` takes exactly the arguments ``kubectl`` would, decides
whether the current context needs confirming, then replaces itself with
``kubectl``.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import click
from rich.markup import escape

from kubekeeper._output import configure_logging, err_console
from kubekeeper.config import KeeperSettings
from kubekeeper.core.cache import FreshnessCache
from kubekeeper.core.engine import DecisionEngine
from kubekeeper.core.rules import default_rule_set, load_rule_set
from kubekeeper.errors import KubekeeperError, ValidationAbortedError
from kubekeeper.kubectl import KubectlClient
from kubekeeper.prompt import TerminalConfirmer

if TYPE_CHECKING:
    from collections.abc import Sequence

    from kubekeeper.prompt import Confirmer

logger = logging.getLogger(__name__)


class PassthroughCommand(click.Command):
    """A command whose arguments all belong to kubectl.

    Option parsing is skipped entirely, so ``--``, ``--help`` and unknown
    options reach kubectl exactly as typed.
    """

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        ctx.params["kubectl_args"] = tuple(args)
        return []


def guard(
    settings: KeeperSettings,
    args: Sequence[str],
    *,
    kubectl: KubectlClient | None = None,
    confirmer: Confirmer | None = None,
) -> None:
    """Decide, confirm, record, then exec kubectl with *args*.

    Raises:
        ValidationAbortedError: If the operator did not confirm the context.
        KubekeeperError: If kubectl or the rules file cannot be used.
    """
    kubectl = kubectl or KubectlClient(settings.kubectl)
    confirmer = confirmer or TerminalConfirmer()

    rule_set = load_rule_set(settings.rules_path) if settings.rules_path else default_rule_set()
    cache = FreshnessCache(settings)
    engine = DecisionEngine(rule_set, cache, kubectl)

    context = kubectl.current_context()
    namespace = kubectl.current_namespace()
    logger.debug("Found context=%r namespace=%r", context, namespace)

    command = " ".join(args)
    logger.debug("Received command=%r", command)

    decision = engine.decide(context, command, args)

    if decision.validate and not confirmer.confirm(context, namespace):
        raise ValidationAbortedError(context, namespace)

    if decision.record:
        try:
            cache.record(context)
        except OSError as exc:
            logger.debug("Could not record context in %s: %s", cache.path, exc)

    kubectl.exec(args, context=context if decision.amend else None)


@click.command(cls=PassthroughCommand, add_help_option=False)
def main(kubectl_args: tuple[str, ...]) -> None:
    """Confirm the cluster context, then run kubectl with the given arguments."""
    # Settings validation may already warn, before the debug level is known
    configure_logging(debug=False)
    settings = KeeperSettings()
    configure_logging(debug=settings.debug)

    try:
        guard(settings, kubectl_args)
    except ValidationAbortedError:
        err_console.print("Failed to validate context. Abort.")
        sys.exit(1)
    except KubekeeperError as exc:
        err_console.print(f"[red]kubekeeper error:[/red] {escape(str(exc))}")
        sys.exit(1)


if __name__ == "__main__":
    main()
