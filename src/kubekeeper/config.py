"""Process-wide settings, collected once from the environment at startup.

Every setting can be overridden with a ``KUBEKEEPER_*`` environment
variable, e.g. ``KUBEKEEPER_CHECK_INTERVAL=60``.  The rules file is read
from ``KUBEKEEPER_CONFIG``.
"""

from __future__ import annotations

import logging
import tempfile
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

ENV_PREFIX = "KUBEKEEPER_"
ENV_CHECK_INTERVAL = f"{ENV_PREFIX}CHECK_INTERVAL"
ENV_CONFIG = f"{ENV_PREFIX}CONFIG"

DEFAULT_CHECK_INTERVAL = 900
DEFAULT_PIDFILE = "kubekeeper.pid"
DEFAULT_KUBECTL = "kubectl"


class KeeperSettings(BaseSettings):
    """Configuration shared by the decision engine and its collaborators."""

    model_config = SettingsConfigDict(env_prefix=ENV_PREFIX, populate_by_name=True)

    check_interval: int = Field(
        default=DEFAULT_CHECK_INTERVAL,
        ge=0,
        description="Seconds during which a confirmed context is not asked again.",
    )
    pidfile: str = Field(
        default=DEFAULT_PIDFILE,
        description="Cache file name, relative to the temp directory.",
    )
    debug: bool = Field(default=False, description="Emit debug logs on stderr.")
    rules_path: Path | None = Field(
        default=None,
        validation_alias=ENV_CONFIG,
        description="Optional YAML file overriding the default rule set.",
    )
    kubectl: str = Field(default=DEFAULT_KUBECTL, description="kubectl executable to wrap.")

    @property
    def cache_path(self) -> Path:
        """Location of the freshness cache file."""
        return Path(tempfile.gettempdir()) / self.pidfile

    @field_validator("check_interval", mode="before")
    @classmethod
    def _fallback_interval(cls, value: Any) -> Any:
        """An unparsable or negative interval falls back to the default."""
        try:
            interval = int(value)
        except (TypeError, ValueError):
            interval = -1
        if interval < 0:
            logger.warning(
                "Ignoring invalid %s=%r, using %d",
                ENV_CHECK_INTERVAL,
                value,
                DEFAULT_CHECK_INTERVAL,
            )
            return DEFAULT_CHECK_INTERVAL
        return interval

    @field_validator("debug", mode="before")
    @classmethod
    def _set_means_enabled(cls, value: Any) -> Any:
        # KUBEKEEPER_DEBUG turns debugging on whatever its value, even empty
        if isinstance(value, str):
            return True
        return value

    @field_validator("rules_path", mode="before")
    @classmethod
    def _empty_path_is_none(cls, value: Any) -> Any:
        return value or None

    @field_validator("kubectl", mode="before")
    @classmethod
    def _empty_kubectl_is_default(cls, value: Any) -> Any:
        return value or DEFAULT_KUBECTL
