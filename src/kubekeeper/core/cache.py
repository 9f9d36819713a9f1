"""FreshnessCache — remembers the last confirmed context for a while.

The record is a single file: its content is the context name and its
modification time is when that context was confirmed.  Every failure reads
as "not fresh", so a broken cache costs an extra prompt and never skips one.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

    from kubekeeper.config import KeeperSettings

logger = logging.getLogger(__name__)


class FreshnessCache:
    """File-backed record of the last validated context."""

    def __init__(
        self,
        settings: KeeperSettings,
        *,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._path = settings.cache_path
        self._window = settings.check_interval
        self._clock = clock

    @property
    def path(self) -> Path:
        return self._path

    def is_fresh(self, context: str) -> bool:
        """Return ``True`` iff *context* was recorded within the window."""
        try:
            modified = self._path.stat().st_mtime
            stored = self._path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.debug("Cache %s unavailable: %s", self._path, exc)
            return False

        if stored != context:
            logger.debug("Cache holds %r, not %r", stored, context)
            return False

        elapsed = self._clock() - modified
        if elapsed < 0:
            logger.debug("Cache %s is dated in the future", self._path)
            return False

        return elapsed <= self._window

    def record(self, context: str) -> None:
        """Overwrite the record with *context*, stamped now.

        Raises:
            OSError: If the file cannot be written.
        """
        self._path.write_text(context, encoding="utf-8")
