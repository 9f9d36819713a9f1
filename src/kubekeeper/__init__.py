"""kubekeeper — a context guard in front of kubectl."""

from __future__ import annotations

__version__ = "0.1.0"
