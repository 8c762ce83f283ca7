"""Errors raised while building guides."""
from __future__ import annotations

from typing import Any, Sequence


class InconsistentScaleGrouping(AssertionError):
    """Scales sharing a legend title disagree on their data values."""

    def __init__(self, title: str, keys: Sequence[Any]):
        self.title = title
        self.keys = list(keys)
        super().__init__(
            f"Scales {self.keys} share the legend title {title!r} "
            f"but have different data values")


class UnresolvablePlotType(ValueError):
    """A declared plot type cannot be mapped to a concrete plot type."""
