"""Colorbar computation for continuous color fields."""
from __future__ import annotations

import logging
from typing import Any, Iterable

import numpy as np

from ._plottypes import as_plottype
from ._theme import current_theme
from ._types import ColorbarSpec, Entry, PlotType, ValueKind, iter_entries, value_kind

logger = logging.getLogger(__name__)

# Plot types that color by their third positional argument unless a color is
# given explicitly.
ZCOLOR_PLOTTYPES = frozenset({
    PlotType.HEATMAP, PlotType.CONTOUR, PlotType.CONTOURF, PlotType.SURFACE,
})
ZCOLOR_SLOT = 2


def has_zcolor(entry: Entry) -> bool:
    return (as_plottype(entry.plottype) in ZCOLOR_PLOTTYPES
            and not entry.uses("color"))


def compute_extrema(entries: Iterable[Entry],
                    key: str | int) -> tuple[float, float] | None:
    """(min, max) over the values at *key* of all *entries*, or None."""
    extrema = None
    for entry in entries:
        values = np.asarray(entry.get(key), dtype=float)
        lo, hi = float(np.nanmin(values)), float(np.nanmax(values))
        if extrema is not None:
            lo, hi = min(extrema[0], lo), max(extrema[1], hi)
        extrema = (lo, hi)
    return extrema


def compute_label(entries: Iterable[Entry], key: str | int) -> str:
    """Label of *key*, taken from the first entry that has one.

    Entries are expected to agree; a conflicting label is logged and ignored.
    """
    label = ""
    for entry in entries:
        other = entry.labels.get(key)
        if not other:
            continue
        other = str(other)
        if not label:
            label = other
        elif other != label:
            logger.warning("Conflicting colorbar labels %r and %r; using %r",
                           label, other, label)
    return label


def labeled_color_range(grid: Any) -> tuple[str, tuple[float, float]] | None:
    entries = list(iter_entries(grid))
    key: str | int = ZCOLOR_SLOT if any(map(has_zcolor, entries)) else "color"
    continuous = [e for e in entries
                  if value_kind(e.get(key)) is ValueKind.CONTINUOUS]
    colorrange = compute_extrema(continuous, key)
    if colorrange is None:
        return None
    return compute_label(continuous, key), colorrange


def compute_colorbar(grid: Any) -> ColorbarSpec | None:
    """Colorbar label, limits and colormap for *grid*, or None when no entry
    encodes a continuous color field.

    The colormap is the theme default unless entries set ``colormap`` in
    their attributes; the last such entry wins.
    """
    labeled = labeled_color_range(grid)
    if labeled is None:
        logger.debug("No continuous color field; skipping colorbar")
        return None
    label, limits = labeled
    colormap = current_theme().colormap
    for entry in iter_entries(grid):
        colormap = entry.attributes.get("colormap", colormap)
    return ColorbarSpec(label=label, limits=limits, colormap=colormap)
