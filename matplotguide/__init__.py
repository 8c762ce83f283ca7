"""matplotguide — legends and colorbars for grids of plot entries.

Usage:
    # Inspect what would be drawn
    legend = compute_legend(grid)        # LegendSpec or None
    colorbar = compute_colorbar(grid)    # ColorbarSpec or None

    # Draw next to the subplots of a FigureGrid
    draw_legend(fg)
    draw_colorbar(fg)

    # Or into an Axes reserved for the guide
    draw_colorbar(cax, grid, orientation="horizontal")
"""
from __future__ import annotations

__version__ = "0.1.0"
__all__ = [
    "AxisEntries",
    "ColorbarSpec",
    "Entry",
    "FigureGrid",
    "InconsistentScaleGrouping",
    "LegendSpec",
    "PlotType",
    "Scale",
    "UnresolvablePlotType",
    "ValueKind",
    "compute_colorbar",
    "compute_legend",
    "current_theme",
    "draw_colorbar",
    "draw_legend",
    "legend_elements",
    "plottypes_attributes",
    "register_elements",
    "register_resolver",
    "reset_theme",
    "resolve_plottype",
    "set_theme",
    "theme",
]

import logging

from ._api import draw_colorbar, draw_legend
from ._colorbar import compute_colorbar
from ._elements import legend_elements, register_elements
from ._errors import InconsistentScaleGrouping, UnresolvablePlotType
from ._legend import compute_legend
from ._plottypes import plottypes_attributes, register_resolver, resolve_plottype
from ._theme import current_theme, reset_theme, set_theme, theme
from ._types import (
    AxisEntries,
    ColorbarSpec,
    Entry,
    FigureGrid,
    LegendSpec,
    PlotType,
    Scale,
    ValueKind,
)

# Importing never configures logging; callers opt in.
logging.getLogger(__name__).addHandler(logging.NullHandler())
