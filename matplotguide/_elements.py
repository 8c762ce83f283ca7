"""Legend glyph synthesis — maps PlotType to an element factory."""
from __future__ import annotations

from typing import Any, Callable

from matplotlib.artist import Artist
from matplotlib.lines import Line2D
from matplotlib.patches import Patch

from ._theme import current_theme
from ._types import PlotType

ElementFactory = Callable[..., list[Artist]]


def marker_elements(color=None, marker=None, shape=None, markersize=None,
                    strokecolor=None, alpha=None, **_ignored: Any) -> list[Artist]:
    th = current_theme()
    color = th.color if color is None else color
    if marker is None:
        marker = shape if shape is not None else th.marker
    return [Line2D(
        [], [], linestyle="None",
        marker=marker,
        markersize=th.markersize if markersize is None else markersize,
        color=color,
        markerfacecolor=color,
        markeredgecolor=color if strokecolor is None else strokecolor,
        alpha=alpha)]


def line_elements(color=None, linestyle=None, linewidth=None, alpha=None,
                  **_ignored: Any) -> list[Artist]:
    th = current_theme()
    return [Line2D(
        [], [],
        color=th.color if color is None else color,
        linestyle=th.linestyle if linestyle is None else linestyle,
        linewidth=th.linewidth if linewidth is None else linewidth,
        alpha=alpha)]


def poly_elements(color=None, strokecolor=None, alpha=None,
                  **_ignored: Any) -> list[Artist]:
    """Patch swatch; also the fallback for composite plot types."""
    th = current_theme()
    return [Patch(
        facecolor=th.color if color is None else color,
        edgecolor="none" if strokecolor is None else strokecolor,
        alpha=alpha)]


ELEMENT_REGISTRY: dict[PlotType, ElementFactory] = {
    PlotType.SCATTER: marker_elements,
    PlotType.LINES: line_elements,
    PlotType.LINESEGMENTS: line_elements,
    PlotType.STAIRS: line_elements,
    PlotType.HLINES: line_elements,
    PlotType.VLINES: line_elements,
    PlotType.CONTOUR: line_elements,
    PlotType.ERRORBARS: line_elements,
}


def register_elements(plottype: PlotType, factory: ElementFactory) -> None:
    ELEMENT_REGISTRY[plottype] = factory


def legend_elements(plottype: PlotType, **options: Any) -> list[Artist]:
    """Legend glyphs for *plottype* drawn with channel values *options*."""
    factory = ELEMENT_REGISTRY.get(plottype, poly_elements)
    return factory(**options)
