"""Draw computed legends and colorbars into matplotlib figures."""
from __future__ import annotations

from typing import Any

from matplotlib.cm import ScalarMappable
from matplotlib.colorbar import Colorbar
from matplotlib.colors import Normalize
from matplotlib.legend import Legend
from matplotlib.lines import Line2D

from ._colorbar import compute_colorbar
from ._legend import compute_legend
from ._types import FigureGrid, LegendSpec, as_cells


def _split_target(target: Any, grid: Any) -> tuple[Any, Any]:
    if grid is not None:
        return target, grid
    if isinstance(target, FigureGrid):
        return target, target.grid
    raise TypeError(
        f"Expected a FigureGrid, or an Axes and a grid, got {type(target)}")


def _handle(group: list) -> Any:
    if not group:
        return Line2D([], [], linestyle="None")
    if len(group) == 1:
        return group[0]
    return tuple(group)  # overlaid by HandlerTuple


def legend_handles(legend: LegendSpec) -> tuple[list, list[str], list[int]]:
    """Flatten legend sections into matplotlib handles and labels.

    With several sections, each one is preceded by an empty-handle header
    row; the header positions are returned as the third item.
    """
    handles: list = []
    labels: list[str] = []
    headers: list[int] = []
    several = len(legend.titles) > 1
    for groups, texts, title in zip(legend.elements, legend.labels,
                                    legend.titles):
        if several:
            headers.append(len(labels))
            handles.append(Line2D([], [], linestyle="None"))
            labels.append(title)
        handles.extend(_handle(group) for group in groups)
        labels.extend(texts)
    return handles, labels, headers


def draw_legend(target: Any, grid: Any = None, **kwargs: Any) -> Legend | None:
    """Compute the legend of *grid* and draw it at *target*.

    *target* is either a FigureGrid (the legend goes to the right of its
    subplots) or an Axes reserved for the legend.  *kwargs* are passed to
    ``matplotlib.legend.Legend``.
    """
    target, grid = _split_target(target, grid)
    legend = compute_legend(grid)
    if legend is None:
        return None
    handles, labels, headers = legend_handles(legend)
    if len(legend.titles) == 1:
        kwargs.setdefault("title", legend.titles[0])

    if isinstance(target, FigureGrid):
        kwargs.setdefault("loc", "outside right upper")
        leg = target.figure.legend(handles, labels, **kwargs)
    else:
        kwargs.setdefault("loc", "center left")
        target.set_axis_off()
        leg = target.legend(handles, labels, **kwargs)

    texts = leg.get_texts()
    for i in headers:
        texts[i].set_fontweight("bold")
    return leg


def draw_colorbar(target: Any, grid: Any = None,
                  **kwargs: Any) -> Colorbar | None:
    """Compute the colorbar of *grid* and draw it at *target*.

    *target* is either a FigureGrid (space is taken from all its subplots) or
    an Axes used as the colorbar axes.  *kwargs* are passed to
    ``Figure.colorbar``.
    """
    target, grid = _split_target(target, grid)
    spec = compute_colorbar(grid)
    if spec is None:
        return None
    mappable = ScalarMappable(norm=Normalize(*spec.limits), cmap=spec.colormap)
    kwargs.setdefault("label", spec.label)

    if isinstance(target, FigureGrid):
        fig = target.figure
        axes = [cell.axis for cell in as_cells(grid).flat
                if cell.axis is not None]
        return fig.colorbar(mappable, ax=axes or fig.get_axes(), **kwargs)
    return target.figure.colorbar(mappable, cax=target, **kwargs)
