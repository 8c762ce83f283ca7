"""Plot type enums and the data structures that flow through the guides."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Iterator, Mapping

import numpy as np


class PlotType(Enum):
    PLOT = auto()  # generic, resolved from argument shapes
    SCATTER = auto()
    LINES = auto()
    LINESEGMENTS = auto()
    STAIRS = auto()
    HLINES = auto()
    VLINES = auto()
    BARPLOT = auto()
    BAND = auto()
    POLY = auto()
    ERRORBARS = auto()
    HEATMAP = auto()
    IMAGE = auto()
    CONTOUR = auto()
    CONTOURF = auto()
    SURFACE = auto()


class ValueKind(Enum):
    """How a value maps onto a visual channel."""

    CATEGORICAL = auto()
    CONTINUOUS = auto()
    CONSTANT = auto()


def value_kind(value: Any) -> ValueKind:
    """Classify *value* as continuous numeric data, categories, or a constant.

    Non-empty numeric arrays of any dimension are continuous; lists and
    tuples (nested or not) are classified as the array they convert to.
    Booleans never count as numeric here.  A sequence holding tuples is a
    list of color tuples such as ``[(1, 0, 0), (0, 1, 0)]`` and stays
    categorical; rows of a nested numeric list must be lists.
    """
    if isinstance(value, (list, tuple)):
        if any(isinstance(v, tuple) for v in value):
            return ValueKind.CATEGORICAL
        try:
            value = np.asarray(value)
        except ValueError:  # ragged
            return ValueKind.CATEGORICAL
    if isinstance(value, np.ndarray):
        if value.size == 0:
            return ValueKind.CATEGORICAL
        if (np.issubdtype(value.dtype, np.number)
                and not np.issubdtype(value.dtype, np.bool_)):
            return ValueKind.CONTINUOUS
        return ValueKind.CATEGORICAL
    return ValueKind.CONSTANT


@dataclass(frozen=True)
class Scale:
    """Mapping from the unique values of a data field to a visual channel.

    ``datavalues[i]`` is drawn with ``plotvalues[i]``.
    """

    label: str
    datavalues: tuple = ()
    plotvalues: tuple = ()
    kind: ValueKind = ValueKind.CATEGORICAL

    def __post_init__(self):
        # normalize to tuples so scales compare and hash by content
        object.__setattr__(self, "datavalues", tuple(self.datavalues))
        object.__setattr__(self, "plotvalues", tuple(self.plotvalues))
        if len(self.datavalues) != len(self.plotvalues):
            raise ValueError(
                f"Scale {self.label!r} has {len(self.datavalues)} data values "
                f"but {len(self.plotvalues)} plot values")


@dataclass(frozen=True)
class Entry:
    """One drawn layer with its resolved arguments and scales."""

    plottype: PlotType | str
    positional: tuple = ()
    primary: Mapping[str, Any] = field(default_factory=dict)
    named: Mapping[str, Any] = field(default_factory=dict)
    attributes: Mapping[str, Any] = field(default_factory=dict)
    scales: Mapping[str | int, Scale] = field(default_factory=dict)
    labels: Mapping[str | int, str] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "positional", tuple(self.positional))

    def get(self, key: str | int, default: Any = None) -> Any:
        """Positional argument for an int key, keyword value for a str key."""
        if isinstance(key, int):
            if -len(self.positional) <= key < len(self.positional):
                return self.positional[key]
            return default
        return self.named.get(key, default)

    def uses(self, channel: str) -> bool:
        return (channel in self.primary or channel in self.named
                or channel in self.attributes)


@dataclass
class AxisEntries:
    """A grid cell: the axes, its entries and the scales active there."""

    axis: Any = None  # matplotlib.axes.Axes
    entries: list[Entry] = field(default_factory=list)
    scales: Mapping[str | int, Scale] = field(default_factory=dict)


@dataclass
class FigureGrid:
    figure: Any  # matplotlib.figure.Figure
    grid: Any


def as_cells(grid: Any) -> np.ndarray:
    """Return *grid* (or a FigureGrid's grid) as a 2-D object array."""
    if isinstance(grid, FigureGrid):
        grid = grid.grid
    if isinstance(grid, np.ndarray):
        cells = grid
    else:
        try:
            rows = [list(row) for row in grid]
        except TypeError as exc:
            raise ValueError("Expected a 2-D grid of AxisEntries") from exc
        ncols = len(rows[0]) if rows else 0
        if any(len(row) != ncols for row in rows):
            raise ValueError("Grid rows must all have the same length")
        cells = np.empty((len(rows), ncols), dtype=object)
        for i, row in enumerate(rows):
            for j, cell in enumerate(row):
                cells[i, j] = cell
    if cells.ndim != 2:
        raise ValueError(f"Expected a 2-D grid of AxisEntries, got {cells.ndim}-D")
    return cells


def iter_entries(grid: Any) -> Iterator[Entry]:
    """Yield every entry, cells in row-major order."""
    for cell in as_cells(grid).flat:
        yield from cell.entries


@dataclass
class LegendSpec:
    """Legend sections: ``elements[s][i]`` is the glyph group for
    ``labels[s][i]`` under ``titles[s]``."""

    elements: list[list[list[Any]]] = field(default_factory=list)
    labels: list[list[str]] = field(default_factory=list)
    titles: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class ColorbarSpec:
    label: str
    limits: tuple[float, float]
    colormap: Any  # str or matplotlib.colors.Colormap
