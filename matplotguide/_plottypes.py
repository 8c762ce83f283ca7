"""Plot type resolution and per-plot-type attribute enumeration."""
from __future__ import annotations

from typing import Any, Callable, Iterable

import numpy as np

from ._errors import UnresolvablePlotType
from ._types import Entry, PlotType, ValueKind, value_kind

Resolver = Callable[..., PlotType]


def _resolve_plot(*positional: Any) -> PlotType:
    """Pick a concrete plot type for a generic ``PLOT`` from its arguments."""
    if not positional:
        raise UnresolvablePlotType("PLOT needs at least one positional argument")
    try:
        last = np.asarray(positional[-1])
    except ValueError as exc:
        raise UnresolvablePlotType(
            "PLOT arguments must have a regular shape") from exc
    if last.ndim == 2 and value_kind(last) is ValueKind.CONTINUOUS:
        return PlotType.HEATMAP
    if len(positional) == 1:
        return PlotType.LINES
    return PlotType.SCATTER


RESOLVER_REGISTRY: dict[PlotType, Resolver] = {
    PlotType.PLOT: _resolve_plot,
}


def register_resolver(plottype: PlotType, resolver: Resolver) -> None:
    """Resolve entries declared as *plottype* with ``resolver(*positional)``."""
    RESOLVER_REGISTRY[plottype] = resolver


def as_plottype(declared: PlotType | str) -> PlotType:
    if isinstance(declared, PlotType):
        return declared
    if isinstance(declared, str):
        try:
            return PlotType[declared.upper()]
        except KeyError:
            raise UnresolvablePlotType(f"Unknown plot type: {declared!r}") from None
    raise UnresolvablePlotType(
        f"Expected a PlotType or its name, got {type(declared).__name__}")


def resolve_plottype(declared: PlotType | str, *positional: Any) -> PlotType:
    """Effective plot type of *declared* when drawn with *positional*."""
    plottype = as_plottype(declared)
    resolver = RESOLVER_REGISTRY.get(plottype)
    if resolver is None:
        return plottype
    return resolver(*positional)


def plottypes_attributes(
        entries: Iterable[Entry]) -> tuple[list[PlotType], list[list[str]]]:
    """Return plot types and the attributes each uses, as two lists of the
    same length.

    Plot types appear in order of first occurrence.  ``attributes[i]`` is the
    union of the ``primary`` and ``named`` keys of every entry resolving to
    ``plottypes[i]``.
    """
    plottypes: list[PlotType] = []
    attributes: list[list[str]] = []
    for entry in entries:
        plottype = resolve_plottype(entry.plottype, *entry.positional)
        if plottype not in plottypes:
            plottypes.append(plottype)
            attributes.append([])
        known = attributes[plottypes.index(plottype)]
        for attr in (*entry.primary, *entry.named):
            if attr not in known:
                known.append(attr)
    return plottypes, attributes
