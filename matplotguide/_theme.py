"""Theme defaults for legend glyphs and colorbars.

Defaults follow the active matplotlib ``rcParams``.  The default colormap can
be overridden from the environment (``MATPLOTGUIDE_COLORMAP``) without
touching matplotlib's own settings.
"""
from __future__ import annotations

import contextlib
import dataclasses
import os
from dataclasses import dataclass
from typing import Any, Iterator

import matplotlib as mpl

COLORMAP_ENV_VAR = "MATPLOTGUIDE_COLORMAP"


@dataclass(frozen=True)
class Theme:
    colormap: Any
    color: Any
    marker: str
    markersize: float
    linestyle: Any
    linewidth: float


def _first_cycle_color() -> Any:
    try:
        return mpl.rcParams["axes.prop_cycle"].by_key()["color"][0]
    except (KeyError, IndexError):
        return "C0"


def default_theme() -> Theme:
    """Build a theme from the current rcParams and environment."""
    rc = mpl.rcParams
    return Theme(
        colormap=os.environ.get(COLORMAP_ENV_VAR) or rc["image.cmap"],
        color=_first_cycle_color(),
        marker=rc["scatter.marker"],
        markersize=rc["lines.markersize"],
        linestyle=rc["lines.linestyle"],
        linewidth=rc["lines.linewidth"],
    )


_overrides: dict[str, Any] = {}


def current_theme() -> Theme:
    """The active theme: rcParams defaults updated with set_theme overrides."""
    return dataclasses.replace(default_theme(), **_overrides)


def set_theme(**overrides: Any) -> None:
    """Override theme fields, e.g. ``set_theme(colormap="magma")``."""
    valid = {f.name for f in dataclasses.fields(Theme)}
    unknown = set(overrides) - valid
    if unknown:
        raise TypeError(f"Unknown theme fields: {sorted(unknown)}")
    _overrides.update(overrides)


def reset_theme() -> None:
    _overrides.clear()


@contextlib.contextmanager
def theme(**overrides: Any) -> Iterator[Theme]:
    """Temporarily override theme fields."""
    saved = dict(_overrides)
    set_theme(**overrides)
    try:
        yield current_theme()
    finally:
        _overrides.clear()
        _overrides.update(saved)
