"""Tests for legend computation: scale filtering → titles → glyph groups.

Run:  python -m pytest tests/test_legend.py -v
"""
from __future__ import annotations

import sys
from pathlib import Path

import matplotlib
matplotlib.use("Agg")  # headless backend

import numpy as np
import pytest
from matplotlib.colors import to_rgba
from matplotlib.lines import Line2D
from matplotlib.patches import Patch

# Add the parent dir so `matplotguide` is importable
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from matplotguide import (
    AxisEntries,
    Entry,
    FigureGrid,
    InconsistentScaleGrouping,
    PlotType,
    Scale,
    UnresolvablePlotType,
    ValueKind,
    compute_legend,
)
from matplotguide._legend import legend_scales


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

SPECIES = ("setosa", "versicolor", "virginica")
COLORS = ("#1f77b4", "#ff7f0e", "#2ca02c")
MARKERS = ("o", "s", "^")
LINESTYLES = ("-", "--", ":")

X = np.arange(3.0)


def _grid(scales, *entries):
    """Single-cell grid holding *entries* with *scales*."""
    return [[AxisEntries(entries=list(entries), scales=scales)]]


def _scatter(**primary):
    return Entry(PlotType.SCATTER, (X, X), primary=primary)


def _lines(**primary):
    return Entry(PlotType.LINES, (X, X), primary=primary)


# ---------------------------------------------------------------------------
# Absent legends
# ---------------------------------------------------------------------------

class TestNoLegend:

    def test_empty_scales(self):
        assert compute_legend(_grid({}, _scatter())) is None

    def test_only_structural_scales(self):
        scales = {key: Scale(key, ("a", "b"), (1, 2))
                  for key in ("row", "col", "layout", "stack", "dodge", "group")}
        assert compute_legend(_grid(scales, _scatter(group="a"))) is None

    def test_positional_scales_ignored(self):
        scales = {0: Scale("x", (1, 2), (0.0, 1.0)),
                  1: Scale("y", (1, 2), (0.0, 1.0))}
        assert compute_legend(_grid(scales, _scatter())) is None

    def test_continuous_scales_ignored(self):
        scales = {"color": Scale("depth", kind=ValueKind.CONTINUOUS)}
        assert compute_legend(_grid(scales, _scatter(color="k"))) is None

    def test_empty_grid(self):
        assert compute_legend([]) is None

    def test_heatmap_without_scales(self):
        z = np.arange(6.0).reshape(2, 3)
        entry = Entry(PlotType.HEATMAP, (X[:2], X, z))
        assert compute_legend(_grid({}, entry)) is None


# ---------------------------------------------------------------------------
# Titles
# ---------------------------------------------------------------------------

class TestTitles:

    def test_shared_label_gives_one_title(self):
        scales = {
            "color": Scale("Species", SPECIES, COLORS),
            "marker": Scale("Species", SPECIES, MARKERS),
        }
        legend = compute_legend(
            _grid(scales, _scatter(color=COLORS, marker=MARKERS)))
        assert legend.titles == ["Species"]
        assert legend.labels == [list(SPECIES)]

    def test_first_occurrence_order(self):
        scales = {
            "color": Scale("Species", SPECIES, COLORS),
            "linestyle": Scale("Site", ("A", "B"), ("-", "--")),
            "marker": Scale("Species", SPECIES, MARKERS),
        }
        legend = compute_legend(
            _grid(scales, _scatter(color=1, marker=1), _lines(linestyle=1)))
        assert legend.titles == ["Species", "Site"]
        assert legend.labels == [list(SPECIES), ["A", "B"]]

    def test_empty_label_becomes_space(self):
        scales = {"color": Scale("", ("a", "b"), COLORS[:2])}
        legend = compute_legend(_grid(scales, _scatter(color=1)))
        assert legend.titles == [" "]

    def test_labels_are_strings(self):
        scales = {"color": Scale("Year", (2019, 2020), COLORS[:2])}
        legend = compute_legend(_grid(scales, _scatter(color=1)))
        assert legend.labels == [["2019", "2020"]]


# ---------------------------------------------------------------------------
# Glyph groups
# ---------------------------------------------------------------------------

class TestElements:

    def test_attributes_merge_into_one_glyph(self):
        scales = {
            "color": Scale("Species", SPECIES, COLORS),
            "marker": Scale("Species", SPECIES, MARKERS),
        }
        legend = compute_legend(
            _grid(scales, _scatter(color=1, marker=1)))
        groups = legend.elements[0]
        assert len(groups) == 3
        for idx, group in enumerate(groups):
            assert len(group) == 1
            (glyph,) = group
            assert isinstance(glyph, Line2D)
            assert glyph.get_marker() == MARKERS[idx]
            assert glyph.get_color() == COLORS[idx]

    def test_union_across_plot_types(self):
        scales = {
            "color": Scale("Species", SPECIES, COLORS),
            "marker": Scale("Shape", ("p", "q"), ("o", "s")),
            "linestyle": Scale("Style", ("u", "v"), ("-", "--")),
        }
        grid = _grid(scales,
                     _scatter(color=1, marker=1),
                     _lines(color=1, linestyle=1))
        legend = compute_legend(grid)
        species = legend.elements[legend.titles.index("Species")]
        for idx, group in enumerate(species):
            assert len(group) == 2
            marker, line = group
            assert marker.get_linestyle() == "None"
            assert marker.get_color() == COLORS[idx]
            assert line.get_linestyle() == "-"
            assert line.get_color() == COLORS[idx]

    def test_plot_type_without_shared_attribute_skipped(self):
        scales = {"linestyle": Scale("Style", ("u", "v"), ("-", "--"))}
        grid = _grid(scales, _scatter(color="k"), _lines(linestyle=1))
        legend = compute_legend(grid)
        for group in legend.elements[0]:
            assert len(group) == 1
            assert group[0].get_marker() in ("None", "", None)

    def test_named_attributes_count(self):
        scales = {"color": Scale("Group", ("a", "b"), COLORS[:2])}
        entry = Entry(PlotType.BARPLOT, (X, X), named={"color": ["a", "b", "a"]})
        legend = compute_legend(_grid(scales, entry))
        patch = legend.elements[0][1][0]
        assert isinstance(patch, Patch)
        assert patch.get_facecolor() == to_rgba(COLORS[1])

    def test_entries_from_every_cell(self):
        scales = {"color": Scale("Species", SPECIES, COLORS)}
        left = AxisEntries(entries=[_scatter(color=1)], scales=scales)
        right = AxisEntries(entries=[_lines(color=1)], scales=scales)
        legend = compute_legend([[left, right]])
        assert all(len(group) == 2 for group in legend.elements[0])

    def test_figure_grid_accepted(self):
        scales = {"color": Scale("Species", SPECIES, COLORS)}
        fg = FigureGrid(figure=None, grid=_grid(scales, _scatter(color=1)))
        assert compute_legend(fg).titles == ["Species"]


# ---------------------------------------------------------------------------
# Preconditions and determinism
# ---------------------------------------------------------------------------

class TestConsistency:

    def test_mismatched_datavalues_raise(self):
        scales = {
            "color": Scale("Species", SPECIES, COLORS),
            "marker": Scale("Species", SPECIES[:2], MARKERS[:2]),
        }
        with pytest.raises(InconsistentScaleGrouping) as info:
            compute_legend(_grid(scales, _scatter(color=1, marker=1)))
        assert info.value.title == "Species"
        assert info.value.keys == ["color", "marker"]
        assert isinstance(info.value, AssertionError)

    def test_unresolvable_plot_type_propagates(self):
        scales = {"color": Scale("Species", SPECIES, COLORS)}
        entry = Entry("violinplot3d", (X,), primary={"color": 1})
        with pytest.raises(UnresolvablePlotType):
            compute_legend(_grid(scales, entry))

    def test_repeatable(self):
        scales = {
            "color": Scale("Species", SPECIES, COLORS),
            "linestyle": Scale("", ("u", "v"), ("-", "--")),
        }
        grid = _grid(scales, _scatter(color=1), _lines(color=1, linestyle=1))
        first, second = compute_legend(grid), compute_legend(grid)
        assert first.titles == second.titles
        assert first.labels == second.labels
        colors = [[[e.get_color() for e in g] for g in s] for s in first.elements]
        again = [[[e.get_color() for e in g] for g in s] for s in second.elements]
        assert colors == again

    def test_only_first_cell_scales_used(self):
        first = AxisEntries(entries=[], scales={})
        second = AxisEntries(
            entries=[_scatter(color=1)],
            scales={"color": Scale("Species", SPECIES, COLORS)})
        assert legend_scales([[first, second]]) == {}
        assert compute_legend([[first, second]]) is None


class TestScale:

    def test_length_mismatch_rejected(self):
        with pytest.raises(ValueError):
            Scale("Species", SPECIES, COLORS[:2])

    def test_values_normalized_to_tuples(self):
        scale = Scale("Species", list(SPECIES), list(COLORS))
        assert scale.datavalues == SPECIES
        assert scale.plotvalues == COLORS
