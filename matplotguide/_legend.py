"""Legend computation — one section per distinct scale label."""
from __future__ import annotations

import logging
from typing import Any

from ._elements import legend_elements
from ._errors import InconsistentScaleGrouping
from ._plottypes import plottypes_attributes
from ._types import LegendSpec, Scale, ValueKind, as_cells, iter_entries

logger = logging.getLogger(__name__)

# Layout and aggregation directives, not visual channels.
NON_LEGEND_KEYS = ("row", "col", "layout", "stack", "dodge", "group")


def legend_scales(grid: Any) -> dict[str, Scale]:
    """Scales of *grid* that can appear in a legend.

    All subplots are assumed to share the scales of the first one.
    """
    cells = as_cells(grid)
    if cells.size == 0:
        return {}
    return {key: scale for key, scale in cells.flat[0].scales.items()
            if isinstance(key, str)
            and key not in NON_LEGEND_KEYS
            and scale.kind is not ValueKind.CONTINUOUS}


def _shared_datavalues(title: str, label_attrs: list[str],
                       scales: dict[str, Scale]) -> tuple:
    datavalues = scales[label_attrs[0]].datavalues
    for key in label_attrs[1:]:
        if scales[key].datavalues != datavalues:
            raise InconsistentScaleGrouping(title, label_attrs)
    return datavalues


def compute_legend(grid: Any) -> LegendSpec | None:
    """Legend sections summarizing the scales of *grid*, or None when no
    scale needs a legend."""
    scales = legend_scales(grid)
    if not scales:
        logger.debug("No legend-worthy scales; skipping legend")
        return None

    titles = list(dict.fromkeys(scale.label for scale in scales.values()))
    plottypes, attributes = plottypes_attributes(iter_entries(grid))

    legend = LegendSpec()
    for title in titles:
        label_attrs = [key for key, scale in scales.items()
                       if scale.label == title]
        uniquevalues = _shared_datavalues(title, label_attrs, scales)
        groups = []
        for idx in range(len(uniquevalues)):
            elements = []
            for plottype, attrs in zip(plottypes, attributes):
                shared = [attr for attr in attrs if attr in label_attrs]
                if not shared:
                    continue
                options = {attr: scales[attr].plotvalues[idx] for attr in shared}
                elements.extend(legend_elements(plottype, **options))
            groups.append(elements)
        legend.elements.append(groups)
        legend.labels.append([str(value) for value in uniquevalues])
        # empty titles break legend layout
        legend.titles.append(title or " ")
    return legend
