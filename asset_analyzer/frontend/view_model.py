"""
Pure transformations over the merged asset list for presentation.

Handles:
- Table sorting and sort-header toggling
- Type aggregation for the summary pie chart
"""

import math

from .models import Asset, ChartSlice, SortConfig, SortDirection, SortKey

UNSPECIFIED_TYPE_LABEL = "Unspecified"
EMPTY_CELL = "-"

CHART_COLORS: tuple[str, ...] = (
    "#0088FE",
    "#00C49F",
    "#FFBB28",
    "#FF8042",
    "#8884d8",
    "#82ca9d",
    "#ffc658",
)


def sort_assets(assets: list[Asset], config: SortConfig) -> list[Asset]:
    """
    Return a new list of assets ordered by the sort configuration.

    Assets with no value for the key always come last, whichever the
    direction. The sort is stable, so ties keep their input order.
    """
    attribute = config.key.attribute
    present = [a for a in assets if getattr(a, attribute) is not None]
    absent = [a for a in assets if getattr(a, attribute) is None]

    present.sort(
        key=lambda a: str(getattr(a, attribute)),
        reverse=config.direction == SortDirection.DESCENDING,
    )
    return present + absent


def next_sort_config(current: SortConfig | None, key: SortKey) -> SortConfig:
    """Sort config after a click on the header for key."""
    if (
        current is not None
        and current.key == key
        and current.direction == SortDirection.ASCENDING
    ):
        return SortConfig(key=key, direction=SortDirection.DESCENDING)
    return SortConfig(key=key, direction=SortDirection.ASCENDING)


def aggregate_by_type(assets: list[Asset]) -> dict[str, int]:
    """Count assets per type, in first-seen order."""
    counts: dict[str, int] = {}
    for asset in assets:
        label = asset.type or UNSPECIFIED_TYPE_LABEL
        counts[label] = counts.get(label, 0) + 1
    return counts


def chart_slices(assets: list[Asset]) -> list[ChartSlice]:
    """
    Pie chart data: one slice per type with a share and palette color.

    Shares are whole percents rounded half up, so 12.5 shows as 13.
    """
    counts = aggregate_by_type(assets)
    total = sum(counts.values())
    return [
        ChartSlice(
            name=name,
            value=count,
            percent=math.floor(count * 100 / total + 0.5),
            color=CHART_COLORS[index % len(CHART_COLORS)],
        )
        for index, (name, count) in enumerate(counts.items())
    ]


def display_value(value: str | None) -> str:
    # Table cells show a dash for missing values
    return value or EMPTY_CELL
