"""
Load diagram series, statistics and CSV export over the 8760-hour tables.

All reductions work on exactly the values produced by
engine.load_profile.generate_8760_table; months use a fixed non-leap
month-length table laid over the simulated year.
"""

import csv
import io

import numpy as np

from airaudit.config import DAYS_IN_MONTH, DAYS_PER_YEAR, HOURS_PER_DAY, MONTH_LABELS
from airaudit.engine.load_profile import generate_8760_table
from airaudit.models.load_profile import (
    DiagramView,
    LoadDiagramOutput,
    LoadStats,
    SeriesPoint,
)
from airaudit.models.project import ProjectData

_HOURS_PER_WEEK = 168

_VIEW_UNITS = {
    DiagramView.DAILY: "kW",
    DiagramView.WEEKLY: "kW",
    DiagramView.MONTHLY: "MWh",
    DiagramView.ANNUAL: "kW",
}

CSV_HEADER = ["hour_of_year", "day_of_year", "month", "base_power_kw", "proposed_power_kw"]


def _month_of_hour() -> list[str]:
    """Month label for each of the 8760 hours."""
    labels = []
    for label, days in zip(MONTH_LABELS, DAYS_IN_MONTH):
        labels.extend([label] * (days * HOURS_PER_DAY))
    return labels


def build_load_series(
    base_table: list[float],
    proposed_table: list[float],
    view: DiagramView,
) -> list[SeriesPoint]:
    """Reduce two 8760 tables to the chart series of one view."""
    base = np.asarray(base_table, dtype=float)
    prop = np.asarray(proposed_table, dtype=float)

    if view == DiagramView.DAILY:
        return [
            SeriesPoint(label=f"{h}h", base=float(base[h]), proposed=float(prop[h]))
            for h in range(HOURS_PER_DAY)
        ]

    if view == DiagramView.WEEKLY:
        return [
            SeriesPoint(
                label=f"D{h // HOURS_PER_DAY + 1} {h % HOURS_PER_DAY}h",
                base=float(base[h]),
                proposed=float(prop[h]),
            )
            for h in range(0, _HOURS_PER_WEEK, 2)
        ]

    if view == DiagramView.MONTHLY:
        points = []
        cursor = 0
        for label, days in zip(MONTH_LABELS, DAYS_IN_MONTH):
            end = cursor + days * HOURS_PER_DAY
            points.append(SeriesPoint(
                label=label,
                base=float(base[cursor:end].sum()) / 1000,
                proposed=float(prop[cursor:end].sum()) / 1000,
            ))
            cursor = end
        return points

    # Annual: mean power per simulated day
    base_daily = base.reshape(DAYS_PER_YEAR, HOURS_PER_DAY).mean(axis=1)
    prop_daily = prop.reshape(DAYS_PER_YEAR, HOURS_PER_DAY).mean(axis=1)
    return [
        SeriesPoint(label=f"D{i + 1}", base=float(b), proposed=float(p))
        for i, (b, p) in enumerate(zip(base_daily, prop_daily))
    ]


def load_stats(table: list[float]) -> LoadStats:
    """Peak power (never below 0) and total energy of a table."""
    values = np.asarray(table, dtype=float)
    peak = max(float(values.max()), 0.0) if values.size else 0.0
    return LoadStats(peak_kw=peak, total_kwh=float(values.sum()))


def build_load_diagram(project: ProjectData, view: DiagramView) -> LoadDiagramOutput:
    """Series for the requested view plus annual stats for both scenarios."""
    base_table = generate_8760_table(project.base_scenario)
    prop_table = generate_8760_table(project.proposed_scenario)

    return LoadDiagramOutput(
        view=view,
        unit=_VIEW_UNITS[view],
        series=build_load_series(base_table, prop_table, view),
        base_stats=load_stats(base_table),
        proposed_stats=load_stats(prop_table),
    )


def export_8760_csv(base_table: list[float], proposed_table: list[float]) -> str:
    """
    Render both tables side by side, one row per hour.

    Columns: 0-based hour of year, 1-based day of year, month label,
    base and proposed power in kW with two decimals. Separator is ';'.
    """
    buf = io.StringIO()
    writer = csv.writer(buf, delimiter=";", lineterminator="\n")
    writer.writerow(CSV_HEADER)

    for hour, (month, b, p) in enumerate(zip(_month_of_hour(), base_table, proposed_table)):
        writer.writerow([hour, hour // HOURS_PER_DAY + 1, month, f"{b:.2f}", f"{p:.2f}"])

    return buf.getvalue()
