"""
Tests for load diagram series, statistics and the 8760-hour CSV export.
"""

import pytest

from airaudit.engine.load_diagrams import (
    CSV_HEADER,
    build_load_diagram,
    build_load_series,
    export_8760_csv,
    load_stats,
)
from airaudit.engine.load_profile import generate_8760_table
from airaudit.engine.project import new_project
from airaudit.models.load_profile import DiagramView


@pytest.fixture
def tables():
    project = new_project()
    return (
        generate_8760_table(project.base_scenario),
        generate_8760_table(project.proposed_scenario),
    )


class TestSeries:

    def test_daily_view(self, tables):
        base, prop = tables
        series = build_load_series(base, prop, DiagramView.DAILY)
        assert len(series) == 24
        assert series[0].label == "0h"
        assert series[23].label == "23h"
        assert [p.base for p in series] == base[:24]
        assert [p.proposed for p in series] == prop[:24]

    def test_weekly_view_samples_every_second_hour(self, tables):
        base, prop = tables
        series = build_load_series(base, prop, DiagramView.WEEKLY)
        assert len(series) == 84
        assert series[0].label == "D1 0h"
        assert series[1].label == "D1 2h"
        assert series[12].label == "D2 0h"
        assert series[-1].label == "D7 22h"
        assert series[5].base == base[10]

    def test_monthly_view_in_mwh(self, tables):
        base, prop = tables
        series = build_load_series(base, prop, DiagramView.MONTHLY)
        assert [p.label for p in series][:3] == ["Jan", "Feb", "Mar"]
        assert len(series) == 12
        assert sum(p.base for p in series) == pytest.approx(sum(base) / 1000)
        assert sum(p.proposed for p in series) == pytest.approx(sum(prop) / 1000)

    def test_monthly_january_covers_31_days(self, tables):
        base, prop = tables
        series = build_load_series(base, prop, DiagramView.MONTHLY)
        assert series[0].base == pytest.approx(sum(base[:31 * 24]) / 1000)

    def test_annual_view_daily_means(self, tables):
        base, prop = tables
        series = build_load_series(base, prop, DiagramView.ANNUAL)
        assert len(series) == 365
        assert series[0].label == "D1"
        assert series[0].base == pytest.approx(sum(base[:24]) / 24)
        assert series[5].base == 0.0  # first weekend day


class TestStats:

    def test_peak_and_total(self, tables):
        base, _ = tables
        stats = load_stats(base)
        assert stats.peak_kw == 45.0
        assert stats.total_kwh == pytest.approx(sum(base))

    def test_all_zero_table(self):
        stats = load_stats([0.0] * 8760)
        assert stats.peak_kw == 0.0
        assert stats.total_kwh == 0.0

    def test_negative_values_floor_peak_at_zero(self):
        stats = load_stats([-5.0] * 24)
        assert stats.peak_kw == 0.0


class TestDiagram:

    def test_units_per_view(self):
        project = new_project()
        assert build_load_diagram(project, DiagramView.MONTHLY).unit == "MWh"
        assert build_load_diagram(project, DiagramView.DAILY).unit == "kW"

    def test_stats_for_both_scenarios(self):
        project = new_project()
        diagram = build_load_diagram(project, DiagramView.ANNUAL)
        assert diagram.base_stats.peak_kw == project.base_scenario.power_load_kw
        assert diagram.proposed_stats.peak_kw == project.proposed_scenario.power_load_kw


class TestCsvExport:

    def setup_method(self):
        project = new_project()
        self.csv = export_8760_csv(
            generate_8760_table(project.base_scenario),
            generate_8760_table(project.proposed_scenario),
        )
        self.lines = self.csv.splitlines()

    def test_row_count(self):
        assert len(self.lines) == 8761

    def test_header(self):
        assert self.lines[0] == ";".join(CSV_HEADER)

    def test_first_rows(self):
        assert self.lines[1] == "0;1;Jan;0.00;0.00"
        assert self.lines[9] == "8;1;Jan;45.00;38.00"

    def test_month_boundaries(self):
        assert self.lines[1 + 31 * 24].split(";")[:3] == ["744", "32", "Feb"]
        assert self.lines[-1].split(";")[:3] == ["8759", "365", "Dec"]
