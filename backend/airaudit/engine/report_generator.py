"""
PDF report generator using fpdf2.

Produces the technical audit report containing:
  - Title page with project info and headline savings / payback
  - Calculation methodology
  - Base vs proposed scenario comparison table
  - Calculation steps
  - Load diagram image
  - Investment budget itemised by chapter
  - Financial viability
  - User notes
"""

import base64
import logging
import os
import tempfile
from datetime import datetime

from fpdf import FPDF

from airaudit.engine.budget import chapter_totals
from airaudit.engine.metrics import compute_project_results
from airaudit.models.project import BudgetItem, ProjectData, ProjectResults
from airaudit.models.report import ReportInput

logger = logging.getLogger(__name__)

# Scenario comparison columns
_SCENARIO_COLS = [
    ("Parameter", 90),
    ("Audited (base)", 50),
    ("Proposed", 50),
]

# Budget columns
_BUDGET_COLS = [
    ("Chapter / Item", 110),
    ("Qty", 20),
    ("Unit (EUR)", 30),
    ("Subtotal (EUR)", 30),
]


class AuditReport(FPDF):
    """Custom FPDF subclass with header/footer."""

    def __init__(self, title: str):
        super().__init__(orientation="P", unit="mm", format="A4")
        self._report_title = title
        self.set_auto_page_break(auto=True, margin=15)

    def header(self):
        self.set_font("Helvetica", "B", 9)
        self.set_text_color(100, 100, 100)
        self.cell(0, 6, self._report_title, align="L")
        self.cell(0, 6, datetime.now().strftime("%Y-%m-%d %H:%M"), align="R", new_x="LMARGIN", new_y="NEXT")
        self.set_draw_color(200, 200, 200)
        self.line(10, self.get_y(), self.w - 10, self.get_y())
        self.ln(3)

    def footer(self):
        self.set_y(-12)
        self.set_font("Helvetica", "I", 7)
        self.set_text_color(150, 150, 150)
        self.cell(0, 8, f"Page {self.page_no()}/{{nb}}", align="C")


def generate_report(inp: ReportInput) -> bytes:
    """Generate a PDF report and return the bytes."""
    project = inp.project
    results = compute_project_results(project)

    title = _latin1(inp.title)
    pdf = AuditReport(title)
    pdf.alias_nb_pages()

    # ── Page 1: Title + headline figures ──
    pdf.add_page()
    pdf.set_font("Helvetica", "B", 18)
    pdf.cell(0, 12, title, align="C", new_x="LMARGIN", new_y="NEXT")
    pdf.ln(2)

    pdf.set_font("Helvetica", "", 10)
    pdf.set_text_color(60, 60, 60)
    info_lines = [
        f"Client: {project.client_name or 'N/A'}",
        f"Installation: {project.installation or 'N/A'}   |   Location: {project.location or 'N/A'}",
        f"Audit date: {project.date or 'N/A'}   |   Technician: {project.technician_name or 'N/A'}",
        f"Energy tariff: {project.energy_cost:.4f} EUR/kWh",
    ]
    for line in info_lines:
        pdf.cell(0, 6, _latin1(line), align="C", new_x="LMARGIN", new_y="NEXT")
    pdf.ln(6)

    _add_headline(pdf, results)

    if "methodology" in inp.include_sections:
        _add_section_heading(pdf, "Calculation Methodology")
        _add_methodology(pdf, project)

    # ── Scenario comparison ──
    if "scenarios" in inp.include_sections:
        pdf.add_page()
        _add_section_heading(pdf, "Audited vs Proposed Scenario")
        _add_scenarios_table(pdf, project, results)

    if "steps" in inp.include_sections:
        pdf.ln(4)
        _add_section_heading(pdf, "Calculation Steps")
        _add_calculation_steps(pdf, results)

    # ── Load diagram ──
    if "chart" in inp.include_sections and inp.chart_image_base64:
        pdf.add_page()
        _add_section_heading(pdf, "Load Diagram (8760 h)")
        _add_chart_image(pdf, inp.chart_image_base64)

    # ── Budget ──
    if "budget" in inp.include_sections:
        pdf.add_page()
        _add_section_heading(pdf, "Investment Budget (CAPEX)")
        _add_budget_table(pdf, project, results)

    if "financial" in inp.include_sections:
        pdf.ln(4)
        _add_section_heading(pdf, "Financial Viability")
        _add_financial(pdf, project, results)

    # ── Notes ──
    if "notes" in inp.include_sections and inp.notes:
        pdf.add_page()
        _add_section_heading(pdf, "Notes")
        pdf.set_font("Helvetica", "", 10)
        pdf.set_text_color(40, 40, 40)
        pdf.multi_cell(0, 5, _latin1(inp.notes))

    logger.info("Generated report '%s' (%d pages)", inp.title, pdf.page_no())
    return pdf.output()


def format_payback(payback_years: float) -> str:
    """Payback of 0 means savings are not positive, so there is no payback."""
    if payback_years <= 0:
        return "N/A"
    return f"{payback_years:.1f} years"


def _add_headline(pdf: FPDF, results: ProjectResults) -> None:
    """Boxed summary of savings and payback."""
    cmp = results.comparison
    pdf.set_font("Helvetica", "B", 12)
    pdf.set_fill_color(235, 245, 255)
    pdf.set_text_color(30, 30, 30)
    lines = [
        f"Annual savings: {_fmoney(cmp.savings_euro)} EUR/year",
        f"Energy savings: {_fnum(cmp.savings_energy_kwh, 0)} kWh/year",
        f"Payback: {format_payback(cmp.payback_years)}",
    ]
    for line in lines:
        pdf.cell(0, 9, line, align="C", fill=True, new_x="LMARGIN", new_y="NEXT")
    pdf.ln(6)


def _add_section_heading(pdf: FPDF, text: str) -> None:
    """Add a section heading."""
    pdf.set_font("Helvetica", "B", 14)
    pdf.set_text_color(30, 30, 30)
    pdf.cell(0, 10, text, new_x="LMARGIN", new_y="NEXT")
    pdf.ln(2)


def _add_methodology(pdf: FPDF, project: ProjectData) -> None:
    pdf.set_font("Helvetica", "", 10)
    pdf.set_text_color(40, 40, 40)

    delta_p = project.base_scenario.pressure_bar - project.proposed_scenario.pressure_bar
    paragraphs = [
        "Pressure: a 7% input power penalty is applied for every bar above the 7 bar "
        f"reference. Reducing pressure from {project.base_scenario.pressure_bar:g} bar to "
        f"{project.proposed_scenario.pressure_bar:g} bar gives an immediate saving of about "
        f"{delta_p * 7:.1f}%.",
        "Leaks: leaked air must be produced on top of the useful demand, so loaded energy "
        "is increased by the leak percentage and only the remaining air counts as useful volume.",
        "Unloaded running: idle power is counted as a fixed draw, independent of pressure and leaks.",
        "SEC: specific energy consumption is the annual energy divided by the useful air volume.",
    ]
    for text in paragraphs:
        pdf.multi_cell(0, 5, text, new_x="LMARGIN", new_y="NEXT")
        pdf.ln(1)


def _add_scenarios_table(pdf: FPDF, project: ProjectData, results: ProjectResults) -> None:
    """Render the base vs proposed table."""
    b, p = project.base_scenario, project.proposed_scenario
    bm, pm = results.base, results.proposed

    rows = [
        ("Compressor type", b.compressor_type.value.replace("_", " "), p.compressor_type.value.replace("_", " ")),
        ("Load power (kW)", _fnum(b.power_load_kw, 1), _fnum(p.power_load_kw, 1)),
        ("Unload power (kW)", _fnum(b.power_unload_kw, 1), _fnum(p.power_unload_kw, 1)),
        ("Working pressure (bar)", _fnum(b.pressure_bar, 1), _fnum(p.pressure_bar, 1)),
        ("Leaks (%)", _fnum(b.leak_percentage, 1), _fnum(p.leak_percentage, 1)),
        ("Load / unload hours per day", f"{b.hours_load_per_day:g} / {b.hours_unload_per_day:g}",
         f"{p.hours_load_per_day:g} / {p.hours_unload_per_day:g}"),
        ("Days per week / weeks per year", f"{b.days_per_week} / {b.weeks_per_year}",
         f"{p.days_per_week} / {p.weeks_per_year}"),
        ("Annual energy (kWh)", _fnum(bm.annual_energy_kwh, 0), _fnum(pm.annual_energy_kwh, 0)),
        ("Useful air volume (m³)", _fnum(bm.volume_useful_m3, 0), _fnum(pm.volume_useful_m3, 0)),
        ("SEC (kWh/m³)", _fnum(bm.sec_kwh_per_m3, 4), _fnum(pm.sec_kwh_per_m3, 4)),
        ("Energy cost (EUR/year)", _fmoney(bm.energy_cost), _fmoney(pm.energy_cost)),
        ("Maintenance (EUR/year)", _fmoney(bm.maintenance_cost), _fmoney(pm.maintenance_cost)),
        ("Total OPEX (EUR/year)", _fmoney(bm.total_opex), _fmoney(pm.total_opex)),
    ]

    _table_header(pdf, _SCENARIO_COLS)
    pdf.set_font("Helvetica", "", 9)
    pdf.set_text_color(40, 40, 40)
    for row in rows:
        for i, (_, width) in enumerate(_SCENARIO_COLS):
            align = "L" if i == 0 else "C"
            pdf.cell(width, 6, row[i], border=1, align=align)
        pdf.ln()


def _add_calculation_steps(pdf: FPDF, results: ProjectResults) -> None:
    for step in results.calculation_steps:
        pdf.set_font("Helvetica", "B", 10)
        pdf.set_text_color(30, 30, 30)
        pdf.cell(0, 6, step.label, new_x="LMARGIN", new_y="NEXT")
        pdf.set_font("Helvetica", "", 9)
        pdf.set_text_color(60, 60, 60)
        pdf.cell(0, 5, f"Formula: {step.formula}", new_x="LMARGIN", new_y="NEXT")
        pdf.cell(0, 5, step.value, new_x="LMARGIN", new_y="NEXT")
        pdf.ln(1)


def _add_chart_image(pdf: FPDF, b64_data: str) -> None:
    """Decode base64 PNG and add to PDF."""
    # Strip data URI prefix if present
    if "," in b64_data:
        b64_data = b64_data.split(",", 1)[1]

    img_bytes = base64.b64decode(b64_data)

    tmp = tempfile.NamedTemporaryFile(suffix=".png", delete=False)
    try:
        tmp.write(img_bytes)
        tmp.flush()
        tmp.close()

        available_width = pdf.w - 20  # 10mm margins each side
        available_height = pdf.h - pdf.get_y() - 20

        pdf.image(tmp.name, x=10, w=available_width, h=min(available_height, 120))
    finally:
        os.unlink(tmp.name)


def budget_rows(items: list[BudgetItem]) -> list[tuple[bool, list[str]]]:
    """
    Rows of the itemised budget table as (is_chapter, cells).

    Each non-empty chapter gets a heading row carrying its subtotal,
    followed by its lines with quantity, unit price and line total.
    """
    rows = []
    for ct in chapter_totals(items):
        if ct.item_count == 0:
            continue
        rows.append((True, [ct.chapter.value, "", "", _fmoney(ct.total)]))
        for item in items:
            if item.chapter != ct.chapter:
                continue
            rows.append((False, [
                _latin1(item.description),
                f"{item.quantity:g}",
                _fmoney(item.unit_price),
                _fmoney(item.total),
            ]))
    return rows


def _add_budget_table(pdf: FPDF, project: ProjectData, results: ProjectResults) -> None:
    """Render every budget line under its chapter, then the CAPEX total."""
    rows = budget_rows(project.budget_items)
    if not rows:
        logger.warning("Report requested with an empty budget")

    _table_header(pdf, _BUDGET_COLS)
    desc_width = _BUDGET_COLS[0][1]
    span = sum(width for _, width in _BUDGET_COLS[:-1])
    last = _BUDGET_COLS[-1][1]

    pdf.set_text_color(40, 40, 40)
    for is_chapter, cells in rows:
        if is_chapter:
            pdf.set_font("Helvetica", "B", 9)
            pdf.set_fill_color(235, 245, 255)
            pdf.cell(span, 6, _fit(pdf, cells[0], span), border=1, fill=True)
            pdf.cell(last, 6, cells[3], border=1, fill=True, align="R")
        else:
            pdf.set_font("Helvetica", "", 8)
            pdf.cell(desc_width, 6, _fit(pdf, "   " + cells[0], desc_width), border=1)
            for (_, width), val in zip(_BUDGET_COLS[1:], cells[1:]):
                pdf.cell(width, 6, val, border=1, align="R")
        pdf.ln()

    if not rows:
        pdf.set_font("Helvetica", "I", 9)
        pdf.cell(span + last, 6, "No budget lines", border=1, align="C")
        pdf.ln()

    pdf.set_font("Helvetica", "B", 10)
    pdf.cell(span, 8, "Total investment (CAPEX)", border=1, align="R")
    pdf.cell(last, 8, _fmoney(results.comparison.capex_total), border=1, align="R")
    pdf.ln()


def _add_financial(pdf: FPDF, project: ProjectData, results: ProjectResults) -> None:
    cmp = results.comparison
    pdf.set_font("Helvetica", "", 10)
    pdf.set_text_color(40, 40, 40)

    lines = [
        f"Annual OPEX savings: {_fmoney(cmp.savings_euro)} EUR/year",
        f"Annual energy savings: {_fnum(cmp.savings_energy_kwh, 0)} kWh/year",
        f"CO2 reduction: {_fnum(results.co2_reduction_kg, 0)} kg/year",
        f"SEC improvement: {results.sec_improvement_pct:.0f}%",
        f"Simple payback: {format_payback(cmp.payback_years)}",
    ]
    for line in lines:
        pdf.cell(0, 6, line, new_x="LMARGIN", new_y="NEXT")

    pdf.ln(2)
    if cmp.savings_euro > 0:
        verdict = (
            f"The project pays back in {cmp.payback_years:.1f} years with net savings of "
            f"{_fmoney(cmp.savings_euro)} EUR per year and should be considered in the "
            f"investment plan of {project.client_name or 'the client'}."
        )
    else:
        verdict = (
            "The proposed scenario does not reduce operating costs, so no payback "
            "period applies."
        )
    pdf.multi_cell(0, 5, _latin1(verdict), new_x="LMARGIN", new_y="NEXT")


def _table_header(pdf: FPDF, cols: list[tuple[str, int]]) -> None:
    pdf.set_font("Helvetica", "B", 9)
    pdf.set_fill_color(230, 230, 230)
    pdf.set_text_color(30, 30, 30)
    for label, width in cols:
        pdf.cell(width, 6, label, border=1, fill=True, align="C")
    pdf.ln()


def _fnum(val: float, decimals: int = 2) -> str:
    return f"{val:,.{decimals}f}"


def _fmoney(val: float) -> str:
    return f"{val:,.2f}"


def _fit(pdf: FPDF, text: str, width: float) -> str:
    """Truncate text with an ellipsis so it fits a cell of the given width."""
    if pdf.get_string_width(text) <= width - 2:
        return text
    while text and pdf.get_string_width(text + "...") > width - 2:
        text = text[:-1]
    return text + "..."


def _latin1(text: str) -> str:
    """Core PDF fonts only cover latin-1; anything else becomes '?'."""
    return text.encode("latin-1", "replace").decode("latin-1")
