"""
PDF Farm Report Generator.

Builds a farm report from stored calculation runs.
Uses fpdf2 (pure Python, no system dependencies).

Layout:
1. Header: organization, report title, type, period
2. Selected sections (the checklist the user ticked)
3. One block per calculator: a table of runs with their headline figures
4. Notes
"""

from datetime import date, datetime

from fpdf import FPDF

from .calculators.registry import CALCULATOR_REGISTRY


REPORT_FORMATS = ["PDF", "Excel", "Word"]

# Only PDF is rendered server-side
SUPPORTED_FORMATS = ["PDF"]

REPORT_TYPES = {
    "Production Performance": [
        "Growth Rate Analysis",
        "Feed Conversion Ratio",
        "Survival Rate",
        "Biomass Production",
        "Water Quality Trends",
        "Disease Incidents",
    ],
    "Financial Statement": [
        "Revenue Analysis",
        "Cost Breakdown",
        "Profit Margins",
        "ROI Analysis",
        "Cash Flow Statement",
        "Budget Variance",
    ],
    "Environmental Compliance": [
        "Water Quality Parameters",
        "Waste Management",
        "Energy Usage",
        "Chemical Usage",
        "Environmental Impact",
        "Sustainability Metrics",
    ],
    "Health Inspection": [
        "Disease Incidents",
        "Treatment Records",
        "Mortality Rates",
        "Quarantine Records",
        "Medication Usage",
        "Health Certifications",
    ],
    "Inventory Status": [
        "Feed Stock",
        "Equipment Status",
        "Medication Inventory",
        "Supply Usage",
        "Reorder Analysis",
        "Stock Valuation",
    ],
    "Custom Report": [
        "Custom Section 1",
        "Custom Section 2",
        "Custom Section 3",
        "Custom Section 4",
        "Custom Section 5",
    ],
}

# Which stored runs feed each report type. None means every calculator.
REPORT_CALCULATORS = {
    "Production Performance": [
        "fcr", "fcr_optimizer", "feeding", "fish_production", "fish_stocking",
        "fish_yield", "growth_tracker", "growth_predictor", "growth_benchmark", "harvest_timing",
    ],
    "Financial Statement": [
        "profitability", "market_analysis", "fish_production", "pond_lining",
        "energy_efficiency",
    ],
    "Environmental Compliance": [
        "water_quality", "water_quality_monitor", "water_quality_predictor",
        "pond_evaporation", "pond_liming", "pond_sediment", "waste_fertilizer",
        "energy_efficiency", "weather_impact", "aeration", "environmental_monitor",
    ],
    "Health Inspection": ["disease_risk", "disease_prevention", "fish_stress", "water_quality"],
    "Inventory Status": [
        "inventory", "feed_management", "feeding", "fcr_optimizer", "pond_liming",
        "energy_efficiency",
    ],
    "Custom Report": None,
}

# Headline figures per table row
MAX_FIGURES = 4


def report_calculators(report_type: str) -> list:
    """Calculator slugs whose runs belong in a report type. ValueError if unknown."""
    if report_type not in REPORT_TYPES:
        raise ValueError(
            f"Unknown report type: {report_type}. Available: {list(REPORT_TYPES.keys())}"
        )
    slugs = REPORT_CALCULATORS[report_type]
    return list(CALCULATOR_REGISTRY.keys()) if slugs is None else list(slugs)


def _safe(text) -> str:
    """Replace Unicode chars that can't be rendered by built-in PDF fonts (latin-1)."""
    if text is None or text == "":
        return ""
    return (
        str(text)
        .replace("\u2022", "-")    # bullet
        .replace("\u2014", " - ")  # em dash
        .replace("\u2013", "-")    # en dash
        .replace("\u00b2", "2")    # superscript two (m2)
        .replace("\u00b3", "3")    # superscript three (m3)
        .replace("\u2018", "'")  # left single quote
        .replace("\u2019", "'")  # right single quote
        .encode("latin-1", errors="replace")
        .decode("latin-1")
    )


def _fmt(value) -> str:
    """Numbers to two decimals with thousands separators; everything else as text."""
    if isinstance(value, bool):
        return "Yes" if value else "No"
    if isinstance(value, (int, float)):
        return f"{value:,.2f}"
    return _safe(value)


def _label(key: str) -> str:
    return key.replace("_", " ").title()


def headline_figures(result: dict, limit: int = MAX_FIGURES) -> list:
    """
    First scalar entries of a result dict, as (label, text) pairs.
    Nested dicts and lists are skipped; they don't fit a table cell.
    """
    figures = []
    for key, value in (result or {}).items():
        if isinstance(value, (dict, list)) or value is None:
            continue
        figures.append((_label(key), _fmt(value)))
        if len(figures) >= limit:
            break
    return figures


def _period(start, end) -> str:
    if start and end:
        return f"{start.isoformat()} to {end.isoformat()}"
    if start:
        return f"From {start.isoformat()}"
    if end:
        return f"Until {end.isoformat()}"
    return "All records"


class ReportPDF(FPDF):
    """Custom PDF class for farm reports."""

    def __init__(self, organization=""):
        super().__init__()
        self.organization = organization
        self.set_auto_page_break(auto=True, margin=20)

    def header(self):
        pass  # Title block is drawn once on the first page

    def footer(self):
        self.set_y(-15)
        self.set_font("Helvetica", "I", 8)
        self.set_text_color(150, 150, 150)
        self.cell(0, 10, f"Page {self.page_no()}/{{nb}}", align="C")

    def section_header(self, title):
        """Render a section header bar."""
        self.set_font("Helvetica", "B", 11)
        self.set_fill_color(45, 55, 72)
        self.set_text_color(255, 255, 255)
        self.cell(0, 8, f"  {_safe(title)}", fill=True, new_x="LMARGIN", new_y="NEXT")
        self.set_text_color(0, 0, 0)
        self.ln(2)

    def table_header(self, cols):
        """Render a table header row. cols: [(label, width), ...]"""
        self.set_font("Helvetica", "B", 8)
        self.set_fill_color(240, 240, 240)
        for label, width in cols:
            self.cell(width, 6, label, border="B", fill=True)
        self.ln()

    def table_row(self, values, widths):
        """Render a table data row."""
        self.set_font("Helvetica", "", 8)
        for val, width in zip(values, widths):
            self.cell(width, 5.5, _safe(val))
        self.ln()


def generate_report_pdf(
    report_type: str,
    records: list,
    title: str = None,
    organization: str = "",
    start: date = None,
    end: date = None,
    sections: list = None,
) -> bytes:
    """
    Generate a farm report PDF.

    Args:
        report_type: one of REPORT_TYPES
        records: stored calculation runs, objects with calculator,
            result_json and created_at
        title: report title; defaults to the report type
        organization: name printed at the top
        start, end: reporting period, printed in the header
        sections: section names to list; defaults to all sections of the type

    Returns:
        PDF bytes
    """
    if report_type not in REPORT_TYPES:
        raise ValueError(f"Unknown report type: {report_type}")
    sections = sections or REPORT_TYPES[report_type]

    pdf = ReportPDF(organization=organization)
    pdf.alias_nb_pages()
    pdf.add_page()
    pw = pdf.w - pdf.l_margin - pdf.r_margin  # printable width

    # ── Header ──
    if organization:
        pdf.set_font("Helvetica", "B", 20)
        pdf.cell(0, 10, _safe(organization), new_x="LMARGIN", new_y="NEXT")
        pdf.ln(2)

    pdf.set_font("Helvetica", "B", 14)
    pdf.cell(0, 8, _safe(title or report_type), new_x="LMARGIN", new_y="NEXT")
    pdf.set_font("Helvetica", "", 10)
    pdf.cell(0, 5, f"Report type: {_safe(report_type)}", new_x="LMARGIN", new_y="NEXT")
    pdf.cell(0, 5, f"Period: {_period(start, end)}", new_x="LMARGIN", new_y="NEXT")
    pdf.cell(0, 5, f"Generated: {datetime.utcnow().strftime('%B %d, %Y')}",
             new_x="LMARGIN", new_y="NEXT")
    pdf.ln(6)

    # ── Sections ──
    pdf.section_header("SECTIONS")
    pdf.set_font("Helvetica", "", 9)
    for name in sections:
        pdf.set_x(pdf.l_margin)
        pdf.cell(pw, 5, _safe(f"  - {name}"), new_x="LMARGIN", new_y="NEXT")
    pdf.ln(4)

    # ── Runs per calculator ──
    grouped = {}
    for record in records:
        grouped.setdefault(record.calculator, []).append(record)

    if not grouped:
        pdf.section_header("CALCULATIONS")
        pdf.set_font("Helvetica", "I", 9)
        pdf.cell(0, 5, "No calculations recorded for this period.", new_x="LMARGIN", new_y="NEXT")

    date_width = 30
    figure_width = (pw - date_width) / MAX_FIGURES
    for slug, runs in grouped.items():
        cls = CALCULATOR_REGISTRY.get(slug)
        pdf.section_header(cls.TITLE.upper() if cls else _label(slug).upper())

        labels = [label for label, _ in headline_figures(runs[0].result_json)]
        cols = [("Date", date_width)] + [(label, figure_width) for label in labels]
        widths = [c[1] for c in cols]
        pdf.table_header(cols)

        for run in runs:
            figures = [text for _, text in headline_figures(run.result_json)]
            when = run.created_at.strftime("%Y-%m-%d") if run.created_at else ""
            pdf.table_row([when] + figures, widths)
        pdf.ln(4)

    # ── Notes ──
    pdf.ln(2)
    pdf.set_font("Helvetica", "I", 8)
    pdf.set_text_color(100, 100, 100)
    pdf.set_x(pdf.l_margin)
    pdf.multi_cell(pw, 4, "Figures are computed estimates from the recorded calculator inputs. "
                          "Verify against field measurements before acting on them.")
    pdf.set_text_color(0, 0, 0)

    return bytes(pdf.output())
