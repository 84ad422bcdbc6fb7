"""
Printable PDF chart using fpdf2.

Produces a landscape letter document with:
  - Title, pattern summary and yarn legend
  - One color chart per year, drawn square by square from the grid
  - Pattern statistics table
"""

from typing import Optional, Union

from fpdf import FPDF

from graphghan.config import GRID_COLS, GRID_ROWS, ThemeId
from graphghan.engine.export_synthesizer import compute_measurements
from graphghan.engine.themes import get_theme
from graphghan.errors import EmptyPatternError
from graphghan.models.pattern import Pattern, YearGrid
from graphghan.models.theme import Theme

# Chart square edge length (mm); 110 squares fit the usable landscape width
_SQUARE_MM = 2.3
_MARGIN_MM = 10


class PatternChart(FPDF):
    """Custom FPDF subclass with header/footer."""

    def __init__(self, title: str):
        super().__init__(orientation="L", unit="mm", format="letter")
        self._chart_title = title
        self.set_auto_page_break(auto=True, margin=15)

    def header(self):
        self.set_font("Helvetica", "B", 9)
        self.set_text_color(100, 100, 100)
        self.cell(0, 6, self._chart_title, align="L", new_x="LMARGIN", new_y="NEXT")
        self.set_draw_color(200, 200, 200)
        self.line(_MARGIN_MM, self.get_y(), self.w - _MARGIN_MM, self.get_y())
        self.ln(3)

    def footer(self):
        self.set_y(-12)
        self.set_font("Helvetica", "I", 7)
        self.set_text_color(150, 150, 150)
        self.cell(0, 8, f"Page {self.page_no()}/{{nb}}", align="C")


def render_pattern_pdf(
    pattern: Pattern,
    username: str,
    theme: Optional[Union[str, ThemeId]] = None,
) -> bytes:
    """Render the pattern as a printable color chart and return the PDF bytes."""
    if not pattern.years or not pattern.year_grids:
        raise EmptyPatternError("Pattern has no years to export.")

    selected = get_theme(theme)
    m = compute_measurements(pattern)
    title = _latin1(f"{username}'s GitHub Graphghan Pattern")

    pdf = PatternChart(title)
    pdf.alias_nb_pages()

    # ── Page 1: Summary + Legend ──
    pdf.add_page()
    pdf.set_font("Helvetica", "B", 18)
    pdf.cell(0, 12, title, align="C", new_x="LMARGIN", new_y="NEXT")
    pdf.ln(2)

    pdf.set_font("Helvetica", "", 10)
    pdf.set_text_color(60, 60, 60)
    info_lines = [
        f"Years: {', '.join(str(y) for y in pattern.years)} (newest at top)",
        f"Total commits: {pattern.total_count}",
        f"Size: {m.width_squares} x {m.height_squares} squares   |   "
        f"Finished: ~{m.finished_width_in:.0f} x {m.finished_height_in:.0f} in",
        f"Theme: {selected.label}   |   Border yarn: {selected.border_yarn}",
    ]
    for line in info_lines:
        pdf.cell(0, 6, line, align="C", new_x="LMARGIN", new_y="NEXT")
    pdf.ln(4)

    _add_section_heading(pdf, "Yarn Colors")
    _add_legend(pdf, selected)

    # ── Charts ──
    chart_height = GRID_ROWS * _SQUARE_MM
    for grid in pattern.year_grids:
        if pdf.get_y() + chart_height + 14 > pdf.h - 15:
            pdf.add_page()
        _add_section_heading(pdf, f"{grid.year} ({grid.total_count} commits)")
        _add_year_chart(pdf, grid, selected)

    # ── Statistics ──
    pdf.add_page()
    _add_section_heading(pdf, "Pattern Statistics")
    _add_statistics_table(pdf, [
        ("Total squares", str(m.total_squares)),
        ("Data squares", str(m.data_squares)),
        ("Border squares", str(m.border_squares)),
        ("Years stacked", str(m.year_count)),
        ("Square size", f"{m.square_size_in:g} in"),
        ("Finished width", f"{m.finished_width_in:.0f} in ({m.finished_width_cm:.0f} cm)"),
        ("Finished height", f"{m.finished_height_in:.0f} in ({m.finished_height_cm:.0f} cm)"),
    ] + [
        (f"{selected.color_for(level).name} squares", str(n))
        for level, n in m.squares_per_level.items()
    ])

    return bytes(pdf.output())


def _latin1(text: str) -> str:
    """Core PDF fonts only cover Latin-1; anything else prints as '?'."""
    return text.encode("latin-1", "replace").decode("latin-1")


def _hex_to_rgb(hex_code: str) -> tuple[int, int, int]:
    h = hex_code.lstrip("#")
    return int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16)


def _add_section_heading(pdf: FPDF, text: str) -> None:
    """Add a section heading."""
    pdf.set_font("Helvetica", "B", 14)
    pdf.set_text_color(30, 30, 30)
    pdf.cell(0, 10, text, new_x="LMARGIN", new_y="NEXT")
    pdf.ln(2)


def _add_legend(pdf: FPDF, theme: Theme) -> None:
    """One row per yarn color: swatch, symbol, name, hex, description."""
    pdf.set_font("Helvetica", "", 9)
    pdf.set_text_color(40, 40, 40)
    pdf.set_draw_color(120, 120, 120)
    for color in theme.colors:
        y = pdf.get_y()
        pdf.set_fill_color(*_hex_to_rgb(color.hex))
        pdf.rect(_MARGIN_MM, y + 1, 4, 4, style="DF")
        pdf.set_x(_MARGIN_MM + 6)
        pdf.cell(8, 6, color.indicator)
        pdf.cell(36, 6, color.name)
        pdf.cell(22, 6, color.hex)
        pdf.cell(0, 6, color.description, new_x="LMARGIN", new_y="NEXT")
    pdf.ln(4)


def _add_year_chart(pdf: FPDF, grid: YearGrid, theme: Theme) -> None:
    """Draw every square of the grid as a filled cell."""
    x0 = _MARGIN_MM
    y0 = pdf.get_y()
    fills = [_hex_to_rgb(c.hex) for c in theme.colors]

    pdf.set_draw_color(210, 210, 210)
    pdf.set_line_width(0.05)
    for row in range(GRID_ROWS):
        for col in range(GRID_COLS):
            pdf.set_fill_color(*fills[grid.level_at(row, col)])
            pdf.rect(
                x0 + col * _SQUARE_MM,
                y0 + row * _SQUARE_MM,
                _SQUARE_MM,
                _SQUARE_MM,
                style="DF",
            )
    pdf.set_line_width(0.2)
    pdf.set_y(y0 + GRID_ROWS * _SQUARE_MM + 4)


def _add_statistics_table(pdf: FPDF, rows: list[tuple[str, str]]) -> None:
    """Two-column label/value table."""
    pdf.set_font("Helvetica", "B", 9)
    pdf.set_fill_color(230, 230, 230)
    pdf.set_text_color(30, 30, 30)
    pdf.cell(60, 6, "Measure", border=1, fill=True, align="C")
    pdf.cell(60, 6, "Value", border=1, fill=True, align="C")
    pdf.ln()

    pdf.set_font("Helvetica", "", 9)
    pdf.set_text_color(40, 40, 40)
    for label, value in rows:
        pdf.cell(60, 5, label, border=1, align="L")
        pdf.cell(60, 5, value, border=1, align="C")
        pdf.ln()
