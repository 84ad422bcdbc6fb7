"""
Pattern export: printable transcript, measurements and the instructions
document.

The transcript has one character per square, rows top to bottom, columns
left to right, years in pattern order. Every row ends with a newline, so
year N's grid starts on line N * 18.
"""

import logging
from typing import Optional, Union

import numpy as np

from graphghan.config import (
    BORDER_LEVEL,
    BORDER_WIDTH,
    CM_PER_INCH,
    DATA_COLS,
    DATA_ROWS,
    GRID_COLS,
    GRID_ROWS,
    LEVEL_COUNT,
    LEVEL_INDICATORS,
    SQUARE_SIZE_INCHES,
    ThemeId,
)
from graphghan.engine.themes import get_theme
from graphghan.errors import EmptyPatternError
from graphghan.models.pattern import Pattern, PatternExport, PatternMeasurements

logger = logging.getLogger(__name__)

_INDICATOR_TO_LEVEL = {symbol: level for level, symbol in LEVEL_INDICATORS.items()}
# Lookup table: level -> indicator byte
_INDICATOR_TABLE = np.array(
    [ord(LEVEL_INDICATORS[level]) for level in range(BORDER_LEVEL + 1)],
    dtype=np.uint8,
)


def _require_years(pattern: Pattern) -> None:
    if not pattern.years or not pattern.year_grids:
        raise EmptyPatternError("Pattern has no years to export.")


# ---------------------------------------------------------------------------
# Transcript
# ---------------------------------------------------------------------------

def render_transcript(pattern: Pattern) -> str:
    """Symbolic grid for every year, one line per square row."""
    _require_years(pattern)
    lines = []
    for grid in pattern.year_grids:
        symbols = _INDICATOR_TABLE[grid.levels]
        for row in symbols:
            lines.append(row.tobytes().decode("ascii"))
    return "".join(line + "\n" for line in lines)


def parse_transcript(text: str) -> list[np.ndarray]:
    """
    Decode a transcript back into one (18, 110) level array per year.

    Raises ValueError on unknown symbols or a malformed layout.
    """
    lines = text.splitlines()
    if not lines or len(lines) % GRID_ROWS:
        raise ValueError(
            f"Transcript must contain a multiple of {GRID_ROWS} rows, got {len(lines)}."
        )

    grids = []
    for start in range(0, len(lines), GRID_ROWS):
        levels = np.empty((GRID_ROWS, GRID_COLS), dtype=np.int8)
        for row, line in enumerate(lines[start:start + GRID_ROWS]):
            if len(line) != GRID_COLS:
                raise ValueError(
                    f"Transcript row {start + row} has {len(line)} squares, expected {GRID_COLS}."
                )
            for col, symbol in enumerate(line):
                try:
                    levels[row, col] = _INDICATOR_TO_LEVEL[symbol]
                except KeyError:
                    raise ValueError(
                        f"Unknown symbol {symbol!r} at row {start + row}, col {col}."
                    )
        grids.append(levels)
    return grids


# ---------------------------------------------------------------------------
# Measurements
# ---------------------------------------------------------------------------

def compute_measurements(pattern: Pattern) -> PatternMeasurements:
    """Square counts and finished size of the stacked pattern."""
    _require_years(pattern)

    year_count = len(pattern.year_grids)
    width = GRID_COLS
    height = GRID_ROWS * year_count

    per_level = {level: 0 for level in range(LEVEL_COUNT + 1)}
    for grid in pattern.year_grids:
        for level, n in grid.level_histogram().items():
            per_level[level] += n

    total = sum(g.square_count for g in pattern.year_grids)
    border = per_level[BORDER_LEVEL]

    width_in = width * SQUARE_SIZE_INCHES
    height_in = height * SQUARE_SIZE_INCHES
    return PatternMeasurements(
        year_count=year_count,
        width_squares=width,
        height_squares=height,
        total_squares=total,
        data_squares=total - border,
        border_squares=border,
        squares_per_level=per_level,
        square_size_in=SQUARE_SIZE_INCHES,
        finished_width_in=width_in,
        finished_height_in=height_in,
        finished_width_cm=round(width_in * CM_PER_INCH, 1),
        finished_height_cm=round(height_in * CM_PER_INCH, 1),
    )


# ---------------------------------------------------------------------------
# Instructions document
# ---------------------------------------------------------------------------

def export_filename(username: str, pattern: Pattern, extension: str = "txt") -> str:
    """``<username>-<year>-<year>....<extension>`` with years in pattern order."""
    _require_years(pattern)
    return f"{username}-{'-'.join(str(y) for y in pattern.years)}.{extension}"


def generate_instructions(
    pattern: Pattern,
    username: str,
    theme: Optional[Union[str, ThemeId]] = None,
) -> str:
    """Full plain-text pattern: materials, technique, grid and statistics."""
    _require_years(pattern)

    selected = get_theme(theme)
    m = compute_measurements(pattern)
    years = list(pattern.years)
    years_label = ", ".join(str(y) for y in years)

    materials = "\n".join(
        f"  • {c.name} ({c.hex}) - {c.description}" for c in selected.colors
    )
    structure = "\n".join(
        f"- {g.year}: {DATA_COLS} × {DATA_ROWS} squares plus border "
        f"({GRID_COLS} × {GRID_ROWS}), {g.total_count} commits"
        for g in pattern.year_grids
    )
    legend = ", ".join(f"{c.indicator} = {c.name}" for c in selected.colors)
    level_lines = "\n".join(
        f"- {selected.color_for(level).name}: {m.squares_per_level[level]} squares"
        for level in range(LEVEL_COUNT + 1)
    )

    sections = [
        f"# {username}'s GitHub Graphghan Pattern",
        "## Materials Needed\n"
        f"- Worsted weight yarn in {len(selected.colors)} colors:\n"
        f"{materials}\n"
        "- Size H/8 (5.0mm) crochet hook\n"
        "- Yarn needle for sewing\n"
        "- Scissors",
        "## Finished Size\n"
        f"Approximately {m.finished_width_in:.0f}\" × {m.finished_height_in:.0f}\" "
        f"({m.finished_width_cm:.0f} cm × {m.finished_height_cm:.0f} cm), "
        f"{SQUARE_SIZE_INCHES:g}\" per square, including {BORDER_WIDTH}-square wide borders",
        "## Pattern Notes\n"
        "- This is a corner-to-corner (C2C) crochet pattern\n"
        f"- Each day of {username}'s GitHub activity is a 2 × 2 block of squares\n"
        f"- Years are stacked vertically, newest ({years[0]}) at top, oldest ({years[-1]}) at bottom\n"
        f"- Pattern covers: {years_label}\n"
        f"- Total commits represented: {pattern.total_count}\n"
        f"- All borders are {BORDER_WIDTH} squares wide",
        "## Abbreviations (US terms)\n"
        "- ch - chain\n"
        "- dc - double crochet\n"
        "- slst - slip stitch",
        "## Instructions\n\n"
        "### Corner-to-Corner Technique\n\n"
        "Follow the pattern starting in the bottom left corner and working diagonally "
        "to the top right corner.\n\n"
        "R1 - ch 6, dc in 4th ch from hook, dc in next 2 ch, turn\n"
        "R2 - ch 6, dc in 4th ch from hook, dc in next 2 ch, slst in top of 3 ch loop "
        "in previous row, ch 3, 3 dc in the chain space, turn\n"
        "R3 - ch 6, dc in 4th ch from hook, dc in next 2 ch, slst in top of 3 ch loop "
        "in previous row, ch 3, 3 dc in the chain space, slst in top of 3 ch loop in "
        "previous row, ch 3, 3 dc in the chain space, turn\n"
        "Continue increasing until you reach the full width of the pattern. The blanket "
        "is not square: once you reach the full width, keep working in the established "
        "pattern but skip the final square.\n\n"
        "Decreasing rows: turn and slst into the 3 dc you just made and into the top of "
        "the ch 3 loop. Ch 3, 3 dc into the ch space, slst into the top of the ch 3 loop.\n\n"
        "When switching colors, change on the second half of the last double crochet of "
        "the previous square.",
        "### Pattern Structure\n" + structure,
        "### Color Guide\n"
        "- Follow the printable grid below\n"
        "- Each cell = 1 C2C square\n"
        f"- Years are separated by {2 * BORDER_WIDTH}-square tall {selected.label.lower()} "
        "border sections\n"
        f"- Total pattern size: {m.width_squares} × {m.height_squares} squares "
        "(including borders)\n"
        f"{level_lines}",
        "### Pattern Grid (Printable)\n"
        "Each symbol represents a yarn color:\n"
        f"{legend}\n\n"
        "Print this section in a monospace font (such as Courier or Consolas) so "
        "the columns line up.\n\n"
        + render_transcript(pattern).rstrip("\n"),
        f"### Border ({selected.label} Mode)\n"
        f"All borders are {BORDER_WIDTH} squares wide using {selected.border_yarn} yarn:\n"
        f"- Top border: {BORDER_WIDTH} squares tall\n"
        f"- Bottom border: {BORDER_WIDTH} squares tall\n"
        f"- Left border: {BORDER_WIDTH} squares wide\n"
        f"- Right border: {BORDER_WIDTH} squares wide\n"
        f"- Between years: {2 * BORDER_WIDTH} squares total ({BORDER_WIDTH} below one "
        f"year and {BORDER_WIDTH} above the next)\n\n"
        "Optional edging around the finished blanket:\n\n"
        "R1: Join yarn in the middle of an edge, ch 1, sc into same st and each st "
        "around, working 3 sc in each corner, slst into first sc.\n"
        "R2: Ch 2, dc into same st and each st around, working 3 dc in each corner, "
        "slst into first dc.\n"
        "R3: Ch 1, sc into same st and each st around, working 3 sc in each corner, "
        "slst into first sc. Bind off.",
        "### Finishing\n"
        "1. Weave in all ends securely\n"
        "2. Block if desired for crisp edges\n"
        "3. Enjoy your personalized commit graph blanket!",
        "## Pattern Statistics\n"
        f"- Total squares: {m.total_squares}\n"
        f"- Data squares: {m.data_squares}\n"
        f"- Border squares: {m.border_squares}\n"
        f"- Years stacked: {m.year_count}\n"
        f"- Years included: {years_label}\n"
        f"- Created from {username}'s GitHub activity",
        "Generated by Commit Graphghan Generator",
    ]
    return "\n\n".join(sections) + "\n"


def export_pattern(
    pattern: Pattern,
    username: str,
    theme: Optional[Union[str, ThemeId]] = None,
) -> PatternExport:
    """Instructions document plus its download filename."""
    content = generate_instructions(pattern, username, theme)
    filename = export_filename(username, pattern)
    logger.info("Exported %s (%d characters)", filename, len(content))
    return PatternExport(filename=filename, content=content)
