"""
Tests for the transcript, measurements and the instructions document.
"""

from datetime import date

import numpy as np
import pytest

from graphghan.config import BORDER_LEVEL
from graphghan.engine.export_synthesizer import (
    compute_measurements,
    export_filename,
    export_pattern,
    generate_instructions,
    parse_transcript,
    render_transcript,
)
from graphghan.engine.year_stacker import build_pattern
from graphghan.errors import EmptyPatternError
from graphghan.models.pattern import Pattern

COUNTS = {
    2022: {date(2022, 1, 1): 2, date(2022, 6, 15): 12},
    2023: {date(2023, 3, 1): 4, date(2023, 3, 2): 7, date(2023, 12, 31): 1},
}

EMPTY = Pattern(years=(), year_grids=(), total_count=0)


class TestTranscript:
    def setup_method(self):
        self.pattern = build_pattern([2022, 2023], COUNTS)
        self.text = render_transcript(self.pattern)

    def test_shape(self):
        lines = self.text.splitlines()
        assert len(lines) == 2 * 18
        assert all(len(line) == 110 for line in lines)
        assert self.text.endswith("\n")

    def test_symbols(self):
        assert set(self.text) <= set("01234B\n")
        assert self.text.splitlines()[0] == "B" * 110

    def test_newest_year_first(self):
        lines = self.text.splitlines()
        first_year = parse_transcript("\n".join(lines[:18]))[0]
        assert np.array_equal(first_year, self.pattern.grid_for(2023).levels)

    def test_round_trip_every_square(self):
        decoded = parse_transcript(self.text)
        assert len(decoded) == len(self.pattern.year_grids)
        for levels, grid in zip(decoded, self.pattern.year_grids):
            for row in range(grid.rows):
                for col in range(grid.cols):
                    assert levels[row, col] == grid.level_at(row, col)

    def test_stable(self):
        assert render_transcript(build_pattern([2023, 2022], COUNTS)) == self.text

    def test_border_marker_is_not_a_digit(self):
        line = self.text.splitlines()[0]
        assert not line[0].isdigit()

    def test_parse_rejects_unknown_symbol(self):
        bad = self.text.replace("B", "X", 1)
        with pytest.raises(ValueError, match="Unknown symbol 'X'"):
            parse_transcript(bad)

    def test_parse_rejects_partial_year(self):
        with pytest.raises(ValueError, match="multiple of 18"):
            parse_transcript("\n".join(self.text.splitlines()[:17]))

    def test_parse_rejects_short_row(self):
        lines = self.text.splitlines()
        lines[3] = lines[3][:-1]
        with pytest.raises(ValueError, match="expected 110"):
            parse_transcript("\n".join(lines))

    def test_empty_pattern(self):
        with pytest.raises(EmptyPatternError):
            render_transcript(EMPTY)


class TestMeasurements:
    def test_two_years(self):
        m = compute_measurements(build_pattern([2022, 2023], COUNTS))
        assert m.year_count == 2
        assert m.width_squares == 110
        assert m.height_squares == 36
        assert m.total_squares == 2 * 1980
        assert m.data_squares == 2 * 1484
        assert m.border_squares == 2 * 496
        assert m.squares_per_level[BORDER_LEVEL] == 2 * 496
        assert sum(m.squares_per_level.values()) == m.total_squares

    def test_finished_size_uses_square_scale(self):
        m = compute_measurements(build_pattern([2023], COUNTS))
        assert m.square_size_in == 3.0
        assert m.finished_width_in == 330.0
        assert m.finished_height_in == 54.0
        assert m.finished_width_cm == pytest.approx(838.2)

    def test_level_counts(self):
        m = compute_measurements(build_pattern([2023], COUNTS))
        # 4 -> level 2, 7 -> level 3, 1 -> level 1, one 2x2 block each
        assert m.squares_per_level[1] == 4
        assert m.squares_per_level[2] == 4
        assert m.squares_per_level[3] == 4
        assert m.squares_per_level[4] == 0

    def test_empty_pattern(self):
        with pytest.raises(EmptyPatternError):
            compute_measurements(EMPTY)


class TestInstructions:
    def setup_method(self):
        self.pattern = build_pattern([2022, 2023], COUNTS)

    def test_contains_transcript_verbatim(self):
        doc = generate_instructions(self.pattern, "octocat", "light")
        assert render_transcript(self.pattern).rstrip("\n") in doc

    def test_materials_list_six_colors(self):
        doc = generate_instructions(self.pattern, "octocat", "light")
        for name, hex_code in [
            ("Cream", "#f8f9fa"),
            ("Light Green", "#c6e48b"),
            ("Medium Green", "#7bc96f"),
            ("Dark Green", "#239a3b"),
            ("Forest Green", "#196127"),
            ("Border", "#e9ecef"),
        ]:
            assert f"{name} ({hex_code})" in doc

    def test_per_year_structure_and_totals(self):
        doc = generate_instructions(self.pattern, "octocat")
        assert "- 2023: 106 × 14 squares plus border (110 × 18), 12 commits" in doc
        assert "- 2022: 106 × 14 squares plus border (110 × 18), 14 commits" in doc
        assert doc.index("- 2023:") < doc.index("- 2022:")
        assert "Total commits represented: 26" in doc

    def test_header_and_stats(self):
        doc = generate_instructions(self.pattern, "octocat")
        assert doc.startswith("# octocat's GitHub Graphghan Pattern")
        assert "newest (2023) at top, oldest (2022) at bottom" in doc
        assert "- Total squares: 3960" in doc
        assert "- Border squares: 992" in doc

    def test_unknown_theme_falls_back_to_default(self):
        doc = generate_instructions(self.pattern, "octocat", "ultraviolet")
        assert doc == generate_instructions(self.pattern, "octocat", "light")
        assert "### Border (Light Mode)" in doc

    def test_spooky_theme(self):
        doc = generate_instructions(self.pattern, "octocat", "spooky")
        assert "Burnt Orange (#d94701)" in doc
        assert "using Pumpkin Orange yarn" in doc

    def test_deterministic(self):
        a = generate_instructions(self.pattern, "octocat", "dark")
        b = generate_instructions(build_pattern([2023, 2022], COUNTS), "octocat", "dark")
        assert a == b

    def test_empty_pattern(self):
        with pytest.raises(EmptyPatternError):
            generate_instructions(EMPTY, "octocat")


class TestExportFile:
    def test_filename(self):
        pattern = build_pattern([2022, 2023], COUNTS)
        assert export_filename("octocat", pattern) == "octocat-2023-2022.txt"

    def test_username_copied_unmodified(self):
        pattern = build_pattern([2023], COUNTS)
        assert export_filename("we ird/Name", pattern) == "we ird/Name-2023.txt"

    def test_pdf_extension(self):
        pattern = build_pattern([2022, 2023], COUNTS)
        assert export_filename("octocat", pattern, extension="pdf") == "octocat-2023-2022.pdf"

    def test_export_pattern(self):
        pattern = build_pattern([2023], COUNTS)
        export = export_pattern(pattern, "octocat", "dark")
        assert export.filename == "octocat-2023.txt"
        assert export.content == generate_instructions(pattern, "octocat", "dark")

    def test_empty_pattern(self):
        with pytest.raises(EmptyPatternError):
            export_pattern(EMPTY, "octocat")
