"""Tests for application/render/rich_layout.py.

Expected output is spelled out line by line with the colorless
backend; tests/factories.py lists the text of files a, b and c.
"""

import logging

import pytest

from spanreport.domain.model.config import DEFAULT_CONFIG
from spanreport.domain.model.diagnostic import error, note, warning
from spanreport.infrastructure.sources import SourceFile
from tests.factories import FILE_B, FILE_C, loc, make_source, plain_lines


class TestHeaderAndFrame:
    """Header line, block header and bottom border."""

    def test_primary_only(self) -> None:
        assert plain_lines(error("type mismatch", loc(4, 9, 13), "expected int")) == [
            "Error: type mismatch",
            "   ╭─ a ─╴",
            "   │",
            " 4 │     call(args);",
            "   │          ^^^^ expected int",
            "───╯",
        ]

    def test_primary_mark_without_sub_message(self) -> None:
        lines = plain_lines(error("type mismatch", loc(4, 9, 13)))
        assert lines[-2] == "   │          ^^^^"

    def test_multiline_sub_message(self) -> None:
        lines = plain_lines(error("e", loc(4, 9, 13), "expected int\nfound str"))
        assert lines[4] == "   │          ^^^^ expected int"
        assert lines[5] == "   │" + " " * 15 + "found str"

    def test_code_in_label(self) -> None:
        lines = plain_lines(warning("unused", loc(2, 8, 9), code="W12"))
        assert lines[0] == "Warning(W12): unused"

    def test_empty_message_suppresses_header(self) -> None:
        lines = plain_lines(error("", loc(4, 9, 13)))
        assert lines[0] == "   ╭─ a ─╴"

    def test_border_paddings(self) -> None:
        config = DEFAULT_CONFIG.replace(border_padding_top=0, border_padding_bottom=2)
        assert plain_lines(error("e", loc(4, 9, 13)), config) == [
            "Error: e",
            "   ╭─ a ─╴",
            " 4 │     call(args);",
            "   │          ^^^^",
            "   │",
            "   │",
            "───╯",
        ]

    def test_gutter_paddings(self) -> None:
        config = DEFAULT_CONFIG.replace(gutter_padding_left=2, gutter_padding_right=2)
        lines = plain_lines(error("e", loc(4, 9, 13)), config)
        assert lines[1] == "     ╭─ a ─╴"
        assert lines[3] == "  4  │     call(args);"
        assert lines[-1] == "─────╯"


class TestScenario:
    """Primary in a, note in a, help in b."""

    def test_rich(self) -> None:
        diagnostic = (
            error("type mismatch", loc(4, 9, 13))
            .with_note("declared here", loc(1, 0, 8))
            .with_help("see also", loc(1, 0, 8, FILE_B))
        )
        assert plain_lines(diagnostic) == [
            "Error: type mismatch",
            "   ╭─ a ─╴",
            "   │",
            " 1 │ int main() {",
            "   │ ~~~~~~~~ declared here",
            " ⋯",
            " 4 │     call(args);",
            "   │          ^^^^",
            "───╯",
            "   ╭─ b ─╴",
            "   │",
            " 1 │ #include <stdio.h>",
            "   │ ~~~~~~~~ see also",
            "───╯",
        ]


class TestGaps:
    """Bridge lines and ellipsis rows."""

    def test_single_skipped_line_is_bridged(self) -> None:
        diagnostic = error("e").with_note("five", loc(5, 11, 12)).with_note("seven", loc(7, 0, 2))
        assert plain_lines(diagnostic) == [
            "Error: e",
            "   ╭─ a ─╴",
            "   │",
            " 5 │     return x;",
            "   │            ~ five",
            " 6 │ }",
            " 7 │ // seven",
            "   │ ~~ seven",
            "───╯",
        ]

    def test_larger_gap_is_elided(self) -> None:
        diagnostic = error("e").with_note("five", loc(5, 11, 12)).with_note("nine", loc(9, 0, 2))
        lines = plain_lines(diagnostic)
        assert lines[5] == " ⋯"
        assert lines[6] == " 9 │ // nine"
        assert not any(line.startswith((" 6", " 7", " 8")) for line in lines)

    def test_adjacent_lines_have_no_separator(self) -> None:
        diagnostic = error("e", loc(4, 9, 13)).with_note("three", loc(3, 4, 9))
        lines = plain_lines(diagnostic)
        assert lines[3] == " 3 │     float y = 2.0;"
        assert lines[4] == "   │     ~~~~~ three"
        assert lines[5] == " 4 │     call(args);"

    def test_two_digit_gutter(self) -> None:
        diagnostic = error("e", loc(4, 9, 13)).with_note("end", loc(12, 3, 9))
        lines = plain_lines(diagnostic)
        assert lines[1] == "    ╭─ a ─╴"
        assert lines[3] == " 4  │     call(args);"
        assert lines[5] == " ··"
        assert lines[6] == " 12 │ // twelve"
        assert lines[7] == "    │    ~~~~~~ end"
        assert lines[8] == "────╯"


class TestPrimaryLine:
    """Marker placement on the primary's own line."""

    def test_mark_above_when_line_is_shared(self) -> None:
        diagnostic = error("type mismatch", loc(4, 9, 13), "expected int").with_note("callee", loc(4, 4, 8))
        assert plain_lines(diagnostic) == [
            "Error: type mismatch",
            "   ╭─ a ─╴",
            "   │",
            "   │          expected int",
            "   │          vvvv",
            " 4 │     call(args);",
            "   │     ~~~~ callee",
            "───╯",
        ]

    def test_exact_location_is_label_only(self) -> None:
        diagnostic = error("e", loc(4, 9, 13), "here").with_note("also here", loc(4, 9, 13))
        assert plain_lines(diagnostic)[3:] == [
            " 4 │     call(args);",
            "   │          ^^^^ here",
            "   │          ╰ also here",
            "───╯",
        ]

    def test_exact_location_does_not_move_mark_above(self) -> None:
        diagnostic = error("e", loc(4, 9, 13)).with_note("same", loc(4, 9, 13))
        assert not any("v" in line for line in plain_lines(diagnostic) if "│" in line and "call" not in line)

    def test_exact_and_shared_line(self) -> None:
        diagnostic = (
            error("e", loc(4, 9, 13))
            .with_note("same", loc(4, 9, 13))
            .with_note("callee", loc(4, 4, 8))
        )
        assert plain_lines(diagnostic)[3:] == [
            "   │          vvvv",
            " 4 │     call(args);",
            "   │     ~~~~ │",
            "   │     │    ╰ same",
            "   │     ╰ callee",
            "───╯",
        ]


class TestStacking:
    """Several secondaries on one line."""

    def test_overlapping_spans_use_depth_rows(self) -> None:
        diagnostic = (
            error("e", loc(4, 9, 13))
            .with_note("A", loc(3, 0, 5))
            .with_note("B", loc(3, 2, 8))
            .with_note("C", loc(3, 6, 10))
        )
        assert plain_lines(diagnostic)[3:9] == [
            " 3 │     float y = 2.0;",
            "   │ ~~~~~ ~~~~",
            "   │ │ ~~~~~~",
            "   │ │ │   ╰ C",
            "   │ │ ╰ B",
            "   │ ╰ A",
        ]

    def test_disjoint_spans_share_a_row(self) -> None:
        diagnostic = error("e", loc(4, 9, 13)).with_note("kw", loc(3, 4, 9)).with_note("val", loc(3, 14, 17))
        assert plain_lines(diagnostic)[3:8] == [
            " 3 │     float y = 2.0;",
            "   │     ~~~~~     ~~~",
            "   │     │         ╰ val",
            "   │     ╰ kw",
            " 4 │     call(args);",
        ]

    def test_nested_span_escalates_glyph(self) -> None:
        diagnostic = error("e", loc(4, 9, 13)).with_note("outer", loc(3, 4, 17)).with_note("inner", loc(3, 10, 11))
        assert plain_lines(diagnostic)[3:7] == [
            " 3 │     float y = 2.0;",
            "   │     ~~~~~~=~~~~~~",
            "   │     │     ╰ inner",
            "   │     ╰ outer",
        ]

    def test_merged_labels_share_one_underline(self) -> None:
        diagnostic = error("e", loc(4, 9, 13)).with_note("first", loc(2, 8, 9)).with_help("second", loc(2, 8, 9))
        lines = plain_lines(diagnostic)
        assert lines[3:8] == [
            " 2 │     int x = 1;",
            "   │         ~",
            "   │         ╰ first",
            "   │         ╰ second",
            " 3 │     float y = 2.0;",
        ]
        assert sum(1 for line in lines if "~" in line) == 1

    def test_child_labels_parent_span_and_keeps_gutter(self) -> None:
        parent = note("", loc(2, 8, 9), "first")
        parent.attach(note("", loc(12, 0, 2), "deep"))
        lines = plain_lines(error("e", loc(4, 9, 13)).attach(parent))
        assert lines[1] == "   ╭─ a ─╴"
        assert lines[3:8] == [
            " 2 │     int x = 1;",
            "   │         ~",
            "   │         ╰ first",
            "   │         ╰ deep",
            " 3 │     float y = 2.0;",
        ]
        assert not any(line.startswith(" 12") for line in lines)

    def test_multiline_label_keeps_connectors(self) -> None:
        diagnostic = (
            error("e", loc(4, 9, 13))
            .with_note("left", loc(3, 4, 9))
            .with_note("right one\nright two", loc(3, 14, 17))
        )
        assert plain_lines(diagnostic)[4:8] == [
            "   │     ~~~~~     ~~~",
            "   │     │         ╰ right one",
            "   │     │           right two",
            "   │     ╰ left",
        ]

    def test_inline_multiline_label(self) -> None:
        diagnostic = error("e", loc(4, 9, 13)).with_note("one\ntwo", loc(3, 4, 9))
        assert plain_lines(diagnostic)[4:6] == [
            "   │     ~~~~~ one",
            "   │           two",
        ]


class TestFiles:
    """File blocks."""

    def test_one_block_per_file_ordered_by_name(self) -> None:
        diagnostic = (
            error("e", loc(4, 9, 13))
            .with_note("in c", loc(1, 0, 1, FILE_C))
            .with_note("in b", loc(2, 0, 4, FILE_B))
            .with_note("in a", loc(1, 0, 3))
        )
        lines = plain_lines(diagnostic)
        headers = [line.strip() for line in lines if "╭─" in line]
        assert headers == ["╭─ a ─╴", "╭─ b ─╴", "╭─ c ─╴"]
        assert sum(1 for line in lines if line.endswith("╯")) == 3
        b_at = lines.index("   ╭─ b ─╴")
        c_at = lines.index("   ╭─ c ─╴")
        assert any("in b" in line for line in lines[b_at:c_at])
        assert not any("in c" in line for line in lines[b_at:c_at])

    def test_unlocated_primary_still_shows_secondary_files(self) -> None:
        lines = plain_lines(error("e").with_note("in b", loc(2, 0, 4, FILE_B)))
        assert lines[0] == "Error: e"
        assert lines[1] == "   ╭─ b ─╴"
        assert lines[-1] == "───╯"

    def test_primary_file_block_without_secondaries_in_it(self) -> None:
        lines = plain_lines(error("e", loc(4, 9, 13)).with_note("elsewhere", loc(1, 0, 8, FILE_B)))
        assert [line.strip() for line in lines if "╭─" in line] == ["╭─ a ─╴", "╭─ b ─╴"]


class TestBullets:
    """Unlocated secondaries."""

    def test_bullets_after_border(self) -> None:
        diagnostic = (
            error("e", loc(4, 9, 13))
            .with_help("a general help message,\nnot set to any position")
            .with_note("can also be a note")
        )
        assert plain_lines(diagnostic)[-4:] == [
            "───╯",
            "   • Help: a general help message,",
            "           not set to any position",
            "   • Note: can also be a note",
        ]

    def test_located_before_unlocated(self) -> None:
        diagnostic = error("e", loc(4, 9, 13)).with_note("free").with_note("bound", loc(2, 8, 9))
        lines = plain_lines(diagnostic)
        bound_at = next(i for i, line in enumerate(lines) if "bound" in line)
        free_at = next(i for i, line in enumerate(lines) if "free" in line)
        assert bound_at < free_at

    def test_without_any_location(self) -> None:
        assert plain_lines(error("e").with_note("n")) == ["Error: e", "   • Note: n"]


class TestTabs:
    """Tabs expand identically in text, marks and underlines."""

    def test_primary_after_tab(self) -> None:
        tabbed = SourceFile("tabbed")
        source = make_source(tabbed="\tx = y;\n")
        lines = plain_lines(error("e", loc(1, 1, 2, tabbed), "here"), source=source)
        assert lines[3] == " 1 │     x = y;"
        assert lines[4] == "   │     ^ here"

    def test_underline_spans_tab_width(self) -> None:
        tabbed = SourceFile("tabbed")
        source = make_source(tabbed="\tx = y;\n")
        diagnostic = error("e", loc(1, 5, 6, tabbed)).with_note("tab and x", loc(1, 0, 2, tabbed))
        assert plain_lines(diagnostic, source=source)[3:6] == [
            "   │         v",
            " 1 │     x = y;",
            "   │ ~~~~~ tab and x",
        ]

    def test_tab_width_from_config(self) -> None:
        tabbed = SourceFile("tabbed")
        source = make_source(tabbed="\tx = y;\n")
        config = DEFAULT_CONFIG.replace(tab_width=8)
        lines = plain_lines(error("e", loc(1, 1, 2, tabbed)), config, source)
        assert lines[3] == " 1 │         x = y;"
        assert lines[4] == "   │         ^"


class TestUnreadableSource:
    """Missing lines render empty and never abort the render."""

    def test_missing_file_renders_empty_line(self, caplog: pytest.LogCaptureFixture) -> None:
        missing = SourceFile("missing")
        with caplog.at_level(logging.WARNING, logger="spanreport.application.render.rich_layout"):
            lines = plain_lines(error("e", loc(2, 0, 3, missing)).with_note("n", loc(1, 0, 3)))
        assert " 2 │" in lines
        assert any("n" in line and "~~~" in line for line in lines)
        assert "missing" in caplog.text

    def test_line_out_of_range_renders_empty_line(self) -> None:
        lines = plain_lines(error("e", loc(40, 0, 3)))
        assert " 40 │" in lines
