"""Tests for ascii_table.styled_text -- visible/invisible segmented text."""

from __future__ import annotations

from ascii_table.styled_text import Segment, StyledText, to_styled_text


# ---------------------------------------------------------------------------
# Scanning
# ---------------------------------------------------------------------------


class TestScanning:
    """Split source strings into visible and invisible segments."""

    def test_plain_text_is_one_visible_segment(self) -> None:
        assert StyledText("hello").segments == (Segment(True, "hello"),)

    def test_empty_string_has_no_segments(self) -> None:
        text = StyledText("")
        assert text.segments == ()
        assert text.visible_length() == 0

    def test_sgr_sequences_are_invisible(self) -> None:
        text = StyledText("\x1b[1mhi\x1b[0m")
        assert text.segments == (
            Segment(False, "\x1b[1m"),
            Segment(True, "hi"),
            Segment(False, "\x1b[0m"),
        )
        assert text.visible_length() == 2

    def test_multiple_parameters(self) -> None:
        text = StyledText("a\x1b[1;31;42mbc")
        assert text.segments == (
            Segment(True, "a"),
            Segment(False, "\x1b[1;31;42m"),
            Segment(True, "bc"),
        )

    def test_round_trip_reproduces_source(self) -> None:
        source = "\x1b[32mok\x1b[0m then \x1b[1;4mbold\x1b[0m"
        assert str(StyledText(source)) == source

    def test_escape_without_bracket_is_visible(self) -> None:
        assert StyledText("\x1bx").visible_length() == 2

    def test_malformed_sequence_ends_at_unexpected_char(self) -> None:
        text = StyledText("\x1b[31xyz")
        assert text.segments == (Segment(False, "\x1b[31"), Segment(True, "xyz"))
        assert text.visible_length() == 3

    def test_malformed_sequence_followed_by_new_sequence(self) -> None:
        text = StyledText("\x1b[31\x1b[0mz")
        assert text.segments == (
            Segment(False, "\x1b[31"),
            Segment(False, "\x1b[0m"),
            Segment(True, "z"),
        )

    def test_unterminated_sequence_stays_invisible(self) -> None:
        text = StyledText("ab\x1b[12;3")
        assert text.segments == (Segment(True, "ab"), Segment(False, "\x1b[12;3"))
        assert text.visible_length() == 2
        assert str(text) == "ab\x1b[12;3"

    def test_plain_constructor_skips_scanning(self) -> None:
        text = StyledText.plain("\x1b[1m")
        assert text.segments == (Segment(True, "\x1b[1m"),)
        assert text.visible_length() == 4


# ---------------------------------------------------------------------------
# Emptiness
# ---------------------------------------------------------------------------


class TestIsEmpty:
    """Only visible content counts towards emptiness."""

    def test_empty(self) -> None:
        assert StyledText().is_empty()

    def test_only_escape_codes(self) -> None:
        assert StyledText("\x1b[31m\x1b[0m").is_empty()

    def test_visible_content(self) -> None:
        assert not StyledText("\x1b[31mx").is_empty()


# ---------------------------------------------------------------------------
# Mutation
# ---------------------------------------------------------------------------


class TestPushVisible:
    def test_appends_to_last_visible_segment(self) -> None:
        text = StyledText("\x1b[31mred\x1b[0m")
        text.push_visible(" ")
        assert str(text) == "\x1b[31mred \x1b[0m"
        assert text.visible_length() == 4

    def test_creates_segment_when_empty(self) -> None:
        text = StyledText()
        text.push_visible("x")
        assert text.segments == (Segment(True, "x"),)

    def test_creates_trailing_segment_after_escape_only(self) -> None:
        text = StyledText("\x1b[0m")
        text.push_visible("x")
        assert str(text) == "\x1b[0mx"


class TestInsertVisibleFront:
    def test_prepends_to_first_visible_segment(self) -> None:
        text = StyledText("\x1b[31mred\x1b[0m")
        text.insert_visible_front(" ")
        assert str(text) == "\x1b[31m red\x1b[0m"

    def test_creates_leading_segment_after_escape_only(self) -> None:
        text = StyledText("\x1b[0m")
        text.insert_visible_front("x")
        assert str(text) == "x\x1b[0m"


class TestPopVisible:
    def test_pops_across_segments_from_the_end(self) -> None:
        text = StyledText("\x1b[31mab\x1b[0mc")
        assert text.pop_visible() == "c"
        assert text.pop_visible() == "b"
        assert text.pop_visible() == "a"
        assert text.pop_visible() is None
        assert str(text) == "\x1b[31m\x1b[0m"

    def test_pop_on_empty_returns_none(self) -> None:
        assert StyledText().pop_visible() is None

    def test_push_after_pop_lands_in_emptied_segment(self) -> None:
        text = StyledText("\x1b[31mab\x1b[0mc")
        text.pop_visible()
        text.push_visible("+")
        assert str(text) == "\x1b[31mab\x1b[0m+"


# ---------------------------------------------------------------------------
# Copy, equality, conversion
# ---------------------------------------------------------------------------


class TestCopyAndConversion:
    def test_copy_is_independent(self) -> None:
        original = StyledText("\x1b[1mabc\x1b[0m")
        clone = original.copy()
        clone.pop_visible()
        clone.insert_visible_front(" ")
        assert str(original) == "\x1b[1mabc\x1b[0m"
        assert str(clone) == "\x1b[1m ab\x1b[0m"

    def test_equality_compares_raw_text(self) -> None:
        assert StyledText("\x1b[1ma") == StyledText("\x1b[1ma")
        assert StyledText("a") != StyledText("b")

    def test_to_styled_text_converts_values(self) -> None:
        assert str(to_styled_text(12)) == "12"
        assert to_styled_text("\x1b[2mx").visible_length() == 1

    def test_to_styled_text_passes_styled_text_through(self) -> None:
        text = StyledText("x")
        assert to_styled_text(text) is text
