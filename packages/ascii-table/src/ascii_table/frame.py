"""Box-drawing frame: borders, separators and cell lines."""

from __future__ import annotations

from ascii_table.styled_text import StyledText

# Glyphs named by the directions their strokes point to
SE = "┌"
SW = "┐"
NE = "└"
NW = "┘"
NS = "│"
EW = "─"
EWS = "┬"
NES = "├"
NWS = "┤"
NEW = "┴"
NEWS = "┼"


def format_line(cells: list[StyledText], head: str, delim: str, tail: str) -> str:
    return head + delim.join(str(cell) for cell in cells) + tail + "\n"


def _border(widths: list[int], left: str, junction: str, right: str) -> str:
    fills = [StyledText.plain(EW * width) for width in widths]
    return format_line(fills, left + EW, EW + junction + EW, EW + right)


def format_first(widths: list[int]) -> str:
    return _border(widths, SE, EWS, SW)


def format_middle(widths: list[int]) -> str:
    return _border(widths, NES, NEWS, NWS)


def format_last(widths: list[int]) -> str:
    return _border(widths, NE, NEW, NW)


def format_row(cells: list[StyledText]) -> str:
    """Cell line for already rendered cells."""
    return format_line(cells, NS + " ", " " + NS + " ", " " + NS)


def format_empty() -> str:
    """Fallback frame for tables that cannot be laid out."""
    return format_first([0]) + format_row([StyledText()]) + format_last([0])
