"""Render a single cell to an exact visible width."""

from __future__ import annotations

from ascii_table.config import Align
from ascii_table.styled_text import StyledText

TRUNCATION_MARKER = "+"


def make_cell(text: StyledText, width: int, align: Align, pad: str = " ") -> StyledText:
    """Return a copy of *text* that is exactly *width* visible characters.

    Text that is too long loses trailing characters and its last visible
    character is replaced by ``+``.  Shorter text is padded according to
    *align*; centering puts an odd leftover on the right.
    """
    result = text.copy()

    if result.visible_length() > width:
        while result.visible_length() > width:
            if result.pop_visible() is None:
                break
        if result.pop_visible() is not None:
            result.push_visible(TRUNCATION_MARKER)
        return result

    if align == "left":
        while result.visible_length() < width:
            result.push_visible(pad)
    elif align == "right":
        while result.visible_length() < width:
            result.insert_visible_front(pad)
    else:
        while result.visible_length() < width:
            result.push_visible(pad)
            if result.visible_length() < width:
                result.insert_visible_front(pad)
    return result
