"""Text with embedded ANSI SGR sequences, measured by its visible characters.

A :class:`StyledText` keeps the source string as an ordered list of
segments, each either visible (printable characters) or invisible (a run
such as ``ESC[1;31m``).  Length, padding and truncation only ever touch
visible segments, so escape sequences are reproduced exactly as captured.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

ESC = "\x1b"

# Characters allowed between ``ESC[`` and the terminating ``m``
_SGR_PARAMS = frozenset("[;0123456789")


@dataclass
class Segment:
    visible: bool
    text: str


class StyledText:
    """A displayable string split into visible and invisible segments."""

    def __init__(self, source: str = "") -> None:
        self._segments: list[Segment] = _scan(source)

    @classmethod
    def plain(cls, text: str) -> StyledText:
        """Build from text known to contain no escape sequences."""
        result = cls()
        if text:
            result._segments.append(Segment(True, text))
        return result

    @property
    def segments(self) -> tuple[Segment, ...]:
        return tuple(self._segments)

    def visible_length(self) -> int:
        return sum(len(seg.text) for seg in self._segments if seg.visible)

    def is_empty(self) -> bool:
        return all(not seg.text for seg in self._segments if seg.visible)

    def push_visible(self, char: str) -> None:
        """Append *char* to the last visible segment."""
        for seg in reversed(self._segments):
            if seg.visible:
                seg.text += char
                return
        self._segments.append(Segment(True, char))

    def insert_visible_front(self, char: str) -> None:
        """Prepend *char* to the first visible segment."""
        for seg in self._segments:
            if seg.visible:
                seg.text = char + seg.text
                return
        self._segments.insert(0, Segment(True, char))

    def pop_visible(self) -> str | None:
        """Remove and return the last visible character, or ``None``.

        Emptied segments stay in place so a following :meth:`push_visible`
        lands where the removed character was.
        """
        for seg in reversed(self._segments):
            if seg.visible and seg.text:
                char = seg.text[-1]
                seg.text = seg.text[:-1]
                return char
        return None

    def copy(self) -> StyledText:
        result = StyledText()
        result._segments = [Segment(seg.visible, seg.text) for seg in self._segments]
        return result

    def __str__(self) -> str:
        return "".join(seg.text for seg in self._segments)

    def __repr__(self) -> str:
        return f"StyledText({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StyledText):
            return NotImplemented
        return str(self) == str(other)

    def __hash__(self) -> int:
        return hash(str(self))


def _scan(source: str) -> list[Segment]:
    segments: list[Segment] = []
    buf: list[str] = []
    visible = True

    def flush() -> None:
        if buf:
            segments.append(Segment(visible, "".join(buf)))
            buf.clear()

    i = 0
    n = len(source)
    while i < n:
        ch = source[i]
        if visible:
            if ch == ESC and i + 1 < n and source[i + 1] == "[":
                flush()
                visible = False
            buf.append(ch)
        elif ch == "m":
            buf.append(ch)
            flush()
            visible = True
        elif ch in _SGR_PARAMS:
            buf.append(ch)
        else:
            # Malformed sequence: close it and re-read this char as visible
            flush()
            visible = True
            continue
        i += 1

    flush()
    return segments


def to_styled_text(value: Any) -> StyledText:
    """Convert any displayable value to :class:`StyledText`."""
    if isinstance(value, StyledText):
        return value
    return StyledText(str(value))
