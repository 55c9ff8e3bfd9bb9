"""Column layout: validity, per-column settings and width fitting."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ascii_table.config import Align, ColumnConfig, TableConfig
from ascii_table.styled_text import StyledText, to_styled_text

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedColumn:
    """Column settings with every default filled in."""

    header: StyledText
    align: Align
    max_width: int | None


@dataclass
class Layout:
    rows: list[list[StyledText]]
    columns: list[ResolvedColumn]
    widths: list[int]
    has_header: bool


def frame_padding(num_cols: int) -> int:
    """Characters taken by borders, cell padding and separators."""
    return 3 * (num_cols - 1) + 4


def num_columns(rows: list[list[StyledText]]) -> int:
    return max((len(row) for row in rows), default=0)


def is_valid(rows: list[list[StyledText]], config: TableConfig) -> bool:
    if not rows:
        logger.debug("Degenerate table: no rows")
        return False
    cols = num_columns(rows)
    if cols == 0:
        logger.debug("Degenerate table: no columns")
        return False
    if config.max_width < frame_padding(cols):
        logger.debug(
            "Degenerate table: max_width %d below frame of %d for %d columns",
            config.max_width,
            frame_padding(cols),
            cols,
        )
        return False
    return True


def square_rows(rows: list[list[StyledText]], num_cols: int) -> list[list[StyledText]]:
    """Right-pad each row with empty cells up to *num_cols*."""
    return [list(row) + [StyledText() for _ in range(num_cols - len(row))] for row in rows]


def resolve_column_config(config: TableConfig, num_cols: int) -> list[ResolvedColumn]:
    """Turn the sparse column mapping into one entry per column.

    Columns configured beyond *num_cols* are ignored.
    """
    result: list[ResolvedColumn] = []
    for index in range(num_cols):
        column = config.columns.get(index) or ColumnConfig()
        result.append(
            ResolvedColumn(
                header=to_styled_text(column.header),
                align=column.align or config.default_align,
                max_width=column.max_width,
            )
        )
    return result


def column_widths(rows: list[list[StyledText]], columns: list[ResolvedColumn]) -> list[int]:
    """Natural width of each column, capped by its ``max_width``."""
    widths: list[int] = []
    for index, column in enumerate(columns):
        width = column.header.visible_length()
        for row in rows:
            width = max(width, row[index].visible_length())
        if column.max_width is not None:
            width = max(min(width, column.max_width), 0)
        widths.append(width)
    return widths


def shrink_widths(widths: list[int], max_width: int) -> list[int]:
    """Shrink *widths* until the framed table fits in *max_width*.

    Each step takes one character from the widest column, the rightmost
    one on ties.
    """
    widths = list(widths)
    if not widths:
        return widths
    padding = frame_padding(len(widths))
    while sum(widths) + padding > max_width and max(widths) > 0:
        widest = max(widths)
        index = len(widths) - 1 - widths[::-1].index(widest)
        widths[index] -= 1
    return widths


def resolve_layout(rows: list[list[StyledText]], config: TableConfig) -> Layout | None:
    """Compute the layout for *rows*, or ``None`` for a degenerate table."""
    if not is_valid(rows, config):
        return None

    cols = num_columns(rows)
    rows = square_rows(rows, cols)
    columns = resolve_column_config(config, cols)
    natural = column_widths(rows, columns)
    widths = shrink_widths(natural, config.max_width)
    if widths != natural:
        logger.debug("Shrunk column widths %s -> %s to fit %d", natural, widths, config.max_width)

    has_header = any(column.header.visible_length() > 0 for column in columns)
    return Layout(rows=rows, columns=columns, widths=widths, has_header=has_header)
