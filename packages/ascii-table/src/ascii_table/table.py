"""Table front end: format rows into a framed block and print it."""

from __future__ import annotations

from typing import IO, Any, Iterable

import click

from ascii_table.cell import make_cell
from ascii_table.config import Align, ColumnConfig, TableConfig, check_align, check_width
from ascii_table.frame import format_empty, format_first, format_last, format_middle, format_row
from ascii_table.layout import resolve_layout
from ascii_table.styled_text import StyledText, to_styled_text

Rows = Iterable[Iterable[Any]]


def stringify(rows: Rows) -> list[list[StyledText]]:
    return [[to_styled_text(value) for value in row] for row in rows]


def format_table(rows: Rows, config: TableConfig | None = None) -> str:
    """Render *rows* as a bordered text block.

    Values are converted with ``str()`` unless they already are
    :class:`StyledText`.  Input that cannot be laid out renders as an
    empty one-cell frame.
    """
    if config is None:
        config = TableConfig()

    layout = resolve_layout(stringify(rows), config)
    if layout is None:
        return format_empty()

    widths = layout.widths
    lines = [format_first(widths)]
    if layout.has_header:
        headers = [
            make_cell(column.header, width, "left")
            for column, width in zip(layout.columns, widths)
        ]
        lines.append(format_row(headers))
        lines.append(format_middle(widths))
    for row in layout.rows:
        cells = [
            make_cell(cell, width, column.align)
            for cell, width, column in zip(row, widths, layout.columns)
        ]
        lines.append(format_row(cells))
    lines.append(format_last(widths))
    return "".join(lines)


def print_table(rows: Rows, config: TableConfig | None = None, *, file: IO[str] | None = None) -> None:
    """Write the formatted table to *file* (stdout by default)."""
    click.echo(format_table(rows, config), file=file, nl=False, color=True)


class AsciiTable:
    """Builder-style wrapper around :class:`TableConfig`.

    Example::

        table = AsciiTable(max_width=40)
        table.column(0).set_header("Name")
        table.column(1).set_header("Score").set_align("right")
        table.print([["alice", 10], ["bob", 7]])
    """

    def __init__(self, max_width: int | None = None, default_align: Align = "left") -> None:
        self._config = TableConfig()
        self.set_default_align(default_align)
        if max_width is not None:
            self.set_max_width(max_width)

    @classmethod
    def from_config(cls, config: TableConfig) -> AsciiTable:
        table = cls(max_width=config.max_width, default_align=config.default_align)
        for index, column in config.columns.items():
            table._config.columns[index] = ColumnConfig(
                header=column.header, align=column.align, max_width=column.max_width
            )
        return table

    @property
    def max_width(self) -> int:
        return self._config.max_width

    @property
    def default_align(self) -> Align:
        return self._config.default_align

    def set_max_width(self, max_width: int) -> AsciiTable:
        self._config.max_width = check_width(max_width, "max_width")
        return self

    def set_default_align(self, align: Align) -> AsciiTable:
        self._config.default_align = check_align(align, "default_align")
        return self

    def column(self, index: int) -> ColumnConfig:
        """Settings for column *index*, created on first access."""
        if index < 0:
            raise ValueError(f"Column index must not be negative, got {index}")
        return self._config.columns.setdefault(index, ColumnConfig())

    @property
    def config(self) -> TableConfig:
        """Snapshot of the current settings."""
        return TableConfig(
            max_width=self._config.max_width,
            default_align=self._config.default_align,
            columns={
                index: ColumnConfig(header=c.header, align=c.align, max_width=c.max_width)
                for index, c in self._config.columns.items()
            },
        )

    def format(self, rows: Rows) -> str:
        return format_table(rows, self._config)

    def print(self, rows: Rows, file: IO[str] | None = None) -> None:
        print_table(rows, self._config, file=file)
