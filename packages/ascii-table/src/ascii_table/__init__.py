"""ascii-table: bordered text tables for the terminal, ANSI-aware."""

# Configuration
from ascii_table.config import (
    Align,
    ColumnConfig,
    TableConfig,
    config_from_dict,
    config_to_dict,
    load_config,
)

# Layout
from ascii_table.layout import Layout, ResolvedColumn, resolve_layout

# Cell and frame rendering
from ascii_table.cell import make_cell
from ascii_table.frame import format_empty

# Styled text
from ascii_table.styled_text import Segment, StyledText, to_styled_text

# Front end
from ascii_table.table import AsciiTable, format_table, print_table

__all__ = [
    # Config
    "Align",
    "ColumnConfig",
    "TableConfig",
    "config_from_dict",
    "config_to_dict",
    "load_config",
    # Layout
    "Layout",
    "ResolvedColumn",
    "resolve_layout",
    # Rendering
    "format_empty",
    "make_cell",
    # Styled text
    "Segment",
    "StyledText",
    "to_styled_text",
    # Front end
    "AsciiTable",
    "format_table",
    "print_table",
]
