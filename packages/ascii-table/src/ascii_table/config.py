"""Table configuration: dataclasses plus JSON loading.

A config file looks like::

    {
      "maxWidth": 100,
      "defaultAlign": "left",
      "columns": {"0": {"header": "Name"}, "2": {"align": "right", "maxWidth": 12}}
    }

``columns`` may also be a list, in which case the position is the index.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal, get_args

from ascii_table.styled_text import StyledText

logger = logging.getLogger(__name__)

Align = Literal["left", "center", "right"]

ALIGNMENTS: tuple[str, ...] = get_args(Align)

DEFAULT_MAX_WIDTH = 80

CONFIG_ENV_VAR = "ASCII_TABLE_CONFIG"
WIDTH_ENV_VAR = "ASCII_TABLE_WIDTH"


@dataclass
class ColumnConfig:
    """Per-column settings. ``None`` means "use the default"."""

    header: str | StyledText = ""
    align: Align | None = None
    max_width: int | None = None

    def __post_init__(self) -> None:
        if self.align is not None:
            check_align(self.align, "align")
        if self.max_width is not None:
            check_width(self.max_width, "max_width")

    def set_header(self, header: str | StyledText) -> ColumnConfig:
        self.header = header
        return self

    def set_align(self, align: Align) -> ColumnConfig:
        self.align = check_align(align, "align")
        return self

    def set_max_width(self, max_width: int | None) -> ColumnConfig:
        self.max_width = None if max_width is None else check_width(max_width, "max_width")
        return self


@dataclass
class TableConfig:
    """Whole-table settings with a sparse index -> column mapping."""

    max_width: int = DEFAULT_MAX_WIDTH
    default_align: Align = "left"
    columns: dict[int, ColumnConfig] = field(default_factory=dict)

    def __post_init__(self) -> None:
        check_width(self.max_width, "max_width")
        check_align(self.default_align, "default_align")


# ---------------------------------------------------------------------------
# Validation helpers
# ---------------------------------------------------------------------------


def check_align(value: Any, key: str) -> Align:
    if value not in ALIGNMENTS:
        raise ValueError(
            f"Invalid '{key}' value {value!r}, expected one of {', '.join(ALIGNMENTS)}"
        )
    return value


def check_width(value: Any, key: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"'{key}' must be an integer, got {value!r}")
    if value < 0:
        raise ValueError(f"'{key}' must not be negative, got {value}")
    return value


def _check_index(value: Any) -> int:
    try:
        index = int(value)
    except (TypeError, ValueError):
        raise ValueError(f"Column index must be an integer, got {value!r}") from None
    if index < 0:
        raise ValueError(f"Column index must not be negative, got {index}")
    return index


# ---------------------------------------------------------------------------
# Dict conversion
# ---------------------------------------------------------------------------


def column_from_dict(data: dict[str, Any]) -> ColumnConfig:
    """Deserialize a ColumnConfig from a JSON-compatible dict."""
    if not isinstance(data, dict):
        raise ValueError(f"Column config must be an object, got {data!r}")
    column = ColumnConfig()
    header = data.get("header")
    if header is None:
        header = ""
    if not isinstance(header, str):
        raise ValueError(f"'header' must be a string, got {header!r}")
    column.header = header
    if data.get("align") is not None:
        column.align = check_align(data["align"], "align")
    if data.get("maxWidth") is not None:
        column.max_width = check_width(data["maxWidth"], "maxWidth")
    return column


def column_to_dict(column: ColumnConfig) -> dict[str, Any]:
    """Serialize a ColumnConfig, omitting unset fields."""
    result: dict[str, Any] = {"header": str(column.header)}
    if column.align is not None:
        result["align"] = column.align
    if column.max_width is not None:
        result["maxWidth"] = column.max_width
    return result


def config_from_dict(data: dict[str, Any]) -> TableConfig:
    """Deserialize a TableConfig from a JSON-compatible dict."""
    if not isinstance(data, dict):
        raise ValueError(f"Table config must be an object, got {data!r}")
    config = TableConfig()
    if data.get("maxWidth") is not None:
        config.max_width = check_width(data["maxWidth"], "maxWidth")
    if data.get("defaultAlign") is not None:
        config.default_align = check_align(data["defaultAlign"], "defaultAlign")

    columns = data.get("columns") or {}
    if isinstance(columns, list):
        items = enumerate(columns)
    elif isinstance(columns, dict):
        items = columns.items()
    else:
        raise ValueError(f"'columns' must be an object or a list, got {columns!r}")
    for key, value in items:
        config.columns[_check_index(key)] = column_from_dict(value)
    return config


def config_to_dict(config: TableConfig) -> dict[str, Any]:
    """Serialize a TableConfig to a JSON-compatible dict."""
    return {
        "maxWidth": config.max_width,
        "defaultAlign": config.default_align,
        "columns": {
            str(index): column_to_dict(column)
            for index, column in sorted(config.columns.items())
        },
    }


# ---------------------------------------------------------------------------
# File loading
# ---------------------------------------------------------------------------


def load_config(path: str | Path | None = None) -> TableConfig:
    """Load a TableConfig from *path* or ``$ASCII_TABLE_CONFIG``.

    A missing file yields the defaults.  ``$ASCII_TABLE_WIDTH`` overrides
    ``max_width`` when set.
    """
    if path is None:
        env_path = os.environ.get(CONFIG_ENV_VAR)
        path = Path(env_path) if env_path else None
    else:
        path = Path(path)

    if path is not None and path.exists():
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e
        except OSError as e:
            raise ValueError(f"Cannot read config {path}: {e}") from e
        config = config_from_dict(data)
        logger.debug("Loaded table config from %s", path)
    else:
        config = TableConfig()

    width = os.environ.get(WIDTH_ENV_VAR)
    if width:
        try:
            config.max_width = check_width(int(width), WIDTH_ENV_VAR)
        except ValueError as e:
            raise ValueError(f"Invalid {WIDTH_ENV_VAR}: {e}") from e
    return config
