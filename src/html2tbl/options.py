#  Copyright (c) 2025 Tom Villani, Ph.D.

# html2tbl/options.py
"""Configuration options for HTML table to tbl conversion.

This module defines the frozen options dataclass consumed by the table
renderer and the document splicer.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from html2tbl.constants import (
    DEFAULT_COLUMN_SEPARATOR,
    DEFAULT_ESCAPE_CONTROL_LINES,
    DEFAULT_EXPAND_MARKER,
    DEFAULT_FAIL_ON_TABLE_ERRORS,
)


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class TableOptions(CloneFrozenMixin):
    """Configuration options for rendering HTML tables as tbl layout blocks.

    Parameters
    ----------
    column_separator : str, default "|"
        Single character declared in the ``tab(...)`` option and written
        between cells of a row.
    expand_marker : str, default "x"
        Suffix appended to the column token that absorbs extra width.
        Set to an empty string for tbl implementations that do not
        understand the ``x`` modifier (e.g. the one shipped with macOS).
    fail_on_table_errors : bool, default True
        When splicing tables into a document, raise on the first table that
        cannot be laid out. When False the table's markup is left unconverted
        and a warning is logged.
    escape_control_lines : bool, default True
        When splicing tables into a document, protect cell text that starts
        with a troff control character.

    """

    column_separator: str = field(
        default=DEFAULT_COLUMN_SEPARATOR,
        metadata={"help": "Column separator character used by tab(...) and between cells", "importance": "core"},
    )
    expand_marker: str = field(
        default=DEFAULT_EXPAND_MARKER,
        metadata={
            "help": "Suffix marking the expanding column ('x', or '' for tbl without expand support)",
            "importance": "advanced",
        },
    )
    fail_on_table_errors: bool = field(
        default=DEFAULT_FAIL_ON_TABLE_ERRORS,
        metadata={
            "help": "Raise on malformed tables when converting documents instead of leaving them unconverted",
            "importance": "core",
        },
    )
    escape_control_lines: bool = field(
        default=DEFAULT_ESCAPE_CONTROL_LINES,
        metadata={"help": "Escape cell lines beginning with '.' when converting documents", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate option values.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        if not isinstance(self.column_separator, str) or len(self.column_separator) != 1:
            raise ValueError(f"column_separator must be a single character, got {self.column_separator!r}")
        if self.column_separator.isspace() or self.column_separator in "\\;()":
            raise ValueError(f"column_separator cannot be whitespace or one of '\\;()', got {self.column_separator!r}")
        if not isinstance(self.expand_marker, str) or self.expand_marker not in ("", "x", "X"):
            raise ValueError(f"expand_marker must be 'x', 'X' or empty, got {self.expand_marker!r}")


__all__ = ["CloneFrozenMixin", "TableOptions"]
