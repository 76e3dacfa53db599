#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for HTML-to-Markdown conversion.

All options are frozen dataclasses so a single instance can be shared by any
number of converters. Use ``create_updated`` to derive a modified copy.

Examples
--------
Use ``+`` bullets and ``1)`` numbering:

    >>> options = ConversionOptions(unordered_list_marker="+", ordered_list_delimiter=")")

Wrap long prose lines:

    >>> options = ConversionOptions(split_lines=True, soft_break=72, hard_break=90)

"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from html2md.constants import (
    DEFAULT_EMPHASIS_SYMBOL,
    DEFAULT_ESCAPE_SPECIAL_CHARACTERS,
    DEFAULT_FORMAT_TABLES,
    DEFAULT_HARD_BREAK,
    DEFAULT_INCLUDE_TITLE,
    DEFAULT_ORDERED_LIST_DELIMITER,
    DEFAULT_REMOVE_IMAGES,
    DEFAULT_SOFT_BREAK,
    DEFAULT_SPLIT_LINES,
    DEFAULT_UNORDERED_LIST_MARKER,
    DEFAULT_USE_HASH_HEADINGS,
    EmphasisSymbol,
    OrderedListDelimiter,
    UnorderedListMarker,
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
class ConversionOptions(CloneFrozenMixin):
    """Configuration options for HTML-to-Markdown conversion.

    Parameters
    ----------
    unordered_list_marker : {"-", "*", "+"}, default "-"
        Bullet emitted for items of an unordered list.
    ordered_list_delimiter : {".", ")"}, default "."
        Delimiter written after the number of an ordered list item.
    emphasis_symbol : {"*", "_"}, default "*"
        Symbol used for italic text; bold text uses it twice.
    include_title : bool, default True
        Turn the document ``<title>`` into a level-1 heading. When False the
        title text is dropped.
    use_hash_headings : bool, default True
        Render the title heading as ``# Title`` rather than a setext heading.
    escape_special_characters : bool, default False
        Escape Markdown-significant characters in text content.
    remove_images : bool, default False
        Drop images instead of emitting ``![alt](src)``.
    split_lines : bool, default False
        Wrap long prose lines at spaces.
    soft_break : int, default 80
        Line length after which the next space becomes a line break.
    hard_break : int, default 100
        Line length after which the previous space in the line becomes a
        line break.
    format_tables : bool, default False
        Pad pipe tables into aligned columns once the table is closed.

    """

    unordered_list_marker: UnorderedListMarker = field(
        default=DEFAULT_UNORDERED_LIST_MARKER,
        metadata={"help": "Bullet character for unordered list items", "choices": ["-", "*", "+"]},
    )
    ordered_list_delimiter: OrderedListDelimiter = field(
        default=DEFAULT_ORDERED_LIST_DELIMITER,
        metadata={"help": "Delimiter after ordered list numbers", "choices": [".", ")"]},
    )
    emphasis_symbol: EmphasisSymbol = field(
        default=DEFAULT_EMPHASIS_SYMBOL,
        metadata={"help": "Symbol for emphasis (italic); doubled for bold", "choices": ["*", "_"]},
    )
    include_title: bool = field(
        default=DEFAULT_INCLUDE_TITLE,
        metadata={"help": "Render the <title> element as a level-1 heading"},
    )
    use_hash_headings: bool = field(
        default=DEFAULT_USE_HASH_HEADINGS,
        metadata={"help": "Use '# Title' instead of an underlined title heading"},
    )
    escape_special_characters: bool = field(
        default=DEFAULT_ESCAPE_SPECIAL_CHARACTERS,
        metadata={"help": "Escape Markdown special characters in text content"},
    )
    remove_images: bool = field(
        default=DEFAULT_REMOVE_IMAGES,
        metadata={"help": "Drop images from the output"},
    )
    split_lines: bool = field(
        default=DEFAULT_SPLIT_LINES,
        metadata={"help": "Wrap long prose lines at spaces"},
    )
    soft_break: int = field(
        default=DEFAULT_SOFT_BREAK,
        metadata={"help": "Wrap at the next space once a line is longer than this", "type": int},
    )
    hard_break: int = field(
        default=DEFAULT_HARD_BREAK,
        metadata={"help": "Wrap at the previous space once a line is longer than this", "type": int},
    )
    format_tables: bool = field(
        default=DEFAULT_FORMAT_TABLES,
        metadata={"help": "Pad pipe tables into aligned columns"},
    )

    def __post_init__(self) -> None:
        """Validate option values.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        if self.unordered_list_marker not in ("-", "*", "+"):
            raise ValueError(f"unordered_list_marker must be one of '-', '*', '+', got {self.unordered_list_marker!r}")
        if self.ordered_list_delimiter not in (".", ")"):
            raise ValueError(f"ordered_list_delimiter must be '.' or ')', got {self.ordered_list_delimiter!r}")
        if self.emphasis_symbol not in ("*", "_"):
            raise ValueError(f"emphasis_symbol must be '*' or '_', got {self.emphasis_symbol!r}")
        if self.soft_break <= 0:
            raise ValueError(f"soft_break must be positive, got {self.soft_break}")
        if self.hard_break < self.soft_break:
            raise ValueError(f"hard_break ({self.hard_break}) must not be smaller than soft_break ({self.soft_break})")
