"""html2md - fast, forgiving HTML to Markdown conversion.

html2md turns HTML into Markdown in a single pass over the input. It keeps
document structure (headings, paragraphs, lists, tables, links, images,
emphasis, code blocks and blockquotes), normalizes whitespace, and never
gives up on malformed markup.

Key Features
------------
- Character-level tag scanner; no DOM tree is built
- Per-element handler table with a no-op fallback for unknown elements
- Content of script, style, nav, noscript, template and hidden elements is dropped
- Pipe tables with column alignment
- Fenced code blocks with language detection from ``language-xxx`` classes
- Well-formedness report for unbalanced markup

Examples
--------
Basic usage:

    >>> from html2md import convert
    >>> convert("<ul><li>a</li><li>b</li></ul>")
    '\\n- a\\n- b\\n\\n'

Checking whether all tags were closed:

    >>> from html2md import Converter
    >>> converter = Converter("<div><p>text")
    >>> "text" in converter.to_markdown()
    True
    >>> converter.is_well_formed()
    False

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

__version__ = "1.0.0"

from html2md.converter import Converter, convert
from html2md.exceptions import Html2MdError, InvalidInputError, ValidationError
from html2md.options import ConversionOptions

__all__ = [
    "__version__",
    "Converter",
    "convert",
    "ConversionOptions",
    "Html2MdError",
    "InvalidInputError",
    "ValidationError",
]
