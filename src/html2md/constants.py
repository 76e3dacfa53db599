#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for html2md.

This module centralizes element names, attribute names, element classes and
default option values used by the scanner, the element handlers and the
cleanup pass.

Constants are organized by category:
1. Type Definitions - Literal types for option values
2. Option Defaults - Default values for ``ConversionOptions``
3. Element Names - Tag names with dedicated behavior
4. Element Classes - Void, raw-text and ignored element sets
5. Hidden Element Heuristic - Markers that hide an element's content
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

UnorderedListMarker = Literal["-", "*", "+"]
OrderedListDelimiter = Literal[".", ")"]
EmphasisSymbol = Literal["*", "_"]
TableAlignment = Literal["left", "center", "right"]

# =============================================================================
# Option Defaults
# =============================================================================

DEFAULT_UNORDERED_LIST_MARKER: UnorderedListMarker = "-"
DEFAULT_ORDERED_LIST_DELIMITER: OrderedListDelimiter = "."
DEFAULT_EMPHASIS_SYMBOL: EmphasisSymbol = "*"
DEFAULT_INCLUDE_TITLE = True
DEFAULT_USE_HASH_HEADINGS = True
DEFAULT_ESCAPE_SPECIAL_CHARACTERS = False
DEFAULT_REMOVE_IMAGES = False
DEFAULT_SPLIT_LINES = False
DEFAULT_SOFT_BREAK = 80
DEFAULT_HARD_BREAK = 100
DEFAULT_FORMAT_TABLES = False

# =============================================================================
# Element Names
# =============================================================================

TAG_ANCHOR = "a"
TAG_BLOCKQUOTE = "blockquote"
TAG_BREAK = "br"
TAG_CODE = "code"
TAG_DIV = "div"
TAG_HEAD = "head"
TAG_IMAGE = "img"
TAG_LINK = "link"
TAG_LIST_ITEM = "li"
TAG_META = "meta"
TAG_NAV = "nav"
TAG_NOSCRIPT = "noscript"
TAG_OPTION = "option"
TAG_ORDERED_LIST = "ol"
TAG_PARAGRAPH = "p"
TAG_PRE = "pre"
TAG_SCRIPT = "script"
TAG_SEPARATOR = "hr"
TAG_SPAN = "span"
TAG_STYLE = "style"
TAG_TABLE = "table"
TAG_TABLE_DATA = "td"
TAG_TABLE_HEADER = "th"
TAG_TABLE_ROW = "tr"
TAG_TEMPLATE = "template"
TAG_TITLE = "title"
TAG_UNORDERED_LIST = "ul"

HEADING_TAGS = ("h1", "h2", "h3", "h4", "h5", "h6")
BOLD_TAGS = ("b", "strong")
ITALIC_TAGS = ("i", "em", "cite", "dfn")
UNDERLINE_TAGS = ("u",)
STRIKETHROUGH_TAGS = ("del", "s")

# Attributes captured on the current tag context
ATTRIBUTE_HREF = "href"
ATTRIBUTE_SRC = "src"
ATTRIBUTE_ALT = "alt"
ATTRIBUTE_TITLE = "title"
ATTRIBUTE_CLASS = "class"
ATTRIBUTE_ALIGN = "align"

# =============================================================================
# Element Classes
# =============================================================================

# Elements without closing tags; opening and closing behavior fire back to back
VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        TAG_BREAK,
        "col",
        "embed",
        TAG_SEPARATOR,
        TAG_IMAGE,
        "input",
        TAG_LINK,
        TAG_META,
        "param",
        "source",
        "track",
        "wbr",
    }
)

# Elements whose content is consumed without tag recognition
RAW_TEXT_ELEMENTS = frozenset({TAG_SCRIPT, TAG_STYLE})

# Elements whose descendant content never reaches the output
IGNORED_ELEMENTS = frozenset({TAG_NAV, TAG_NOSCRIPT, TAG_SCRIPT, TAG_STYLE, TAG_TEMPLATE})

# Ancestors that re-enable emission inside ignored content
ALWAYS_EMITTED_ELEMENTS = frozenset({TAG_PRE, TAG_TITLE})

# Characters that, as the second-to-last emitted character, mark a bare list marker
LIST_MARKER_PUNCTUATION = frozenset("*-+.)")

# Code fence
CODE_FENCE = "```"
CODE_LANGUAGE_CLASS_PREFIXES = ("language-", "lang-")
INDENTED_CODE_PREFIX = "\t\t"

# =============================================================================
# Hidden Element Heuristic
# =============================================================================

HIDDEN_CLASS_MARKERS = ("Details-content--hidden-not-important",)
HIDDEN_STYLE_DECLARATIONS = {
    "display": "none",
    "visibility": "hidden",
}
