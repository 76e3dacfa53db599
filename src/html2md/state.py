#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2md/state.py
"""Mutable conversion state shared by the element handlers.

One ``ConversionState`` exists per conversion. It owns the open-element
stack, the context flags the handlers consult, the Markdown buffer and the
table builder, and it is handed to every handler invocation.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from html2md.constants import (
    ALWAYS_EMITTED_ELEMENTS,
    ATTRIBUTE_ALIGN,
    ATTRIBUTE_ALT,
    ATTRIBUTE_CLASS,
    ATTRIBUTE_HREF,
    ATTRIBUTE_SRC,
    ATTRIBUTE_TITLE,
    HIDDEN_CLASS_MARKERS,
    HIDDEN_STYLE_DECLARATIONS,
    IGNORED_ELEMENTS,
)
from html2md.emitter import MarkdownEmitter
from html2md.options import ConversionOptions
from html2md.tables import TableBuilder

logger = logging.getLogger(__name__)


@dataclass
class TagContext:
    """A single scanned tag occurrence.

    The scanner fills in the name, the open/close flags and every attribute;
    the attributes the handlers read are also exposed as captured fields.
    """

    name: str = ""
    is_closing: bool = False
    is_self_closing: bool = False
    attributes: dict[str, str] = field(default_factory=dict)

    def get(self, attribute: str, default: str = "") -> str:
        return self.attributes.get(attribute, default)

    @property
    def href(self) -> str:
        return self.get(ATTRIBUTE_HREF)

    @property
    def src(self) -> str:
        return self.get(ATTRIBUTE_SRC)

    @property
    def alt(self) -> str:
        return self.get(ATTRIBUTE_ALT)

    @property
    def title(self) -> str:
        return self.get(ATTRIBUTE_TITLE)

    @property
    def css_class(self) -> str:
        return self.get(ATTRIBUTE_CLASS)

    @property
    def align(self) -> str:
        return self.get(ATTRIBUTE_ALIGN)

    def is_hidden(self) -> bool:
        """Check the attributes for markers that hide the element's content.

        An element counts as hidden when it carries ``aria-hidden="true"``
        (or the legacy ``aria="hidden"``), an inline style declaring
        ``display: none``, ``visibility: hidden`` or a zero ``opacity``, or a
        class containing one of the known hidden-content markers.
        """
        if self.get("aria-hidden").strip().lower() == "true" or self.get("aria").strip().lower() == "hidden":
            return True

        css_class = self.css_class
        if any(marker in css_class for marker in HIDDEN_CLASS_MARKERS):
            return True

        for declaration in self.get("style").split(";"):
            prop, _, value = declaration.partition(":")
            prop = prop.strip().lower()
            value = value.strip().lower().removesuffix("!important").strip()
            if HIDDEN_STYLE_DECLARATIONS.get(prop) == value:
                return True
            if prop == "opacity":
                try:
                    if float(value.rstrip("%")) == 0:
                        return True
                except ValueError:
                    continue
        return False


@dataclass
class StackEntry:
    """An open element; ``hidden`` marks elements hidden by the attribute heuristic."""

    name: str
    hidden: bool = False

    @property
    def is_ignored(self) -> bool:
        return self.hidden or self.name in IGNORED_ELEMENTS


@dataclass
class ConversionState:
    """Everything one conversion call reads and mutates."""

    options: ConversionOptions = field(default_factory=ConversionOptions)
    md: MarkdownEmitter = field(default_factory=MarkdownEmitter)
    table: TableBuilder = field(default_factory=TableBuilder)
    open_elements: list[StackEntry] = field(default_factory=list)

    is_in_pre: bool = False
    is_in_code: bool = False
    is_in_table: bool = False
    is_in_list: bool = False
    # relevant for <li> only, False means unordered list
    is_in_ordered_list: bool = False
    list_item_index: int = 0
    blockquote_depth: int = 0

    current_tag: TagContext = field(default_factory=TagContext)
    prev_tag: str = ""

    # Anchor attributes survive until the closing tag
    anchor_href: str = ""
    anchor_title: str = ""

    # Preformatted block bookkeeping
    fence_language: str = ""
    fence_info_pending: bool = False
    code_line_prefix: str = ""

    title_start: int | None = None
    # Buffer lengths at each open <span>
    span_starts: list[int] = field(default_factory=list)

    def push(self, name: str, hidden: bool = False) -> None:
        if hidden:
            logger.debug("Hiding content of <%s> based on its attributes", name)
        self.open_elements.append(StackEntry(name, hidden))

    def pop(self, name: str) -> bool:
        """Close ``name`` on the open-element stack.

        The top entry is popped when it matches. When ``name`` is open further
        down, everything above it is closed implicitly. A closing tag with no
        open counterpart leaves the stack untouched.

        Returns
        -------
        bool
            True when an open element was closed.

        """
        index = self.find_open(name)
        if index is None:
            logger.debug("Ignoring stray closing tag </%s>", name)
            return False

        if index != len(self.open_elements) - 1:
            implicit = [entry.name for entry in self.open_elements[index + 1 :]]
            logger.debug("</%s> implicitly closes %s", name, ", ".join(implicit))
        del self.open_elements[index:]
        return True

    def has_open(self, name: str) -> bool:
        return self.find_open(name) is not None

    def find_open(self, name: str) -> int | None:
        """Return the stack index of the innermost open ``name``, or None."""
        for index in range(len(self.open_elements) - 1, -1, -1):
            if self.open_elements[index].name == name:
                return index
        return None

    def is_in_ignored(self, depth: int | None = None) -> bool:
        """Check whether output is currently suppressed.

        Content is suppressed while any open element is ignored, unless a
        ``pre`` or ``title`` element is open as well.

        Parameters
        ----------
        depth : int, optional
            Only consider the stack entries up to and including this index.
            Used for closing tags, where the entries above the element being
            closed are about to be closed implicitly.

        """
        entries = self.open_elements if depth is None else self.open_elements[: depth + 1]
        ignored = False
        for entry in entries:
            if entry.name in ALWAYS_EMITTED_ELEMENTS:
                return False
            if entry.is_ignored:
                ignored = True
        return ignored

    def is_balanced(self) -> bool:
        return not self.open_elements

    def blockquote_prefix(self) -> str:
        return "> " * max(self.blockquote_depth, 0)
