#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2md/converter.py
"""HTML to Markdown conversion.

This module ties the pieces together: the ``TagScanner`` tokenizes the
input, every tag is dispatched to its ``ElementHandler``, text runs are
appended to the Markdown buffer, and the cleanup pass normalizes the result.

No DOM is built. Formatting decisions are made on the fly from the
open-element stack, a handful of context flags and the last characters
written. Malformed markup never raises; unbalanced nesting is reported by
``Converter.is_well_formed()``.

Examples
--------
Stateless conversion:

    >>> convert("<h1>Title</h1>")
    '\\n# Title\\n'

Stateful conversion with a balance check:

    >>> converter = Converter("<div><p>text")
    >>> markdown = converter.to_markdown()
    >>> converter.is_well_formed()
    False

"""

from __future__ import annotations

import logging
from typing import Union

from html2md.cleanup import clean_up_markdown
from html2md.constants import VOID_ELEMENTS
from html2md.exceptions import InvalidInputError, ValidationError
from html2md.handlers import get_handler, handle_text, is_recognized
from html2md.options import ConversionOptions
from html2md.scanner import TagScanner
from html2md.state import ConversionState, TagContext

logger = logging.getLogger(__name__)

HtmlInput = Union[str, bytes]


def _coerce_input(html: HtmlInput) -> str:
    if isinstance(html, str):
        return html
    if isinstance(html, (bytes, bytearray)):
        return bytes(html).decode("utf-8", errors="replace")
    raise InvalidInputError(
        f"HTML input must be str or bytes, got {type(html).__name__}",
        input_type=type(html),
    )


class Converter:
    """Convert one HTML document to Markdown.

    Parameters
    ----------
    html : str or bytes
        The HTML to convert. Bytes are decoded as UTF-8.
    options : ConversionOptions, optional
        Conversion settings; defaults are used when omitted.

    Raises
    ------
    InvalidInputError
        If ``html`` is neither str nor bytes.
    ValidationError
        If ``options`` is not a ``ConversionOptions`` instance.

    """

    def __init__(self, html: HtmlInput, options: ConversionOptions | None = None):
        if options is not None and not isinstance(options, ConversionOptions):
            raise ValidationError(
                f"options must be a ConversionOptions instance, got {type(options).__name__}",
                parameter_name="options",
                parameter_value=options,
            )
        self.html = _coerce_input(html)
        self.options = options or ConversionOptions()
        self._markdown: str | None = None
        self._well_formed = True

    def to_markdown(self) -> str:
        """Convert the HTML and return the Markdown.

        The conversion runs once; later calls return the same string.
        """
        if self._markdown is None:
            state = ConversionState(options=self.options)
            for token in TagScanner(self.html).tokens():
                if isinstance(token, str):
                    handle_text(state, token)
                else:
                    self._handle_tag(state, token)

            self._well_formed = state.is_balanced()
            if not self._well_formed:
                logger.debug(
                    "Unclosed elements at end of input: %s",
                    ", ".join(entry.name for entry in state.open_elements),
                )
            self._markdown = clean_up_markdown(state.md.getvalue())
            logger.debug(
                "Converted %d characters of HTML into %d characters of Markdown",
                len(self.html),
                len(self._markdown),
            )
        return self._markdown

    def is_well_formed(self) -> bool:
        """Return False if any element was still open at the end of the input."""
        self.to_markdown()
        return self._well_formed

    @staticmethod
    def _handle_tag(state: ConversionState, tag: TagContext) -> None:
        name = tag.name
        handler = get_handler(name)
        state.current_tag = tag
        if not is_recognized(name):
            logger.debug("No handler for <%s%s>; treating it as a plain container", "/" if tag.is_closing else "", name)

        if tag.is_closing:
            if name in VOID_ELEMENTS:
                pass
            elif (depth := state.find_open(name)) is not None:
                # elements left open above this one are closed with it and do not count
                if not state.is_in_ignored(depth):
                    handler.on_close(state)
                state.pop(name)
            else:
                logger.debug("Ignoring stray closing tag </%s>", name)
        else:
            is_void = name in VOID_ELEMENTS or tag.is_self_closing
            hidden = tag.is_hidden()
            if not is_void:
                state.push(name, hidden)
            if not state.is_in_ignored() and not (is_void and hidden):
                handler.on_open(state)
                if is_void:
                    handler.on_close(state)

        state.prev_tag = name


def convert(html: HtmlInput, options: ConversionOptions | None = None) -> str:
    """Convert an HTML string to Markdown.

    Parameters
    ----------
    html : str or bytes
        The HTML to convert.
    options : ConversionOptions, optional
        Conversion settings.

    Returns
    -------
    str
        The Markdown text.

    """
    return Converter(html, options).to_markdown()
