"""Test utilities for the html2md test suite.

``render_raw`` drives the scanner and the handlers exactly like
``Converter`` does but returns the Markdown buffer before the cleanup pass,
so tests can check what the handlers themselves emit.
"""

from html2md import ConversionOptions
from html2md.converter import Converter
from html2md.handlers import handle_text
from html2md.scanner import TagScanner
from html2md.state import ConversionState, TagContext


def render_raw(html: str, options: ConversionOptions | None = None) -> str:
    """Convert ``html`` and return the buffer contents before cleanup."""
    state = run_conversion(html, options)
    return state.md.getvalue()


def run_conversion(html: str, options: ConversionOptions | None = None) -> ConversionState:
    """Feed every token of ``html`` through the handlers and return the final state."""
    state = ConversionState(options=options or ConversionOptions())
    for token in TagScanner(html).tokens():
        if isinstance(token, str):
            handle_text(state, token)
        else:
            Converter._handle_tag(state, token)
    return state


def tags_only(html: str) -> list[TagContext]:
    """Return the tag tokens of ``html``."""
    return [token for token in TagScanner(html).tokens() if isinstance(token, TagContext)]


def text_only(html: str) -> str:
    """Return the concatenated text tokens of ``html``."""
    return "".join(token for token in TagScanner(html).tokens() if isinstance(token, str))
