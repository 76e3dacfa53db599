#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2md/utils/escape.py
"""Markdown escaping helpers.

This module provides the character escaping applied to text content and the
sanitizing of code fence language identifiers taken from class attributes.

"""

from __future__ import annotations

import re

from html2md.constants import CODE_LANGUAGE_CLASS_PREFIXES

# Characters that need escaping in Markdown text:
# \ - Escape character itself
# * _ - Emphasis/strong
# ` - Inline code
MARKDOWN_SPECIAL_CHARACTERS = frozenset("\\*_`")

_SAFE_LANGUAGE = re.compile(r"^[A-Za-z0-9_+\-]+$")


def escape_markdown_char(char: str, in_table: bool = False) -> str:
    r"""Escape a single character of text content.

    Parameters
    ----------
    char : str
        Character to escape
    in_table : bool, default False
        Whether the character is part of a table cell, where ``|`` would
        split the cell

    Returns
    -------
    str
        The character, backslash-escaped when it is significant in Markdown

    Examples
    --------
        >>> escape_markdown_char("*")
        '\\*'
        >>> escape_markdown_char("|", in_table=True)
        '\\|'

    """
    if char in MARKDOWN_SPECIAL_CHARACTERS or (in_table and char == "|"):
        return "\\" + char
    return char


def sanitize_language_identifier(language: str) -> str:
    """Return ``language`` if it is a safe code fence info string, else an empty string.

    Examples
    --------
        >>> sanitize_language_identifier("c++")
        'c++'
        >>> sanitize_language_identifier("python\\nmalicious")
        ''

    """
    language = language.strip()
    if not language or not _SAFE_LANGUAGE.match(language):
        return ""
    return language


def language_from_class(class_attribute: str) -> str:
    """Extract a code language from a ``language-xxx`` or ``lang-xxx`` class token.

    Parameters
    ----------
    class_attribute : str
        Raw value of a ``class`` attribute

    Returns
    -------
    str
        The language identifier, or an empty string when none is present

    """
    for token in class_attribute.split():
        for prefix in CODE_LANGUAGE_CLASS_PREFIXES:
            if token.startswith(prefix):
                return sanitize_language_identifier(token[len(prefix) :])
    return ""
