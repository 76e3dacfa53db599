#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Helper utilities for html2md."""

from html2md.utils.escape import escape_markdown_char, language_from_class, sanitize_language_identifier

__all__ = ["escape_markdown_char", "language_from_class", "sanitize_language_identifier"]
