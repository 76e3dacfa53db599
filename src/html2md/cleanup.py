#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2md/cleanup.py
"""Whitespace normalization applied to the finished Markdown buffer.

The pass is line based:

1. Lines inside a fenced code block, and indented code lines (a tab after
   optional ``>`` quote markers), are kept verbatim.
2. Every other line is stripped. A line ending in two spaces keeps exactly
   two, since that is a Markdown hard break.
3. Outside fenced blocks, more than two consecutive blank lines are reduced
   to two.

Applying the pass to its own output changes nothing.
"""

from __future__ import annotations

import re

from html2md.constants import CODE_FENCE

_INDENTED_CODE_LINE = re.compile(r"^(?:> ?)*>?\t")
_MAX_BLANK_LINES = 2


def _tidy_line(line: str) -> str:
    if _INDENTED_CODE_LINE.match(line):
        return line
    stripped = line.strip()
    if stripped and line.endswith("  "):
        return stripped + "  "
    return stripped


def clean_up_markdown(markdown: str) -> str:
    """Trim every line and collapse runs of blank lines.

    Parameters
    ----------
    markdown : str
        Raw converter output

    Returns
    -------
    str
        Normalized Markdown

    Examples
    --------
        >>> clean_up_markdown("  # Title  \\n\\n\\n\\n\\ntext ")
        '# Title  \\n\\n\\ntext'

    """
    output: list[str] = []
    blank_lines = 0
    in_fence = False

    for line in markdown.split("\n"):
        if line.strip().startswith(CODE_FENCE):
            in_fence = not in_fence
            output.append(line.strip())
            blank_lines = 0
            continue

        if in_fence:
            output.append(line)
            continue

        line = _tidy_line(line)
        if not line:
            blank_lines += 1
            if blank_lines > _MAX_BLANK_LINES:
                continue
        else:
            blank_lines = 0
        output.append(line)

    return "\n".join(output)
