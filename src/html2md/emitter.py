#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2md/emitter.py
"""Append-only Markdown buffer with two-character lookback.

Element handlers decide on spacing by looking at the last one or two emitted
characters, so the buffer keeps them cheap to read. Removing characters from
the tail re-derives the lookback from what is left rather than guessing it.
"""

from __future__ import annotations

_BLANK = " \t"


class MarkdownEmitter:
    """Character buffer holding the Markdown produced so far."""

    def __init__(self) -> None:
        self._chars: list[str] = []

    def __len__(self) -> int:
        return len(self._chars)

    def __str__(self) -> str:
        return self.getvalue()

    def getvalue(self) -> str:
        """Return the buffer contents as a string."""
        return "".join(self._chars)

    @property
    def prev_ch(self) -> str:
        """Last emitted character, or an empty string."""
        return self._chars[-1] if self._chars else ""

    @property
    def prev_prev_ch(self) -> str:
        """Second-to-last emitted character, or an empty string."""
        return self._chars[-2] if len(self._chars) > 1 else ""

    def append(self, text: str) -> MarkdownEmitter:
        """Append text to the buffer."""
        self._chars.extend(text)
        return self

    def append_blank(self) -> MarkdownEmitter:
        """Append a space unless the buffer is empty or already ends in a separator.

        No space is added after whitespace or after characters that open an
        inline construct (``*``, ``_``, ``~``, ``[``, ``(``).
        """
        if self._chars and self._chars[-1] not in " \t\n*_~[(":
            self._chars.append(" ")
        return self

    def shorten(self, count: int = 1) -> MarkdownEmitter:
        """Remove up to ``count`` characters from the end of the buffer."""
        if count > 0:
            del self._chars[-count:]
        return self

    def truncate(self, position: int) -> str:
        """Cut the buffer back to ``position`` and return the removed text."""
        removed = "".join(self._chars[position:])
        del self._chars[position:]
        return removed

    def text_since(self, position: int) -> str:
        """Return the text emitted after ``position``."""
        return "".join(self._chars[position:])

    def ends_with(self, suffix: str) -> bool:
        """Check whether the buffer ends with ``suffix``."""
        if not suffix:
            return True
        if len(suffix) > len(self._chars):
            return False
        return "".join(self._chars[-len(suffix) :]) == suffix

    def rtrim(self, only_blank: bool = False) -> MarkdownEmitter:
        """Remove trailing whitespace, or only spaces and tabs when ``only_blank`` is set."""
        strip = _BLANK if only_blank else None
        while self._chars and (self._chars[-1] in strip if strip else self._chars[-1].isspace()):
            self._chars.pop()
        return self

    def trim(self) -> MarkdownEmitter:
        """Remove leading and trailing whitespace."""
        self.rtrim()
        start = 0
        while start < len(self._chars) and self._chars[start].isspace():
            start += 1
        del self._chars[:start]
        return self

    def ensure_newline(self) -> MarkdownEmitter:
        """Make sure the buffer ends with a newline, unless it is empty."""
        if self._chars and self._chars[-1] != "\n":
            self._chars.append("\n")
        return self

    def ensure_blank_line(self) -> MarkdownEmitter:
        """Make sure the buffer ends with two newlines."""
        if self.prev_ch != "\n":
            self._chars.append("\n")
        if self.prev_prev_ch != "\n":
            self._chars.append("\n")
        return self

    def current_line(self) -> str:
        """Return the text after the last newline."""
        return self.text_since(self.line_start())

    def line_start(self) -> int:
        """Return the buffer position where the current line starts."""
        for index in range(len(self._chars) - 1, -1, -1):
            if self._chars[index] == "\n":
                return index + 1
        return 0

    def replace_previous_space_in_line(self, replacement: str = "\n") -> bool:
        """Replace the last space of the current line.

        Returns
        -------
        bool
            True when a space was found and replaced.

        """
        for index in range(len(self._chars) - 1, -1, -1):
            char = self._chars[index]
            if char == "\n":
                return False
            if char == " ":
                self._chars[index : index + 1] = list(replacement)
                return True
        return False
