#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2md/scanner.py
"""Single-pass HTML tag scanner.

The scanner walks the input once, left to right, and yields two kinds of
tokens: text runs (``str``, character references already decoded) and
``TagContext`` objects for every complete tag. Inside a tag it runs a small
character-level state machine that recognises the closing slash, the tag
name, attribute names, and quoted or unquoted attribute values.

Comments, doctypes and processing instructions are skipped. The content of
``script`` and ``style`` elements is yielded as raw text without looking for
tags inside it. Nothing here raises on malformed markup: an unterminated tag
at the end of the input is dropped.

Examples
--------
    >>> [t if isinstance(t, str) else t.name for t in TagScanner("<b>x</b>").tokens()]
    ['b', 'x', 'b']

"""

from __future__ import annotations

import html
import logging
import re
from enum import Enum, auto
from typing import Iterator, Union

from html2md.constants import RAW_TEXT_ELEMENTS
from html2md.state import TagContext

logger = logging.getLogger(__name__)

Token = Union[str, TagContext]

_WHITESPACE = " \t\n\f"


class _TagState(Enum):
    TAG_OPEN = auto()
    TAG_NAME = auto()
    BEFORE_ATTRIBUTE_NAME = auto()
    ATTRIBUTE_NAME = auto()
    AFTER_ATTRIBUTE_NAME = auto()
    BEFORE_ATTRIBUTE_VALUE = auto()
    ATTRIBUTE_VALUE_QUOTED = auto()
    ATTRIBUTE_VALUE_UNQUOTED = auto()
    SELF_CLOSING_START = auto()


class _Markup(Enum):
    TAG = auto()
    COMMENT = auto()
    CDATA = auto()
    BOGUS = auto()


def normalize_newlines(text: str) -> str:
    """Turn ``\\r\\n`` and lone ``\\r`` into ``\\n``."""
    return text.replace("\r\n", "\n").replace("\r", "\n")


class TagScanner:
    """Tokenizer for one HTML string.

    Parameters
    ----------
    html : str
        The HTML to scan.

    """

    def __init__(self, html: str):
        self.html = normalize_newlines(html)
        self._raw_text_end: dict[str, re.Pattern[str]] = {}

    def tokens(self) -> Iterator[Token]:
        """Yield text runs and tags in document order."""
        source = self.html
        length = len(source)
        pos = 0

        while pos < length:
            lt = source.find("<", pos)
            if lt == -1:
                yield html.unescape(source[pos:])
                return

            kind = self._markup_at(lt)
            if kind is None:
                # A '<' that cannot start markup is literal text
                yield html.unescape(source[pos : lt + 1])
                pos = lt + 1
                continue

            if lt > pos:
                yield html.unescape(source[pos:lt])

            if kind is _Markup.COMMENT:
                pos = self._skip_past(lt + 2, "-->", "comment")
            elif kind is _Markup.CDATA:
                end = source.find("]]>", lt + 9)
                if end == -1:
                    end = length
                if end > lt + 9:
                    yield source[lt + 9 : end]
                pos = min(end + 3, length)
            elif kind is _Markup.BOGUS:
                pos = self._skip_past(lt + 1, ">", "declaration")
            else:
                tag, pos = self._scan_tag(lt)
                if tag is None:
                    return
                yield tag
                if tag.name in RAW_TEXT_ELEMENTS and not tag.is_closing and not tag.is_self_closing:
                    end = self._find_raw_text_end(tag.name, pos)
                    if end > pos:
                        yield source[pos:end]
                    pos = end

    def _markup_at(self, lt: int) -> _Markup | None:
        source = self.html
        nxt = source[lt + 1 : lt + 2]
        if nxt.isalpha():
            return _Markup.TAG
        if nxt == "/":
            return _Markup.TAG if source[lt + 2 : lt + 3].isalpha() else _Markup.BOGUS
        if nxt == "!":
            if source.startswith("<!--", lt):
                return _Markup.COMMENT
            if source.startswith("<![CDATA[", lt):
                return _Markup.CDATA
            return _Markup.BOGUS
        if nxt == "?":
            return _Markup.BOGUS
        return None

    def _skip_past(self, start: int, terminator: str, what: str) -> int:
        end = self.html.find(terminator, start)
        if end == -1:
            logger.debug("Unterminated %s at end of input", what)
            return len(self.html)
        return end + len(terminator)

    def _find_raw_text_end(self, name: str, start: int) -> int:
        pattern = self._raw_text_end.get(name)
        if pattern is None:
            pattern = re.compile(rf"</{name}(?=[\s/>]|$)", re.IGNORECASE)
            self._raw_text_end[name] = pattern
        match = pattern.search(self.html, start)
        if match is None:
            logger.debug("Unterminated <%s> at end of input", name)
            return len(self.html)
        return match.start()

    def _scan_tag(self, lt: int) -> tuple[TagContext | None, int]:
        """Scan the tag starting at ``lt`` (the ``<``).

        Returns
        -------
        tuple[TagContext | None, int]
            The tag, or None if the input ends inside it, and the position
            after the closing ``>``.

        """
        source = self.html
        length = len(source)
        pos = lt + 1

        tag = TagContext()
        name: list[str] = []
        attribute_name: list[str] = []
        attribute_value: list[str] = []
        quote = ""
        state = _TagState.TAG_OPEN

        def commit_attribute() -> None:
            key = "".join(attribute_name)
            if key and key not in tag.attributes:
                tag.attributes[key] = html.unescape("".join(attribute_value))
            attribute_name.clear()
            attribute_value.clear()

        while pos < length:
            ch = source[pos]
            pos += 1

            if state is _TagState.TAG_OPEN:
                if ch == "/":
                    tag.is_closing = True
                else:
                    name.append(ch.lower())
                    state = _TagState.TAG_NAME

            elif state is _TagState.TAG_NAME:
                if ch in _WHITESPACE:
                    state = _TagState.BEFORE_ATTRIBUTE_NAME
                elif ch == "/":
                    state = _TagState.SELF_CLOSING_START
                elif ch == ">":
                    break
                else:
                    name.append(ch.lower())

            elif state is _TagState.BEFORE_ATTRIBUTE_NAME:
                if ch in _WHITESPACE:
                    continue
                if ch == "/":
                    state = _TagState.SELF_CLOSING_START
                elif ch == ">":
                    break
                else:
                    attribute_name.append(ch.lower())
                    state = _TagState.ATTRIBUTE_NAME

            elif state is _TagState.ATTRIBUTE_NAME:
                if ch in _WHITESPACE:
                    state = _TagState.AFTER_ATTRIBUTE_NAME
                elif ch == "/":
                    commit_attribute()
                    state = _TagState.SELF_CLOSING_START
                elif ch == "=":
                    state = _TagState.BEFORE_ATTRIBUTE_VALUE
                elif ch == ">":
                    commit_attribute()
                    break
                else:
                    attribute_name.append(ch.lower())

            elif state is _TagState.AFTER_ATTRIBUTE_NAME:
                if ch in _WHITESPACE:
                    continue
                if ch == "=":
                    state = _TagState.BEFORE_ATTRIBUTE_VALUE
                    continue
                commit_attribute()
                if ch == "/":
                    state = _TagState.SELF_CLOSING_START
                elif ch == ">":
                    break
                else:
                    attribute_name.append(ch.lower())
                    state = _TagState.ATTRIBUTE_NAME

            elif state is _TagState.BEFORE_ATTRIBUTE_VALUE:
                if ch in _WHITESPACE:
                    continue
                if ch in "\"'":
                    quote = ch
                    state = _TagState.ATTRIBUTE_VALUE_QUOTED
                elif ch == ">":
                    commit_attribute()
                    break
                else:
                    attribute_value.append(ch)
                    state = _TagState.ATTRIBUTE_VALUE_UNQUOTED

            elif state is _TagState.ATTRIBUTE_VALUE_QUOTED:
                if ch == quote:
                    commit_attribute()
                    state = _TagState.BEFORE_ATTRIBUTE_NAME
                else:
                    attribute_value.append(ch)

            elif state is _TagState.ATTRIBUTE_VALUE_UNQUOTED:
                if ch in _WHITESPACE:
                    commit_attribute()
                    state = _TagState.BEFORE_ATTRIBUTE_NAME
                elif ch == ">":
                    commit_attribute()
                    break
                else:
                    attribute_value.append(ch)

            elif state is _TagState.SELF_CLOSING_START:
                if ch == ">":
                    tag.is_self_closing = True
                    break
                # a stray '/' inside the tag; reconsume as attribute start
                pos -= 1
                state = _TagState.BEFORE_ATTRIBUTE_NAME

        else:
            logger.debug("Unterminated tag <%s at end of input", "".join(name))
            return None, length

        tag.name = "".join(name)
        return tag, pos
