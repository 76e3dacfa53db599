#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2md/handlers.py
"""Element handler registry.

Each recognised element name maps to an ``ElementHandler``: a pair of
functions called when the scanner has finished an opening tag and when it
has finished a closing tag. Void and self-closing elements get both calls
back to back. Handlers only read and mutate the ``ConversionState`` they are
given (flags, the Markdown buffer, the table builder); when their
preconditions are not met they do nothing.

Unknown element names resolve to ``IGNORED_HANDLER`` so unsupported markup
never interrupts a conversion.
"""

from __future__ import annotations

from functools import partial
from typing import Callable, NamedTuple

from html2md.constants import (
    BOLD_TAGS,
    CODE_FENCE,
    HEADING_TAGS,
    INDENTED_CODE_PREFIX,
    ITALIC_TAGS,
    LIST_MARKER_PUNCTUATION,
    STRIKETHROUGH_TAGS,
    TAG_ANCHOR,
    TAG_BLOCKQUOTE,
    TAG_BREAK,
    TAG_CODE,
    TAG_DIV,
    TAG_HEAD,
    TAG_IMAGE,
    TAG_LINK,
    TAG_LIST_ITEM,
    TAG_META,
    TAG_NAV,
    TAG_NOSCRIPT,
    TAG_OPTION,
    TAG_ORDERED_LIST,
    TAG_PARAGRAPH,
    TAG_PRE,
    TAG_SCRIPT,
    TAG_SEPARATOR,
    TAG_SPAN,
    TAG_STYLE,
    TAG_TABLE,
    TAG_TABLE_DATA,
    TAG_TABLE_HEADER,
    TAG_TABLE_ROW,
    TAG_TEMPLATE,
    TAG_TITLE,
    TAG_UNORDERED_LIST,
    UNDERLINE_TAGS,
)
from html2md.state import ConversionState
from html2md.tables import format_pipe_table
from html2md.utils.escape import escape_markdown_char, language_from_class

HandlerFunc = Callable[[ConversionState], None]


class ElementHandler(NamedTuple):
    """Behaviors run when an element's opening or closing tag is complete."""

    on_open: HandlerFunc
    on_close: HandlerFunc


def _noop(state: ConversionState) -> None:
    pass


IGNORED_HANDLER = ElementHandler(_noop, _noop)


# =============================================================================
# Text content
# =============================================================================


def handle_text(state: ConversionState, text: str) -> None:
    """Append a run of text content to the Markdown buffer.

    Outside preformatted context every whitespace run becomes at most one
    space, and no space is written at the start of a line. Inside ``pre`` or
    ``code`` the text is copied verbatim, with block prefixes repeated after
    each newline.
    """
    if not text or state.is_in_ignored():
        return

    if state.is_in_pre or state.is_in_code:
        _emit_verbatim(state, text)
        return

    md = state.md
    options = state.options
    escape = options.escape_special_characters
    split_lines = options.split_lines and _allows_line_split(state)

    keep_quoted_newlines = state.blockquote_depth > 0 and _allows_quoted_newline(state)

    for ch in text:
        if ch.isspace():
            if ch == "\n" and keep_quoted_newlines and md.current_line().strip(" >"):
                # the next text character picks up the quote prefix
                md.rtrim(only_blank=True).append("\n")
                continue
            if not len(md) or md.prev_ch in " \t\n":
                continue
            md.append(" ")
            if split_lines and len(md) - md.line_start() > options.soft_break:
                md.shorten().append("\n" + state.blockquote_prefix())
            continue

        if state.blockquote_depth > 0 and (not len(md) or md.prev_ch == "\n"):
            md.append(state.blockquote_prefix())
        md.append(escape_markdown_char(ch, state.is_in_table) if escape else ch)
        if split_lines and len(md) - md.line_start() > options.hard_break:
            md.replace_previous_space_in_line("\n" + state.blockquote_prefix())


def _emit_verbatim(state: ConversionState, text: str) -> None:
    md = state.md
    prefix = state.code_line_prefix if state.is_in_pre else state.blockquote_prefix()
    for ch in text:
        if ch == "\n":
            if state.fence_info_pending:
                # the newline right after <pre> belongs to the fence line
                _finish_fence_info(state)
                continue
            md.append("\n" + prefix)
            continue
        if state.fence_info_pending:
            _finish_fence_info(state)
        md.append(ch)


def _allows_quoted_newline(state: ConversionState) -> bool:
    if state.is_in_table:
        return False
    return not any(entry.name in HEADING_TAGS for entry in state.open_elements)


def _allows_line_split(state: ConversionState) -> bool:
    if state.is_in_table or state.is_in_list or state.is_in_pre or state.is_in_code:
        return False
    return not any(entry.name == TAG_ANCHOR or entry.name in HEADING_TAGS for entry in state.open_elements)


# =============================================================================
# Headings, paragraphs and block containers
# =============================================================================


def _open_heading(level: int, state: ConversionState) -> None:
    state.md.append("\n" + "#" * level + " ")


def _close_heading(state: ConversionState) -> None:
    md = state.md
    if md.prev_ch == " " and md.prev_prev_ch != " ":
        md.shorten()
    md.append("\n")


def _open_paragraph(state: ConversionState) -> None:
    md = state.md
    if state.is_in_list and state.prev_tag == TAG_PARAGRAPH:
        md.append("\n\t")
    elif not state.is_in_list and state.blockquote_depth == 0:
        md.append("\n")

    if state.blockquote_depth > 0:
        md.append("> \n" + state.blockquote_prefix())


def _close_paragraph(state: ConversionState) -> None:
    if len(state.md):
        state.md.append("\n")


def _open_div(state: ConversionState) -> None:
    state.md.ensure_blank_line()


def _open_blockquote(state: ConversionState) -> None:
    state.blockquote_depth += 1
    if state.blockquote_depth == 1:
        state.md.append("\n")


def _close_blockquote(state: ConversionState) -> None:
    state.blockquote_depth -= 1


def _open_separator(state: ConversionState) -> None:
    state.md.append("\n---\n")


def _open_break(state: ConversionState) -> None:
    md = state.md
    if state.is_in_table:
        if md.prev_ch == " ":
            md.shorten()
        md.append("<br>")
    elif len(md):
        md.append("  \n" + state.blockquote_prefix())


def _open_span(state: ConversionState) -> None:
    state.span_starts.append(len(state.md))


def _close_span(state: ConversionState) -> None:
    start = state.span_starts.pop() if state.span_starts else len(state.md)
    # separate adjacent inline spans, but only when this one produced output
    if len(state.md) > start and state.md.prev_ch != " ":
        state.md.append_blank()


def _close_option(state: ConversionState) -> None:
    if len(state.md):
        state.md.append("  \n")


def _open_title(state: ConversionState) -> None:
    state.title_start = len(state.md)


def _close_title(state: ConversionState) -> None:
    md = state.md
    start = state.title_start if state.title_start is not None else md.line_start()
    state.title_start = None
    title = " ".join(md.truncate(start).split())
    if not title or not state.options.include_title:
        return

    md.ensure_newline()
    if state.options.use_hash_headings:
        md.append(f"# {title}\n\n")
    else:
        md.append(f"{title}\n{'=' * len(title)}\n\n")


# =============================================================================
# Inline formatting
# =============================================================================


def _emphasis_marker(state: ConversionState, strength: int) -> str:
    return state.options.emphasis_symbol * strength


def _open_emphasis(strength: int, state: ConversionState) -> None:
    md = state.md
    if md.prev_ch != " ":
        md.append_blank()
    md.append(_emphasis_marker(state, strength))


def _close_emphasis(strength: int, state: ConversionState) -> None:
    md = state.md
    if md.prev_ch == " ":
        md.shorten()
    md.append(_emphasis_marker(state, strength) + " ")


def _open_strikethrough(state: ConversionState) -> None:
    md = state.md
    if md.prev_ch != " ":
        md.append_blank()
    md.append("~")


def _close_strikethrough(state: ConversionState) -> None:
    md = state.md
    if md.prev_ch == " ":
        md.shorten()
    md.append("~ ")


def _open_underline(state: ConversionState) -> None:
    md = state.md
    if md.prev_prev_ch == " " and md.prev_ch == " ":
        md.shorten()
    md.append("<u>")


def _close_underline(state: ConversionState) -> None:
    md = state.md
    if md.prev_ch == " ":
        md.shorten()
    md.append("</u>")


def _open_code(state: ConversionState) -> None:
    state.is_in_code = True
    md = state.md
    if not state.is_in_pre:
        md.append("`")
        return

    if md.prev_ch == " ":
        md.shorten()
    if state.fence_info_pending:
        _finish_fence_info(state, language_from_class(state.current_tag.css_class))


def _close_code(state: ConversionState) -> None:
    state.is_in_code = False
    if state.is_in_pre:
        return

    md = state.md
    if md.prev_ch == " ":
        md.shorten()
    md.append("` ")


# =============================================================================
# Links and images
# =============================================================================


def _open_anchor(state: ConversionState) -> None:
    tag = state.current_tag
    state.anchor_title = tag.title
    state.anchor_href = tag.href
    state.md.rtrim(only_blank=True).append_blank().append("[")


def _close_anchor(state: ConversionState) -> None:
    if not state.has_open(TAG_ANCHOR):
        return

    md = state.md
    if md.prev_ch == " ":
        md.shorten()

    if md.prev_ch == "[":
        md.shorten()
    else:
        md.append("](" + state.anchor_href)
        if state.anchor_title:
            md.append(f' "{state.anchor_title}"')
        md.append(") ")
        if state.prev_tag == TAG_IMAGE:
            md.append("\n")

    state.anchor_href = ""
    state.anchor_title = ""


def _open_image(state: ConversionState) -> None:
    if state.options.remove_images:
        return

    md = state.md
    tag = state.current_tag
    if state.prev_tag != TAG_ANCHOR and len(md) and md.prev_ch != "\n":
        md.append("\n")

    md.append(f"![{tag.alt}]({tag.src}")
    if tag.title:
        md.append(f' "{tag.title}"')
    md.append(")")


def _close_image(state: ConversionState) -> None:
    if not state.options.remove_images and state.has_open(TAG_ANCHOR):
        state.md.append("\n")


# =============================================================================
# Lists
# =============================================================================


def _open_unordered_list(state: ConversionState) -> None:
    if state.is_in_list or state.is_in_table:
        return

    state.is_in_list = True
    state.md.append("\n")


def _close_unordered_list(state: ConversionState) -> None:
    if state.is_in_table:
        return

    md = state.md
    state.is_in_list = False
    # a bare marker before the closing tag means an enclosing list is still open
    if md.prev_prev_ch in LIST_MARKER_PUNCTUATION and state.prev_tag != TAG_PARAGRAPH:
        state.is_in_list = True

    if md.prev_prev_ch == "\n" and md.prev_ch == "\n":
        while md.ends_with("\n\n\n"):
            md.shorten()
    else:
        md.ensure_newline().append("\n")


def _open_ordered_list(state: ConversionState) -> None:
    if state.is_in_table:
        return

    state.is_in_list = True
    state.is_in_ordered_list = True
    state.list_item_index = 0

    md = state.md
    if md.prev_ch == " ":
        md.shorten().append("\n")
    md.append("\n")


def _close_ordered_list(state: ConversionState) -> None:
    if state.is_in_table:
        return

    state.is_in_list = False
    state.is_in_ordered_list = False
    state.md.append("\n")


def _open_list_item(state: ConversionState) -> None:
    if state.is_in_table:
        return

    md = state.md
    md.ensure_newline()
    if state.blockquote_depth > 0 and (not len(md) or md.prev_ch == "\n"):
        md.append(state.blockquote_prefix())

    if not state.is_in_ordered_list:
        md.append(state.options.unordered_list_marker + " ")
        return

    state.list_item_index += 1
    md.append(f"{state.list_item_index}{state.options.ordered_list_delimiter} ")


def _close_list_item(state: ConversionState) -> None:
    if state.is_in_table:
        return

    if state.md.prev_ch != "\n":
        state.md.append("\n")


# =============================================================================
# Preformatted blocks
# =============================================================================


def _finish_fence_info(state: ConversionState, language: str = "") -> None:
    state.md.append((language or state.fence_language) + "\n")
    state.fence_info_pending = False


def _open_pre(state: ConversionState) -> None:
    md = state.md
    state.is_in_pre = True
    state.fence_language = language_from_class(state.current_tag.css_class)

    if state.blockquote_depth > 0:
        quote_marks = state.blockquote_prefix().rstrip()
        md.ensure_newline().append(quote_marks + "\n")
        state.code_line_prefix = quote_marks + INDENTED_CODE_PREFIX
    elif state.is_in_list:
        md.ensure_blank_line()
        state.code_line_prefix = INDENTED_CODE_PREFIX
    else:
        md.ensure_blank_line().append(CODE_FENCE)
        state.code_line_prefix = ""
        state.fence_info_pending = True
        return

    md.append(state.code_line_prefix)
    state.fence_info_pending = False


def _close_pre(state: ConversionState) -> None:
    if not state.is_in_pre:
        return

    md = state.md
    if state.fence_info_pending:
        _finish_fence_info(state)
    state.is_in_pre = False
    state.code_line_prefix = ""
    state.fence_language = ""

    md.ensure_newline()
    if not state.is_in_list and state.blockquote_depth == 0:
        md.append(CODE_FENCE + "\n")


# =============================================================================
# Tables
# =============================================================================


def _open_table(state: ConversionState) -> None:
    state.is_in_table = True
    state.md.ensure_blank_line()
    state.table.begin(len(state.md))


def _close_table(state: ConversionState) -> None:
    md = state.md
    state.is_in_table = False
    start = state.table.end()
    if state.options.format_tables and start is not None:
        md.append(format_pipe_table(md.truncate(start)))
    md.ensure_blank_line()


def _open_table_row(state: ConversionState) -> None:
    # only when needed, so header, separator and data rows stay contiguous
    state.md.ensure_newline()


def _close_table_row(state: ConversionState) -> None:
    if not state.is_in_table:
        return

    md = state.md
    # TODO: a row whose last emitted character is already '|' gets a newline
    # instead of its closing pipe; confirm the intended output with the table owners.
    if md.prev_ch == "|":
        md.append("\n")
    else:
        md.append("|")

    if state.table.has_pending_separator():
        md.ensure_newline().append(state.table.flush_separator())


def _open_table_header(state: ConversionState) -> None:
    state.table.add_header_cell(state.current_tag.align)
    state.md.append("| ")


def _open_table_data(state: ConversionState) -> None:
    if not state.md.ends_with("| "):
        state.md.append("| ")


# =============================================================================
# Registry
# =============================================================================

HANDLERS: dict[str, ElementHandler] = {
    # recognised, but nothing is printed for the element itself
    TAG_HEAD: IGNORED_HANDLER,
    TAG_META: IGNORED_HANDLER,
    TAG_LINK: IGNORED_HANDLER,
    TAG_NAV: IGNORED_HANDLER,
    TAG_NOSCRIPT: IGNORED_HANDLER,
    TAG_SCRIPT: IGNORED_HANDLER,
    TAG_STYLE: IGNORED_HANDLER,
    TAG_TEMPLATE: IGNORED_HANDLER,
    # blocks
    TAG_PARAGRAPH: ElementHandler(_open_paragraph, _close_paragraph),
    TAG_DIV: ElementHandler(_open_div, _noop),
    TAG_BLOCKQUOTE: ElementHandler(_open_blockquote, _close_blockquote),
    TAG_SEPARATOR: ElementHandler(_open_separator, _noop),
    TAG_BREAK: ElementHandler(_open_break, _noop),
    TAG_OPTION: ElementHandler(_noop, _close_option),
    TAG_SPAN: ElementHandler(_open_span, _close_span),
    TAG_TITLE: ElementHandler(_open_title, _close_title),
    TAG_PRE: ElementHandler(_open_pre, _close_pre),
    TAG_CODE: ElementHandler(_open_code, _close_code),
    # links and images
    TAG_ANCHOR: ElementHandler(_open_anchor, _close_anchor),
    TAG_IMAGE: ElementHandler(_open_image, _close_image),
    # lists
    TAG_UNORDERED_LIST: ElementHandler(_open_unordered_list, _close_unordered_list),
    TAG_ORDERED_LIST: ElementHandler(_open_ordered_list, _close_ordered_list),
    TAG_LIST_ITEM: ElementHandler(_open_list_item, _close_list_item),
    # tables
    TAG_TABLE: ElementHandler(_open_table, _close_table),
    TAG_TABLE_ROW: ElementHandler(_open_table_row, _close_table_row),
    TAG_TABLE_HEADER: ElementHandler(_open_table_header, _noop),
    TAG_TABLE_DATA: ElementHandler(_open_table_data, _noop),
}

for _level, _name in enumerate(HEADING_TAGS, start=1):
    HANDLERS[_name] = ElementHandler(partial(_open_heading, _level), _close_heading)

for _name in BOLD_TAGS:
    HANDLERS[_name] = ElementHandler(partial(_open_emphasis, 2), partial(_close_emphasis, 2))

for _name in ITALIC_TAGS:
    HANDLERS[_name] = ElementHandler(partial(_open_emphasis, 1), partial(_close_emphasis, 1))

for _name in UNDERLINE_TAGS:
    HANDLERS[_name] = ElementHandler(_open_underline, _close_underline)

for _name in STRIKETHROUGH_TAGS:
    HANDLERS[_name] = ElementHandler(_open_strikethrough, _close_strikethrough)


def get_handler(name: str) -> ElementHandler:
    """Return the handler pair for ``name``, or ``IGNORED_HANDLER`` for unknown elements."""
    return HANDLERS.get(name, IGNORED_HANDLER)


def is_recognized(name: str) -> bool:
    return name in HANDLERS
