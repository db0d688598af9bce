#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/events2md/utils/escape.py
"""Markdown text escaping.

This module rewrites raw text so that no part of it can be read back as
markdown syntax. Escaping is context sensitive (start of line, inside a
table, inside a superscript span, ...) and order sensitive: every step scans
the text produced by the previous steps, including the backslashes they
inserted.

The escape character itself is doubled first, which means escaping must run
exactly once over any given span of text. Running it again over escaped text
doubles the inserted backslashes and corrupts the output.

"""

from __future__ import annotations

import re
from dataclasses import dataclass

from events2md.constants import ESCAPE_CHAR, ESCAPED_URI_PREFIXES
from events2md.exceptions import EscapeRuleError

# Non-escaped square brackets
BRACKETS_PATTERN = re.compile(r"[^\\](\[|\])")

# En dash ('--') and em dash ('---')
DASHES_PATTERN = re.compile(r"(-)?(--)")

# Opening backticks of an inline code span; isolated backticks do not match
INLINE_CODE_PATTERN = re.compile(r"(`{1,2})[^`]+(?=`{1,2})")

# Opening italic/bold markers ('*', '_', '**', '__' and combinations)
ITALIC_BOLD_PATTERN = re.compile(r"(?:^|\s)([*_]{1,3})[^\s*_]")

# Opening of a link ('['), image ('![') or macro ('#[') label
LABEL_PATTERN = re.compile(r"([#!]?\[+)")

# Horizontal line and setext-style header underline
LINE_AND_SETEXT_HEADER_PATTERN = re.compile(r"^((?:[=\-*] ?){3,})$")

# Bullet ('*', '+', '-') of an unordered list or ':' / '~' of a definition
LIST_PATTERN = re.compile(r"\s*([*+-]|[:~])\s+")

# Period of an ordered list marker
NUMBERED_LIST_PATTERN = re.compile(r"\s*[0-9]+(\.)\s+")

PARENTHESIS_PATTERN = re.compile(r"([()])")

# Opening '^' (superscript) or '~' (subscript) of a closed span
SUPER_SUB_SCRIPT_PATTERN = re.compile(r"(?:^|\s)([~^])(?:\S|\\\s)+\1")

ATX_HEADER_MARKER = "#"
BLOCKQUOTE_MARKER = ">"


@dataclass(frozen=True)
class EscapeContext:
    """Render state the escape rules depend on.

    Parameters
    ----------
    in_line : bool, default True
        Whether the text belongs to inline content (paragraph, header, list
        item, table cell, ...). Line-start and dash rules only apply there.
    in_table : bool, default False
        Whether the text is inside a table, where ``|`` divides columns.
    on_new_line : bool, default True
        Whether the text starts right after a line break.
    escape_spaces : bool, default False
        Whether spaces and tabs must be escaped (superscript/subscript spans).

    """

    in_line: bool = True
    in_table: bool = False
    on_new_line: bool = True
    escape_spaces: bool = False


def _insert_escapes(text: str, positions: list[int]) -> str:
    """Insert the escape character before each of the given positions."""
    if not positions:
        return text
    parts: list[str] = []
    last = 0
    for pos in positions:
        parts.append(text[last:pos])
        parts.append(ESCAPE_CHAR)
        last = pos
    parts.append(text[last:])
    return "".join(parts)


def escape_first_matched_character(text: str, pattern: re.Pattern[str]) -> str:
    """Escape the first character of group 1 when the pattern matches at the start.

    Parameters
    ----------
    text : str
        Text to check and escape
    pattern : re.Pattern
        Regular expression with exactly one capturing group

    Returns
    -------
    str
        The text, escaped when the pattern matched

    """
    match = pattern.match(text)
    if match:
        return _insert_escapes(text, [match.start(1)])
    return text


def escape_all_matched_subsequences(text: str, pattern: re.Pattern[str]) -> str:
    r"""Escape the first character of every captured group of every match.

    Matches are searched in the text as given; each escape shifts the
    following positions by one, which is accounted for when inserting.
    Groups that did not take part in a match are skipped.

    Parameters
    ----------
    text : str
        Text to check and escape
    pattern : re.Pattern
        Regular expression with at least one capturing group

    Returns
    -------
    str
        Escaped text

    Raises
    ------
    EscapeRuleError
        If the pattern has no capturing group

    Examples
    --------
        >>> escape_all_matched_subsequences("a--b", DASHES_PATTERN)
        'a\\--b'

    """
    if pattern.groups < 1:
        raise EscapeRuleError(pattern.pattern)

    positions: list[int] = []
    for match in pattern.finditer(text):
        for group in range(1, pattern.groups + 1):
            start = match.start(group)
            if start != -1:
                positions.append(start)
    return _insert_escapes(text, positions)


def escape_when_starts_with(text: str, char: str) -> str:
    """Escape the first character of the text if it is ``char``."""
    if text.startswith(char):
        return ESCAPE_CHAR + text
    return text


def escape_uri(text: str, prefix: str) -> str:
    """Escape the colon of the first occurrence of a ``scheme:`` prefix."""
    pos = text.find(prefix)
    if pos > -1:
        return _insert_escapes(text, [pos + len(prefix) - 1])
    return text


def escape_label(label: str) -> str:
    r"""Escape the square brackets of a link or image label.

    Brackets already preceded by a backslash are left alone, as is a bracket
    at the very start of the label.

    Parameters
    ----------
    label : str
        Label text (already escaped as regular text)

    Returns
    -------
    str
        Label safe to print between ``[`` and ``]``

    Examples
    --------
        >>> escape_label("a[b]")
        'a\\[b\\]'

    """
    if "[" in label or "]" in label:
        return escape_all_matched_subsequences(label, BRACKETS_PATTERN)
    return label


def escape_reference(reference: str) -> str:
    """Escape the parentheses of a reference printed as ``(reference)``."""
    if "(" in reference or ")" in reference:
        return escape_all_matched_subsequences(reference, PARENTHESIS_PATTERN)
    return reference


def escape_markdown(text: str, context: EscapeContext) -> str:
    r"""Escape characters that would otherwise be read as markdown syntax.

    The steps run in a fixed order and each one sees the output of the
    previous ones:

    1. Double the escape character.
    2. Escape spaces and tabs inside superscript/subscript spans.
    3. Escape en/em dash sequences in inline content, unless the whole text
       is a horizontal line (handled by step 5 instead).
    4. Escape the opening of link, image and macro labels. This runs before
       step 5 so that ``#[`` is not escaped twice.
    5. At the start of a line in inline content, escape list, numbered list,
       horizontal line, header and blockquote markers.
    6. Escape column dividers inside tables.
    7. Escape opening italic and bold markers.
    8. Escape opening superscript and subscript markers.
    9. Escape opening backticks of inline code spans.
    10. Escape the colon of ``image:``, ``attach:`` and ``mailto:``.

    Parameters
    ----------
    text : str
        Raw text accumulated since the last flush
    context : EscapeContext
        Render state at flush time

    Returns
    -------
    str
        Escaped text

    Examples
    --------
        >>> escape_markdown("C:\\path", EscapeContext(on_new_line=False))
        'C:\\\\path'
        >>> escape_markdown("- not a list", EscapeContext())
        '\\- not a list'

    """
    if not text:
        return text

    text = text.replace(ESCAPE_CHAR, ESCAPE_CHAR + ESCAPE_CHAR)

    if context.escape_spaces:
        text = text.replace(" ", ESCAPE_CHAR + " ")
        text = text.replace("\t", ESCAPE_CHAR + "\t")

    if context.in_line and "--" in text and not LINE_AND_SETEXT_HEADER_PATTERN.fullmatch(text):
        text = escape_all_matched_subsequences(text, DASHES_PATTERN)

    if "[" in text:
        text = escape_all_matched_subsequences(text, LABEL_PATTERN)

    if context.in_line and context.on_new_line:
        text = escape_first_matched_character(text, LIST_PATTERN)
        text = escape_first_matched_character(text, NUMBERED_LIST_PATTERN)
        text = escape_first_matched_character(text, LINE_AND_SETEXT_HEADER_PATTERN)
        text = escape_when_starts_with(text, ATX_HEADER_MARKER)
        text = escape_when_starts_with(text, BLOCKQUOTE_MARKER)

    if context.in_table:
        text = text.replace("|", ESCAPE_CHAR + "|")

    if "*" in text or "_" in text:
        text = escape_all_matched_subsequences(text, ITALIC_BOLD_PATTERN)

    if "^" in text or "~" in text:
        text = escape_all_matched_subsequences(text, SUPER_SUB_SCRIPT_PATTERN)

    if "`" in text:
        text = escape_all_matched_subsequences(text, INLINE_CODE_PATTERN)

    for prefix in ESCAPED_URI_PREFIXES:
        text = escape_uri(text, prefix)

    return text
