#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the events2md library.

This module centralizes the hardcoded values and default configuration
constants used across the markdown serializer.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Markdown Syntax - Tokens the serializer emits verbatim
3. Table Layout - Column width fitting parameters
4. Event Parameters - Recognized parameter keys
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

InputFormat = Literal["json", "yaml"]
TableAlignment = Literal["left", "right", "center", "default"]

# =============================================================================
# Markdown Syntax
# =============================================================================

ESCAPE_CHAR = "\\"

# Indentation of list item and definition description content
DEFAULT_LIST_INDENT_WIDTH = 4

BULLETED_LIST_MARKER = "*"
NUMBERED_LIST_MARKER = "1."
DEFINITION_DESCRIPTION_MARKER = ":"
QUOTATION_PREFIX = "> "
HORIZONTAL_RULE = "---"
HARD_LINE_BREAK = "  \n"
CODE_FENCE = "```"

# Macro rendered with native code syntax instead of the generic macro syntax
DEFAULT_CODE_MACRO_ID = "code"

# Header levels below this get two empty lines before them, others one
MAJOR_HEADER_LEVEL_LIMIT = 4

# URI prefixes whose colon is escaped in text
ESCAPED_URI_PREFIXES = ("image:", "attach:", "mailto:")

# =============================================================================
# Table Layout
# =============================================================================

DEFAULT_TABLE_WIDTH_STOP = 100
DEFAULT_TABLE_MIN_PADDING = 1
DEFAULT_REPEATED_WIDTH_BONUS = 0.8

# =============================================================================
# Event Parameters
# =============================================================================

PARAM_TITLE = "title"
PARAM_ALT = "alt"
PARAM_ALIGN = "align"
PARAM_COLSPAN = "colspan"
PARAM_LANGUAGE = "language"

# =============================================================================
# Output
# =============================================================================

DEFAULT_STRIP_TRAILING_NEWLINES = False
DEFAULT_INPUT_FORMAT: InputFormat = "json"
