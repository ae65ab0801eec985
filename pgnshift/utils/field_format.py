# ==============================================================================
# field_format.py  –  Stateless helpers for CSV field preparation
#
# Provides:
#   • trim          – strip PGN line whitespace (space, tab, CR, LF)
#   • escape_csv    – quote free-text fields that need it
#   • format_number – validate Elo ratings, blank anything non-numeric
# ==============================================================================

from __future__ import annotations

import re

_WHITESPACE = " \t\r\n"
_DIGITS = re.compile(r"[0-9]+")
_CSV_SPECIAL = (",", '"', "\n")


def trim(value: str) -> str:
    """Remove leading/trailing spaces, tabs, carriage returns and newlines."""
    return value.strip(_WHITESPACE)


def escape_csv(field: str) -> str:
    """
    Quote a CSV field if it contains a comma, double quote or newline.

    Internal double quotes are doubled; plain fields are returned unchanged.
    """
    if any(ch in field for ch in _CSV_SPECIAL):
        return '"' + field.replace('"', '""') + '"'
    return field


def format_number(value: str) -> str:
    """
    Return `value` if it is a plain digit string, else an empty string.

    A single surrounding pair of double quotes is removed first, so
    ``'"2400"'`` becomes ``'2400'``. Ratings such as ``"?"`` or ``"12a3"``
    are blanked rather than rejected.
    """
    result = value
    if result and result[0] == '"' and result[-1] == '"':
        result = result[1:-1]

    if not _DIGITS.fullmatch(result):
        return ""
    return result
