# ==============================================================================
# opening_classifier.py  –  ECO code → broad opening category
#
# Only the first letter of the ECO code is inspected (A–E volumes).
# ==============================================================================

from __future__ import annotations

from typing import Dict, Final

from pgnshift.utils.field_format import trim

UNKNOWN_CATEGORY: Final[str] = "Unknown category"

ECO_CATEGORIES: Final[Dict[str, str]] = {
    "A": "Flankeneröffnung",
    "B": "Halboffene Eröffnung",
    "C": "Offene Eröffnung",
    "D": "Geschlossene Eröffnung",
    "E": "Indische Verteidigung",
}


def categorize_opening(eco: str) -> str:
    """Map an ECO code such as ``"B90"`` to its category label (case-insensitive)."""
    code = trim(eco)
    if not code:
        return UNKNOWN_CATEGORY
    return ECO_CATEGORIES.get(code[0].upper(), UNKNOWN_CATEGORY)
