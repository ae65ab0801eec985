# ==============================================================================
# pgn_parser.py  –  Utility for parsing PGN header blocks
#
# Parses the tag-pair section of one game record (e.g. [Event "Test Cup"])
# into a header map and projects it onto the fixed GameRecord shape.
# Move text is never interpreted.
# ==============================================================================

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from pgnshift.utils.field_format import trim
from pgnshift.utils.opening_classifier import categorize_opening


@dataclass(frozen=True)
class GameRecord:
    """One converted game, ready to be serialised as a CSV row."""

    game_number: int
    white_elo: str
    black_elo: str
    eco: str
    opening: str
    event: str
    result: str
    opening_category: str


def parse_tag_line(line: str) -> Optional[Tuple[str, str]]:
    """
    Split a trimmed tag line into ``(key, value)``.

    Parameters
    ----------
    line : str
        A single PGN line with surrounding whitespace already removed.

    Returns
    -------
    Optional[Tuple[str, str]]
        ``None`` for anything that is not ``[...]`` or has no space
        separating key and value (e.g. ``[KeyOnly]``).
    """
    if not line or line[0] != "[" or line[-1] != "]":
        return None

    space = line.find(" ")
    if space == -1:
        return None

    # Example: [Result "1-0"] → key='Result', value='"1-0"]'
    key = line[1:space]
    value = line[space + 1 :]

    if value.endswith("]"):
        value = value[:-1]
    if len(value) >= 2 and value[0] == '"' and value[-1] == '"':
        value = value[1:-1]

    return key, value


class PgnHeaderParser:
    """
    Reusable parser for the header section of a single game record.

    The header map is cleared on every call, so one instance can serve any
    number of records sequentially (but not concurrently).
    """

    def __init__(self) -> None:
        self.headers: Dict[str, str] = {}

    def parse(self, segment_text: str) -> Tuple[Dict[str, str], bool]:
        """
        Extract tag pairs from the raw text of one game record.

        Scanning stops at the first blank line; non-tag lines are ignored
        and duplicate keys keep the last value.

        Returns
        -------
        Tuple[Dict[str, str], bool]
            The header map and whether it holds at least one tag.
        """
        self.headers.clear()

        for raw in segment_text.split("\n"):
            line = trim(raw)
            if not line:
                break

            pair = parse_tag_line(line)
            if pair is not None:
                key, value = pair
                self.headers[key] = value

        return self.headers, bool(self.headers)


def build_game_record(headers: Dict[str, str], game_number: int) -> GameRecord:
    """Project a header map onto the eight exported fields."""
    eco = headers.get("ECO", "")
    return GameRecord(
        game_number=game_number,
        white_elo=headers.get("WhiteElo", ""),
        black_elo=headers.get("BlackElo", ""),
        eco=eco,
        opening=headers.get("Opening", ""),
        event=headers.get("Event", ""),
        result=headers.get("Result", ""),
        opening_category=categorize_opening(eco),
    )
