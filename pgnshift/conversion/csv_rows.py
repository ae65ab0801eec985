# ==============================================================================
# csv_rows.py  –  GameRecord → CSV line
#
# Column order is fixed. Only the free-text columns (Opening, Event) are
# escaped; ratings are digit-validated and everything else is written raw.
# ==============================================================================

from __future__ import annotations

from typing import Final

from pgnshift.utils.field_format import escape_csv, format_number
from pgnshift.utils.pgn_parser import GameRecord

CSV_HEADER: Final[str] = (
    "GameNumber,WhiteElo,BlackElo,ECO,Opening,Event,Result,OpeningCategory"
)


def format_output_row(record: GameRecord) -> str:
    """Serialise one record; the caller appends the line terminator."""
    return ",".join(
        (
            str(record.game_number),
            format_number(record.white_elo),
            format_number(record.black_elo),
            record.eco,
            escape_csv(record.opening),
            escape_csv(record.event),
            record.result,
            record.opening_category,
        )
    )
