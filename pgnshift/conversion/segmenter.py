# ==============================================================================
# segmenter.py
# ------------------------------------------------------------------------------
# Groups a PGN line stream into game-record segments and turns each segment
# into a GameRecord / CSV row.
#
# Execution flow:
#   1. Non-blank lines are appended (untrimmed) to the current segment
#   2. A blank line (or end of input) closes the segment
#   3. The segment is parsed with `PgnHeaderParser`:
#        • tags found  → GameRecord with the next game number
#        • no tags     → skipped, number not consumed
# Only one segment is held in memory at a time.
# ==============================================================================

from __future__ import annotations

from enum import Enum
from typing import Callable, Iterable, Iterator, List, Optional

from pgnshift.conversion.csv_rows import format_output_row
from pgnshift.utils.config_utils import DEFAULT_PROGRESS_INTERVAL
from pgnshift.utils.field_format import trim
from pgnshift.utils.pgn_parser import GameRecord, PgnHeaderParser, build_game_record

ProgressHook = Callable[[int], None]


class SegmentState(Enum):
    IDLE = "idle"
    ACCUMULATING = "accumulating"


class RecordSegmenter:
    """
    Stateful driver from raw PGN lines to numbered game records.

    Parameters
    ----------
    parser : PgnHeaderParser | None
        Header parser reused for every segment (a fresh one by default).
    progress_interval : int
        Emit `on_progress` every time this many games have been produced.
    on_progress : Callable[[int], None] | None
        Observability hook receiving the running game count.
    """

    def __init__(
        self,
        parser: Optional[PgnHeaderParser] = None,
        progress_interval: int = DEFAULT_PROGRESS_INTERVAL,
        on_progress: Optional[ProgressHook] = None,
    ) -> None:
        if progress_interval <= 0:
            raise ValueError("progress_interval must be positive")

        self.parser = parser or PgnHeaderParser()
        self.progress_interval = progress_interval
        self.on_progress = on_progress
        self._reset()

    # --------------------------------------------------------------------------
    # Public API
    # --------------------------------------------------------------------------

    @property
    def games_converted(self) -> int:
        """Games emitted so far (equals the next game number)."""
        return self._next_game_number

    def iter_records(self, lines: Iterable[str]) -> Iterator[GameRecord]:
        """Yield one GameRecord per successfully parsed segment, in input order."""
        self._reset()

        for raw in lines:
            line = raw.rstrip("\n")

            if trim(line):
                self._buffer.append(line + "\n")
                self.state = SegmentState.ACCUMULATING
                continue

            record = self._finalize_segment()
            if record is not None:
                yield record
                self._report_progress()

        # Input not terminated by a blank line
        record = self._finalize_segment()
        if record is not None:
            yield record
            self._report_progress()

    def run(self, lines: Iterable[str]) -> Iterator[str]:
        """Yield CSV rows (without line terminator) for `lines`."""
        for record in self.iter_records(lines):
            yield format_output_row(record)

    # --------------------------------------------------------------------------
    # Helpers
    # --------------------------------------------------------------------------

    def _reset(self) -> None:
        self.state = SegmentState.IDLE
        self._buffer: List[str] = []
        self._next_game_number = 0
        self.segments_skipped = 0

    def _finalize_segment(self) -> Optional[GameRecord]:
        """Parse the open segment (if any) and return to IDLE."""
        if self.state is not SegmentState.ACCUMULATING or not self._buffer:
            return None

        segment_text = "".join(self._buffer)
        self._buffer.clear()
        self.state = SegmentState.IDLE

        headers, ok = self.parser.parse(segment_text)
        if not ok:
            self.segments_skipped += 1
            return None

        record = build_game_record(headers, self._next_game_number)
        self._next_game_number += 1

        return record

    def _report_progress(self) -> None:
        """Call the progress hook once the consumer has handled the last record."""
        if self.on_progress and self._next_game_number % self.progress_interval == 0:
            self.on_progress(self._next_game_number)
