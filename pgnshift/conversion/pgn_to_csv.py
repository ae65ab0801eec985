#!/usr/bin/env python3
# ==============================================================================
# pgn_to_csv.py
# ------------------------------------------------------------------------------
# Streams a PGN file through `RecordSegmenter` and writes one CSV row per game.
#
# Execution flow:
#   1. Open input (split on LF, configured codec) and output (UTF-8);
#      undecodable input bytes pass through unchanged
#   2. Write the fixed CSV header
#   3. Stream rows, logging progress every PROGRESS_INTERVAL games
#   4. Update Prometheus counters and return the number of games written
# ==============================================================================

from __future__ import annotations

import codecs
from pathlib import Path
from typing import BinaryIO, Iterable, Iterator, Optional, TextIO, Tuple, Union

from pgnshift.conversion.csv_rows import CSV_HEADER
from pgnshift.conversion.segmenter import RecordSegmenter
from pgnshift.utils.config_utils import get_input_encoding, get_progress_interval
from pgnshift.utils.logging_utils import setup_logger
from pgnshift.utils.metrics import CONVERSION_DURATION, GAMES_CONVERTED, SEGMENTS_SKIPPED

LOGGER = setup_logger("pgn_to_csv")

PathLike = Union[str, Path]


class ConversionError(RuntimeError):
    """Base class for conversions that cannot start."""


class InputFileError(ConversionError):
    pass


class OutputFileError(ConversionError):
    pass


class ConfigurationError(ConversionError):
    pass


# ==============================================================================
# Main conversion
# ==============================================================================


def convert_pgn_to_csv(
    input_path: PathLike,
    output_path: PathLike,
    progress_interval: Optional[int] = None,
) -> int:
    """
    Convert `input_path` (PGN) into `output_path` (CSV).

    Input lines are split on ``\\n`` only; bytes the configured codec cannot
    decode are carried through to the output unchanged.

    Returns
    -------
    int
        Number of games written.

    Raises
    ------
    ConfigurationError
        Unknown input codec or malformed progress interval.
    InputFileError
        The input cannot be opened for reading.
    OutputFileError
        The output cannot be created.
    """
    interval, encoding = _resolve_settings(progress_interval)

    try:
        src = open(input_path, "rb")
    except OSError as exc:
        raise InputFileError(f"Could not open input file: {input_path}") from exc

    with src:
        try:
            dst = open(
                output_path, "w", encoding="utf-8", errors="surrogateescape", newline=""
            )
        except OSError as exc:
            raise OutputFileError(f"Could not create output file: {output_path}") from exc

        with dst, CONVERSION_DURATION.time():
            return _write_rows(_decoded_lines(src, encoding), dst, interval)


# ==============================================================================
# Helpers
# ==============================================================================


def _resolve_settings(progress_interval: Optional[int]) -> Tuple[int, str]:
    """Read interval + codec from the environment, validating both up front."""
    try:
        interval = progress_interval or get_progress_interval()
        encoding = codecs.lookup(get_input_encoding()).name
    except LookupError as exc:
        raise ConfigurationError(f"Unknown input encoding: {exc}") from exc
    except RuntimeError as exc:
        raise ConfigurationError(str(exc)) from exc
    return interval, encoding


def _decoded_lines(src: BinaryIO, encoding: str) -> Iterator[str]:
    """Yield text lines split on b"\\n" (a lone CR does not end a line)."""
    for raw in src:
        yield raw.decode(encoding, errors="surrogateescape")


def _write_rows(lines: Iterable[str], dst: TextIO, interval: int) -> int:
    """Write the header plus every converted row; return the row count."""
    segmenter = RecordSegmenter(progress_interval=interval, on_progress=_log_progress)

    dst.write(CSV_HEADER + "\n")
    for row in segmenter.run(lines):
        dst.write(row + "\n")
        GAMES_CONVERTED.inc()

    if segmenter.segments_skipped:
        SEGMENTS_SKIPPED.inc(segmenter.segments_skipped)
        LOGGER.debug("Skipped %d segment(s) without tags", segmenter.segments_skipped)

    return segmenter.games_converted


def _log_progress(count: int) -> None:
    LOGGER.info("Processed %d games...", count)
