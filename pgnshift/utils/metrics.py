# ==============================================================================
# metrics.py  –  Prometheus metrics for PGN → CSV conversion
#
# Counters are process-global; the HTTP exporter is only started when a
# METRICS_PORT is configured.
# ==============================================================================

from __future__ import annotations

from prometheus_client import Counter, Histogram, start_http_server

from pgnshift.utils.logging_utils import setup_logger

LOGGER = setup_logger("metrics")

GAMES_CONVERTED = Counter(
    "pgnshift_games_converted",
    "Total number of games written as CSV rows",
)

SEGMENTS_SKIPPED = Counter(
    "pgnshift_segments_skipped",
    "Total number of PGN segments without any tag pair",
)

CONVERSION_DURATION = Histogram(
    "pgnshift_conversion_duration_seconds",
    "Histogram for the duration of one file conversion",
)


def start_metrics_server(port: int) -> None:
    """Expose the metrics above on ``http://0.0.0.0:<port>/metrics``."""
    LOGGER.info("Starting metrics server on port %d…", port)
    start_http_server(port)
    LOGGER.info("Metrics server started successfully.")
