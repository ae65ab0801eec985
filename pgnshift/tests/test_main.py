# ==============================================================================
# test_main.py  –  CLI exit codes and summary message
# ==============================================================================

import logging
from unittest.mock import patch

import pytest

from pgnshift.main import main


@pytest.mark.parametrize("argv", [[], ["only_one.pgn"], ["a.pgn", "b.csv", "c"]])
def test_wrong_argument_count(argv, caplog):
    with caplog.at_level(logging.ERROR, logger="main"):
        assert main(argv) == 1
    assert "Usage:" in caplog.text


def test_successful_conversion(tmp_path, sample_pgn, caplog, monkeypatch):
    monkeypatch.delenv("METRICS_PORT", raising=False)
    src = tmp_path / "games.pgn"
    dst = tmp_path / "games.csv"
    src.write_text(sample_pgn, encoding="utf-8")

    with caplog.at_level(logging.INFO, logger="main"):
        assert main([str(src), str(dst)]) == 0

    assert f"Successfully converted 2 games from {src} to {dst}" in caplog.text
    assert dst.exists()


def test_missing_input(tmp_path, caplog):
    dst = tmp_path / "out.csv"

    with caplog.at_level(logging.ERROR, logger="main"):
        assert main([str(tmp_path / "nope.pgn"), str(dst)]) == 1

    assert "Could not open input file" in caplog.text
    assert not dst.exists()


def test_uncreatable_output(tmp_path, sample_pgn, caplog):
    src = tmp_path / "games.pgn"
    src.write_text(sample_pgn, encoding="utf-8")

    with caplog.at_level(logging.ERROR, logger="main"):
        assert main([str(src), str(tmp_path / "no_dir" / "out.csv")]) == 1

    assert "Could not create output file" in caplog.text


def test_metrics_server_started_when_port_set(tmp_path, monkeypatch):
    monkeypatch.setenv("METRICS_PORT", "9109")
    src = tmp_path / "games.pgn"
    src.write_text('[Event "A"]\n', encoding="utf-8")

    with patch("pgnshift.main.start_metrics_server") as mock_start:
        assert main([str(src), str(tmp_path / "games.csv")]) == 0

    mock_start.assert_called_once_with(9109)


def test_pipeline_entry_point_uses_main():
    from pgnshift.pipeline.run_conversion import main as pipeline_main

    assert pipeline_main is main


def test_unknown_input_encoding(tmp_path, sample_pgn, caplog, monkeypatch):
    monkeypatch.setenv("PGN_INPUT_ENCODING", "no-such-codec")
    src = tmp_path / "games.pgn"
    src.write_text(sample_pgn, encoding="utf-8")

    with caplog.at_level(logging.ERROR, logger="main"):
        assert main([str(src), str(tmp_path / "games.csv")]) == 1

    assert "Unknown input encoding" in caplog.text


def test_malformed_metrics_port(tmp_path, caplog, monkeypatch):
    monkeypatch.setenv("METRICS_PORT", "http")

    with caplog.at_level(logging.ERROR, logger="main"):
        assert main([str(tmp_path / "a.pgn"), str(tmp_path / "b.csv")]) == 1

    assert "METRICS_PORT" in caplog.text
