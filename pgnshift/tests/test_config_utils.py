import pytest

from pgnshift.utils.config_utils import (
    DEFAULT_PROGRESS_INTERVAL,
    get_input_encoding,
    get_logs_dir,
    get_metrics_port,
    get_progress_interval,
    log_to_file_enabled,
)


def test_progress_interval_default(monkeypatch):
    monkeypatch.delenv("PROGRESS_INTERVAL", raising=False)
    assert get_progress_interval() == DEFAULT_PROGRESS_INTERVAL == 100_000


def test_progress_interval_override(monkeypatch):
    monkeypatch.setenv("PROGRESS_INTERVAL", "250")
    assert get_progress_interval() == 250


@pytest.mark.parametrize("raw", ["abc", "0", "-5"])
def test_progress_interval_invalid(monkeypatch, raw):
    monkeypatch.setenv("PROGRESS_INTERVAL", raw)
    with pytest.raises(RuntimeError, match="PROGRESS_INTERVAL"):
        get_progress_interval()


def test_input_encoding(monkeypatch):
    monkeypatch.delenv("PGN_INPUT_ENCODING", raising=False)
    assert get_input_encoding() == "utf-8"
    monkeypatch.setenv("PGN_INPUT_ENCODING", "latin-1")
    assert get_input_encoding() == "latin-1"


def test_metrics_port(monkeypatch):
    monkeypatch.delenv("METRICS_PORT", raising=False)
    assert get_metrics_port() is None
    monkeypatch.setenv("METRICS_PORT", "9100")
    assert get_metrics_port() == 9100


def test_logs_dir(monkeypatch, tmp_path):
    monkeypatch.delenv("LOG_DIR", raising=False)
    assert get_logs_dir() is None
    monkeypatch.setenv("LOG_DIR", str(tmp_path))
    assert get_logs_dir() == tmp_path


@pytest.mark.parametrize(
    "raw,expected", [("true", True), ("1", True), ("YES", True), ("false", False), ("0", False)]
)
def test_log_to_file_enabled(monkeypatch, raw, expected):
    monkeypatch.setenv("LOG_TO_FILE", raw)
    assert log_to_file_enabled() is expected
