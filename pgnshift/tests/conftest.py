# ==============================================================================
# conftest.py  –  Shared pytest setup
#   • keeps test runs from writing log files
#   • ensures the project root is importable
# ==============================================================================

import os
import sys
from pathlib import Path

import pytest

os.environ["LOG_TO_FILE"] = "false"

PROJECT_ROOT = Path(__file__).resolve().parents[2]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture
def sample_pgn() -> str:
    """Two games with move text, separated by blank lines."""
    return (
        '[Event "Test Cup"]\n'
        '[WhiteElo "2000"]\n'
        '[BlackElo "2100"]\n'
        '[ECO "C50"]\n'
        '[Opening "Italian Game"]\n'
        '[Result "1-0"]\n'
        "\n"
        "1. e4 e5 2. Nf3 Nc6 3. Bc4 1-0\n"
        "\n"
        '[Event "City, Country"]\n'
        '[WhiteElo "?"]\n'
        '[BlackElo "1850"]\n'
        '[ECO "b90"]\n'
        '[Opening "Sicilian Defense: Najdorf Variation"]\n'
        '[Result "0-1"]\n'
        "\n"
        "1. e4 c5 0-1\n"
    )
