#!/usr/bin/env python3
# ==============================================================================
# run_conversion.py  –  Entry point for PGN → CSV conversion
#   Calls: pgnshift.main.main
# ==============================================================================

import sys
from pathlib import Path

from dotenv import load_dotenv

load_dotenv(dotenv_path=Path(__file__).resolve().parents[2] / "config" / ".env.local")

CURRENT_FILE = Path(__file__).resolve()
PROJECT_ROOT = CURRENT_FILE.parents[2]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from pgnshift.main import main

if __name__ == "__main__":
    sys.exit(main())
