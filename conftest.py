import sys
from pathlib import Path

# Make `apps` and `cartstore` importable when pytest runs from the repo root
BACKEND_DIR = str(Path(__file__).resolve().parent / "backend")
if BACKEND_DIR not in sys.path:
    sys.path.insert(0, BACKEND_DIR)
