# paths.py

from pathlib import Path

# Project root (this file lives in the root directory)
ROOT = Path(__file__).parent

# Where the SQLite databases are kept by default
DATA_DIR = ROOT / "Data"

def data_file(filename: str) -> Path:
    return DATA_DIR / filename

def sqlite_url(filename: str) -> str:
    return f"sqlite:///{data_file(filename)}"
