# bktree/config.py
"""
Configuration for the BK-tree tools (word list lookup, benchmark, UI).
Environment variables override these values, see ``bktree.utils``.
"""

# === APPLICATION ===
APP_NAME = "BK-tree fuzzy lookup"
APP_VERSION = "0.1.0"
APP_DESCRIPTION = "Radius queries over discrete metric spaces with BK-trees"
APP_LICENSE = "MIT"

# === SEARCH ===
SEARCH_DEFAULTS = {
    "radius": 2,
    "max_radius": 10,
    "metric": "levenshtein",
}

# === WORD LISTS ===
# Tried in order, the first existing file wins
WORD_LIST_PATHS = [
    "/usr/share/dict/words",
    "/usr/share/dict/american-english",
]

# === LOGGING ===
LOGGING_CONFIG = {
    "level": "INFO",
    "format": "%(asctime)s - %(levelname)s - %(message)s",
    "file": None,
}

# === BENCHMARK ===
BENCHMARK_DEFAULTS = {
    "queries": ["exaple", "helo", "wrld", "pythn", "tre"],
    "output": "benchmark_report.csv",
}

# === USER INTERFACE ===
UI_CONFIG = {
    "page_title": "BK-tree fuzzy lookup",
    "page_icon": "🌳",
    "port": 8501,
    "max_rows": 500,
}
