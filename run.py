#!/usr/bin/env python3
"""
Fuzzy word lookup with a BK-tree
Usage: python run.py QUERY [--radius N] [--words PATH] [--metric NAME]
       python run.py --ui [--port PORT] [--host HOST]
"""

import sys
import logging
import argparse
import subprocess
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from bktree import BKTree, get_metric, hamming_distance, load_word_list
from bktree.config import UI_CONFIG
from bktree.utils import get_default_metric, get_default_radius, get_logging_config


def setup_logging():
    """Configure logging from ``LOGGING_CONFIG`` and the environment"""
    config = get_logging_config()
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if config.get("file"):
        handlers.append(logging.FileHandler(config["file"]))

    logging.basicConfig(
        level=getattr(logging, str(config.get("level", "INFO")).upper(), logging.INFO),
        format=config.get("format"),
        handlers=handlers,
    )


def check_dependencies() -> bool:
    """Check that the runtime libraries can be imported"""
    required_packages = {
        "rapidfuzz": "rapidfuzz",
        "chardet": "chardet",
        "pandas": "pandas",
        "streamlit": "streamlit",
    }

    missing = []
    for package, module in required_packages.items():
        try:
            __import__(module)
        except ImportError:
            missing.append(package)

    if missing:
        print(f"❌ Missing dependencies: {', '.join(missing)}")
        print("📦 Install with: pip install -e .")
        return False
    return True


def format_results_table(results: Sequence[Tuple[str, int]]) -> str:
    """Render ``(word, distance)`` pairs as a Markdown table"""
    width = max([len("Neighbor")] + [len(str(word)) for word, _ in results])
    lines = [
        f"| {'Neighbor':<{width}} | Distance |",
        f"|{'-' * (width + 2)}|----------|",
    ]
    for word, dist in results:
        lines.append(f"| {str(word):<{width}} | {dist:<8d} |")
    return "\n".join(lines)


def run_streamlit(host="localhost", port=8501):
    """Launch the Streamlit lookup page"""
    app_path = Path(__file__).parent / "main.py"
    cmd = [
        sys.executable, "-m", "streamlit", "run", str(app_path),
        "--server.address", host,
        "--server.port", str(port),
        "--server.headless", "true",
    ]

    print(f"🚀 Starting the lookup page on http://{host}:{port}")
    print("⏹️ Stop: Ctrl+C")

    try:
        subprocess.run(cmd)
    except KeyboardInterrupt:
        print("\n👋 Stopped")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Find the words of a dictionary within a given distance of a query"
    )
    parser.add_argument("query", nargs="?", help="Word to look up")
    parser.add_argument(
        "--radius",
        type=int,
        default=get_default_radius(),
        help="Maximum distance of a match (default: %(default)s)",
    )
    parser.add_argument(
        "--words",
        default=None,
        help="Word list, one word per line (default: BKTREE_WORDS_PATH or the system dictionary)",
    )
    parser.add_argument(
        "--metric",
        default=get_default_metric(),
        help="Distance function: levenshtein, hamming or absolute (default: %(default)s)",
    )
    parser.add_argument("--ui", action="store_true", help="Launch the Streamlit page")
    parser.add_argument("--host", default="localhost", help="UI address (default: localhost)")
    parser.add_argument(
        "--port", type=int, default=UI_CONFIG["port"], help="UI port (default: %(default)s)"
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point, returns the process exit code"""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging()

    if args.ui:
        if not check_dependencies():
            return 1
        run_streamlit(args.host, args.port)
        return 0

    if not args.query:
        parser.error("a query is required unless --ui is given")

    try:
        distance_func = get_metric(args.metric)
        words = load_word_list(args.words)
    except (ValueError, FileNotFoundError, UnicodeDecodeError) as e:
        logging.error(str(e))
        return 1

    if distance_func is hamming_distance:
        # Hamming distance is only defined between words of equal length
        words = [word for word in words if len(word) == len(args.query)]

    try:
        tree = BKTree(distance_func, words)
        logging.info("BK-tree built with %d words", len(words))
        results = tree.search(args.query, args.radius)
    except (ValueError, TypeError) as e:
        logging.error(f"Search failed: {e}")
        return 1

    print(format_results_table(results))
    return 0


if __name__ == "__main__":
    sys.exit(main())
