#!/usr/bin/env python3
"""CLI script comparing BK-tree queries with a linear scan of a word list."""
import argparse
import logging
import sys
from typing import Optional, Sequence

from bktree import absolute_difference, get_metric, load_word_list
from bktree.benchmark import evaluate
from bktree.config import BENCHMARK_DEFAULTS
from bktree.utils import get_default_metric, get_default_radius


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="BK-tree benchmark")
    parser.add_argument("--words", default=None, help="Word list, one word per line")
    parser.add_argument(
        "--queries", nargs="+", default=BENCHMARK_DEFAULTS["queries"], help="Query words"
    )
    parser.add_argument("--radius", type=int, default=get_default_radius(), help="Search radius")
    parser.add_argument(
        "--metric", default=get_default_metric(), help="Distance function: levenshtein or hamming"
    )
    parser.add_argument("--output", default=BENCHMARK_DEFAULTS["output"], help="Output CSV file")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")

    try:
        distance_func = get_metric(args.metric)
        if distance_func is absolute_difference:
            raise ValueError("The absolute metric compares integers, not words")
        words = load_word_list(args.words)
        df = evaluate(words, args.queries, args.radius, distance_func)
    except (ValueError, TypeError, FileNotFoundError, UnicodeDecodeError) as e:
        logging.error(str(e))
        return 1

    df.to_csv(args.output, index=False)
    print(df.to_string(index=False))
    print(f"Report saved to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
