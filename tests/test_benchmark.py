import sys
from pathlib import Path

import pandas as pd
import pytest

from bktree.benchmark import evaluate
from bktree.distance import absolute_difference, hamming_distance, levenshtein_distance

# benchmark.py lives at the project root
sys.path.insert(0, str(Path(__file__).parent.parent))

from benchmark import main as benchmark_main

WORDS = ["example", "sample", "simple", "ample", "apple", "maple", "temple", "exact", "excel"]


def test_evaluate_report():
    df = evaluate(WORDS, ["exaple", "aple"], 2)

    assert list(df["query"]) == ["exaple", "aple"]
    assert list(df.columns) == [
        "query",
        "radius",
        "matches",
        "tree_calls",
        "scan_calls",
        "pruned_ratio",
        "tree_seconds",
        "scan_seconds",
        "consistent",
    ]
    assert df["consistent"].all()
    assert (df["scan_calls"] == len(WORDS)).all()
    assert (df["tree_calls"] <= df["scan_calls"]).all()
    assert (df["matches"] >= 1).all()


def test_evaluate_custom_metric_prunes():
    values = list(range(0, 2000, 3))
    df = evaluate(values, [1000], 4, absolute_difference)

    row = df.iloc[0]
    assert row["matches"] == 3  # 996, 999, 1002
    assert bool(row["consistent"])
    assert row["tree_calls"] < row["scan_calls"]
    assert row["pruned_ratio"] == pytest.approx(1 - row["tree_calls"] / row["scan_calls"])


def test_evaluate_without_queries():
    df = evaluate(WORDS, [], 2)
    assert df.empty


def test_evaluate_hamming_compares_same_length_words():
    df = evaluate(["example", "sample", "simple", "exaple"], ["sample", "exaple"], 1, hamming_distance)

    assert list(df["matches"]) == [2, 1]  # sample/simple, exaple
    assert df["consistent"].all()
    assert (df["scan_calls"] == 3).all()


def test_evaluate_same_length_with_levenshtein():
    df = evaluate(WORDS, ["exaple"], 2, levenshtein_distance, same_length=True)

    # only the six-letter words are compared
    assert df.iloc[0]["scan_calls"] == len([w for w in WORDS if len(w) == 6])
    assert bool(df.iloc[0]["consistent"])


# === CLI ===

@pytest.fixture
def words_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("\n".join(WORDS + ["exaple"]), encoding="utf-8")
    return path


def test_cli_writes_csv(words_file, tmp_path):
    output = tmp_path / "report.csv"
    code = benchmark_main(
        ["--words", str(words_file), "--queries", "exaple", "aple", "--output", str(output)]
    )

    assert code == 0
    report = pd.read_csv(output)
    assert list(report["query"]) == ["exaple", "aple"]
    assert report["consistent"].all()


def test_cli_hamming(words_file, tmp_path):
    output = tmp_path / "hamming.csv"
    code = benchmark_main(
        ["--words", str(words_file), "--metric", "hamming", "--queries", "sample", "--radius", "1",
         "--output", str(output)]
    )

    assert code == 0
    report = pd.read_csv(output)
    assert report.iloc[0]["matches"] == 2  # sample, simple
    assert bool(report.iloc[0]["consistent"])


@pytest.mark.parametrize("metric", ["absolute", "cosine"])
def test_cli_rejects_metric(words_file, tmp_path, metric):
    output = tmp_path / "report.csv"
    code = benchmark_main(["--words", str(words_file), "--metric", metric, "--output", str(output)])

    assert code == 1
    assert not output.exists()


def test_cli_missing_word_list(tmp_path):
    assert benchmark_main(["--words", str(tmp_path / "missing.txt"), "--output", str(tmp_path / "r.csv")]) == 1
