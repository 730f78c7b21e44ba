import sys
from pathlib import Path

import pytest

# run.py lives at the project root
sys.path.insert(0, str(Path(__file__).parent.parent))

from run import format_results_table, main


@pytest.fixture
def words_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text(
        "\n".join(["example", "sample", "simple", "exile", "staple", "exaple", "apple", "zebra"]),
        encoding="utf-8",
    )
    return path


def test_format_results_table():
    table = format_results_table([("example", 1), ("sample", 2)])
    lines = table.splitlines()
    assert lines[0] == "| Neighbor | Distance |"
    assert lines[1] == "|----------|----------|"
    assert lines[2] == "| example  | 1        |"
    assert lines[3] == "| sample   | 2        |"


def test_format_results_table_wide_words():
    table = format_results_table([("extraordinary", 2)])
    assert table.splitlines()[2] == "| extraordinary | 2        |"


def test_main_prints_neighbors(words_file, capsys):
    assert main(["exaple", "--radius", "1", "--words", str(words_file)]) == 0

    rows = capsys.readouterr().out.strip().splitlines()[2:]
    words = [row.split("|")[1].strip() for row in rows]
    assert words[0] == "exaple"
    assert set(words) == {"exaple", "example"}


def test_main_hamming_only_compares_same_length(words_file, capsys):
    assert main(["sample", "--radius", "1", "--metric", "hamming", "--words", str(words_file)]) == 0

    rows = capsys.readouterr().out.strip().splitlines()[2:]
    assert [row.split("|")[1].strip() for row in rows] == ["sample", "simple"]


def test_main_missing_word_list(tmp_path):
    assert main(["exaple", "--words", str(tmp_path / "missing.txt")]) == 1


def test_main_unknown_metric(words_file):
    assert main(["exaple", "--metric", "cosine", "--words", str(words_file)]) == 1


def test_main_requires_query():
    with pytest.raises(SystemExit):
        main([])
