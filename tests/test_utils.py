import os
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from bktree.distance import absolute_difference
from bktree.utils import (
    brute_force_search,
    ensure_unicode,
    get_default_metric,
    get_default_radius,
    get_logging_config,
    get_max_radius,
    get_word_list_paths,
    load_word_list,
    resolve_word_list_path,
)


class TestConfigGetters(unittest.TestCase):
    """Environment variables override the configuration."""

    def test_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            self.assertEqual(get_default_radius(), 2)
            self.assertEqual(get_max_radius(), 10)
            self.assertEqual(get_default_metric(), "levenshtein")

    def test_env_radius(self):
        os.environ["BKTREE_DEFAULT_RADIUS"] = "3"
        try:
            self.assertEqual(get_default_radius(), 3)
        finally:
            del os.environ["BKTREE_DEFAULT_RADIUS"]

    def test_env_radius_invalid_is_ignored(self):
        with patch.dict(os.environ, {"BKTREE_DEFAULT_RADIUS": "far"}):
            self.assertEqual(get_default_radius(), 2)
        with patch.dict(os.environ, {"BKTREE_DEFAULT_RADIUS": "-4"}):
            self.assertEqual(get_default_radius(), 2)

    def test_max_radius_never_below_default(self):
        with patch.dict(os.environ, {"BKTREE_DEFAULT_RADIUS": "7", "BKTREE_MAX_RADIUS": "4"}):
            self.assertEqual(get_max_radius(), 7)

    def test_env_metric(self):
        with patch.dict(os.environ, {"BKTREE_METRIC": " Hamming "}):
            self.assertEqual(get_default_metric(), "hamming")

    def test_env_words_path_first(self):
        with patch.dict(os.environ, {"BKTREE_WORDS_PATH": "/tmp/my_words.txt"}):
            paths = get_word_list_paths()
        self.assertEqual(paths[0], "/tmp/my_words.txt")
        self.assertIn("/usr/share/dict/words", paths)

    def test_env_logging(self):
        with patch.dict(os.environ, {"BKTREE_LOG_LEVEL": "debug", "BKTREE_LOG_FILE": "bk.log"}):
            config = get_logging_config()
        self.assertEqual(config["level"], "DEBUG")
        self.assertEqual(config["file"], "bk.log")


class TestEnsureUnicode(unittest.TestCase):
    def test_str_passes_through(self):
        self.assertEqual(ensure_unicode("café"), "café")

    def test_utf8_bytes(self):
        self.assertEqual(ensure_unicode("Café".encode("utf-8")), "Café")

    def test_detected_encoding(self):
        data = "Café".encode("latin-1")
        with patch("bktree.utils.chardet.detect", return_value={"encoding": "latin-1", "confidence": 0.9}):
            self.assertEqual(ensure_unicode(data), "Café")

    def test_raises_on_unknown_encoding(self):
        bad_bytes = b"\xff\xfe\xfd"
        with patch("bktree.utils.chardet.detect", return_value={"encoding": None, "confidence": 0}):
            with self.assertRaises(UnicodeDecodeError):
                ensure_unicode(bad_bytes)


class TestLoadWordList(unittest.TestCase):
    def setUp(self):
        self.tmp_dir = tempfile.TemporaryDirectory()
        self.path = Path(self.tmp_dir.name) / "words.txt"

    def tearDown(self):
        self.tmp_dir.cleanup()

    def test_load_word_list(self):
        self.path.write_text("example\n\n  sample \nexample\nsimple\n", encoding="utf-8")
        self.assertEqual(load_word_list(self.path), ["example", "sample", "simple"])

    def test_load_word_list_from_env(self):
        self.path.write_text("alpha\nbeta\n", encoding="utf-8")
        with patch.dict(os.environ, {"BKTREE_WORDS_PATH": str(self.path)}):
            self.assertEqual(load_word_list(), ["alpha", "beta"])

    def test_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            load_word_list(Path(self.tmp_dir.name) / "missing.txt")

    def test_no_configured_file(self):
        with patch("bktree.utils.get_word_list_paths", return_value=[str(Path(self.tmp_dir.name) / "nope")]):
            with self.assertRaises(FileNotFoundError):
                resolve_word_list_path()


class TestBruteForceSearch(unittest.TestCase):
    def test_sorted_by_distance(self):
        results = brute_force_search([1, 9, 5, 3, 7], 5, 2, absolute_difference)
        self.assertEqual(results[0], (5, 0))
        self.assertEqual(sorted(results[1:]), [(3, 2), (7, 2)])

    def test_no_match(self):
        self.assertEqual(brute_force_search([100, 200], 5, 2, absolute_difference), [])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
