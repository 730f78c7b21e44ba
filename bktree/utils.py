import os
import logging
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple, TypeVar, Union

import chardet

from .config import LOGGING_CONFIG, SEARCH_DEFAULTS, WORD_LIST_PATHS

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _env_int(name: str) -> Optional[int]:
    env_value = os.getenv(name)
    if env_value:
        try:
            return int(env_value)
        except ValueError:
            logger.warning("Ignoring invalid value for %s: %r", name, env_value)
    return None


def get_default_radius() -> int:
    """Return the default search radius from env or configuration.

    Environment variable ``BKTREE_DEFAULT_RADIUS`` takes precedence over the
    configuration. Negative values are ignored.
    """

    value = _env_int("BKTREE_DEFAULT_RADIUS")
    if value is not None and value >= 0:
        return value
    return int(SEARCH_DEFAULTS.get("radius", 2))


def get_max_radius() -> int:
    """Return the largest radius offered to users.

    ``BKTREE_MAX_RADIUS`` overrides the configuration. The result is never
    smaller than :func:`get_default_radius`.
    """

    value = _env_int("BKTREE_MAX_RADIUS")
    if value is None or value < 0:
        value = int(SEARCH_DEFAULTS.get("max_radius", 10))
    return max(value, get_default_radius())


def get_default_metric() -> str:
    """Return the metric name from ``BKTREE_METRIC`` or the configuration."""

    env_metric = os.getenv("BKTREE_METRIC")
    if env_metric and env_metric.strip():
        return env_metric.strip().lower()
    return str(SEARCH_DEFAULTS.get("metric", "levenshtein"))


def get_word_list_paths() -> List[str]:
    """Return candidate word list paths, ``BKTREE_WORDS_PATH`` first."""

    paths = list(WORD_LIST_PATHS)
    env_path = os.getenv("BKTREE_WORDS_PATH")
    if env_path:
        paths.insert(0, env_path)
    return paths


def get_logging_config() -> Dict[str, Any]:
    """Return logging settings with ``BKTREE_LOG_LEVEL``/``BKTREE_LOG_FILE`` applied."""

    config = dict(LOGGING_CONFIG)
    env_level = os.getenv("BKTREE_LOG_LEVEL")
    if env_level:
        config["level"] = env_level.strip().upper()
    env_file = os.getenv("BKTREE_LOG_FILE")
    if env_file:
        config["file"] = env_file
    return config


def ensure_unicode(text: Union[str, bytes]) -> str:
    """Decode ``text`` to a string.

    UTF-8 is tried first, then the encoding detected by chardet when its
    confidence is above 0.5.

    Raises
    ------
    UnicodeDecodeError
        If no encoding could decode the data.
    """
    if isinstance(text, bytes):
        try:
            return text.decode("utf-8")
        except UnicodeDecodeError:
            pass

        detection = chardet.detect(text)
        encoding = detection.get("encoding")
        confidence = detection.get("confidence", 0) or 0
        if encoding and confidence > 0.5:
            try:
                return text.decode(encoding)
            except (UnicodeDecodeError, LookupError):
                pass

        logger.error(
            "Failed to decode text (detected encoding: %s, confidence: %.2f)",
            encoding,
            confidence,
        )
        raise UnicodeDecodeError(encoding or "unknown", text, 0, len(text), "decoding failed")

    return str(text)


def resolve_word_list_path(path: Optional[Union[str, Path]] = None) -> Path:
    """Return ``path`` or the first configured word list that exists."""
    if path is not None:
        candidate = Path(path)
        if not candidate.is_file():
            raise FileNotFoundError(f"Word list not found: {path}")
        return candidate

    for candidate_path in get_word_list_paths():
        candidate = Path(candidate_path)
        if candidate.is_file():
            return candidate
    raise FileNotFoundError(
        f"No word list found (tried: {', '.join(get_word_list_paths())})"
    )


def load_word_list(path: Optional[Union[str, Path]] = None) -> List[str]:
    """Load words from a file, one per line.

    Blank lines are skipped and duplicates dropped, keeping the first
    occurrence.
    """
    word_path = resolve_word_list_path(path)
    text = ensure_unicode(word_path.read_bytes())

    seen = set()
    words: List[str] = []
    for line in text.splitlines():
        word = line.strip()
        if word and word not in seen:
            seen.add(word)
            words.append(word)

    logger.info("Loaded %d words from %s", len(words), word_path)
    return words


def brute_force_search(
    values: Iterable[T],
    query: T,
    radius: int,
    distance_func: Callable[[T, T], int],
) -> List[Tuple[T, int]]:
    """Linear scan returning ``(value, distance)`` pairs within ``radius``, nearest first."""
    matches = []
    for value in values:
        dist = distance_func(query, value)
        if dist <= radius:
            matches.append((value, dist))
    matches.sort(key=lambda item: item[1])
    return matches
