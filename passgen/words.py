"""
Word corpus index: words grouped by length plus summary stats.
Built once from the raw word list (python -m passgen.migrate), cached as data/words.json.
"""
from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

from .corpus import DATA_DIR, read_word_list_source

WORDS_JSON_PATH = DATA_DIR / "words.json"


class CorpusUnavailable(FileNotFoundError):
    """Raised when the word index snapshot cannot be found or parsed."""


@dataclass(frozen=True)
class WordStats:
    shortest_word_length: int
    longest_word_length: int
    # Distinct word lengths, longest first
    available_word_sizes: tuple[int, ...]


@dataclass(frozen=True)
class WordIndex:
    words: tuple[str, ...]
    words_by_length: Mapping[int, tuple[str, ...]]
    stats: WordStats

    def to_json(self) -> dict:
        return {
            "words": list(self.words),
            "wordsByLength": {str(k): list(v) for k, v in self.words_by_length.items()},
            "stats": {
                "shortestWordLength": self.stats.shortest_word_length,
                "longestWordLength": self.stats.longest_word_length,
                "availableWordSizes": list(self.stats.available_word_sizes),
            },
        }

    @classmethod
    def from_json(cls, data: dict) -> "WordIndex":
        """Rebuild from a snapshot dict. Stats are re-derived so they always match the buckets."""
        by_length = {int(k): list(v) for k, v in data["wordsByLength"].items()}
        return _index_from_buckets(list(data["words"]), by_length)


def _index_from_buckets(words: list[str], by_length: dict[int, list[str]]) -> WordIndex:
    buckets = {n: tuple(dict.fromkeys(ws)) for n, ws in by_length.items() if ws}
    for n, ws in buckets.items():
        if n < 1:
            raise ValueError(f"Word length must be positive, got bucket {n}")
        bad = [w for w in ws if len(w) != n]
        if bad:
            raise ValueError(f"Bucket {n} holds words of the wrong length: {bad[:3]}")
    if not buckets:
        raise ValueError("No words found in word list source")
    sizes = tuple(sorted(buckets, reverse=True))
    stats = WordStats(
        shortest_word_length=sizes[-1],
        longest_word_length=sizes[0],
        available_word_sizes=sizes,
    )
    return WordIndex(
        words=tuple(words),
        words_by_length=MappingProxyType(buckets),
        stats=stats,
    )


def parse_word_lines(raw: str) -> list[str]:
    """Second tab-separated field of each line; lines without a tab are skipped."""
    words: list[str] = []
    for line in raw.split("\n"):
        parts = line.split("\t")
        if len(parts) < 2:
            continue
        w = parts[1].strip()
        if w:
            words.append(w)
    return words


def build_word_index(raw: str) -> WordIndex:
    words = parse_word_lines(raw)
    by_length: dict[int, list[str]] = {}
    for w in words:
        by_length.setdefault(len(w), []).append(w)
    return _index_from_buckets(words, by_length)


def get_words_json_path() -> Path:
    p = os.environ.get("PASSGEN_WORDS_JSON")
    if p:
        return Path(p)
    return WORDS_JSON_PATH


def save_word_index(index: WordIndex, path: Path | None = None) -> Path:
    p = path or get_words_json_path()
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(json.dumps(index.to_json()), encoding="utf-8")
    return p


def read_word_index(path: Path | None = None) -> WordIndex:
    """Load the cached index. Raises CorpusUnavailable if not built or unreadable."""
    p = path or get_words_json_path()
    if not p.exists():
        raise CorpusUnavailable(f"Unable to find {p} file. Run: python -m passgen.migrate")
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
        return WordIndex.from_json(data)
    except (OSError, json.JSONDecodeError, KeyError, TypeError, ValueError, AttributeError) as e:
        raise CorpusUnavailable(f"Unable to read word index {p}: {e}") from e


def migrate_word_list(source: Path | None = None, target: Path | None = None) -> WordIndex:
    """Build the index from the raw word list and write the JSON snapshot."""
    logging.info("Migrating words list...")
    index = build_word_index(read_word_list_source(source))
    p = save_word_index(index, target)
    logging.info("Words list migrated successfully (%d words) to %s", len(index.words), p)
    return index
