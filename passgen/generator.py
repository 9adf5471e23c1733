"""
Passphrase generator: greedily pack random words from the index into a target length.
"""
from __future__ import annotations

import random
from typing import Protocol, Sequence, TypeVar

from .words import WordIndex

T = TypeVar("T")

# Shortest passphrase the CLI and API accept, and the API ceiling
MIN_LENGTH = 4
MAX_LENGTH = 256
NUMBER_UPPER_BOUND = 100
NUMBER_ATTACH_PROBABILITY = 0.5

_system_random = random.SystemRandom()


class RandomSource(Protocol):
    def random(self) -> float: ...


class LengthTooShort(ValueError):
    """Raised when the requested length can't fit even the shortest word."""

    def __init__(self, shortest_word_length: int) -> None:
        self.shortest_word_length = shortest_word_length
        super().__init__(
            "Password length can't be shorter than the length of the shortest word, "
            f"which is {shortest_word_length} characters long."
        )


def capitalize_word(word: str) -> str:
    """Uppercase the first code point only; the rest of the word is left as-is."""
    return word[:1].upper() + word[1:]


def random_item(items: Sequence[T], rng: RandomSource) -> T:
    return items[min(int(rng.random() * len(items)), len(items) - 1)]


def random_number_to_join(rng: RandomSource | None = None, upper: int = NUMBER_UPPER_BOUND) -> int:
    rng = rng or _system_random
    return min(int(rng.random() * upper), upper - 1)


def _pick_word_length(sizes: Sequence[int], length_to_fill: int, fallback: int) -> int:
    """Largest available size that fits, or the fallback (longest) if none does."""
    for size in sizes:
        if size <= length_to_fill:
            return size
    return fallback


def generate_passphrase_with_max_length(
    index: WordIndex,
    length: int,
    separator: str,
    capitalise: bool,
    number_to_join: int | None = None,
    rng: RandomSource | None = None,
) -> str:
    """
    Build a passphrase of roughly `length` characters.

    Words are chosen longest-fit-first against the remaining budget. The separator
    is only charged to the budget when another word looks likely to fit afterwards,
    so the result can undershoot `length`. It only overshoots when the budget left
    after the number is smaller than every word, in which case the longest word is
    used. The number (if given) is fused to a random word with probability 0.5,
    otherwise appended at the end.
    """
    stats = index.stats
    if length < stats.shortest_word_length:
        raise LengthTooShort(stats.shortest_word_length)
    if number_to_join is not None and number_to_join < 0:
        raise ValueError(f"number_to_join must be non-negative, got {number_to_join}")
    rng = rng or _system_random

    number_str = str(number_to_join) if number_to_join is not None else ""
    target_length_of_just_words = length - len(number_str)

    generated_length = 0
    length_to_fill = target_length_of_just_words
    picked_words: list[str] = []
    need_to_add_number = number_to_join is not None
    while True:
        word_length = _pick_word_length(
            stats.available_word_sizes, length_to_fill, stats.longest_word_length
        )
        word = random_item(index.words_by_length[word_length], rng)

        if need_to_add_number and rng.random() < NUMBER_ATTACH_PROBABILITY:
            need_to_add_number = False
            picked_words.append(word + number_str)
        else:
            picked_words.append(word)

        generated_length += len(word)
        if length_to_fill - len(word) > stats.shortest_word_length:
            generated_length += len(separator)
        length_to_fill = target_length_of_just_words - generated_length

        if generated_length >= target_length_of_just_words or length_to_fill <= stats.shortest_word_length:
            break

    if capitalise:
        picked_words = [capitalize_word(w) for w in picked_words]
    return separator.join(picked_words) + (number_str if need_to_add_number else "")
