"""
Pytest fixtures for passgen tests
"""

import pytest

from passgen.words import WordIndex, build_word_index

SAMPLE_WORD_LIST = "\n".join([
    "11111\tape",
    "11112\tfog",
    "11113\tjam",
    "11114\tbolt",
    "11115\tcrab",
    "11116\tlamp",
    "11121\tmaple",
    "11122\tnudge",
    "11123\tquilt",
    "11124\tbamboo",
    "11125\tcactus",
    "11126\tsalmon",
    "11131\tbalcony",
    "11132\tfreckle",
    "11133\tpelican",
    "11134\tcardigan",
    "11135\tmarathon",
    "11136\tdinosaur",
    "11141\tcaterpillar",
    "",
])


class ScriptedRandom:
    """Random source returning the given values in order, cycling."""

    def __init__(self, values):
        self._values = list(values)
        self._i = 0

    def random(self) -> float:
        v = self._values[self._i % len(self._values)]
        self._i += 1
        return v


@pytest.fixture
def sample_word_list() -> str:
    """Raw EFF-style source text."""
    return SAMPLE_WORD_LIST


@pytest.fixture
def sample_index(sample_word_list) -> WordIndex:
    """Small EFF-style index with word lengths 3-8 and 11."""
    return build_word_index(sample_word_list)


@pytest.fixture
def abc_index() -> WordIndex:
    """One word per length: a, bb, ccc."""
    return build_word_index("1\ta\n2\tbb\n3\tccc\n")


@pytest.fixture
def scripted_random():
    return ScriptedRandom
