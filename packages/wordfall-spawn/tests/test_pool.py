"""Tests for word-pool providers."""
from wordfall_spawn import StaticWordPool, playable_words


def test_playable_words_filters_degenerate_entries():
    words = ["a", "at", "cat", "", "Dog", "it's", "zebra", "x"]
    assert playable_words(words) == ["at", "cat", "zebra"]


def test_static_pool_lookup():
    pool = StaticWordPool({2: ["bird"], 1: ["cat", "dog"]})
    assert list(pool(1)) == ["cat", "dog"]
    assert list(pool(2)) == ["bird"]
    assert list(pool(9)) == []
    assert pool.levels == [1, 2]


def test_static_pool_copies_input():
    words = ["cat"]
    pool = StaticWordPool({1: words})
    words.append("dog")
    assert list(pool(1)) == ["cat"]
