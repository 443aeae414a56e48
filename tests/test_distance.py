import pytest

from bktree.distance import get_distance, hamming, levenshtein


def test_levenshtein_strings():
    assert levenshtein("kitten", "sitting") == 3
    assert levenshtein("", "abc") == 3
    assert levenshtein("abc", "abc") == 0


def test_levenshtein_tokens():
    assert levenshtein(["a", "b", "c"], ["a", "c"]) == 1


def test_hamming():
    assert hamming(13, 5) == 1
    assert hamming(0, 15) == 4
    assert hamming(7, 7) == 0


def test_get_distance():
    assert get_distance("hamming") is hamming
    with pytest.raises(ValueError, match="Unknown metric"):
        get_distance("cosine")


def test_hamming_rejects_negative():
    with pytest.raises(ValueError, match="non-negative"):
        hamming(-8, 0)
    with pytest.raises(ValueError):
        hamming(1, -1)


def test_hamming_triangle_inequality():
    vals = range(0, 17)
    for a in vals:
        for b in vals:
            assert hamming(a, b) == hamming(b, a)
            for c in vals:
                assert hamming(a, c) <= hamming(a, b) + hamming(b, c)


def test_levenshtein_edge_cases():
    assert levenshtein("abc", "") == 3
    assert levenshtein("flaw", "lawn") == 2
    assert levenshtein("lawn", "flaw") == 2
    assert levenshtein("bo", "cake") == 4
    assert levenshtein(("x", "y"), ("y", "x")) == 2
