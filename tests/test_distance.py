import pytest

from wordladder.services.distance import (
    DistanceEstimator, char_frequency_difference, hamming, levenshtein
)


def test_hamming():
    assert hamming('cat', 'cat') == 0
    assert hamming('cat', 'cot') == 1
    assert hamming('cat', 'dog') == 3


def test_hamming_rejects_unequal_lengths():
    with pytest.raises(ValueError):
        hamming('cat', 'cats')


@pytest.mark.parametrize('word1, word2, expected', [
    ('kitten', 'sitting', 3),
    ('flaw', 'lawn', 2),
    ('', 'abc', 3),
    ('abcd', 'bcda', 2),
    ('same', 'same', 0),
])
def test_levenshtein(word1, word2, expected):
    assert levenshtein(word1, word2) == expected


def test_char_frequency_difference():
    assert char_frequency_difference('cat', 'act') == 0
    assert char_frequency_difference('aab', 'abb') == 2
    assert char_frequency_difference('cat', 'cot') == 2


def test_estimate_combines_components():
    estimator = DistanceEstimator()

    # hamming 1, levenshtein 1, frequency difference 2
    assert estimator.estimate('cat', 'cot') == pytest.approx(1.1)
    # hamming 4, levenshtein 2, frequency difference 0
    assert estimator.estimate('abcd', 'bcda') == pytest.approx(3.0)
    assert estimator.estimate('word', 'word') == 0


def test_estimate_is_cached_for_both_orderings():
    estimator = DistanceEstimator()
    first = estimator.estimate('cold', 'warm')

    assert estimator.cache_size == 2
    assert estimator.estimate('warm', 'cold') == first
    assert estimator.estimate('cold', 'warm') == first
    assert estimator.cache_size == 2


def test_estimate_rejects_unequal_lengths():
    with pytest.raises(ValueError):
        DistanceEstimator().estimate('cat', 'cats')
