import pytest


def test_hint_points_toward_target(small_engine):
    assert small_engine.get_hint('cat', 'dog', ['cat']) == 'cot'


def test_hint_skips_used_words(small_engine):
    assert small_engine.get_hint('cot', 'dog', ['cat', 'cot', 'cog']) == 'dot'


def test_no_hint_when_every_neighbor_is_used(small_engine):
    assert small_engine.get_hint('cat', 'dog', ['cat', 'cot']) is None


def test_hint_is_the_closest_unused_neighbor(bundled_engine):
    estimate = bundled_engine.estimator.estimate
    used = ['cold', 'cord']

    hint = bundled_engine.get_hint('cold', 'warm', used)
    candidates = [word for word in bundled_engine.get_neighbors('cold') if word not in used]

    assert hint in candidates
    assert estimate(hint, 'warm') == min(estimate(word, 'warm') for word in candidates)


def test_hint_rejects_length_mismatch(small_engine):
    with pytest.raises(ValueError):
        small_engine.get_hint('cat', 'dogs')
