from itertools import permutations

import pytest

from wordladder.services.distance import DistanceEstimator
from wordladder.services.path_finder import PathFinder
from wordladder.services.word_graph import WordGraph


def make_finder(words, heuristic='hamming'):
    graph = WordGraph.build(words)
    return PathFinder(graph, DistanceEstimator(), heuristic)


def assert_valid_ladder(path, start, end, graph):
    assert path[0] == start
    assert path[-1] == end
    for word1, word2 in zip(path, path[1:]):
        assert word2 in graph.neighbors(word1)


SMALL = ['cat', 'cot', 'cog', 'dog', 'dot']


def test_cat_to_dog():
    finder = make_finder(SMALL)
    path = finder.find_path('cat', 'dog')

    assert path in (['cat', 'cot', 'cog', 'dog'], ['cat', 'cot', 'dot', 'dog'])


def test_cat_to_dog_bidirectional():
    finder = make_finder(SMALL)
    path = finder.find_path_bidirectional('cat', 'dog')

    assert len(path) == 4
    assert_valid_ladder(path, 'cat', 'dog', finder.graph)


def test_disconnected_words_report_no_path():
    # hot-hop and tip-tap are two separate components
    finder = make_finder(['hot', 'hop', 'tip', 'tap'])

    assert finder.find_path('hot', 'tap') is None
    assert finder.find_path_bidirectional('hot', 'tap') is None


def test_same_word_is_a_one_word_path():
    finder = make_finder(SMALL)

    assert finder.find_path('cat', 'cat') == ['cat']
    assert finder.find_path_bidirectional('dog', 'dog') == ['dog']


def test_length_mismatch_is_no_path():
    finder = make_finder(SMALL + ['cats'])

    assert finder.find_path('cat', 'cats') is None
    assert finder.find_path_bidirectional('cat', 'cats') is None


def test_unknown_words_have_no_path():
    finder = make_finder(SMALL)

    assert finder.find_path('cat', 'zzz') is None
    assert finder.find_path_bidirectional('zzz', 'dog') is None


def test_adjacent_words():
    finder = make_finder(SMALL)

    assert finder.find_path('cat', 'cot') == ['cat', 'cot']
    assert finder.find_path_bidirectional('cat', 'cot') == ['cat', 'cot']


def test_long_chain_bidirectional():
    chain = ['aaaa', 'baaa', 'bbaa', 'bbba', 'bbbb']
    finder = make_finder(chain)

    assert finder.find_path_bidirectional('aaaa', 'bbbb') == chain
    assert finder.find_path_bidirectional('bbbb', 'aaaa') == list(reversed(chain))
    assert finder.find_path('aaaa', 'bbbb') == chain


def test_repeated_calls_are_identical():
    finder = make_finder(SMALL)
    first = finder.find_path('cat', 'dog')
    first.append('mutated')

    assert finder.find_path('cat', 'dog') == finder.find_path('cat', 'dog')
    assert 'mutated' not in finder.find_path('cat', 'dog')


def test_no_path_result_is_cached():
    finder = make_finder(['hot', 'hop', 'tip', 'tap'])

    assert finder.find_path('hot', 'tap') is None
    size = finder.cache_size
    assert finder.find_path('hot', 'tap') is None
    assert finder.cache_size == size


def test_unknown_heuristic_is_rejected():
    with pytest.raises(ValueError):
        make_finder(SMALL, heuristic='manhattan')


def test_search_variants_agree_on_length(bundled_engine):
    words = sorted(bundled_engine.words_by_length[4])[:45]
    finder = bundled_engine.path_finder

    for start, end in permutations(words, 2):
        astar = finder.find_path(start, end)
        bidirectional = finder.find_path_bidirectional(start, end)

        if astar is None:
            assert bidirectional is None
            continue

        assert len(astar) == len(bidirectional), (start, end)
        assert_valid_ladder(astar, start, end, finder.graph)
        assert_valid_ladder(bidirectional, start, end, finder.graph)


def test_uniform_cost_search_matches_astar(bundled_engine):
    words = sorted(bundled_engine.words_by_length[3])[:25]
    guided = bundled_engine.path_finder
    unguided = PathFinder(bundled_engine.graph, DistanceEstimator())

    for start, end in permutations(words, 2):
        path = guided.find_path(start, end)
        plain = unguided.find_path(start, end, use_heuristic=False)
        assert (path is None) == (plain is None)
        if path:
            assert len(path) == len(plain)


def test_composite_heuristic_finds_valid_ladder(bundled_engine):
    finder = PathFinder(bundled_engine.graph, DistanceEstimator(), 'composite')
    path = finder.find_path('cold', 'warm')

    assert path is not None
    assert_valid_ladder(path, 'cold', 'warm', finder.graph)
