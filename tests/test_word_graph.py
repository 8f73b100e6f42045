from itertools import combinations

from wordladder.services.distance import hamming
from wordladder.services.word_graph import WordGraph


def test_small_dictionary_edges():
    graph = WordGraph.build(['cat', 'cot', 'cog', 'dog', 'dot'])

    assert graph.neighbors('cat') == {'cot'}
    assert graph.neighbors('cot') == {'cat', 'cog', 'dot'}
    assert graph.neighbors('dog') == {'cog', 'dot'}
    assert graph.edge_count == 5


def test_unknown_word_has_no_neighbors():
    graph = WordGraph.build(['cat', 'cot'])

    assert graph.neighbors('zzz') == set()
    assert graph.sorted_neighbors('zzz') == []
    assert not graph.contains('zzz')


def test_isolated_word_is_registered():
    graph = WordGraph.build(['cat', 'cot', 'zebra'])

    assert graph.contains('zebra')
    assert 'zebra' in graph
    assert graph.neighbors('zebra') == set()
    assert len(graph) == 3


def test_neighbors_returns_a_copy():
    graph = WordGraph.build(['cat', 'cot'])
    graph.neighbors('cat').add('bogus')

    assert graph.neighbors('cat') == {'cot'}


def test_duplicates_and_lengths_do_not_create_edges():
    graph = WordGraph.build(['cat', 'cat', 'cats', 'cot'])

    assert graph.neighbors('cat') == {'cot'}
    assert graph.neighbors('cats') == set()


def test_edges_match_hamming_distance_one(bundled_lines):
    words = {line.strip().lower() for line in bundled_lines if line.strip()}
    graph = WordGraph.build(words)

    for word1, word2 in combinations(sorted(words), 2):
        connected = word2 in graph.neighbors(word1)
        expected = len(word1) == len(word2) and hamming(word1, word2) == 1
        assert connected == expected, (word1, word2)


def test_graph_is_symmetric(bundled_engine):
    graph = bundled_engine.graph
    for word in bundled_engine.words_by_length[4]:
        for neighbor in graph.neighbors(word):
            assert word in graph.neighbors(neighbor)


def test_sorted_neighbors_are_lexical():
    graph = WordGraph.build(['cot', 'dot', 'cat', 'cog', 'hot'])

    assert graph.sorted_neighbors('cot') == ['cat', 'cog', 'dot', 'hot']


def test_are_neighbors():
    assert WordGraph.are_neighbors('cat', 'cot')
    assert not WordGraph.are_neighbors('cat', 'cat')
    assert not WordGraph.are_neighbors('cat', 'dog')
    assert not WordGraph.are_neighbors('cat', 'cats')
