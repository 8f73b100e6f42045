import importlib.util

import pytest

from conftest import build_engine
from wordladder import create_app
from wordladder.config import TestingConfig
from wordladder.services.dictionary import DictionaryLoadError
from wordladder.services.ladder_engine import LadderEngine


def test_check_word(client):
    response = client.get('/api/words/CAT')

    assert response.status_code == 200
    assert response.get_json() == {'success': True, 'word': 'cat', 'valid': True}
    assert client.get('/api/words/cab').get_json()['valid'] is False


def test_get_neighbors(client):
    data = client.get('/api/words/cot/neighbors').get_json()

    assert data['success'] is True
    assert data['neighbors'] == ['cat', 'cog', 'dot']


def test_check_neighbors(client):
    assert client.get('/api/neighbors?word1=cat&word2=cot').get_json()['neighbors'] is True
    assert client.get('/api/neighbors?word1=cat&word2=dog').get_json()['neighbors'] is False
    assert client.get('/api/neighbors?word1=cat').status_code == 400


@pytest.mark.parametrize('algorithm', ['astar', 'bidirectional'])
def test_find_path(client, algorithm):
    response = client.post('/api/path', json={'start': 'cat', 'end': 'dog', 'algorithm': algorithm})
    data = response.get_json()

    assert response.status_code == 200
    assert data['length'] == 4
    assert data['path'][0] == 'cat' and data['path'][-1] == 'dog'


def test_find_path_without_solution(client):
    data = client.post('/api/path', json={'start': 'cat', 'end': 'cats'}).get_json()

    assert data == {'success': True, 'path': None, 'length': None}


def test_find_path_rejects_bad_requests(client):
    assert client.post('/api/path', json={'start': 'cat'}).status_code == 400
    assert client.post('/api/path', data='not json').status_code == 400
    response = client.post('/api/path', json={'start': 'cat', 'end': 'dog', 'algorithm': 'dfs'})
    assert response.status_code == 400
    assert 'Invalid algorithm' in response.get_json()['error']


def test_find_path_requires_boolean_heuristic_flag(client):
    response = client.post('/api/path', json={'start': 'cat', 'end': 'dog', 'use_heuristic': 'false'})

    assert response.status_code == 400
    assert 'use_heuristic' in response.get_json()['error']

    unguided = client.post('/api/path', json={'start': 'cat', 'end': 'dog', 'use_heuristic': False})
    assert unguided.status_code == 200
    assert unguided.get_json()['length'] == 4


def test_ai_move(client):
    response = client.post('/api/ai/move', json={
        'current': 'cat', 'target': 'dog', 'difficulty': 'hard', 'opponent_ladder': ['cat']
    })
    data = response.get_json()

    assert response.status_code == 200
    assert data == {'success': True, 'move': 'cot', 'stuck': False}


def test_ai_move_when_stuck():
    app = create_app(TestingConfig, engine=build_engine(['cat', 'dog', 'dot']))
    data = app.test_client().post('/api/ai/move', json={
        'current': 'cat', 'target': 'dog', 'difficulty': 'expert'
    }).get_json()

    assert data == {'success': True, 'move': None, 'stuck': True}


def test_ai_move_rejects_unknown_difficulty(client):
    response = client.post('/api/ai/move', json={
        'current': 'cat', 'target': 'dog', 'difficulty': 'nightmare'
    })

    assert response.status_code == 400
    assert response.get_json()['success'] is False


def test_ai_move_rejects_bad_ladder(client):
    response = client.post('/api/ai/move', json={
        'current': 'cat', 'target': 'dog', 'difficulty': 'easy', 'opponent_ladder': 'cat'
    })

    assert response.status_code == 400


def test_hint(client):
    data = client.post('/api/hint', json={'current': 'cot', 'target': 'dog', 'used': ['cat', 'cot']}).get_json()

    assert data['hint'] in ('cog', 'dot')
    exhausted = client.post('/api/hint', json={'current': 'cat', 'target': 'dog', 'used': ['cot']})
    assert exhausted.get_json() == {'success': True, 'hint': None}


def test_hint_rejects_length_mismatch(client):
    assert client.post('/api/hint', json={'current': 'cat', 'target': 'dogs'}).status_code == 400


def test_random_pair():
    engine = build_engine(['aaaa', 'baaa', 'bbaa', 'bbba', 'bbbb'], seed=5)
    client = create_app(TestingConfig, engine=engine).test_client()

    pair = client.get('/api/pair?length=4').get_json()['pair']

    assert set(pair) == {'start', 'end', 'optimal_length'}
    assert 2 < pair['optimal_length'] < 8


def test_random_pair_unavailable(client):
    assert client.get('/api/pair?length=7').get_json() == {'success': True, 'pair': None}
    assert client.get('/api/pair?length=0').status_code == 400


def test_difficulty(client):
    data = client.post('/api/difficulty', json={'start': 'cat', 'end': 'dog'}).get_json()

    assert data == {'success': True, 'difficulty': 63.0, 'solvable': True}


def test_difficulty_of_unsolvable_pair(client):
    data = client.post('/api/difficulty', json={'start': 'cat', 'end': 'cab'}).get_json()

    assert data == {'success': True, 'difficulty': None, 'solvable': False}


def test_health(client):
    response = client.get('/api/health')
    data = response.get_json()

    assert response.status_code == 200
    assert data['status'] == 'healthy'
    assert data['statistics']['total_words'] == 5


def test_requests_wait_for_loading_engine():
    client = create_app(TestingConfig, engine=LadderEngine()).test_client()

    response = client.get('/api/words/cat')
    assert response.status_code == 503
    assert client.get('/api/health').get_json()['status'] == 'loading'


def test_requests_report_failed_load():
    engine = LadderEngine()
    with pytest.raises(DictionaryLoadError):
        engine.initialize(['12345'])
    client = create_app(TestingConfig, engine=engine).test_client()

    response = client.post('/api/path', json={'start': 'cat', 'end': 'dog'})
    assert response.status_code == 500
    assert 'failed to load' in response.get_json()['error']

    health = client.get('/api/health')
    assert health.status_code == 500
    assert health.get_json()['status'] == 'error'


def test_app_loads_configured_dictionary(tmp_path):
    path = tmp_path / 'words.txt'
    path.write_text('cat\ncot\n', encoding='utf-8')

    class ConfiguredTesting(TestingConfig):
        WORDLIST_PATH = str(path)

    app = create_app(ConfiguredTesting)
    assert app.engine.wait_until_ready(timeout=10)
    assert app.test_client().get('/api/words/cot').get_json()['valid'] is True


def test_controllers_are_a_regular_package():
    found = importlib.util.find_spec('wordladder.controllers')

    assert found.origin is not None
    assert found.origin.endswith('__init__.py')
