"""
Ladder Controller

Handles the HTTP endpoints through which the game UI queries the ladder engine.
"""

import math
from dataclasses import asdict
from flask import Blueprint, request, jsonify, current_app
from ..config.ladder_settings import DEFAULT_PAIR_LENGTH
from ..models.ladder import Difficulty
from ..utils.decorators import require_engine_ready
from ..utils.helpers import PayloadError, normalize_word, normalize_words, normalize_flag, require_fields
from ..utils.ladder_logger import ladder_logger

ladder_bp = Blueprint('ladder', __name__)

PATH_ALGORITHMS = ('astar', 'bidirectional')


def _error_response(action: str, message: str, status: int):
    error_response = {
        'success': False,
        'error': message
    }
    ladder_logger.log_server_response(request, action, False, error_response)
    return jsonify(error_response), status


def _unexpected_error(action: str, error: Exception):
    ladder_logger.log_error(request, error, action)
    return _error_response(action, str(error), 500)


@ladder_bp.route('/words/<word>', methods=['GET'])
@require_engine_ready
def check_word(word, engine=None):
    """Check whether a word is in the dictionary."""
    try:
        ladder_logger.log_user_action(request, 'check_word', word=word)

        response_data = {
            'success': True,
            'word': word.lower(),
            'valid': engine.is_valid_word(word)
        }
        ladder_logger.log_server_response(request, 'check_word', True, response_data)
        return jsonify(response_data)

    except Exception as e:
        return _unexpected_error('check_word', e)


@ladder_bp.route('/words/<word>/neighbors', methods=['GET'])
@require_engine_ready
def get_neighbors(word, engine=None):
    """List the dictionary neighbors of a word."""
    try:
        ladder_logger.log_user_action(request, 'get_neighbors', word=word)

        neighbors = engine.get_neighbors(word.lower())
        response_data = {
            'success': True,
            'word': word.lower(),
            'neighbors': neighbors
        }
        ladder_logger.log_server_response(request, 'get_neighbors', True, response_data,
                                          neighbor_count=len(neighbors))
        return jsonify(response_data)

    except Exception as e:
        return _unexpected_error('get_neighbors', e)


@ladder_bp.route('/neighbors', methods=['GET'])
@require_engine_ready
def check_neighbors(engine=None):
    """Check whether two words differ in exactly one letter."""
    try:
        ladder_logger.log_user_action(request, 'check_neighbors', query=request.args.to_dict())

        word1 = normalize_word(request.args.get('word1'), 'word1')
        word2 = normalize_word(request.args.get('word2'), 'word2')

        response_data = {
            'success': True,
            'word1': word1,
            'word2': word2,
            'neighbors': engine.are_neighbors(word1, word2)
        }
        ladder_logger.log_server_response(request, 'check_neighbors', True, response_data)
        return jsonify(response_data)

    except PayloadError as e:
        return _error_response('check_neighbors', str(e), 400)
    except Exception as e:
        return _unexpected_error('check_neighbors', e)


@ladder_bp.route('/path', methods=['POST'])
@require_engine_ready
def find_path(engine=None):
    """Find a shortest ladder between two words."""
    try:
        data = require_fields(request.get_json(silent=True), 'start', 'end')
        start = normalize_word(data['start'], 'start')
        end = normalize_word(data['end'], 'end')
        algorithm = data.get('algorithm', 'astar')
        use_heuristic = normalize_flag(data.get('use_heuristic'), 'use_heuristic', True)

        ladder_logger.log_user_action(request, 'find_path', start=start, end=end,
                                      algorithm=algorithm, use_heuristic=use_heuristic)

        if algorithm not in PATH_ALGORITHMS:
            return _error_response(
                'find_path', f'Invalid algorithm. Must be one of {", ".join(PATH_ALGORITHMS)}', 400
            )

        if algorithm == 'bidirectional':
            path = engine.find_path_bidirectional(start, end)
        else:
            path = engine.find_path(start, end, use_heuristic)

        response_data = {
            'success': True,
            'path': path,
            'length': len(path) if path else None
        }
        ladder_logger.log_server_response(request, 'find_path', True, response_data,
                                          found=path is not None)
        return jsonify(response_data)

    except PayloadError as e:
        return _error_response('find_path', str(e), 400)
    except Exception as e:
        return _unexpected_error('find_path', e)


@ladder_bp.route('/ai/move', methods=['POST'])
@require_engine_ready
def ai_move(engine=None):
    """Choose the next word for an AI contestant."""
    try:
        data = require_fields(request.get_json(silent=True), 'current', 'target', 'difficulty')
        current = normalize_word(data['current'], 'current')
        target = normalize_word(data['target'], 'target')
        opponent_ladder = normalize_words(data.get('opponent_ladder'), 'opponent_ladder')

        ladder_logger.log_user_action(request, 'ai_move', current=current, target=target,
                                      difficulty=data['difficulty'],
                                      opponent_ladder_length=len(opponent_ladder))

        difficulty = Difficulty.parse(data['difficulty'])
        move = engine.select_ai_move(current, target, difficulty, opponent_ladder)

        response_data = {
            'success': True,
            'move': move,
            'stuck': move is None
        }
        ladder_logger.log_server_response(request, 'ai_move', True, response_data,
                                          difficulty=difficulty.value)
        return jsonify(response_data)

    except ValueError as e:
        return _error_response('ai_move', str(e), 400)
    except Exception as e:
        return _unexpected_error('ai_move', e)


@ladder_bp.route('/hint', methods=['POST'])
@require_engine_ready
def hint(engine=None):
    """Suggest the next word for a player."""
    try:
        data = require_fields(request.get_json(silent=True), 'current', 'target')
        current = normalize_word(data['current'], 'current')
        target = normalize_word(data['target'], 'target')
        used = normalize_words(data.get('used'), 'used')

        ladder_logger.log_user_action(request, 'hint', current=current, target=target,
                                      used_count=len(used))

        suggestion = engine.get_hint(current, target, used)

        response_data = {
            'success': True,
            'hint': suggestion
        }
        ladder_logger.log_server_response(request, 'hint', True, response_data)
        return jsonify(response_data)

    except ValueError as e:
        return _error_response('hint', str(e), 400)
    except Exception as e:
        return _unexpected_error('hint', e)


@ladder_bp.route('/pair', methods=['GET'])
@require_engine_ready
def random_pair(engine=None):
    """Generate a random solvable start/end pair."""
    try:
        ladder_logger.log_user_action(request, 'random_pair', query=request.args.to_dict())

        length = request.args.get('length', DEFAULT_PAIR_LENGTH, type=int)
        if length < 1:
            return _error_response('random_pair', "'length' must be a positive integer", 400)

        pair = engine.generate_random_pair(length)

        response_data = {
            'success': True,
            'pair': asdict(pair) if pair else None
        }
        ladder_logger.log_server_response(request, 'random_pair', True, response_data,
                                          word_length=length)
        return jsonify(response_data)

    except Exception as e:
        return _unexpected_error('random_pair', e)


@ladder_bp.route('/difficulty', methods=['POST'])
@require_engine_ready
def difficulty(engine=None):
    """Score how hard a puzzle is."""
    try:
        data = require_fields(request.get_json(silent=True), 'start', 'end')
        start = normalize_word(data['start'], 'start')
        end = normalize_word(data['end'], 'end')

        ladder_logger.log_user_action(request, 'difficulty', start=start, end=end)

        score = engine.calculate_difficulty(start, end)

        response_data = {
            'success': True,
            'difficulty': None if math.isinf(score) else round(score, 3),
            'solvable': not math.isinf(score)
        }
        ladder_logger.log_server_response(request, 'difficulty', True, response_data)
        return jsonify(response_data)

    except PayloadError as e:
        return _error_response('difficulty', str(e), 400)
    except Exception as e:
        return _unexpected_error('difficulty', e)


@ladder_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    try:
        engine = getattr(current_app, 'engine', None)

        ladder_logger.log_user_action(request, 'health_check')

        if engine is None:
            status = 'unavailable'
        elif engine.load_error is not None:
            status = 'error'
        elif engine.is_loading:
            status = 'loading'
        else:
            status = 'healthy'

        response_data = {
            'success': status == 'healthy',
            'status': status,
            'load_error': str(engine.load_error) if engine and engine.load_error else None,
            'statistics': engine.get_statistics() if engine else {},
            'log_stats': ladder_logger.get_log_stats()
        }

        ladder_logger.log_server_response(request, 'health_check', True, response_data)
        return jsonify(response_data), 200 if status in ('healthy', 'loading') else 500

    except Exception as e:
        return _unexpected_error('health_check', e)
