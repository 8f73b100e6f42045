"""
Utilities Package

Contains utility functions, decorators, and helper modules.
"""

from .decorators import require_engine_ready
from .helpers import PayloadError, normalize_word, normalize_words, normalize_flag, require_fields
from .ladder_logger import ladder_logger

__all__ = [
    'require_engine_ready', 'PayloadError', 'normalize_word', 'normalize_words',
    'normalize_flag', 'require_fields', 'ladder_logger'
]
