import os
import random
import tempfile

# Keep log files out of the working tree; must run before wordladder is imported
os.environ.setdefault('LOG_DIR', os.path.join(tempfile.gettempdir(), 'wordladder-test-logs'))

import pytest

from wordladder import create_app
from wordladder.config import Config, TestingConfig
from wordladder.services.dictionary import load_word_lines
from wordladder.services.ladder_engine import LadderEngine

SMALL_WORDS = ['cat', 'cot', 'cog', 'dog', 'dot']


class FixedRandom(random.Random):
    """Random source whose random() always returns the same value."""

    def __init__(self, value):
        super().__init__(0)
        self.value = value

    def random(self):
        return self.value


def build_engine(words, **kwargs):
    engine = LadderEngine(**kwargs)
    engine.initialize(words)
    return engine


@pytest.fixture
def small_engine():
    return build_engine(SMALL_WORDS, seed=7)


@pytest.fixture(scope='session')
def bundled_lines():
    return load_word_lines(Config.WORDLIST_PATH)


@pytest.fixture
def bundled_engine(bundled_lines):
    return build_engine(bundled_lines, seed=42)


@pytest.fixture
def client(small_engine):
    app = create_app(TestingConfig, engine=small_engine)
    return app.test_client()
