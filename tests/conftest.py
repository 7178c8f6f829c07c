import os
import random
import tempfile

# Keep test logs out of the working tree; must be set before hostcheat is imported
os.environ.setdefault('LOG_DIR', tempfile.mkdtemp(prefix='hostcheat-logs-'))

import pytest

from hostcheat import create_app
from hostcheat.config import TestingConfig
from hostcheat.services.game_service import GameService

EXAMPLE_ONE_WORDS = ["WORLD", "QUITE", "FANCY", "FRESH", "PANIC", "CRAZY", "BUGGY", "HELLO"]


@pytest.fixture
def service_factory():
    def factory(words=EXAMPLE_ONE_WORDS, seed=0, **kwargs):
        return GameService(word_list=words, rng=random.Random(seed), **kwargs)
    return factory


@pytest.fixture
def app_factory():
    def factory(words=EXAMPLE_ONE_WORDS):
        service = GameService(word_list=words, rng=random.Random(0))
        app, socketio = create_app(TestingConfig, service)
        return app, socketio
    return factory


@pytest.fixture
def client(app_factory):
    app, _ = app_factory()
    return app.test_client()
