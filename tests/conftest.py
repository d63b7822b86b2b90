import pytest

from event_emitter import EventEmitter
from event_emitter.config import reset_defaults


@pytest.fixture(autouse=True)
def _reset_default_max_listeners():
    reset_defaults()
    yield
    reset_defaults()


@pytest.fixture
def emitter():
    return EventEmitter()
