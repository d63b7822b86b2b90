"""Node style synchronous event emitter."""

from event_emitter.config import defaults, reset_defaults
from event_emitter.core.keys import (
    EventKey,
    EventToken,
    validate_event_argument,
    validate_listener_argument,
)
from event_emitter.core.mixin import (
    EventEmitter,
    EventEmitterMixin,
    emitter,
    get_default_max_listeners,
    set_default_max_listeners,
)
from event_emitter.core.registry import ListenerRegistry, current_emitter
from event_emitter.core.state import ListenerMode, ListenerRecord
from event_emitter.errors import InvalidArgument

__all__ = [
    "EventEmitter",
    "EventEmitterMixin",
    "EventKey",
    "EventToken",
    "InvalidArgument",
    "ListenerMode",
    "ListenerRecord",
    "ListenerRegistry",
    "current_emitter",
    "defaults",
    "emitter",
    "get_default_max_listeners",
    "reset_defaults",
    "set_default_max_listeners",
    "validate_event_argument",
    "validate_listener_argument",
]
