"""Compose the listener registry onto arbitrary host classes."""

from __future__ import annotations

import types
from typing import Any, ClassVar

from event_emitter.config import defaults
from event_emitter.core.keys import EventKey
from event_emitter.core.registry import ListenerRegistry, WarningSink
from event_emitter.core.state import Listener, ListenerMode


def get_default_max_listeners() -> int:
    return defaults.default_max_listeners


def set_default_max_listeners(n: Any) -> int:
    """Coerce and store the cap used by emitters created from now on."""

    defaults.default_max_listeners = n
    return defaults.default_max_listeners


class EventEmitterMixin:
    """Gives the host class Node style ``on``/``once``/``emit``.

    The registry lives in ``_event_registry``; every public method forwards
    to it. Constructor arguments pass through untouched to the next class in
    the MRO.
    """

    warning_sink: ClassVar[WarningSink | None] = None

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        # Created first so the host's own __init__ may already register listeners.
        self._event_registry = ListenerRegistry(receiver=self, warning_sink=type(self).warning_sink)
        super().__init__(*args, **kwargs)

    def set_warning_sink(self, sink: WarningSink) -> EventEmitterMixin:
        self._event_registry.warning_sink = sink
        return self

    def get_max_listeners(self) -> int:
        return self._event_registry.get_max_listeners()

    def set_max_listeners(self, n: Any) -> EventEmitterMixin:
        return self._event_registry.set_max_listeners(n)

    def has_listeners(self, event: Any) -> bool:
        return self._event_registry.has_listeners(event)

    def add_listener(
        self, event: EventKey, listener: Listener, mode: ListenerMode = ListenerMode.PERSISTENT
    ) -> EventEmitterMixin:
        return self._event_registry.add_listener(event, listener, mode)

    def on(self, event: EventKey, listener: Listener) -> EventEmitterMixin:
        return self._event_registry.add_listener(event, listener)

    def once(self, event: EventKey, listener: Listener) -> EventEmitterMixin:
        return self._event_registry.once(event, listener)

    def remove_listener(self, event: EventKey, listener: Listener) -> EventEmitterMixin:
        return self._event_registry.remove_listener(event, listener)

    off = remove_listener

    def remove_all_listeners(self, event: EventKey | None = None) -> EventEmitterMixin:
        return self._event_registry.remove_all_listeners(event)

    def emit(self, event: EventKey, *args: Any, **kwargs: Any) -> EventEmitterMixin:
        return self._event_registry.emit(event, *args, **kwargs)

    def listener_count(self, event: Any) -> int:
        return self._event_registry.listener_count(event)

    def listeners(self, event: Any) -> list[Listener]:
        return self._event_registry.listeners(event)

    def event_names(self) -> list[EventKey]:
        return self._event_registry.event_names()


def emitter(base: type = object) -> type:
    """Return a new class that is ``base`` plus the event emitter methods."""

    if base is object:
        name, doc = "EventEmitter", EventEmitterMixin.__doc__
    else:
        name, doc = f"{base.__name__}EventEmitter", base.__doc__

    # A base that already emits only needs a fresh subclass.
    bases = (base,) if issubclass(base, EventEmitterMixin) else (EventEmitterMixin, base)

    def body(namespace: dict[str, Any]) -> None:
        namespace.update({"__module__": __name__, "__qualname__": name, "__doc__": doc})

    return types.new_class(name, bases, exec_body=body)


EventEmitter = emitter()
