"""Synchronous listener registry and emission engine."""

from __future__ import annotations

from collections.abc import Callable
from contextvars import ContextVar
from typing import Any

from event_emitter.config import coerce_max_listeners, defaults
from event_emitter.core.keys import (
    EventKey,
    is_event_key,
    validate_event_argument,
    validate_listener_argument,
)
from event_emitter.core.state import Listener, ListenerMode, ListenerRecord
from event_emitter.logging import get_logger

WarningSink = Callable[[str], None]

_current_emitter: ContextVar[Any] = ContextVar("current_emitter", default=None)

logger = get_logger("registry")


def current_emitter() -> Any:
    """Return the emitter whose listener is running, or ``None``."""

    return _current_emitter.get()


def log_warning(message: str) -> None:
    logger.warning(message)


class ListenerRegistry:
    """Maps event keys to ordered listener records.

    ``emit`` runs over a snapshot of the key's listeners taken when it starts:
    listeners added during the pass wait for the next one, and listeners
    removed by another listener mid-pass still run in this one. One-shot
    records leave the live list before their callback is invoked, so a
    reentrant ``emit`` of the same key never sees them again.

    Mutating operations return ``receiver`` so calls chain on the host object.
    """

    def __init__(self, receiver: Any = None, warning_sink: WarningSink | None = None) -> None:
        self.receiver = self if receiver is None else receiver
        self.warning_sink: WarningSink = warning_sink or log_warning
        self._listeners: dict[EventKey, list[ListenerRecord]] = {}
        self._max_listeners = defaults.default_max_listeners
        self._warned: set[EventKey] = set()

    def get_max_listeners(self) -> int:
        return self._max_listeners

    def set_max_listeners(self, n: Any) -> Any:
        self._max_listeners = coerce_max_listeners(n)
        logger.trace("max listeners set to {}", self._max_listeners)
        return self.receiver

    def has_listeners(self, key: Any) -> bool:
        return is_event_key(key) and key in self._listeners

    def add_listener(
        self, key: EventKey, callback: Listener, mode: ListenerMode = ListenerMode.PERSISTENT
    ) -> Any:
        validate_event_argument(key)
        validate_listener_argument(callback)

        record = ListenerRecord(callback, ListenerMode(mode))
        records = self._listeners.setdefault(key, [])
        records.append(record)

        # Warn once per key so repeated registrations don't flood the sink.
        count = len(records)
        if count > self._max_listeners and key not in self._warned:
            self._warned.add(key)
            message = (
                f'Possible EventEmitter memory leak detected. {count} "{key}" '
                "listeners added. Use set_max_listeners() to increase this limit."
            )
            try:
                self.warning_sink(message)
            except Exception:
                logger.opt(exception=True).warning("Warning sink failed: {}", message)

        return self.receiver

    on = add_listener

    def once(self, key: EventKey, callback: Listener) -> Any:
        return self.add_listener(key, callback, ListenerMode.ONCE)

    def remove_listener(self, key: EventKey, callback: Listener) -> Any:
        validate_event_argument(key)

        records = self._listeners.get(key)
        if not records or not callable(callback):
            return self.receiver

        for index, record in enumerate(records):
            if record.callback == callback:
                self._discard(key, records, index)
                break

        return self.receiver

    off = remove_listener

    def remove_all_listeners(self, key: EventKey | None = None) -> Any:
        if key is None:
            self._listeners = {}
            logger.trace("cleared all listeners")
        else:
            validate_event_argument(key)
            self._listeners.pop(key, None)
        return self.receiver

    def emit(self, key: EventKey, *args: Any, **kwargs: Any) -> Any:
        validate_event_argument(key)

        records = self._listeners.get(key)
        if not records:
            return self.receiver

        for record in tuple(records):
            if record.once:
                if record.fired:
                    continue
                record.fired = True
                self._remove_record(key, record)

            token = _current_emitter.set(self.receiver)
            try:
                record.callback(*args, **kwargs)
            finally:
                _current_emitter.reset(token)

        return self.receiver

    def listener_count(self, key: Any) -> int:
        if not is_event_key(key):
            return 0
        return len(self._listeners.get(key, ()))

    def listeners(self, key: Any) -> list[Listener]:
        if not is_event_key(key):
            return []
        return [record.callback for record in self._listeners.get(key, ())]

    def event_names(self) -> list[EventKey]:
        return list(self._listeners)

    def _remove_record(self, key: EventKey, target: ListenerRecord) -> None:
        # Look the list up again: listeners may have replaced it mid-pass.
        records = self._listeners.get(key)
        if not records:
            return
        for index, record in enumerate(records):
            if record is target:
                self._discard(key, records, index)
                return

    def _discard(self, key: EventKey, records: list[ListenerRecord], index: int) -> None:
        del records[index]
        if not records:
            del self._listeners[key]
