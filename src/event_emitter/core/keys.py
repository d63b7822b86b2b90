"""Event keys and argument validation."""

from __future__ import annotations

from typing import Any, Union

from event_emitter.errors import InvalidArgument


class EventToken:
    """Opaque event key compared by identity, never by description."""

    __slots__ = ("description",)

    def __init__(self, description: str = "") -> None:
        self.description = description

    def __str__(self) -> str:
        return f"EventToken({self.description})"

    def __repr__(self) -> str:
        return f"<EventToken {self.description!r} at {id(self):#x}>"


EventKey = Union[str, EventToken]


def is_event_key(value: Any) -> bool:
    return isinstance(value, (str, EventToken))


def validate_event_argument(value: Any) -> None:
    if not is_event_key(value):
        raise InvalidArgument('Argument for parameter "event" must be a string or EventToken.')


def validate_listener_argument(value: Any) -> None:
    if not callable(value):
        raise InvalidArgument('Argument for parameter "listener" must be callable.')
