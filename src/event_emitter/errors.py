"""Exceptions raised by event-emitter."""


class InvalidArgument(TypeError):
    """Raised when an event key or listener argument has the wrong type."""
