"""Attaching the emitter to host classes."""

from event_emitter import EventEmitter, EventEmitterMixin, current_emitter, emitter


class Widget:
    """A host with its own constructor and behaviour."""

    def __init__(self, name, *, size=1):
        self.name = name
        self.size = size

    def describe(self):
        return f"{self.name}:{self.size}"


def test_emitter_keeps_base_behaviour():
    WidgetEmitter = emitter(Widget)
    widget = WidgetEmitter("knob", size=3)

    assert isinstance(widget, Widget)
    assert isinstance(widget, EventEmitterMixin)
    assert widget.describe() == "knob:3"
    assert WidgetEmitter.__name__ == "WidgetEventEmitter"

    seen = []
    assert widget.on("turn", lambda step: seen.append((current_emitter(), step))) is widget
    widget.emit("turn", 5)
    assert seen == [(widget, 5)]


def test_each_call_returns_a_fresh_class():
    assert emitter() is not emitter()
    assert emitter().__name__ == "EventEmitter"
    assert isinstance(EventEmitter(), EventEmitterMixin)


def test_emitter_of_an_emitter_subclasses_it():
    Derived = emitter(EventEmitter)
    assert issubclass(Derived, EventEmitter)
    assert Derived().on("a", print).listener_count("a") == 1


def test_instances_do_not_share_listeners():
    first, second = EventEmitter(), EventEmitter()
    first.on("a", print)
    assert second.listener_count("a") == 0


def test_host_can_register_in_its_own_init():
    class Job(EventEmitterMixin):
        def __init__(self, job_id):
            super().__init__()
            self.job_id = job_id
            self.finished = []
            self.once("done", self.finished.append)

    job = Job(7)
    job.emit("done", "ok").emit("done", "again")
    assert job.finished == ["ok"]
