"""Listener record containers."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any

Listener = Callable[..., Any]


class ListenerMode(str, Enum):
    PERSISTENT = "on"
    ONCE = "once"


@dataclass(slots=True, eq=False)
class ListenerRecord:
    callback: Listener
    mode: ListenerMode = ListenerMode.PERSISTENT
    # Set when a one-shot record is claimed by an emission pass.
    fired: bool = False

    @property
    def once(self) -> bool:
        return self.mode is ListenerMode.ONCE
