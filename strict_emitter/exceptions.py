"""Diagnostics reported by the emitter."""

from __future__ import annotations

from typing import Any, Hashable


class MemoryLeakWarning(UserWarning):
    """Advisory logged when a single event collects more listeners than allowed.

    Never thrown by the emitter. It is constructed once per emitter, the first time a
    single event's listener count exceeds the emitter's max listeners.
    """

    def __init__(self, emitter: Any, event_name: Hashable, count: int) -> None:
        self.emitter = emitter
        self.event_name = event_name
        self.count = count
        super().__init__(
            f"Possible EventEmitter memory leak detected. {count} {event_name} listeners "
            f"added to {emitter!r}. Use emitter.set_max_listeners() to increase limit"
        )
