"""Node.js compatible event emitter.

Listeners are called synchronously, in registration order, and exceptions bubble up
to whoever called `emit`. Registering and removing listeners announces itself through
the reserved `newListener` and `removeListener` events.

Example:
    ```python
    emitter = Emitter()
    emitter.on("hello", lambda name: print(f"Hello, {name}"))
    emitter.emit("hello", "John")
    ```
"""

from __future__ import annotations

import inspect
import logging
from typing import Any

from strict_emitter.config import get_default_max_listeners
from strict_emitter.constants import NEW_LISTENER, REMOVE_LISTENER
from strict_emitter.exceptions import MemoryLeakWarning
from strict_emitter.typings import EventName, InternalEventName, Listener

logger = logging.getLogger(__name__)


def _ensure_callable(listener: Any) -> None:
    if not callable(listener):
        raise TypeError(f"listener must be callable, got {type(listener).__name__}")


def _same_listener(candidate: Listener, listener: Listener) -> bool:
    if candidate is listener:
        return True
    # Bound methods are rebuilt on every attribute access
    return (
        inspect.ismethod(candidate)
        and inspect.ismethod(listener)
        and candidate.__self__ is listener.__self__
        and candidate.__func__ is listener.__func__
    )


class OnceListener:
    """Stands in for a listener registered with `once` or `prepend_once_listener`.

    On its first call it removes itself from the emitter and then calls the original
    listener. Later calls do nothing, even if an emission already in progress still
    holds a reference to it.
    """

    def __init__(self, emitter: Emitter, event_name: EventName, listener: Listener) -> None:
        _ensure_callable(listener)
        self.emitter = emitter
        self.event_name = event_name
        self.listener = listener
        self.__wrapped__ = listener
        self.fired = False

    def __call__(self, *args, **kwargs) -> Any:
        if self.fired:
            return None
        self.fired = True
        self.emitter.remove_listener(self.event_name, self)
        return self.listener(*args, **kwargs)

    def __repr__(self) -> str:
        return f"<OnceListener {self.listener!r}>"


class Emitter:
    """In-process registry of named listeners.

    `default_max_listeners` is shared by every emitter that never called
    `set_max_listeners`, and it is read live: changing it on the class affects those
    emitters immediately.
    """

    default_max_listeners: int = get_default_max_listeners()

    def __init__(self) -> None:
        self._events: dict[EventName, list[Listener]] = {}
        self._max_listeners: int | None = None
        self._has_warned_about_leak = False

    def _emit_internal_event(
        self, internal_event_name: InternalEventName, event_name: EventName, listener: Listener
    ) -> None:
        self.emit(internal_event_name, event_name, listener)

    def _find_listener(self, listeners: list[Listener], listener: Listener) -> int | None:
        for index, candidate in enumerate(listeners):
            if _same_listener(candidate, listener):
                return index
        return None

    def _check_listener_limit(self, event_name: EventName) -> None:
        if self._has_warned_about_leak:
            return

        max_listeners = self.get_max_listeners()
        count = self.listener_count(event_name)
        if max_listeners > 0 and count > max_listeners:
            self._has_warned_about_leak = True
            logger.warning(MemoryLeakWarning(self, event_name, count))

    def _register(self, event_name: EventName, listener: Listener, prepend: bool) -> Emitter:
        _ensure_callable(listener)

        # Announce before storing, so newListener handlers don't see it yet
        self._emit_internal_event(NEW_LISTENER, event_name, listener)

        listeners = self._events.setdefault(event_name, [])
        if prepend:
            listeners.insert(0, listener)
        else:
            listeners.append(listener)
        logger.debug(f"Added listener {listener!r} for << {event_name} >> ({len(listeners)} total)")

        self._check_listener_limit(event_name)
        return self

    def set_max_listeners(self, max_listeners: int) -> Emitter:
        """Set how many listeners one event may have before a leak warning is logged.

        0 disables the warning.
        """
        if isinstance(max_listeners, bool) or not isinstance(max_listeners, int):
            raise TypeError(f"max_listeners must be an int, got {type(max_listeners).__name__}")
        if max_listeners < 0:
            raise ValueError(f"max_listeners must not be negative, got {max_listeners}")
        self._max_listeners = max_listeners
        return self

    def get_max_listeners(self) -> int:
        """Returns the value set by `set_max_listeners`, or `default_max_listeners`."""
        if self._max_listeners is None:
            return self.default_max_listeners
        return self._max_listeners

    def event_names(self) -> list[EventName]:
        """Returns the names of the events that have at least one listener."""
        return [name for name, listeners in self._events.items() if listeners]

    def emit(self, event_name: EventName, *args, **kwargs) -> bool:
        """Call each listener registered for `event_name` with the supplied arguments.

        The listeners are fixed when the call starts: listeners added or removed while
        it runs only affect later emissions. Exceptions raised by a listener are not
        caught and stop the remaining listeners from running.

        Returns:
            bool: True if the event had listeners, False otherwise.
        """
        listeners = tuple(self._events.get(event_name, ()))
        for listener in listeners:
            listener(*args, **kwargs)
        return len(listeners) > 0

    def add_listener(self, event_name: EventName, listener: Listener) -> Emitter:
        """Append `listener` to the listeners of `event_name`."""
        return self._register(event_name, listener, prepend=False)

    def on(self, event_name: EventName, listener: Listener) -> Emitter:
        """Alias for `add_listener`."""
        return self.add_listener(event_name, listener)

    def once(self, event_name: EventName, listener: Listener) -> Emitter:
        """Add a listener that removes itself after its first call.

        The stored listener is a `OnceListener` wrapper, and that wrapper is what
        `newListener` handlers receive.
        """
        return self.add_listener(event_name, OnceListener(self, event_name, listener))

    def prepend_listener(self, event_name: EventName, listener: Listener) -> Emitter:
        """Insert `listener` before every listener already registered for `event_name`."""
        return self._register(event_name, listener, prepend=True)

    def prepend_once_listener(self, event_name: EventName, listener: Listener) -> Emitter:
        return self.prepend_listener(event_name, OnceListener(self, event_name, listener))

    def remove_listener(self, event_name: EventName, listener: Listener) -> Emitter:
        """Remove the first occurrence of `listener` from `event_name`.

        Listeners are matched by identity. A listener added with `once` is stored as its
        `OnceListener` wrapper, so it can only be removed by passing that wrapper, not the
        original callable. `removeListener` is emitted only when something was actually
        removed.
        """
        listeners = self._events.get(event_name)
        if not listeners:
            return self

        index = self._find_listener(listeners, listener)
        if index is None:
            return self

        del listeners[index]
        if not listeners:
            del self._events[event_name]
        logger.debug(f"Removed listener {listener!r} for << {event_name} >>")

        self._emit_internal_event(REMOVE_LISTENER, event_name, listener)
        return self

    def off(self, event_name: EventName, listener: Listener) -> Emitter:
        """Alias for `remove_listener`."""
        return self.remove_listener(event_name, listener)

    def remove_all_listeners(self, event_name: EventName | None = None) -> Emitter:
        """Remove every listener of `event_name`, or of all events when omitted.

        Does not emit `removeListener`.
        """
        if event_name is None:
            self._events.clear()
        else:
            self._events.pop(event_name, None)
        return self

    def listeners(self, event_name: EventName) -> list[Listener]:
        """Returns a copy of the listeners registered for `event_name`."""
        return list(self._events.get(event_name, ()))

    def raw_listeners(self, event_name: EventName) -> list[Listener]:
        return self.listeners(event_name)

    def listener_count(self, event_name: EventName) -> int:
        """Returns the number of listeners registered for `event_name`.

        Also usable from the class as `Emitter.listener_count(emitter, event_name)`.
        """
        return len(self._events.get(event_name, ()))
