"""Type aliases describing listeners and event names."""

from __future__ import annotations

from typing import Any, Callable, Hashable, Literal, Union

InternalEventName = Literal["newListener", "removeListener"]

# Any hashable value may name an event; the reserved names are listed for checkers.
EventName = Union[InternalEventName, Hashable]

Listener = Callable[..., Any]
