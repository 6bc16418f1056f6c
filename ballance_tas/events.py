"""Named event dispatch with persistent and one-shot listeners."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Optional

logger = logging.getLogger(__name__)

ErrorHandler = Callable[[str, str], None]


@dataclass
class CallbackEntry:
    """A registered listener and whether it fires only once."""

    callback: Callable[..., Any]
    one_time: bool = False

    @property
    def valid(self) -> bool:
        return callable(self.callback)


def _log_error(event_name: str, message: str) -> None:
    logger.error("Error in event '%s': %s", event_name, message)


class EventManager:
    """Dispatches named events to registered callbacks.

    A failing callback does not stop the others: its exception is passed to
    the error handler, which by default logs it.
    """

    def __init__(self, error_handler: Optional[ErrorHandler] = None) -> None:
        self._listeners: dict[str, list[CallbackEntry]] = {}
        self._error_handler: ErrorHandler = error_handler or _log_error

    def register_listener(
        self,
        event_name: str,
        callback: Callable[..., Any],
        one_time: bool = False,
    ) -> None:
        """Call ``callback`` whenever ``event_name`` is fired."""
        if not event_name:
            raise ValueError("Event name cannot be empty")
        if not callable(callback):
            raise TypeError(f"Callback for event '{event_name}' is not callable")
        self._listeners.setdefault(event_name, []).append(
            CallbackEntry(callback, one_time)
        )

    def register_once_listener(
        self, event_name: str, callback: Callable[..., Any]
    ) -> None:
        """Call ``callback`` the next time ``event_name`` is fired, then drop it."""
        self.register_listener(event_name, callback, one_time=True)

    def fire_event(self, event_name: str, *args: Any) -> None:
        """Call every listener of ``event_name`` with ``args``, in registration order."""
        entries = self._listeners.get(event_name)
        if entries is None:
            return

        spent: list[CallbackEntry] = []
        for entry in list(entries):
            if not entry.valid:
                spent.append(entry)
                continue
            try:
                entry.callback(*args)
            except Exception as exc:  # a listener must not break dispatch
                self._error_handler(
                    event_name, f"Callback execution failed: {exc}"
                )
            # One-shot listeners go even when they fail, so they never repeat.
            if entry.one_time:
                spent.append(entry)

        current = self._listeners.get(event_name)
        if current is None:
            return
        for entry in spent:
            if entry in current:
                current.remove(entry)
        if not current:
            del self._listeners[event_name]

    def clear_listeners(self, event_name: Optional[str] = None) -> None:
        """Drop the listeners of one event, or of every event when none is named."""
        if event_name is None:
            self._listeners.clear()
        else:
            self._listeners.pop(event_name, None)

    def listener_count(self, event_name: str) -> int:
        return len(self._listeners.get(event_name, ()))

    def has_listeners(self, event_name: str) -> bool:
        return bool(self._listeners.get(event_name))