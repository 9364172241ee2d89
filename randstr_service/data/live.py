"""Push-based observable values used to propagate state between layers.

``StateFlow`` holds a single current value and notifies subscribers when it
changes. ``LiveQuery`` wraps a loader over storage and re-runs it every time
it is invalidated, delivering the fresh immutable snapshot to every
subscriber. Both replay the current value to a new subscriber right away.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable, Generic, List, Optional, Sequence, Tuple, TypeVar

__all__ = ["LiveQuery", "StateFlow", "Subscription"]

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")
Callback = Callable[[T], None]


class Subscription:
    """Handle returned by ``subscribe``; ``cancel`` stops further deliveries."""

    def __init__(self, on_cancel: Callable[[], None]):
        self._on_cancel = on_cancel
        self._cancelled = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        if not self._cancelled:
            self._cancelled = True
            self._on_cancel()

    def __enter__(self) -> "Subscription":
        return self

    def __exit__(self, *exc_info) -> None:
        self.cancel()


class _Observable(Generic[T]):
    def __init__(self) -> None:
        self._subscribers: List[Callback] = []
        self._lock = threading.Lock()
        # Serialises deliveries so subscribers see values in publication order.
        self._emit_lock = threading.RLock()

    @property
    def subscriber_count(self) -> int:
        with self._lock:
            return len(self._subscribers)

    def _add(self, callback: Callback) -> Subscription:
        with self._lock:
            self._subscribers.append(callback)

        def _remove() -> None:
            with self._lock:
                if callback in self._subscribers:
                    self._subscribers.remove(callback)

        return Subscription(_remove)

    def _deliver(self, value: T, targets: Optional[Sequence[Callback]] = None) -> None:
        if targets is None:
            with self._lock:
                targets = list(self._subscribers)
        for callback in targets:
            try:
                callback(value)
            except Exception:
                LOGGER.exception("Subscriber %r failed while handling an update", callback)


class StateFlow(_Observable[T]):
    """A thread-safe holder of one current value; equal updates are not re-emitted."""

    def __init__(self, initial: T):
        super().__init__()
        self._value = initial

    @property
    def value(self) -> T:
        with self._lock:
            return self._value

    def set(self, value: T) -> None:
        with self._emit_lock:
            with self._lock:
                if value == self._value:
                    return
                self._value = value
            self._deliver(value)

    def subscribe(self, callback: Callback) -> Subscription:
        with self._emit_lock:
            subscription = self._add(callback)
            self._deliver(self.value, [callback])
        return subscription


class LiveQuery(_Observable[Tuple[T, ...]]):
    """Re-runs ``loader`` on every invalidation and publishes the result as a tuple."""

    def __init__(self, loader: Callable[[], Sequence[T]]):
        super().__init__()
        self._loader = loader

    def snapshot(self) -> Tuple[T, ...]:
        return tuple(self._loader())

    def invalidate(self) -> None:
        with self._emit_lock:
            if not self.subscriber_count:
                return
            self._deliver(self.snapshot())

    def subscribe(self, callback: Callback) -> Subscription:
        with self._emit_lock:
            subscription = self._add(callback)
            self._deliver(self.snapshot(), [callback])
        return subscription
