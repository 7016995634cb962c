"""Observable state cells backing the translation engine.

A ``Signal`` holds a single value; a ``Store`` holds a mapping of values.
Both notify their subscribers synchronously after each write. Subscribers
are called in registration order; a subscriber that raises is logged and
the remaining subscribers are still notified.
"""

from types import MappingProxyType
from typing import Any, Callable, Dict, Generic, List, Mapping, Optional, TypeVar

from infrastructure.logging import get_module_logger

logger = get_module_logger()

T = TypeVar("T")

Unsubscribe = Callable[[], None]


def _notify(subscribers: List[Callable], *args: Any) -> None:
    # Iterate over a copy so subscribers may unsubscribe while being notified
    for subscriber in list(subscribers):
        try:
            subscriber(*args)
        except Exception as e:
            logger.error(
                "signal_subscriber_failed",
                subscriber=getattr(subscriber, "__name__", "unknown"),
                error=str(e),
            )


def _remover(subscribers: List[Callable], callback: Callable) -> Unsubscribe:
    def unsubscribe() -> None:
        if callback in subscribers:
            subscribers.remove(callback)

    return unsubscribe


class Signal(Generic[T]):
    """Single mutable value with change notification.

    Writing a value equal to the current one is a no-op.
    """

    def __init__(self, value: T):
        self._value = value
        self._subscribers: List[Callable[[T], None]] = []

    def get(self) -> T:
        return self._value

    def set(self, value: T) -> None:
        if value == self._value:
            return
        self._value = value
        _notify(self._subscribers, value)

    def subscribe(self, callback: Callable[[T], None]) -> Unsubscribe:
        """Register ``callback`` to receive every new value.

        Returns:
            A callable removing the subscription.
        """
        self._subscribers.append(callback)
        return _remover(self._subscribers, callback)


class Store(Generic[T]):
    """Mapping of keys to values with per-write notification.

    Each ``set`` replaces the whole state mapping with a new one, so a
    reader holding a ``snapshot()`` never observes a half-applied write.
    Snapshots are read-only views; only ``set`` changes the state.
    """

    def __init__(self, initial: Optional[Dict[str, T]] = None):
        self._state: Dict[str, T] = dict(initial or {})
        self._subscribers: List[Callable[[str, T], None]] = []

    def get(self, key: str) -> Optional[T]:
        return self._state.get(key)

    def snapshot(self) -> Mapping[str, T]:
        return MappingProxyType(self._state)

    def keys(self) -> List[str]:
        return list(self._state.keys())

    def set(self, key: str, value: T) -> None:
        self._state = {**self._state, key: value}
        _notify(self._subscribers, key, value)

    def subscribe(self, callback: Callable[[str, T], None]) -> Unsubscribe:
        """Register ``callback`` to receive ``(key, value)`` on every write.

        Returns:
            A callable removing the subscription.
        """
        self._subscribers.append(callback)
        return _remover(self._subscribers, callback)
