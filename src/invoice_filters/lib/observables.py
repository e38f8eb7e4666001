"""
Observable value holders used to publish filter state.

An ObservableValue has a single writer (its owner) and any number of
readers. Writing replaces the held value and synchronously notifies the
current subscribers in subscription order. No locking is done: callers must
serialize writes, which the filter manager guarantees by being driven from
one sequential context.

Usage:
    errors = ObservableValue[str | None](None)
    unsubscribe = errors.subscribe(print)
    errors.set("Start date cannot be after the end date")
    unsubscribe()
"""

from typing import Callable, Generic, TypeVar

from invoice_filters.lib import logs

LOG = logs.logger(__file__)

T = TypeVar("T")

Subscriber = Callable[[T], None]


class ObservableValue(Generic[T]):
    """
    Holds a value and notifies subscribers whenever it is replaced.

    Attributes:
        value: The current value (read-only; use set() to replace it).
    """

    def __init__(self, initial: T) -> None:
        self._value: T = initial
        self._subscribers: list[Subscriber] = []

    @property
    def value(self) -> T:
        """Return the currently held value."""
        return self._value

    def set(self, value: T) -> None:
        """
        Replace the held value and notify every subscriber.

        A subscriber that raises is logged and skipped; delivery to the
        remaining subscribers continues.

        Args:
            value: The new value to publish.
        """
        self._value = value
        for subscriber in list(self._subscribers):
            try:
                subscriber(value)
            except Exception:
                LOG.warning("Subscriber %r failed", subscriber, exc_info=True)

    def subscribe(
        self, subscriber: Subscriber, replay: bool = True
    ) -> Callable[[], None]:
        """
        Register a callback for future values.

        Args:
            subscriber: Callable invoked with each new value.
            replay: If True, the subscriber immediately receives the current value.

        Returns:
            A callable that removes the subscription when invoked.
        """
        self._subscribers.append(subscriber)
        if replay:
            subscriber(self._value)

        def _unsubscribe() -> None:
            if subscriber in self._subscribers:
                self._subscribers.remove(subscriber)

        return _unsubscribe
