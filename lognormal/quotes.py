"""
Observable market quotes.

A quote is a mutable scalar (a rate, a volatility, a spot level) shared by
any number of models. Models hold a Handle to the quote rather than the
number itself, so a changed value is seen on the very next read:

    spot = SimpleQuote(100.0)
    handle = Handle(spot)
    handle.value()       # 100.0
    spot.set_value(101.0)
    handle.value()       # 101.0

Observers registered with a quote (or with a handle) are notified whenever
the value changes or the handle is relinked.
"""

import logging
import weakref
from abc import ABC, abstractmethod
from typing import List, Optional

logger = logging.getLogger(__name__)


class UnavailableQuoteError(Exception):
    """Raised when a quote is read while it holds no value."""


class Observer:
    """Receives change notifications from Observable objects."""

    def update(self) -> None:
        pass

    def register_with(self, observable: "Observable") -> None:
        observable.register_observer(self)

    def unregister_with(self, observable: "Observable") -> None:
        observable.unregister_observer(self)


class Observable:
    """
    Keeps weak references to observers and notifies them of changes.

    An observer is dropped once nothing else references it, so registering
    with a quote does not keep a process alive.
    """

    def __init__(self):
        self._observers: List[weakref.ref] = []

    def _live_observers(self) -> List[Observer]:
        live = [ref() for ref in self._observers]
        return [o for o in live if o is not None]

    def register_observer(self, observer: Observer) -> None:
        live = self._live_observers()
        if not any(o is observer for o in live):
            live.append(observer)
        self._observers = [weakref.ref(o) for o in live]

    def unregister_observer(self, observer: Observer) -> None:
        self._observers = [
            weakref.ref(o) for o in self._live_observers() if o is not observer
        ]

    def observer_count(self) -> int:
        return len(self._live_observers())

    def notify_observers(self) -> None:
        for observer in self._live_observers():
            observer.update()


class Quote(Observable, ABC):
    """Abstract scalar market quote."""

    @abstractmethod
    def value(self) -> float:
        """
        Return the current value.

        Raises:
            UnavailableQuoteError: if the quote holds no value
        """
        pass

    @abstractmethod
    def is_valid(self) -> bool:
        pass


class SimpleQuote(Quote):
    """
    Quote backed by a plain settable value.

    Attributes:
        name: Optional label used in error messages and logs
    """

    def __init__(self, value: Optional[float] = None, name: Optional[str] = None):
        super().__init__()
        self._value = None if value is None else float(value)
        self.name = name

    def __repr__(self) -> str:
        return f"SimpleQuote(value={self._value!r}, name={self.name!r})"

    def value(self) -> float:
        if self._value is None:
            label = f"'{self.name}' " if self.name else ""
            raise UnavailableQuoteError(f"Quote {label}has no value")
        return self._value

    def is_valid(self) -> bool:
        return self._value is not None

    def set_value(self, value: Optional[float]) -> float:
        """
        Set a new value and notify observers if it changed.

        Passing None empties the quote, as reset() does.

        Returns:
            Difference between the new and the previous value
            (0.0 when the quote was previously empty or is emptied)
        """
        if value is None:
            if self._value is not None:
                self.reset()
            return 0.0
        value = float(value)
        diff = 0.0 if self._value is None else value - self._value
        if self._value != value:
            self._value = value
            self.notify_observers()
        return diff

    def reset(self) -> None:
        """Empty the quote."""
        logger.debug("Resetting quote %r", self.name)
        self._value = None
        self.notify_observers()


class Handle(Observable, Observer):
    """
    Relinkable reference to a Quote.

    Notifications from the linked quote are forwarded to the observers of
    the handle, and relinking notifies them as well.
    """

    def __init__(self, quote: Optional[Quote] = None):
        Observable.__init__(self)
        self._link: Optional[Quote] = None
        if quote is not None:
            self.link_to(quote, notify=False)

    def __repr__(self) -> str:
        return f"Handle({self._link!r})"

    def link_to(self, quote: Optional[Quote], notify: bool = True) -> None:
        """Point the handle at another quote (or at nothing)."""
        if quote is self._link:
            return
        if self._link is not None:
            self.unregister_with(self._link)
        self._link = quote
        if quote is not None:
            self.register_with(quote)
        logger.debug("Handle relinked to %r", quote)
        if notify:
            self.notify_observers()

    def update(self) -> None:
        self.notify_observers()

    def current_link(self) -> Optional[Quote]:
        return self._link

    def empty(self) -> bool:
        return self._link is None

    def is_valid(self) -> bool:
        return self._link is not None and self._link.is_valid()

    def value(self) -> float:
        """Read the linked quote's current value."""
        if self._link is None:
            raise UnavailableQuoteError("Handle is not linked to any quote")
        return self._link.value()
