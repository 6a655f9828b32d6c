"""Observable Fields — per-field change notification with batched delivery.

Invariants:
    - A write notifies only when the new value differs from the current one
    - Inside notifier.batch() nothing is delivered; on exit of the outermost batch
      each changed field is delivered once, with its final value, in first-change order
    - A field written inside a batch and restored to its starting value is not delivered
    - Field subscribers run before notifier-wide listeners for the same change

Design Decisions:
    - One ChangeNotifier per owner (the controller), shared by all its fields:
      batching spans fields, which is what keeps a multi-field form update atomic
    - FieldView for fields the presentation may read but not write
"""

from contextlib import contextmanager
from typing import Any, Callable, Generic, Iterator, TypeVar

T = TypeVar("T")

FieldListener = Callable[[Any], None]
ChangeListener = Callable[[str, Any], None]


class ChangeNotifier:
    """Change hub for a group of ObservableFields."""

    def __init__(self):
        self._listeners: list[ChangeListener] = []
        self._depth = 0
        # name -> (field, value before the first change in this batch)
        self._pending: dict[str, tuple["ObservableField", Any]] = {}

    def subscribe(self, listener: ChangeListener) -> Callable[[], None]:
        """Receive (field_name, new_value) for every delivered change."""
        self._listeners.append(listener)
        return lambda: self._unsubscribe(listener)

    def _unsubscribe(self, listener: ChangeListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    @contextmanager
    def batch(self) -> Iterator[None]:
        """Defer notifications until the outermost batch exits. Re-entrant."""
        self._depth += 1
        try:
            yield
        finally:
            self._depth -= 1
            if self._depth == 0:
                self._flush()

    def _changed(self, field: "ObservableField", old_value: Any) -> None:
        if self._depth:
            self._pending.setdefault(field.name, (field, old_value))
            return
        self._deliver(field)

    def _flush(self) -> None:
        pending, self._pending = self._pending, {}
        for field, old_value in pending.values():
            if field.value != old_value:
                self._deliver(field)

    def _deliver(self, field: "ObservableField") -> None:
        value = field.value
        field._emit(value)
        for listener in list(self._listeners):
            listener(field.name, value)


class ObservableField(Generic[T]):
    """A named value that notifies subscribers when it changes."""

    def __init__(self, name: str, initial: T, notifier: ChangeNotifier):
        self.name = name
        self._value = initial
        self._notifier = notifier
        self._subscribers: list[FieldListener] = []

    @property
    def value(self) -> T:
        return self._value

    @value.setter
    def value(self, new_value: T) -> None:
        self.set(new_value)

    def set(self, new_value: T) -> bool:
        """Write new_value. Returns False (and notifies nobody) when unchanged."""
        if new_value == self._value:
            return False
        old_value, self._value = self._value, new_value
        self._notifier._changed(self, old_value)
        return True

    def subscribe(self, callback: FieldListener) -> Callable[[], None]:
        """Receive the new value on every delivered change. Returns an unsubscribe callable."""
        self._subscribers.append(callback)
        return lambda: self._unsubscribe(callback)

    def _unsubscribe(self, callback: FieldListener) -> None:
        if callback in self._subscribers:
            self._subscribers.remove(callback)

    def _emit(self, value: T) -> None:
        for callback in list(self._subscribers):
            callback(value)

    def view(self) -> "FieldView[T]":
        return FieldView(self)

    def __repr__(self):
        return f"ObservableField({self.name}={self._value!r})"


class FieldView(Generic[T]):
    """Read-only face of an ObservableField."""

    def __init__(self, field: ObservableField[T]):
        self._field = field

    @property
    def name(self) -> str:
        return self._field.name

    @property
    def value(self) -> T:
        return self._field.value

    def subscribe(self, callback: FieldListener) -> Callable[[], None]:
        return self._field.subscribe(callback)

    def __repr__(self):
        return f"FieldView({self._field.name}={self._field.value!r})"
