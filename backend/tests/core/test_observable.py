"""Observable Fields — notify-on-write and batching contract.

Tests cover:
    - Set-if-changed semantics
    - Field subscribers vs notifier-wide listeners
    - Batch deferral, coalescing, first-change ordering, re-entrancy
    - Read-only views and unsubscribe
"""

from organization.core.observable import ChangeNotifier, ObservableField


def _field(name="f", initial=0, notifier=None):
    notifier = notifier or ChangeNotifier()
    return ObservableField(name, initial, notifier), notifier


def test_write_notifies_subscriber():
    field, _ = _field()
    seen = []
    field.subscribe(seen.append)
    field.value = 5
    assert seen == [5]
    assert field.value == 5


def test_equal_write_does_not_notify():
    field, _ = _field(initial="x")
    seen = []
    field.subscribe(seen.append)
    assert field.set("x") is False
    assert seen == []


def test_notifier_listener_receives_name_and_value():
    field, notifier = _field(name="draft_name", initial="")
    events = []
    notifier.subscribe(lambda name, value: events.append((name, value)))
    field.value = "Ada"
    assert events == [("draft_name", "Ada")]


def test_batch_defers_until_exit():
    notifier = ChangeNotifier()
    a = ObservableField("a", 0, notifier)
    b = ObservableField("b", 0, notifier)
    events = []
    notifier.subscribe(lambda name, value: events.append((name, a.value, b.value)))

    with notifier.batch():
        a.value = 1
        assert events == []
        b.value = 2

    assert events == [("a", 1, 2), ("b", 1, 2)]


def test_batch_coalesces_repeated_writes():
    field, notifier = _field()
    seen = []
    field.subscribe(seen.append)
    with notifier.batch():
        field.value = 1
        field.value = 2
        field.value = 3
    assert seen == [3]


def test_batch_skips_field_restored_to_start_value():
    field, notifier = _field(initial="a")
    seen = []
    field.subscribe(seen.append)
    with notifier.batch():
        field.value = "b"
        field.value = "a"
    assert seen == []


def test_batch_delivers_in_first_change_order():
    notifier = ChangeNotifier()
    a = ObservableField("a", 0, notifier)
    b = ObservableField("b", 0, notifier)
    order = []
    notifier.subscribe(lambda name, value: order.append(name))
    with notifier.batch():
        b.value = 1
        a.value = 1
        b.value = 2
    assert order == ["b", "a"]


def test_nested_batches_flush_once_at_outermost_exit():
    field, notifier = _field()
    seen = []
    field.subscribe(seen.append)
    with notifier.batch():
        with notifier.batch():
            field.value = 1
        assert seen == []
    assert seen == [1]


def test_field_subscribers_run_before_notifier_listeners():
    field, notifier = _field()
    order = []
    notifier.subscribe(lambda name, value: order.append("notifier"))
    field.subscribe(lambda value: order.append("field"))
    field.value = 1
    assert order == ["field", "notifier"]


def test_unsubscribe_stops_delivery():
    field, notifier = _field()
    seen, events = [], []
    stop_field = field.subscribe(seen.append)
    stop_all = notifier.subscribe(lambda name, value: events.append(name))
    stop_field()
    stop_all()
    field.value = 1
    assert seen == []
    assert events == []


def test_unsubscribe_twice_is_harmless():
    field, _ = _field()
    stop = field.subscribe(lambda v: None)
    stop()
    stop()


def test_view_reads_and_subscribes_but_cannot_write():
    field, _ = _field(name="records", initial=())
    view = field.view()
    seen = []
    view.subscribe(seen.append)
    field.value = ("x",)
    assert view.value == ("x",)
    assert view.name == "records"
    assert seen == [("x",)]
    assert not hasattr(view, "set")
