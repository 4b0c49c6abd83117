"""Unit tests for EventHeap ordering."""

from eventsim import CallbackEvent, EventHeap


def _noop(sim):
    pass


def test_pops_in_time_order():
    heap = EventHeap()
    for t in (5.0, 1.0, 3.0):
        heap.push(t, CallbackEvent(t, _noop))

    assert [heap.pop().time for _ in range(3)] == [1.0, 3.0, 5.0]
    assert not heap.has_events()


def test_equal_times_pop_in_push_order():
    heap = EventHeap()
    events = [CallbackEvent(0.0, _noop, label=str(i)) for i in range(5)]
    for event in events:
        heap.push(2.0, event)

    popped = [heap.pop().event for _ in range(5)]
    assert popped == events


def test_peek_does_not_remove():
    heap = EventHeap()
    event = CallbackEvent(1.0, _noop)
    heap.push(1.0, event)

    assert heap.peek().event is event
    assert heap.size() == 1


def test_sequence_ids_increase():
    heap = EventHeap()
    first = heap.push(1.0, CallbackEvent(1.0, _noop))
    second = heap.push(1.0, CallbackEvent(1.0, _noop))
    assert second.seq > first.seq
