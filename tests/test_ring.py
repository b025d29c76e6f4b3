import threading

import pytest

from qniokit.ring import Ring, RingEmpty, RingFull


def test_capacity_is_size():
    assert Ring(8).capacity() == 8


@pytest.mark.parametrize("size", [0, 3, 6, 12, -4])
def test_size_must_be_power_of_two(size):
    with pytest.raises(ValueError):
        Ring(size)


def test_fifo_order():
    ring = Ring(8)
    for item in ["a", "b", "c"]:
        ring.enqueue(item)
    assert len(ring) == 3
    assert [ring.dequeue() for _ in range(3)] == ["a", "b", "c"]
    assert len(ring) == 0


def test_holds_one_less_than_size():
    ring = Ring(4)
    for item in range(3):
        ring.enqueue(item)
    with pytest.raises(RingFull):
        ring.enqueue(99)
    assert len(ring) == 3
    assert ring.dequeue() == 0
    ring.enqueue(99)
    assert [ring.dequeue() for _ in range(3)] == [1, 2, 99]


def test_size_one_ring_is_always_full():
    ring = Ring(1)
    with pytest.raises(RingFull):
        ring.enqueue("x")


def test_dequeue_empty_raises():
    ring = Ring(2)
    with pytest.raises(RingEmpty):
        ring.dequeue()
    with pytest.raises(RingEmpty):
        ring.try_dequeue()


def test_enqueue_with_size_reports_previous_length():
    ring = Ring(8)
    sizes = [ring.enqueue_with_size(item) for item in "abcd"]
    assert sizes == [0, 1, 2, 3]
    assert len(ring) == 4


def test_enqueue_with_size_full_raises():
    ring = Ring(2)
    ring.enqueue_with_size("a")
    with pytest.raises(RingFull):
        ring.enqueue_with_size("b")


def test_try_dequeue_returns_head():
    ring = Ring(4)
    ring.enqueue("first")
    ring.enqueue("second")
    assert ring.try_dequeue() == "first"
    assert ring.dequeue() == "second"


def test_wraps_around_many_times():
    ring = Ring(4)
    seen = []
    for item in range(100):
        ring.enqueue(item)
        ring.enqueue(-item)
        seen.append(ring.dequeue())
        seen.append(ring.dequeue())
    assert seen == [value for item in range(100) for value in (item, -item)]
    assert len(ring) == 0


def test_none_items_are_preserved():
    ring = Ring(4)
    ring.enqueue(None)
    assert len(ring) == 1
    assert ring.dequeue() is None
    assert len(ring) == 0


def test_threaded_producer_and_consumers_deliver_everything():
    ring = Ring(16)
    total = 2000
    received = []
    received_lock = threading.Lock()
    done = threading.Event()

    def producer():
        item = 0
        while item < total:
            try:
                ring.enqueue(item)
            except RingFull:
                continue
            item += 1
        done.set()

    def consumer():
        while True:
            try:
                value = ring.dequeue()
            except RingEmpty:
                if done.is_set() and len(ring) == 0:
                    return
                continue
            with received_lock:
                received.append(value)

    threads = [threading.Thread(target=producer)] + [
        threading.Thread(target=consumer) for _ in range(3)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert sorted(received) == list(range(total))
    assert len(ring) == 0
    assert ring.enqueue_with_size("end") == 0
    assert ring.dequeue() == "end"