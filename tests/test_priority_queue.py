from mazerace.domain.priority_queue import FrontierQueue


def test_lowest_priority_first():
    queue = FrontierQueue()
    queue.put("b", 5)
    queue.put("a", 1)
    queue.put("c", 3)
    assert [queue.get()[0] for _ in range(3)] == ["a", "c", "b"]


def test_equal_priorities_pop_in_insertion_order():
    queue = FrontierQueue()
    for name in ("first", "second", "third"):
        queue.put(name, 4)
    assert queue.get() == ("first", 4)
    assert queue.get() == ("second", 4)
    assert queue.get() == ("third", 4)


def test_duplicates_are_kept():
    queue = FrontierQueue()
    queue.put((1, 1), 6)
    queue.put((1, 1), 4)
    assert len(queue) == 2
    assert queue.get() == ((1, 1), 4)
    assert queue.get() == ((1, 1), 6)


def test_empty_queue():
    queue = FrontierQueue()
    assert queue.is_empty()
    assert queue.get() is None
    assert queue.peek() is None
    queue.put("x", 0)
    assert queue.peek() == ("x", 0)
    queue.clear()
    assert queue.is_empty()
