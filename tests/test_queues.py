import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.queues import ArrayQueue, LinkedQueue, QueueEmptyError, QueueFullError


def test_array_queue_demo():
    queue = ArrayQueue(1000)
    for value in (10, 20, 30, 40):
        queue.enqueue(value)
    assert queue.dequeue() == 10
    assert queue.front() == 20
    assert queue.rear() == 40


def test_linked_queue_demo():
    queue = LinkedQueue()
    queue.enqueue(10)
    queue.enqueue(20)
    queue.dequeue()
    queue.dequeue()
    queue.enqueue(30)
    queue.enqueue(40)
    queue.enqueue(50)
    queue.dequeue()
    assert queue.front() == 40
    assert queue.rear() == 50


def test_new_queue_is_empty():
    for queue in (ArrayQueue(1000), LinkedQueue()):
        assert queue.is_empty() is True
        assert len(queue) == 0


@pytest.mark.parametrize(
    "make_queue",
    [lambda: ArrayQueue(1000), LinkedQueue],
    ids=["array", "linked"],
)
@pytest.mark.parametrize(
    "operation",
    [
        lambda queue: queue.dequeue(),
        lambda queue: queue.front(),
        lambda queue: queue.rear(),
    ],
    ids=["dequeue", "front", "rear"],
)
def test_empty_queue_raises(make_queue, operation):
    queue = make_queue()
    with pytest.raises(QueueEmptyError):
        operation(queue)
    assert len(queue) == 0
    assert queue.is_empty() is True
    queue.enqueue(5)
    assert queue.front() == 5
    assert queue.rear() == 5
    assert len(queue) == 1


def test_empty_error_is_index_error():
    for queue in (ArrayQueue(1000), LinkedQueue()):
        with pytest.raises(IndexError):
            queue.dequeue()


def test_single_element_is_front_and_rear():
    for queue in (ArrayQueue(1000), LinkedQueue()):
        queue.enqueue(7)
        assert queue.front() == queue.rear() == 7
        assert queue.dequeue() == 7
        assert queue.is_empty() is True
        with pytest.raises(QueueEmptyError):
            queue.rear()


def test_reuse_after_emptying():
    for queue in (ArrayQueue(1000), LinkedQueue()):
        queue.enqueue(1)
        queue.dequeue()
        queue.enqueue(2)
        queue.enqueue(3)
        assert queue.front() == 2
        assert queue.rear() == 3


@given(st.lists(st.integers()))
def test_array_queue_is_fifo(values):
    queue = ArrayQueue(len(values))
    for value in values:
        queue.enqueue(value)
    assert len(queue) == len(values)
    assert queue.is_full()
    assert [queue.dequeue() for _ in values] == values
    assert queue.is_empty()


@given(st.lists(st.integers()))
def test_linked_queue_is_fifo(values):
    queue = LinkedQueue()
    for value in values:
        queue.enqueue(value)
    assert len(queue) == len(values)
    assert [queue.dequeue() for _ in values] == values
    assert queue.is_empty()


@given(st.lists(st.integers(), min_size=1, max_size=20), st.integers(min_value=0, max_value=50))
def test_array_queue_wraps_around(values, rounds):
    capacity = len(values)
    queue = ArrayQueue(capacity)
    for value in values:
        queue.enqueue(value)
    expected = list(values)
    for step in range(rounds):
        assert queue.dequeue() == expected.pop(0)
        queue.enqueue(step)
        expected.append(step)
        assert queue.front() == expected[0]
        assert queue.rear() == expected[-1]
    assert [queue.dequeue() for _ in range(capacity)] == expected


def test_array_queue_full_raises():
    queue = ArrayQueue(3)
    for value in (1, 2, 3):
        queue.enqueue(value)
    assert queue.is_full() is True
    with pytest.raises(QueueFullError):
        queue.enqueue(4)
    assert queue.rear() == 3
    assert len(queue) == queue.capacity


def test_array_queue_zero_capacity():
    queue = ArrayQueue(0)
    assert queue.is_full() is True
    with pytest.raises(QueueFullError):
        queue.enqueue(1)


def test_array_queue_negative_capacity():
    with pytest.raises(ValueError):
        ArrayQueue(-2)