import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.linked import LinkedList, LinkedQueue, LinkedStack
from algokit.stacks_queues import EmptyError


def test_new_list_with_one_value():
    linked = LinkedList([1])
    assert list(linked) == [1]
    assert len(linked) == 1


def test_insert_beginning_prepends():
    linked = LinkedList()
    linked.insert_beginning(20)
    linked.insert_beginning(10)
    assert list(linked) == [10, 20]


def test_insert_end_appends():
    linked = LinkedList()
    linked.insert_end(10)
    linked.insert_end(20)
    assert list(linked) == [10, 20]


def test_delete_head_returns_first_value():
    linked = LinkedList([100])
    assert linked.delete_head() == 100
    assert len(linked) == 0
    assert list(linked) == []


def test_delete_head_empty_raises():
    with pytest.raises(EmptyError):
        LinkedList().delete_head()


def test_insert_end_after_emptying():
    linked = LinkedList([1])
    linked.delete_head()
    linked.insert_end(2)
    linked.insert_beginning(0)
    assert list(linked) == [0, 2]


@given(st.lists(st.integers()))
def test_list_round_trip(values):
    linked = LinkedList(values)
    assert list(linked) == values
    assert len(linked) == len(values)


@given(st.lists(st.integers()))
def test_insert_beginning_reverses(values):
    linked = LinkedList()
    for value in values:
        linked.insert_beginning(value)
    assert list(linked) == values[::-1]


def test_stack_top_is_last_pushed():
    stack = LinkedStack()
    stack.push(10)
    stack.push(20)
    assert stack.peek() == 20
    assert stack.pop() == 20
    assert stack.pop() == 10
    assert len(stack) == 0


def test_stack_empty_raises():
    stack = LinkedStack()
    with pytest.raises(EmptyError):
        stack.pop()
    with pytest.raises(EmptyError):
        stack.peek()


def test_queue_front_and_rear():
    queue = LinkedQueue()
    queue.enqueue(50)
    queue.enqueue(60)
    assert queue.front() == 50
    assert queue.rear() == 60
    assert len(queue) == 2


def test_queue_empty_raises():
    queue = LinkedQueue()
    with pytest.raises(EmptyError):
        queue.dequeue()
    with pytest.raises(EmptyError):
        queue.front()
    with pytest.raises(EmptyError):
        queue.rear()


@given(st.lists(st.integers()))
def test_queue_preserves_order(values):
    queue = LinkedQueue()
    for value in values:
        queue.enqueue(value)
    assert [queue.dequeue() for _ in range(len(values))] == values
    assert len(queue) == 0