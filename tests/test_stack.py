import pytest

from dsakit.stack import BoundedStack, StackEmptyError, StackFullError


def test_overflow_after_capacity():
    stack = BoundedStack(5)
    for value in (10, 20, 30, 40, 50):
        stack.push(value)
    assert stack.is_full()
    with pytest.raises(StackFullError):
        stack.push(60)
    assert len(stack) == 5


def test_pop_order_is_lifo():
    stack = BoundedStack(5)
    for value in (10, 20, 30, 40, 50):
        stack.push(value)
    popped = [stack.pop() for _ in range(5)]
    assert popped == [50, 40, 30, 20, 10]
    with pytest.raises(StackEmptyError):
        stack.pop()


def test_peek_does_not_remove():
    stack = BoundedStack(2)
    stack.push("x")
    assert stack.peek() == "x"
    assert len(stack) == 1


def test_peek_empty_raises():
    with pytest.raises(StackEmptyError):
        BoundedStack().peek()


def test_default_capacity_is_five():
    stack = BoundedStack()
    for value in range(5):
        stack.push(value)
    with pytest.raises(StackFullError):
        stack.push(5)