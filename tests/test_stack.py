import threading

import pytest

from dsakit.stack import EmptyStackError, Stack, ThreadSafeStack


def test_example_sequence():
    s = Stack()
    s.push(1)
    s.push(2)
    assert s.size() == 2
    s.pop()
    assert s.size() == 1
    assert s.top() == 1
    s.pop()
    with pytest.raises(EmptyStackError):
        s.pop()
    s.push(123)
    assert s.top() == 123


def test_pop_returns_values_in_reverse_order():
    s = Stack()
    for value in "abc":
        s.push(value)
    assert [s.pop() for _ in range(3)] == ["c", "b", "a"]
    assert s.is_empty()


def test_len_matches_size():
    s = Stack()
    s.push(5)
    s.push(6)
    assert len(s) == s.size() == 2


def test_new_stack_is_empty():
    s = Stack()
    assert s.is_empty()
    assert len(s) == 0


def test_top_of_empty_stack_raises():
    with pytest.raises(EmptyStackError, match="Stack is empty."):
        Stack().top()


def test_empty_stack_error_is_index_error():
    with pytest.raises(IndexError):
        Stack().pop()


def test_failed_pop_leaves_size_unchanged():
    s = Stack()
    with pytest.raises(EmptyStackError):
        s.pop()
    assert s.size() == 0
    s.push(7)
    assert s.size() == 1


def test_thread_safe_push_pop_top():
    s = ThreadSafeStack()
    assert s.is_empty()
    s.push("x")
    s.push("y")
    assert s.top() == "y"
    assert s.pop() == "y"
    assert s.pop() == "x"
    assert s.is_empty()


def test_thread_safe_empty_errors():
    s = ThreadSafeStack()
    with pytest.raises(EmptyStackError):
        s.pop()
    with pytest.raises(EmptyStackError):
        s.top()


def test_thread_safe_concurrent_pushes_are_all_kept():
    s = ThreadSafeStack()
    per_thread = 500
    thread_count = 8

    def worker(base):
        for offset in range(per_thread):
            s.push(base * per_thread + offset)

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(thread_count)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    popped = []
    while not s.is_empty():
        popped.append(s.pop())
    assert sorted(popped) == list(range(per_thread * thread_count))