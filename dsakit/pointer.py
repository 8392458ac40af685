"""Reference-counted and single-owner value holders."""

from __future__ import annotations

from typing import Generic, TypeVar

T = TypeVar("T")


class _Control(Generic[T]):
    __slots__ = ("value", "count")

    def __init__(self, value: T) -> None:
        self.value = value
        self.count = 1


class SharedPointer(Generic[T]):
    """A handle to a value shared by several handles, with a count of them."""

    def __init__(self, value: T | None = None) -> None:
        self._control: _Control[T] | None = None if value is None else _Control(value)

    def copy(self) -> SharedPointer[T]:
        """Return another handle to the same value, raising the count by one."""
        other: SharedPointer[T] = SharedPointer()
        if self._control is not None:
            self._control.count += 1
            other._control = self._control
        return other

    def release(self) -> None:
        """Detach this handle; the value is dropped when the last handle lets go."""
        control, self._control = self._control, None
        if control is not None:
            control.count -= 1
            if control.count <= 0:
                control.value = None

    def get(self) -> T | None:
        """Return the held value, or None for an empty handle."""
        return None if self._control is None else self._control.value

    def use_count(self) -> int:
        """Return how many handles share the value; 0 for an empty handle."""
        return 0 if self._control is None else self._control.count

    def __enter__(self) -> SharedPointer[T]:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.release()


class UniquePointer(Generic[T]):
    """A handle that is the sole owner of its value; ownership moves with take()."""

    def __init__(self, value: T | None = None) -> None:
        self._value = value

    def take(self) -> UniquePointer[T]:
        """Move the value into a new handle and leave this one empty."""
        moved: UniquePointer[T] = UniquePointer(self._value)
        self._value = None
        return moved

    def get(self) -> T | None:
        """Return the held value, or None for an empty handle."""
        return self._value

    def __bool__(self) -> bool:
        return self._value is not None