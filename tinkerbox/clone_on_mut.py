"""A value holder that copies a borrowed value on first mutable access."""

from __future__ import annotations

import copy
import functools
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@functools.total_ordering
class CloneOnMut(Generic[T]):
    """Holds a value either borrowed or owned.

    Reading never copies. Asking for mutable access to a borrowed value first
    replaces it with a private copy, so the original is never changed.
    """

    __slots__ = ("_value", "_owned")

    def __init__(self, value: T, owned: bool) -> None:
        self._value = value
        self._owned = owned

    @classmethod
    def borrow(cls, value: T) -> CloneOnMut[T]:
        """Wrap a value that belongs to someone else."""
        return cls(value, owned=False)

    @classmethod
    def own(cls, value: T) -> CloneOnMut[T]:
        """Wrap a value that this holder owns."""
        return cls(value, owned=True)

    def is_borrowed(self) -> bool:
        return not self._owned

    def is_owned(self) -> bool:
        return self._owned

    def _ensure_owned(self) -> None:
        if not self._owned:
            self._value = copy.deepcopy(self._value)
            self._owned = True

    def get(self) -> T:
        """The held value, for reading."""
        return self._value

    def get_mut(self) -> T:
        """The held value, for changing; a borrowed value is copied first."""
        self._ensure_owned()
        return self._value

    def into_owned(self) -> T:
        """An owned value: the held one, or a copy of the borrowed one."""
        self._ensure_owned()
        return self._value

    def clone(self) -> CloneOnMut[T]:
        """A new holder borrowing whatever this one holds."""
        return type(self).borrow(self._value)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, CloneOnMut):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, CloneOnMut):
            return NotImplemented
        return self._value < other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        kind = "own" if self._owned else "borrow"
        return f"{type(self).__name__}.{kind}({self._value!r})"