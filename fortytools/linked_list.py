"""Singly linked list of arbitrary data."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from functools import cmp_to_key
from typing import Any

Compare = Callable[[Any, Any], int]


class _Cell:
    __slots__ = ("data", "next")

    def __init__(self, data: Any, next_cell: _Cell | None = None) -> None:
        self.data = data
        self.next = next_cell


class LinkedList:
    """A singly linked list; comparison functions return negative, zero or positive."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._head: _Cell | None = None
        for item in items:
            self.push_back(item)

    def _cells(self) -> Iterator[_Cell]:
        cell = self._head
        while cell is not None:
            yield cell
            cell = cell.next

    def _tail(self) -> _Cell | None:
        tail = None
        for tail in self._cells():
            pass
        return tail

    def __iter__(self) -> Iterator[Any]:
        return (cell.data for cell in self._cells())

    def __len__(self) -> int:
        return sum(1 for _ in self._cells())

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def push_back(self, data: Any) -> None:
        """Append ``data`` at the end."""
        tail = self._tail()
        if tail is None:
            self._head = _Cell(data)
        else:
            tail.next = _Cell(data)

    def push_front(self, data: Any) -> None:
        """Put ``data`` at the front."""
        self._head = _Cell(data, self._head)

    def last(self) -> Any:
        """Return the last element; raises ``IndexError`` on an empty list."""
        tail = self._tail()
        if tail is None:
            raise IndexError("last element of an empty list")
        return tail.data

    def at(self, nbr: int) -> Any:
        """Return the element at 1-based position ``nbr``, or ``None`` if out of range."""
        if nbr <= 0:
            return None
        for position, data in enumerate(self, start=1):
            if position == nbr:
                return data
        return None

    def clear(self) -> None:
        """Remove every element."""
        self._head = None

    def reverse(self) -> None:
        """Reverse the list by relinking its cells."""
        previous = None
        cell = self._head
        while cell is not None:
            following = cell.next
            cell.next = previous
            previous = cell
            cell = following
        self._head = previous

    def reverse_data(self) -> None:
        """Reverse the list by swapping data between cells, keeping the links."""
        cells = list(self._cells())
        values = [cell.data for cell in reversed(cells)]
        for cell, value in zip(cells, values):
            cell.data = value

    def foreach(self, func: Callable[[Any], object]) -> None:
        """Call ``func`` on every element in order."""
        for data in self:
            func(data)

    def foreach_if(self, func: Callable[[Any], object], ref: Any, cmp: Compare) -> None:
        """Call ``func`` on every element for which ``cmp(element, ref)`` is zero."""
        for data in self:
            if cmp(data, ref) == 0:
                func(data)

    def find(self, ref: Any, cmp: Compare) -> Any:
        """Return the first element for which ``cmp(element, ref)`` is zero, or ``None``."""
        return next((data for data in self if cmp(data, ref) == 0), None)

    def remove_if(self, ref: Any, cmp: Compare) -> None:
        """Remove every element for which ``cmp(element, ref)`` is zero."""
        while self._head is not None and cmp(self._head.data, ref) == 0:
            self._head = self._head.next
        cell = self._head
        while cell is not None and cell.next is not None:
            if cmp(cell.next.data, ref) == 0:
                cell.next = cell.next.next
            else:
                cell = cell.next

    def merge(self, other: Iterable[Any]) -> None:
        """Append every element of ``other`` at the end."""
        tail = self._tail()
        for data in other:
            new = _Cell(data)
            if tail is None:
                self._head = new
            else:
                tail.next = new
            tail = new

    def sort(self, cmp: Compare) -> None:
        """Sort the elements in place, keeping equal elements in their order."""
        ordered = sorted(self, key=cmp_to_key(cmp))
        for cell, value in zip(self._cells(), ordered):
            cell.data = value

    def sorted_insert(self, data: Any, cmp: Compare) -> None:
        """Insert ``data`` into a sorted list after every element not greater than it."""
        if self._head is None or cmp(self._head.data, data) > 0:
            self._head = _Cell(data, self._head)
            return
        cell = self._head
        while cell.next is not None and cmp(cell.next.data, data) <= 0:
            cell = cell.next
        cell.next = _Cell(data, cell.next)

    def sorted_merge(self, other: Iterable[Any], cmp: Compare) -> None:
        """Append ``other`` and sort the result."""
        self.merge(other)
        self.sort(cmp)


def from_params(args: Iterable[Any]) -> LinkedList:
    """Build a list by pushing each argument to the front, so the last comes first."""
    result = LinkedList()
    for arg in args:
        result.push_front(arg)
    return result