"""
Indexed binary min-heap.

IndexedPriorityQueue keeps its elements in a dense list laid out as a binary
heap, ordered by a comparator supplied at construction, and maintains a map
from each element to its current list index. The map gives constant-time
membership tests and lets any element, not only the root, be removed in
logarithmic time.

The queue holds a set of elements: pushing an element equal to one already
queued is refused.

Example:
    >>> queue = IndexedPriorityQueue(natural_order)
    >>> for value in (5, 1, 3):
    ...     _ = queue.push(value)
    >>> queue.pop()
    1
    >>> queue.remove(5)
    True
    >>> list(queue)
    [3]
"""

from collections.abc import Hashable
from typing import Any, Callable, Dict, Iterator, List

from .exceptions import EmptyQueueError, QueueError
from .types import Comparator


def natural_order(first: Any, second: Any) -> int:
    """Compare two values with their own ordering operators."""
    return (first > second) - (first < second)


def comparing[E](key: Callable[[E], Any]) -> Comparator[E]:
    """
    Build a comparator that orders elements by ``key(element)``.

    Example:
        >>> by_length = comparing(len)
        >>> by_length("ab", "abc")
        -1
    """

    def compare(first: E, second: E) -> int:
        return natural_order(key(first), key(second))

    return compare


class IndexedPriorityQueue[E: Hashable]:
    """
    Priority queue with membership index and arbitrary removal.

    Attributes:
        _heap (List[E]): Elements in heap order, minimum at index 0
        _positions (Dict[E, int]): Current index of every queued element
        _comparator (Comparator[E]): Ordering of the elements
    """

    def __init__(self, comparator: Comparator[E]):
        if not callable(comparator):
            raise TypeError("comparator must be callable")
        self._heap: List[E] = []
        self._positions: Dict[E, int] = {}
        self._comparator = comparator

    def __len__(self) -> int:
        return len(self._heap)

    def __contains__(self, element: object) -> bool:
        return element in self._positions

    def __iter__(self) -> Iterator[E]:
        """Iterate over a snapshot of the elements in heap order."""
        return iter(list(self._heap))

    def __repr__(self) -> str:
        return f"IndexedPriorityQueue(size={len(self._heap)})"

    def empty(self) -> bool:
        """Return True if the queue is empty."""
        return not self._heap

    def contains(self, element: E) -> bool:
        """Return True if an equal element is queued."""
        return element in self._positions

    def push(self, element: E) -> bool:
        """
        Add an element.

        Returns:
            bool: False if an equal element is already queued
        """
        if element in self._positions:
            return False
        self._heap.append(element)
        index = len(self._heap) - 1
        self._positions[element] = index
        self._fix(index)
        return True

    def top(self) -> E:
        """
        Return the minimum element without removing it.

        Raises:
            EmptyQueueError: If the queue is empty
        """
        if not self._heap:
            raise EmptyQueueError("Queue is empty.")
        return self._heap[0]

    def pop(self) -> E:
        """
        Remove and return the minimum element.

        Raises:
            EmptyQueueError: If the queue is empty
        """
        if not self._heap:
            raise EmptyQueueError("Queue is empty.")
        last = len(self._heap) - 1
        self._swap(0, last)
        minimum = self._heap.pop()
        del self._positions[minimum]
        if self._heap:
            self._fix(0)
        return minimum

    def remove(self, element: E) -> bool:
        """
        Remove a specific element.

        The last element takes the vacated slot and is moved up or down until
        the heap property holds again.

        Returns:
            bool: False if no equal element is queued
        """
        index = self._positions.get(element)
        if index is None:
            return False
        last = len(self._heap) - 1
        if index != last:
            self._swap(index, last)
            removed = self._heap.pop()
            del self._positions[removed]
            self._fix(index)
        else:
            removed = self._heap.pop()
            del self._positions[removed]
        return True

    def add_or_update(self, element: E) -> bool:
        """
        Push an element, or replace the queued element equal to it.

        Replacing lets the caller change the priority of a queued element,
        e.g. an edge whose label changed, without a separate remove and push.

        Returns:
            bool: True if the element was pushed or replaced
        """
        index = self._positions.get(element)
        if index is None:
            return self.push(element)
        current = self._heap[index]
        if current is element:
            return False
        # Equal elements hash alike, so the index entry can be rebound in place
        del self._positions[current]
        self._heap[index] = element
        self._positions[element] = index
        self._fix(index)
        return True

    def clear(self) -> None:
        """Remove every element."""
        self._heap.clear()
        self._positions.clear()

    def validate(self) -> None:
        """
        Check the heap property and the consistency of the position index.

        Raises:
            QueueError: If either invariant is broken
        """
        size = len(self._heap)
        if len(self._positions) != size:
            raise QueueError(f"Index holds {len(self._positions)} entries for {size} elements")
        for index, element in enumerate(self._heap):
            if self._positions.get(element) != index:
                raise QueueError(f"Element {element!r} indexed at wrong position")
            for child in (2 * index + 1, 2 * index + 2):
                if child < size and self._compare(element, self._heap[child]) > 0:
                    raise QueueError(f"Heap property violated between {index} and {child}")

    def _fix(self, index: int) -> None:
        """Restore the heap property around ``index``, first upward then downward."""
        index = self._sift_up(index)
        self._sift_down(index)

    def _sift_up(self, index: int) -> int:
        while index > 0:
            parent = (index - 1) // 2
            if self._compare(self._heap[index], self._heap[parent]) >= 0:
                break
            self._swap(index, parent)
            index = parent
        return index

    def _sift_down(self, index: int) -> int:
        size = len(self._heap)
        while True:
            left = 2 * index + 1
            right = left + 1
            smallest = index
            if left < size and self._compare(self._heap[left], self._heap[smallest]) < 0:
                smallest = left
            if right < size and self._compare(self._heap[right], self._heap[smallest]) < 0:
                smallest = right
            if smallest == index:
                return index
            self._swap(index, smallest)
            index = smallest

    def _swap(self, i: int, j: int) -> None:
        """Swap two slots and update both index entries."""
        heap = self._heap
        heap[i], heap[j] = heap[j], heap[i]
        self._positions[heap[i]] = i
        self._positions[heap[j]] = j

    def _compare(self, first: E, second: E) -> int:
        return self._comparator(first, second)
