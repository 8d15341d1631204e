"""
Binary max-heap embedded in a flat list of Records.

Nodes are laid out in breadth-first order with 0-based indexes:
children of `i` live at `2i + 1` and `2i + 2`, the parent at `(i - 1) // 2`.
Only the prefix `arr[:heap_size]` belongs to the heap; slots past it are spare
room for `max_heap_insert`.
"""
from collections.abc import Iterator, MutableSequence, Sequence
from typing import Generic, Optional

from .errors import EmptyHeapError, HeapFullError, HeapIndexError
from .Record import K, P, Record, swap_records


def heapify_down(arr: MutableSequence[Record], heap_size: int, i: int) -> None:
    if not 0 <= i < heap_size:
        raise HeapIndexError(i, heap_size)
    k = i
    while 2 * k + 1 < heap_size:
        j = 2 * k + 1
        if j + 1 < heap_size and arr[j + 1].key > arr[j].key:
            j += 1
        if arr[j].key > arr[k].key:
            swap_records(arr, k, j)
            k = j
        else:
            break


def build_max_heap(arr: MutableSequence[Record], n: Optional[int] = None) -> int:
    "Turn `arr[:n]` into a max heap in O(n) and return the heap size."
    if n is None:
        n = len(arr)
    # leaves `n // 2 .. n - 1` are already heaps
    for i in range(n // 2 - 1, -1, -1):
        heapify_down(arr, n, i)
    return n


def peek_max(arr: Sequence[Record], heap_size: int) -> Record:
    if heap_size == 0:
        raise EmptyHeapError("peek_max")
    return arr[0]


def pop_max(arr: MutableSequence[Record], heap_size: int) -> tuple[Record, int]:
    """Remove the root and return it together with the reduced heap size.

    The last heap entry is moved onto the root and pushed down. The slot it
    came from is left as it was; it now lies outside the heap.
    """
    if heap_size == 0:
        raise EmptyHeapError("pop_max")
    top = arr[0]
    heap_size -= 1
    arr[0] = arr[heap_size]
    if heap_size:
        heapify_down(arr, heap_size, 0)
    return top, heap_size


def max_heap_insert(arr: MutableSequence[Record], capacity: int, heap_size: int, key: K, payload: Optional[P] = None) -> int:
    "Place a new record in the first spare slot, sift it up and return the new heap size."
    if capacity <= heap_size or capacity > len(arr):
        raise HeapFullError(capacity, heap_size)
    i = heap_size
    arr[i] = Record(key, payload)
    while i > 0 and arr[(i - 1) >> 1].key < arr[i].key:
        swap_records(arr, (i - 1) >> 1, i)
        i = (i - 1) >> 1
    return heap_size + 1


def is_max_heap(arr: Sequence[Record], heap_size: Optional[int] = None) -> bool:
    if heap_size is None:
        heap_size = len(arr)
    for i in range(1, heap_size):
        if arr[(i - 1) >> 1].key < arr[i].key:
            return False
    return True


class MaxHeap(Generic[K, P]):
    "Fixed-capacity priority queue over a caller-visible buffer of Records."

    def __init__(self, capacity: int) -> None:
        self.buffer: list[Optional[Record[K, P]]] = [None] * capacity
        self.heap_size = 0

    @classmethod
    def from_records(cls, records: list[Record[K, P]], capacity: Optional[int] = None) -> "MaxHeap[K, P]":
        """Heapify `records` in place and wrap them.

        If `capacity` exceeds `len(records)` the list is extended with empty
        slots so later pushes have room.
        """
        n = len(records)
        if capacity is not None and capacity < n:
            raise HeapFullError(capacity, n)
        heap = cls(0)
        heap.heap_size = build_max_heap(records, n)
        if capacity is not None:
            records.extend([None] * (capacity - n))
        heap.buffer = records
        return heap

    @property
    def capacity(self) -> int:
        return len(self.buffer)

    def __len__(self) -> int:
        return self.heap_size

    def __bool__(self) -> bool:
        return self.heap_size > 0

    def push(self, key: K, payload: Optional[P] = None) -> None:
        self.heap_size = max_heap_insert(self.buffer, self.capacity, self.heap_size, key, payload)

    def peek(self) -> Record[K, P]:
        return peek_max(self.buffer, self.heap_size)

    def pop(self) -> Record[K, P]:
        top, self.heap_size = pop_max(self.buffer, self.heap_size)
        self.buffer[self.heap_size] = None
        return top

    def drain(self) -> Iterator[Record[K, P]]:
        while self.heap_size:
            yield self.pop()

    def is_valid(self) -> bool:
        return is_max_heap(self.buffer, self.heap_size)

    __slots__ = ["buffer", "heap_size"]
