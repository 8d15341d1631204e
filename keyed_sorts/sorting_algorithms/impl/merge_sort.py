from collections.abc import MutableSequence
from typing import Optional

from ...errors import ScratchAllocationError
from ...Record import Record
from ..SortingAlgorithm import SortingAlgorithm


def merge_sort(arr: MutableSequence[Record], n: Optional[int] = None) -> None:
    """Bottom-up merge sort using a single scratch buffer of `n` slots.

    Runs of length `span` are merged pairwise while `span` doubles. A trailing
    run without a right neighbour is left for a later pass.
    """

    def merge(l: int, left_len: int, right_len: int) -> None:
        i, end1 = l, l + left_len
        j, end2 = end1, end1 + right_len
        k = 0
        while i < end1 and j < end2:
            if arr[j].key < arr[i].key:
                scratch[k] = arr[j]
                j += 1
            else:
                scratch[k] = arr[i]
                i += 1
            k += 1
        while i < end1:
            scratch[k] = arr[i]
            i += 1
            k += 1
        while j < end2:
            scratch[k] = arr[j]
            j += 1
            k += 1
        arr[l:end2] = scratch[:k]

    if n is None:
        n = len(arr)
    if n <= 1:
        return
    try:
        scratch: list[Optional[Record]] = [None] * n
    except MemoryError as e:
        raise ScratchAllocationError(n) from e

    span = 1
    while span < n:
        for index in range(0, n - span, 2 * span):
            merge(index, span, min(span, n - index - span))
        span *= 2


algorithm = SortingAlgorithm("merge sort", merge_sort, 8, stable=True)
