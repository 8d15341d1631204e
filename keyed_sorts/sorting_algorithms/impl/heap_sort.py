from collections.abc import MutableSequence
from typing import Optional

from ...max_heap import build_max_heap, heapify_down
from ...Record import Record, swap_records
from ..SortingAlgorithm import SortingAlgorithm


def heap_sort(arr: MutableSequence[Record], n: Optional[int] = None) -> None:
    m = build_max_heap(arr, n)
    # arr[m:] holds the largest keys in their final places
    while m > 1:
        m -= 1
        swap_records(arr, 0, m)
        heapify_down(arr, m, 0)


algorithm = SortingAlgorithm("heap sort", heap_sort, 8)
