from collections.abc import MutableSequence
from typing import Optional

from ...Record import Record
from ..SortingAlgorithm import SortingAlgorithm


def insertion_sort(arr: MutableSequence[Record], n: Optional[int] = None) -> None:
    if n is None:
        n = len(arr)
    # arr[:i] is sorted; only strictly greater keys shift, so equal keys keep their order
    for i in range(1, n):
        target = arr[i]
        j = i
        while j > 0 and arr[j - 1].key > target.key:
            arr[j] = arr[j - 1]
            j -= 1
        arr[j] = target


algorithm = SortingAlgorithm("insertion sort", insertion_sort, 8, stable=True)
