from collections.abc import MutableSequence
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

K = TypeVar("K")
P = TypeVar("P")


@dataclass(frozen=True)
class Record(Generic[K, P]):
    "A keyed record. Only `key` takes part in ordering; `payload` is carried along untouched."

    key: K
    payload: Optional[P] = None


def swap_records(arr: MutableSequence[Record], i: int, j: int) -> None:
    arr[i], arr[j] = arr[j], arr[i]
