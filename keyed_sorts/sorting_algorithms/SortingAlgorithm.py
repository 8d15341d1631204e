from collections import Counter
from collections.abc import Callable, Generator, Iterable, MutableSequence, Sequence
from itertools import permutations
from math import factorial
from random import Random
from typing import NamedTuple, Optional

from ..Config import *
from ..Record import Record


def keyed_permutation(values: Iterable) -> list[Record]:
    "Wrap keys into Records tagged with their original position as payload."
    return [Record(v // DUPLICATE_KEY_DIVISOR, i) for i, v in enumerate(values)]


def _generator(N: int) -> Iterable[Sequence[int]]:
    return permutations(range(N))


def _sampler(N: int, r: Optional[Random] = None) -> Generator[list[int], None, None]:
    if r is None:
        r = Random(SAMPLE_SEED)
    arr = list(range(N))
    while True:
        r.shuffle(arr)
        yield arr


def is_sorted(arr: Sequence[Record]) -> bool:
    return all(arr[i].key <= arr[i + 1].key for i in range(len(arr) - 1))


def is_permutation_of(before: Sequence[Record], after: Sequence[Record]) -> bool:
    return Counter((x.key, x.payload) for x in before) == Counter((x.key, x.payload) for x in after)


def is_stable_order(arr: Sequence[Record]) -> bool:
    "Assumes payloads are the original positions, as produced by `keyed_permutation`."
    return all(arr[i].key < arr[i + 1].key or arr[i].payload < arr[i + 1].payload for i in range(len(arr) - 1))


def validate(algorithm: "SortingAlgorithm", before: Sequence[Record], after: Sequence[Record]) -> bool:
    if not (is_sorted(after) and is_permutation_of(before, after)):
        return False
    return not algorithm.stable or is_stable_order(after)


class SortingAlgorithm(NamedTuple):
    name: str
    func: Callable[[MutableSequence[Record], Optional[int]], None]
    max_N: int
    stable: bool = False
    generator: Callable[[int], Iterable[Sequence[int]]] = _generator
    input_total: Callable[[int], int] = factorial
    sampler: Callable[[int, Optional[Random]], Generator[Sequence[int], None, None]] = _sampler
    validator: Callable[["SortingAlgorithm", Sequence[Record], Sequence[Record]], bool] = validate
