from decimal import Decimal
from itertools import product
from math import lgamma, log, nan
from multiprocessing import Pool
from random import Random
from time import thread_time
from typing import Optional

import numpy as np
import pandas as pd
from tqdm import tqdm

from .Config import *
from .errors import InvalidSortingAlgorithmError
from .Record import Record
from .sorting_algorithms.SortingAlgorithm import SortingAlgorithm, keyed_permutation
from .sorting_algorithms.sorting_algorithms import sorting_algorithms

COLUMNS = ["name", "N", "input", "lower bound", "best", "worst", "avg", "ratio"]


def to_displayable_int(x: int) -> str:
    return str(x) if x < 1e9 else f"{Decimal(x):.2e}"


def log2_factorial(N: int) -> float:
    return lgamma(N + 1) / log(2)


def count_key(mycmp):
    "Like functools.cmp_to_key, but exposes the wrapped value as `val`"

    class K:
        __slots__ = ["val"]

        def __init__(self, val) -> None:
            self.val = val

        def __lt__(self, other: "K") -> bool:
            return mycmp(self.val, other.val) < 0

        def __gt__(self, other: "K") -> bool:
            return mycmp(self.val, other.val) > 0

        def __le__(self, other: "K") -> bool:
            return mycmp(self.val, other.val) <= 0

        def __ge__(self, other: "K") -> bool:
            return mycmp(self.val, other.val) >= 0

        def __eq__(self, other: "K") -> bool:
            return mycmp(self.val, other.val) == 0

        __hash__ = None

    return K


def get_operation_cnts(sorting_algorithm: SortingAlgorithm, N: int) -> np.ndarray:
    "Number of key comparisons made on every enumerated (or sampled) input of size N."

    def cmp(x: int, y: int) -> int:
        nonlocal operation_cnt
        operation_cnt += 1
        return x - y

    key = count_key(cmp)

    do_sample = N > sorting_algorithm.max_N
    if do_sample:
        start_time = thread_time()
    operation_cnts: list[int] = []
    r = Random(SAMPLE_SEED)
    for val_array in sorting_algorithm.sampler(N, r) if do_sample else sorting_algorithm.generator(N):
        before = keyed_permutation(val_array)
        arr = [Record(key(x.key), x.payload) for x in before]
        operation_cnt = 0
        sorting_algorithm.func(arr, N)
        operation_cnts.append(operation_cnt)
        if not sorting_algorithm.validator(sorting_algorithm, before, [Record(x.key.val, x.payload) for x in arr]):
            raise InvalidSortingAlgorithmError(sorting_algorithm.name)
        if do_sample and int((thread_time() - start_time) * 1000) > MAX_SAMPLE_TIME_MS:
            break
    return np.array(operation_cnts, dtype=np.int64)


def get_avg_operation_cnt(sorting_algorithm: SortingAlgorithm, N: int) -> tuple[int, int, float]:
    data = get_operation_cnts(sorting_algorithm, N)
    return int(data.min()), int(data.max()), float(data.mean())


def _work(args: tuple[int, int]) -> tuple:
    sorting_algorithm_idx, N = args
    sorting_algorithm = sorting_algorithms[sorting_algorithm_idx]
    best, worst, avg = get_avg_operation_cnt(sorting_algorithm, N)
    lower_bound = log2_factorial(N)
    ratio = nan if lower_bound == 0 else avg / lower_bound
    return sorting_algorithm.name, N, to_displayable_int(sorting_algorithm.input_total(N)), lower_bound, best, worst, avg, ratio


def generate_statistics(Ns: Optional[list[int]] = None, processes: Optional[int] = None, progress: bool = True) -> pd.DataFrame:
    """Comparison counts of every registered algorithm against the log2(N!) lower bound.

    Each (algorithm, N) pair is evaluated in a worker process. Inputs up to the
    algorithm's `max_N` are enumerated exhaustively, larger ones are sampled for
    at most `MAX_SAMPLE_TIME_MS`.
    """
    if Ns is None:
        Ns = STATISTICS_NS
    tasks = list(product(range(len(sorting_algorithms)), Ns))
    print(f"init: {len(sorting_algorithms)} sorting algorithms, {len(Ns)} sizes")
    rows = []
    with Pool(processes) as pool:
        for result in tqdm(pool.imap_unordered(_work, tasks), total=len(tasks), disable=not progress):
            rows.append(result)
    print(f"fin:  {len(rows)} results")
    df = pd.DataFrame(rows, columns=COLUMNS)
    return df.sort_values(["name", "N"]).reset_index(drop=True)
