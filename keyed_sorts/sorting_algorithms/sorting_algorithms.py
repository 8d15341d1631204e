from importlib import import_module
from pathlib import Path

from .SortingAlgorithm import SortingAlgorithm

sorting_algorithms: list[SortingAlgorithm] = []
for file in sorted((Path(__file__).parent / "impl").glob("*.py")):
    if file.stem.startswith("_"):
        continue
    module = import_module(f".{file.stem}", package="keyed_sorts.sorting_algorithms.impl")
    sorting_algorithms.append(module.algorithm)


def get_sorting_algorithm(name: str) -> SortingAlgorithm:
    for algorithm in sorting_algorithms:
        if algorithm.name == name:
            return algorithm
    raise KeyError(f"Unknown sorting algorithm: `{name}`")
