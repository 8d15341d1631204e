class HeapError(Exception):
    pass


class EmptyHeapError(HeapError):
    def __init__(self, op: str) -> None:
        super().__init__(f"{op} on an empty heap")


class HeapFullError(HeapError):
    def __init__(self, capacity: int, heap_size: int) -> None:
        super().__init__(f"No spare slot to insert into: capacity={capacity}, heap_size={heap_size}")


class HeapIndexError(HeapError, IndexError):
    def __init__(self, i: int, heap_size: int) -> None:
        super().__init__(f"Heap index {i} out of range for heap_size={heap_size}")


class ScratchAllocationError(MemoryError):
    def __init__(self, n: int) -> None:
        super().__init__(f"Cannot allocate a scratch buffer of {n} records")


class InvalidSortingAlgorithmError(Exception):
    def __init__(self, name: str) -> None:
        super().__init__(f"Invalid sorting algorithm: `{name}` produced an invalid output")
