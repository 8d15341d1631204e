from .errors import EmptyHeapError, HeapError, HeapFullError, HeapIndexError, ScratchAllocationError
from .max_heap import MaxHeap, build_max_heap, heapify_down, is_max_heap, max_heap_insert, peek_max, pop_max
from .Record import Record, swap_records
from .sorting_algorithms.impl.heap_sort import heap_sort
from .sorting_algorithms.impl.insertion_sort import insertion_sort
from .sorting_algorithms.impl.merge_sort import merge_sort
