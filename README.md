# minheap

A binary min-heap of integers, kept in an array. Besides inserting values
and extracting the minimum, it can remove values by value, count how often
a value occurs, and report how many heap objects are currently alive.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

```python
from minheap.heap import BinaryMinHeap, HeapEmptyError

heap = BinaryMinHeap()
heap.insert(5)
heap.insert(4)
heap += 1              # same as heap.insert(1)
heap.insert(6)

str(heap)              # "1 5 4 6" (elements in array order)
heap.get_min()         # 1, heap unchanged
heap.extract_min()     # 1, removed from the heap

heap.insert(4)
heap.count(4)          # 2
heap.remove(4)         # True, removes the first occurrence
heap -= 6              # same as heap.remove(6)
heap.remove_all(4)     # removes every 4

len(heap), 5 in heap   # (1, True)
list(heap)             # [5], elements in array order

other = heap.copy()    # independent copy (copy.copy(heap) does the same)
heap.clear()
heap.is_empty()        # True
bool(heap)             # False

try:
    heap.extract_min()
except HeapEmptyError:
    print("heap is empty")

BinaryMinHeap.instance_count()  # number of heap objects still alive
```

Notes:

- `get_min()` and `extract_min()` raise `HeapEmptyError` (a subclass of
  `IndexError`) on an empty heap.
- `remove(value)` returns `False` and leaves the heap unchanged when the
  value is not present; `heap -= value` ignores that result.
- `str(heap)` lists the elements separated by single spaces, and iteration
  yields them, in the order they are stored in the heap's array rather
  than in sorted order. `repr(heap)` shows that array, e.g.
  `BinaryMinHeap([1, 5, 4, 6])`.
- `instance_count()` counts heap objects that have not yet been garbage
  collected, including copies.

## Demo

A short walk through the operations is available as a command:

```
minheap-demo
```

It builds three heaps, inserts values, extracts and reads the minimum,
removes values, clears two of the heaps and prints the result of each step
together with the number of live heaps. It takes no options besides
`--help`.