# tinystl

A small collection of classic data structures and algorithms written in
plain Python, with no third-party dependencies.

## What is inside

| Module                    | Provides                                                              |
|---------------------------|-----------------------------------------------------------------------|
| `tinystl.bitmap`          | `Bitmap`, a fixed-size bit set rounded up to a multiple of 8 bits     |
| `tinystl.circular_buffer` | `CircularBuffer`, a fixed-capacity ring that overwrites its oldest item |
| `tinystl.suffix_array`    | `SuffixArray`, built by prefix doubling, with its rank and height arrays |
| `tinystl.bst`             | `BinarySearchTree`, an unbalanced search tree without duplicates      |
| `tinystl.avl_tree`        | `AVLTree`, a self-balancing search tree without duplicates            |
| `tinystl.graph`           | `DirectedGraph` and `Node`, with adjacency lists and DFS/BFS traversal |
| `tinystl.queues`          | `Queue`, `PriorityQueue` and the max-heap helpers `make_heap`, `push_heap`, `pop_heap`, `sort_heap`, `is_heap` |
| `tinystl.vector`          | `Vector`, a growable array that tracks its capacity                   |
| `tinystl.profiler`        | `Profiler` and `MemoryUnit`, for elapsed time and peak memory of the process |

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Examples

### Search trees

```python
from tinystl.avl_tree import AVLTree

tree = AVLTree([5, 3, 8, 1, 4])
tree.insert(7)
tree.erase(3)

list(tree)          # values in ascending order: [1, 4, 5, 7, 8]
4 in tree           # True
len(tree)           # 5
tree.height()       # number of levels
```

`BinarySearchTree` in `tinystl.bst` offers the same interface, without
rebalancing. Inserting a value that is already stored does nothing, and
erasing a missing value does nothing. `find(value)` raises `KeyError` when
the value is absent; `root()`, `find_min()` and `find_max()` raise
`ValueError` on an empty tree. Both trees provide `preorder()`, `inorder()`,
`postorder()` and `levelorder()`, and the matching `print_*` methods, which
write each value followed by a delimiter (a space by default) to the given
file or to standard output.

### Circular buffer

```python
from tinystl.circular_buffer import CircularBuffer

buf = CircularBuffer.from_iterable(3, ["1", "2", "3"])
str(buf)            # '(1, 2, 3)'
buf.push_back("4")  # full: the oldest item is overwritten
buf.front()         # '2'
buf.pop_front()
len(buf)            # 2
```

`CircularBuffer(capacity, n, value)` starts with `n` copies of `value`
(at most `capacity` of them). Iterating walks the elements from oldest to
newest, while `buf[i]` reads or writes the underlying slot `i` directly.
`front()`, `back()` and `pop_front()` raise `IndexError` on an empty buffer.

### Bitmap

```python
from tinystl.bitmap import Bitmap

bits = Bitmap(10)   # rounded up to 16 bits
len(bits)           # 16
bits.set(3, True)
bits.test(3)        # True
bits.flip(3)
bits.none()         # True
bits.set()          # with no position, sets every bit
bits.to_string()    # '1111111111111111'
```

Positions outside the bitmap raise `IndexError`. `to_string()` lists the
bits lowest position first.

### Queues and heaps

```python
from tinystl.queues import PriorityQueue, Queue, make_heap, sort_heap

pq = PriorityQueue([30, 100, 25, 40])
pq.top()            # 100
pq.pop()
pq.top()            # 40

q = Queue([1, 2])
q.push(3)
q.front(), q.back() # (1, 3)

items = [10, 20, 30, 5, 15]
make_heap(items)    # largest element first
sort_heap(items)    # now ascending
```

Every heap function and `PriorityQueue` take an optional `less(a, b)`
comparison; without one, `<` is used.

### Directed graph

```python
from tinystl.graph import DirectedGraph

g = DirectedGraph()
g.add_node(
    DirectedGraph.make_node(0, 0),
    [DirectedGraph.make_node(1, 11), DirectedGraph.make_node(2, 22)],
)
g.make_edge(1, 2)

visited = []
g.dfs(0, visited.append)
print(g.to_string())
```

Nodes are `(index, value)` pairs. Nodes and edges are listed newest first.
`get_node`, `dfs`, `bfs` and `make_edge` raise `KeyError` for an index that
is not in the graph. `delete_node` removes a node together with every edge
leading to it.

### Vector

```python
from tinystl.vector import Vector

v = Vector.filled(3, 0)
v.push_back(1)
v.capacity()        # 6: grows to old + max(old, needed)
v.insert_range(0, [7, 8])
v.erase_range(1, 3)
list(v)             # [7, 0, 0, 1]
```

### Suffix array

```python
from tinystl.suffix_array import SuffixArray

sa = SuffixArray(b"banana", 256)
sa.suffix_array()   # suffix start positions in sorted order
sa.rank_array()
sa.height_array()   # common prefix length of neighbouring sorted suffixes
```

The sequence may be a string, bytes or a sequence of integers; every symbol
must lie below `max_len`, and `max_len` may not exceed 256 (`ValueError`
otherwise).

### Profiler

```python
from tinystl.profiler import MemoryUnit, Profiler

profiler = Profiler()
profiler.start()
sum(range(1_000_000))
profiler.finish()
profiler.millisecond()
profiler.dump_duration()        # 'total ... milliseconds'
profiler.memory(MemoryUnit.MB)  # peak resident memory
```

## What this package does not do

- It is a library only; it installs no command-line program.
- `Profiler.memory()` relies on the standard `resource` module and raises
  `RuntimeError` on systems without it, such as Windows.
- It has no string, linked-list, deque, hash-set or smart-pointer types of
  its own; Python's built-in types serve those purposes.