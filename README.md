# dsakit

A small collection of classic data structures, sorting algorithms and
concurrency patterns, written in plain Python with no third-party
dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `dsakit.binarytree` | `Tree` and `TreeNode`: a binary search tree that ignores duplicate keys, with `insert`, `search` (also `in`), `delete`, `in_order`, `pre_order`, `post_order`, root-to-leaf `paths`, `min` and `max` (both raise `ValueError` on an empty tree); `build_tree` builds a tree from a level-order list with `None` for missing children |
| `dsakit.heap` | `MaxHeap` with a fixed capacity: `insert` (raises `HeapFullError` when full), `build_heap`, and `heap_sort`, which returns the values ascending and empties the heap |
| `dsakit.linkedqueue` | `LinkedQueue`: a doubly linked queue; `push` adds at the front, `pop` removes from the back, plus `add_to_end` and `remove_from_front`; removing from an empty queue raises `IndexError` |
| `dsakit.collections_` | `LinkedList` (append with `push`, `delete` raises `ValueError` for a missing value), `IndexedList` (`insert`, `get`, `remove`, rejecting negative and out-of-range indices with `IndexError`) and `Stack` (`push`, `pop`) |
| `dsakit.hashtable` | `HashTable`: a chained hash table with a fixed number of buckets, chosen by the first byte of the key's text; `insert` raises `KeyError` for an existing key, `retrieve` raises `KeyError` for a missing one, `delete` returns whether the key was present; a `Student` record |
| `dsakit.stringmap` | `StringHashMap`: ten buckets of string keys placed by `generate_hash` (sum of code points modulo the key's length); `insert`, `delete`, `search` |
| `dsakit.graph` | `Graph`, `Vertex` and `Edge`: weighted or unweighted, directed or undirected; `add_vertex`, `add_edge`, `remove_edge`, `remove_vertex`, and `format` for a text listing |
| `dsakit.dijkstra` | `shortest_path` between two vertices of a `Graph` |
| `dsakit.sorting` | `merge_sort`, `merge_sort_concurrent`, `quick_sort`, `radix_sort` (non-negative integers only), `random_array` |
| `dsakit.iteration` | `Collection`, `CollectionIterator` (with `has_next` as well as the iterator protocol) and a `Student` record |
| `dsakit.workshop` | `Employee` and `remove_duplicates`, which keeps the first employee for each id |
| `dsakit.concurrency` | `pipeline`, `double_stage`, `increment_stage`, `fan_in_fan_out`, `run_worker_pool`, `download_files` (returns a `DownloadReport` of completed ids and peak concurrency), `barrier` (returns the ordered event log) |
| `dsakit.workerpool` | `DynamicWorkerPool` and `Task`: a thread pool that adds a worker when queued tasks outnumber workers, up to a maximum; usable as a context manager, with a `completed` list of finished task ids |

Progress messages from the concurrency modules go to the standard `logging`
module rather than being printed.

## Examples

A binary search tree:

```python
from dsakit.binarytree import Tree

tree = Tree([35, 165, 47, 243, 65, 146, 10, 6, 40, 60, 15])

tree.search(10)      # True
tree.min(), tree.max()   # (6, 243)
tree.delete(165)
tree.in_order()
```

Shortest paths in a weighted, directed graph:

```python
from dsakit.graph import Graph
from dsakit.dijkstra import shortest_path

g = Graph(True, True)
a = g.add_vertex("A")
b = g.add_vertex("B")
c = g.add_vertex("C")
g.add_edge(a, b, 4)
g.add_edge(b, c, 1)
g.add_edge(a, c, 11)

shortest_path(a, c, g)   # ("A --> B --> C", 5)
```

`shortest_path` raises `ValueError` if the end cannot be reached or an edge
has no weight.

Sorting (each function returns a new sorted list):

```python
from dsakit.sorting import quick_sort, merge_sort, radix_sort

quick_sort([50, -8, -96, -63, -73, 95])
merge_sort([5, 3, 9, 1])
radix_sort([6151, 4256, 4485, 3634], 4, 10)
```

A threaded pipeline that doubles each value and then adds one:

```python
from dsakit.concurrency import pipeline

pipeline(range(10))   # [1, 3, 5, ..., 19]
```

## Command line

Installing the package provides the `dsakit` command. It prints a heading and
runs one demonstration, the pipeline by default:

```
dsakit
dsakit quick-sort
dsakit barrier --delay 0.1
```

The demonstrations are `pipeline`, `fan-in-fan-out`, `worker-pool`,
`semaphore`, `barrier`, `dynamic-worker-pool`, `merge-sort`, `quick-sort` and
`radix`. `--delay` scales the simulated work time in seconds (default 1.0).

## What it does not do

The command only demonstrates the concurrency patterns and the sorting
algorithms; the trees, heaps, queues, hash tables and graphs are used from
Python code. Nothing is stored between runs: every structure lives in memory.