# algokit

Small, readable implementations of classic algorithms and data structures,
written in plain Python with no third-party dependencies.

## Installation

```
pip install algokit
```

To run the test suite, install the test extra and run pytest:

```
pip install "algokit[test]"
pytest
```

## What is inside

| Module                  | Contents |
|-------------------------|----------|
| `algokit.arrays`        | `bubble_sort`, `insert_at`, `delete_at`, `largest`, `linear_search` |
| `algokit.recursion`     | `factorial`, `fibonacci`, `fibonacci_series`, `gcd`, `power`, `sum_of_digits` |
| `algokit.heaps`         | `max_heapify`, `min_heapify`, `build_max_heap`, `build_min_heap`, `heap_sort` |
| `algokit.graphs`        | `format_matrix`, `bfs`, `dfs` over adjacency matrices |
| `algokit.stacks_queues` | `ArrayStack`, `ArrayQueue`, `CircularQueue`, `CapacityError`, `EmptyError` |
| `algokit.linked`        | `LinkedList`, `LinkedStack`, `LinkedQueue` |
| `algokit.trees`         | `Node`, `insert`, `search`, `find_min`, `delete`, `count_nodes`, `inorder`, `preorder`, `postorder` |
| `algokit.cli`           | `main`, the entry point of the `algokit` command |

## Examples

### Sequences

The functions in `algokit.arrays` and the sorting functions never change their
input; they return a new list.

```python
from algokit.arrays import bubble_sort, delete_at, insert_at, largest, linear_search
from algokit.heaps import heap_sort

bubble_sort([64, 34, 25, 12, 22])        # [12, 22, 25, 34, 64]
heap_sort([12, 11, 13, 5, 6, 7])         # [5, 6, 7, 11, 12, 13]
insert_at([1, 2, 4, 5], 2, 3)            # [1, 2, 3, 4, 5]
delete_at([1, 2, 99, 3, 4], 2)           # [1, 2, 3, 4]
largest([10, 50, 20, 80, 30])            # 80
linear_search([10, 20, 30, 40, 50], 30)  # 2
linear_search([10, 20], 99)              # None
```

`insert_at` and `delete_at` raise `IndexError` for a position outside the
list; `largest` raises `ValueError` for an empty input.

### Heaps

`max_heapify` and `min_heapify` sift one element down in place within the
first `size` items of a list. `build_max_heap` and `build_min_heap` return a
new list arranged as a heap:

```python
from algokit.heaps import build_max_heap, build_min_heap

build_max_heap([3, 9, 2, 1, 4, 5])   # [9, 4, 5, 1, 3, 2]
build_min_heap([3, 9, 2, 1, 4, 5])   # [1, 3, 2, 9, 4, 5]
```

### Recursion

```python
from algokit.recursion import factorial, fibonacci, fibonacci_series, gcd, power, sum_of_digits

factorial(5)          # 120
fibonacci(10)         # 55
fibonacci_series(5)   # [0, 1, 1, 2, 3]
gcd(48, 18)           # 6
power(2, 3)           # 8
sum_of_digits(1234)   # 10
```

`power` raises `ValueError` for a negative exponent. `gcd` takes remainders
with truncating division, so the sign of the result follows the inputs, and
`sum_of_digits` of a negative number is the negated digit sum.

### Graphs

Graphs are square adjacency matrices; an edge from `u` to `v` exists where
`graph[u][v] == 1`. Neighbours are visited lowest index first.

```python
from algokit.graphs import bfs, dfs, format_matrix

graph = [
    [0, 1, 1, 0],
    [1, 0, 0, 1],
    [1, 0, 0, 1],
    [0, 1, 1, 0],
]
bfs(graph, 0)   # [0, 1, 2, 3]
dfs(graph, 0)   # [0, 1, 3, 2]
print(format_matrix(graph))
```

Both traversals raise `ValueError` for a matrix that is not square and
`IndexError` for a start vertex outside it.

### Binary search trees

```python
from algokit.trees import count_nodes, delete, inorder, insert, search

root = None
for value in (50, 30, 70):
    root = insert(root, value)

search(root, 30).value   # 30
count_nodes(root)        # 3
root = delete(root, 50)
inorder(root)            # [30, 70]
```

Values not less than a node's value go into its right subtree. `search`
returns the node or `None`; `delete` returns the new root, which is `None`
once the last node is removed.

### Stacks, queues and linked lists

```python
from algokit.linked import LinkedList, LinkedQueue
from algokit.stacks_queues import ArrayStack, CircularQueue

stack = ArrayStack([10, 20, 30])
stack.pop()         # 30
stack.display()     # 'Stack: 20 10'

ring = CircularQueue(capacity=3)
for value in (10, 20, 30):
    ring.enqueue(value)
ring.rear()         # 30

queue = LinkedQueue()
queue.enqueue(50)
queue.enqueue(60)
queue.front(), queue.rear()   # (50, 60)

items = LinkedList([10, 20])
items.insert_beginning(5)
list(items)         # [5, 10, 20]
```

`ArrayStack` and `ArrayQueue` hold five values by default and `CircularQueue`
three; pass `capacity` to change it. An `ArrayQueue` never reuses a slot, so
after `capacity` values have been enqueued it refuses more even if some were
dequeued. Adding to a full container raises `CapacityError`; taking from or
reading an empty one raises `EmptyError`. The linked containers have no
capacity limit.

## Command line

Installing the package provides an `algokit` command with four small
demonstrations:

```
algokit matrix               # print a sample 3x3 adjacency matrix
algokit bubble-sort 5 3 9 1  # sort integers with bubble sort
algokit heap-sort 12 11 13   # sort integers with heap sort
algokit factorial 6          # print 6!
```

Without values, `bubble-sort` sorts `64 34 25 12 22`, `heap-sort` sorts
`12 11 13 5 6 7`, and `factorial` computes `5!`. A subcommand is required.
The command only runs these demonstrations; the rest of the package is used
from Python.