# dsakit

A small library of classic data structures and algorithms on integers,
written in plain Python with no third-party dependencies.

## Installation

```
pip install dsakit
```

To run the test suite from a checkout:

```
pip install ".[test]"
pytest
```

## What is inside

| Module              | Contents |
|---------------------|----------|
| `dsakit.arrays`     | `delete_element`, `frequencies`, `is_sorted`, `insert`, `largest`, `leaders`, `left_rotate`, `flip_groups`, `move_zeroes_to_end` |
| `dsakit.subarrays`  | `longest_even_odd`, `majority_element`, `max_consecutive_ones`, `max_difference`, `max_subarray_sum`, `max_circular_subarray_sum` |
| `dsakit.numbers`    | `gcd`, `lcm`, `trailing_zeroes_in_factorial` |
| `dsakit.searching`  | `linear_search`, `binary_search`, `first_occurrence`, `last_occurrence` |
| `dsakit.sorting`    | `bubble_sort`, `selection_sort` |
| `dsakit.hashing`    | `ChainedHashTable` |
| `dsakit.stacks`     | `ArrayStack`, `LinkedStack`, `ListStack`, `StackFullError`, `StackEmptyError` |
| `dsakit.queues`     | `ArrayQueue`, `LinkedQueue`, `QueueFullError`, `QueueEmptyError` |
| `dsakit.trees`      | `Node`, `height`, `maximum`, `nodes_at_distance`, `size` |

The array, subarray and sorting functions never modify their input; they
return new lists.

## Examples

### Arrays and subarrays

```python
from dsakit.arrays import frequencies, insert, leaders, left_rotate
from dsakit.subarrays import majority_element, max_subarray_sum

leaders([7, 10, 4, 3, 6, 5, 2])           # [10, 6, 5, 2]
left_rotate([1, 2, 3, 4, 5], 2)           # [3, 4, 5, 1, 2]
frequencies([10, 10, 20, 30, 30, 30])     # [(10, 2), (20, 1), (30, 3)]
insert([1, 2, 3], 5, 9, 2)                # [1, 9, 2, 3]
max_subarray_sum([-3, 8, -2, 4, -5, 6])   # 11
majority_element([8, 3, 8])               # 0  (index of the first 8)
```

`insert` takes a 1-based position; when the list already holds `capacity`
elements it is returned unchanged, and a position outside the list raises
`ValueError`. `majority_element` returns `None` when no element appears more
than half the time. `largest`, `max_difference`, `max_subarray_sum` and the
other functions that need elements raise `ValueError` on too short an input.

### Number theory

```python
from dsakit.numbers import gcd, lcm, trailing_zeroes_in_factorial

gcd(12, 18)                        # 6
lcm(4, 6)                          # 12
trailing_zeroes_in_factorial(100)  # 24
```

### Searching and sorting

```python
from dsakit.searching import binary_search, first_occurrence, last_occurrence
from dsakit.sorting import bubble_sort, selection_sort

binary_search([1, 3, 5, 7], 5)        # True
first_occurrence([1, 2, 2, 2, 3], 2)  # 1
last_occurrence([1, 2, 2, 2, 3], 2)   # 3
bubble_sort([5, 1, 4, 2])             # [1, 2, 4, 5]
selection_sort([5, 1, 4, 2])          # [1, 2, 4, 5]
```

`first_occurrence` and `last_occurrence` expect a sorted sequence and return
`None` when the target is absent.

### Containers

Containers raise exceptions rather than returning sentinel values.
`StackEmptyError` and `QueueEmptyError` are subclasses of `IndexError`;
`StackFullError` and `QueueFullError` are raised when a fixed-capacity
`ArrayStack` or `ArrayQueue` is full.

```python
from dsakit.stacks import ArrayStack, StackEmptyError
from dsakit.queues import LinkedQueue
from dsakit.hashing import ChainedHashTable

stack = ArrayStack(capacity=5)
stack.push(5)
stack.push(10)
stack.pop()        # 10
len(stack)         # 1

queue = LinkedQueue()
queue.enqueue(10)
queue.enqueue(20)
queue.dequeue()    # 10
queue.front()      # 20

table = ChainedHashTable(buckets=7)
table.insert(10)
10 in table        # True
table.remove(10)
table.search(10)   # False
```

`ChainedHashTable` keeps duplicate keys; `remove` deletes every copy of a key.

### Binary trees

```python
from dsakit.trees import Node, height, maximum, nodes_at_distance, size

root = Node(10)
root.left = Node(20)
root.right = Node(30)
root.left.left = Node(40)

height(root)               # 3
maximum(root)              # 40
nodes_at_distance(root, 1) # [20, 30]
size(root)                 # 4
```

## What it does not do

dsakit is a library only: it has no command-line program, and it does not read
input or print results. Call its functions from your own code.