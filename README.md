# dsakit

A small collection of classic data structures and algorithms, written for
clarity. It is a library only, with no runtime dependencies.

## Installation

```
pip install dsakit
```

## What is inside

| Module              | Contents                                                           |
|---------------------|--------------------------------------------------------------------|
| `dsakit.math_utils` | `fibonacci`, `gcd`, `lcm`, `square_root`                           |
| `dsakit.hash_map`   | `HashMap`: integer keys in a fixed number of chained buckets       |
| `dsakit.search`     | `lower_bound`, `upper_bound` on sorted sequences                   |
| `dsakit.fifo`       | `Queue`, `BetterQueue`, `EmptyQueueError`                          |
| `dsakit.stack`      | `Stack`, `ThreadSafeStack`, `EmptyStackError`                      |
| `dsakit.strings`    | `BoundedString`, `Trie` (words of the letters `a` to `z`)          |
| `dsakit.tree`       | `Node`, `Side`, `BinaryTree` with in-order traversal and diameter  |
| `dsakit.graph`      | `Vertex`, `Graph`                                                  |
| `dsakit.pointer`    | `SharedPointer`, `UniquePointer`: value holders with ownership     |
| `dsakit.operators`  | `BinaryOperator` (abstract), `Add`                                 |

## Examples

### Numbers

```python
from dsakit.math_utils import fibonacci, gcd, lcm, square_root

fibonacci(10)       # 55; fibonacci(1) == fibonacci(2) == 1, n < 1 raises ValueError
gcd(10, 15)         # 5
lcm(10, 15)         # 30; lcm(0, 0) raises ZeroDivisionError
square_root(2.0)    # about 1.41421356, found by bisection over [0, x]
```

`square_root` searches the interval `[0, x]`, so it gives the square root
only for `x >= 1`; it takes an optional tolerance `eps` (default `1e-9`).

### Hash map

```python
from dsakit.hash_map import HashMap

m = HashMap(10)
m.insert(1, 10)
m.insert(2, 20)
m.get(1)            # 10
m.remove(2)
m.get(2)            # raises KeyError
```

`insert` always appends; when a key is inserted twice, `get` and `remove`
act on the pair that was inserted first.

### Binary search

```python
from dsakit.search import lower_bound, upper_bound

data = [1, 3, 3, 4, 4, 5]
lower_bound(data, 3)    # 1, the first index whose element is not less than 3
upper_bound(data, 3)    # 3, the first index whose element is greater than 3
```

Both return `len(data)` when no element qualifies.

### Queues and stacks

```python
from dsakit.fifo import BetterQueue
from dsakit.stack import Stack

a = BetterQueue()
a << 1 << 2 << 3
b = BetterQueue()
b << 4 << 5 << 6
list(a + b)         # [1, 2, 3, 4, 5, 6]
a.pop()             # 1
a.front(), a.back() # (2, 3)

s = Stack()
s.push(1)
s.push(2)
s.pop()             # 2
s.top()             # 1
```

Taking from or reading an empty queue raises `EmptyQueueError`; an empty stack
raises `EmptyStackError`. Both are subclasses of `IndexError`.
`ThreadSafeStack` has `push`, `pop`, `top` and `is_empty`, each guarded by a lock.

### Strings and tries

```python
from dsakit.strings import BoundedString, Trie

s = BoundedString(2)
s.insert("a")           # True
s.insert("b")           # True
s.insert("c")           # False, the string is full
str(s)                  # "ab"

t = Trie()
t.insert("hello")
t.search("hello")       # True
t.starts_with("hel")    # True
t.starts_with("world")  # False
```

`Trie` raises `ValueError` for any character outside `a`–`z`.

### Binary tree

```python
from dsakit.tree import BinaryTree, Side

tree = BinaryTree()
root = tree.add_node(None, None, 1)
left = tree.add_node(root, Side.LEFT, 2)
tree.add_node(left, "left", 4)
tree.add_node(root, Side.RIGHT, 3)

list(tree.in_order())   # [4, 2, 1, 3]
tree.in_order_print()   # prints "4 2 1 3 " and a newline
tree.diameter()         # 3 edges on the longest path; -1 for an empty tree
```

### Pointers

```python
from dsakit.pointer import SharedPointer, UniquePointer

p = SharedPointer("A")
with p.copy() as q:
    p.use_count()       # 2
p.use_count()           # 1, the copy was released on leaving the block

u = UniquePointer("B")
v = u.take()
u.get(), v.get()        # (None, "B")
```

### Operators and graphs

```python
from dsakit.operators import Add
from dsakit.graph import Graph

Add(1, 2).execute()     # 3

g = Graph()
g.create_vertex(1, "one")
g.vertices()            # [Vertex(id=1, value='one')]
```

## What it does not do

`Graph` holds vertices only: it has no edges and no graph algorithms.
The package has no command-line program.

## Running the tests

```
pip install -e ".[test]"
pytest
```