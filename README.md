# algokit

A small collection of classic data structures, together with a handful of
algorithm exercises built on top of them. Pure Python, no dependencies.

## Data structures

| Module                 | Class                     | What it is                                          |
|------------------------|---------------------------|-----------------------------------------------------|
| `algokit.array`        | `Array`                   | fixed-size array, every slot starts as `fill`       |
| `algokit.vector`       | `Vector`                  | growable array; capacity doubles when it runs out   |
| `algokit.stack`        | `Stack`                   | last-in, first-out stack built on `Vector`          |
| `algokit.fifo`         | `Queue`                   | first-in, first-out queue made of two stacks        |
| `algokit.linked_list`  | `LinkedList`, `ListItem`  | doubly linked list with item handles                |
| `algokit.graph`        | `Graph`, `Vertex`, `Edge` | directed graph with integer-weighted edges          |

```python
from algokit.array import Array
from algokit.vector import Vector
from algokit.stack import Stack
from algokit.fifo import Queue
from algokit.linked_list import LinkedList

a = Array(3, 0)
a[1] = 7
print(list(a), len(a))    # [0, 7, 0] 3

v = Vector()
v.resize(5)               # new slots hold None
for i in range(len(v)):
    v[i] = i
print(list(v))            # [0, 1, 2, 3, 4]
print(v.capacity)         # 8
v.reserve(20)             # make room without changing the length

s = Stack()
s.push(1)
s.push(2)
print(s.top())            # 2
print(s.pop())            # 2
print(len(s), bool(s))    # 1 True

q = Queue()
q.insert(1)
q.insert(2)
print(q.front())          # 1
print(q.remove())         # 1

items = LinkedList()
items.insert(1)
items.insert(2)
items.insert_after(items.first(), 3)
print(list(items))        # [2, 3, 1]
first = items.first()
items.erase(first)        # returns the item that followed
print([item.data for item in items.items()])   # [3, 1]
```

Errors are raised the usual way: an index out of range gives `IndexError`,
as does `top`/`pop` on an empty `Stack` and `front`/`remove` on an empty
`Queue`. Passing a `ListItem` that belongs to another list (or was erased)
gives `ValueError`; `erase_next` on the last item gives `IndexError`.

### Graph

A graph keeps its vertices in order; each `Vertex` holds `data` and a list
of outgoing `Edge`s, each with a `to_vertex` and an integer `weight`.

```python
from algokit.graph import Graph

g = Graph(3, 0)                                   # three vertices, data 0
g.add_edge(g.vertex(0), g.vertex(1), 10)
print(g.edge_weight(g.vertex(0), g.vertex(1)))   # 10
print(g.check_edge(g.vertex(1), g.vertex(0)))    # False
g.set_edge_weight(g.vertex(0), g.vertex(1), 4)
print([e.weight for e in g.edges(g.vertex(0))])  # [4]
g.set_vertex_data(2, "c")
print(g.vertex_data(2))                           # c
g.remove_vertex(1)                                # also drops edges into it
print(len(g))                                     # 2
```

`add_edge` on an existing edge only changes its weight. `set_edge_weight`,
`remove_edge`, `set_vertex_data` and `remove_vertex` quietly ignore a
missing edge or an index out of range; `edge_weight` raises `KeyError` for a
missing edge and `index_of` raises `ValueError` for a foreign vertex.

## Exercises

Each exercise is a module usable both as a library and as a command:

- `algokit.mst` — `collect_edges(graph)` lists a graph's edges as
  `WeightedEdge(source, target, weight)`; `spanning_tree(vertex_count, edges)`
  returns a `SpanningTree` (its `edges` and total `weight`), taking edges by
  weight; `format_report(tree)` renders it as text.
- `algokit.maze` — `find_path(lines)` marks the shortest path from `X` to
  the nearest `Y` with `x` and returns the rows, or `None` when no `Y` can be
  reached. Tiles are `#` (wall) and `.` (floor); any other character met
  during the search raises `UnknownTileError`. `parse_map(lines)` gives the
  rows of `Tile`s.
- `algokit.stackmachine` — `run(tokens)` executes `PUSH <number|register>`
  and `POP <register>` pairs over registers `A`–`D` (all starting at 0),
  stopping at `EXIT` or the end of input; `format_registers` prints them.
  `is_number` tells whether a text is all decimal digits.
- `algokit.digits` — `digit_sum(values)` adds up the decimal digits of
  non-negative numbers; `random_values(size, rng)` fills an `Array` with
  random integers from 1 to 999.
- `algokit.practice` — warm-ups: `array_sums(by_value)`,
  `prepend_all(values)`, `lookup_definitions(entries, queries)` (first
  definition wins, otherwise `Not found`) and `less_than(values, limit)`.

## Commands

```
algokit-mst                         # spanning tree of a built-in 6-vertex sample graph
algokit-maze [PATH]                 # maze file, default input.txt; prints IMPOSSIBLE if unreachable
algokit-stackmachine < commands.txt # reads commands from standard input
algokit-digits [--size N] [--seed S]   # asks for the size if --size is omitted
algokit-practice {array1,array2,list1,map1,vector1} < input.txt
```

`algokit-practice` reads its input from standard input: `list1` takes a
count and that many numbers; `map1` takes a count, that many word/definition
pairs, then the words to look up; `vector1` takes a count, the numbers and a
limit. `array1` and `array2` need no input.

## Running the tests

```
pip install -e ".[test]"
pytest
```