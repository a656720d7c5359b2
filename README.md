# dsakit

Classic data structures and algorithms in plain Python, with no runtime
dependencies. Requires Python 3.10 or later.

## Installation

```
pip install dsakit
```

## Modules

| Module | Contents |
| --- | --- |
| `dsakit.arithmetic` | `get_bit`, `set_bit`, `clear_bit`, `update_bit`, `clear_last_bits`, `clear_bits_range`, `count_set_bits`, `count_set_bits_fast`, `gcd` |
| `dsakit.dsu` | `UnionFind` (path compression, union by rank), `run_commands` |
| `dsakit.searching` | `linear_search`, `binary_search`, `lower_bound`, `upper_bound`, `count_occurrences` |
| `dsakit.sorting` | `bubble_sort`, `insertion_sort`, `selection_sort`, `merge_sort`, `quick_sort`, `dutch_flag_sort` |
| `dsakit.strings` | `reverse_string`, `sort_strings`, `tokenize` |
| `dsakit.stack` | `BoundedStack`, `StackFullError`, `StackEmptyError` |
| `dsakit.linked_list` | singly linked `LinkedList` with in-place `reverse` |
| `dsakit.recursion` | `inversion_count`, `quick_sort_lomuto`, `hanoi_moves` |
| `dsakit.backtracking` | `hamiltonian_cycles`, `solve_n_queens`, `rat_in_maze` |
| `dsakit.dynamic` | `knapsack_01`, `tsp_naive` |
| `dsakit.greedy` | `max_activities`, `fractional_knapsack`, `Job`, `job_sequencing` |
| `dsakit.heaps` | `heapify`, `build_max_heap`, `heap_sort`, `MaxHeap`, `MinHeap` |
| `dsakit.graph` | adjacency-list `Graph` with `bfs`, `dfs`, `neighbours` and `format_adjacency` |
| `dsakit.graph_analysis` | `articulation_points`, `greedy_coloring` |
| `dsakit.shortest_paths` | `bellman_ford`, `dijkstra`, `floyd_warshall`, `NegativeCycleError` |
| `dsakit.flow` | `ford_fulkerson`, `FlowResult` |
| `dsakit.mst` | `Edge`, `kruskal`, `kruskal_weight`, `prim`, `prim_weight` |
| `dsakit.trees` | `TreeNode`, `BinarySearchTree`, `inorder`, `preorder`, `postorder`, `level_order`, `height` |

All sorting functions take any iterable and return a new sorted list; the
input is left untouched.

## Examples

### Sorting, searching and strings

```python
from dsakit.sorting import merge_sort, dutch_flag_sort
from dsakit.searching import linear_search, lower_bound, upper_bound, count_occurrences
from dsakit.strings import sort_strings, tokenize

merge_sort([5, 4, 3, 6, 1, 2, 7])             # [1, 2, 3, 4, 5, 6, 7]
dutch_flag_sort([2, 1, 0, 0, 2, 1])           # [0, 0, 1, 1, 2, 2]

items = [10, 20, 40, 40, 40, 70, 100]
lower_bound(items, 40), upper_bound(items, 40)  # (2, 5)
count_occurrences(items, 40)                  # 3
linear_search(items, 55)                      # None

sort_strings(["ab", "c", "abc", "bb"])        # ['abc', 'ab', 'bb', 'c']
tokenize("Today is a pretty day")             # ['Today', 'is', 'a', 'pretty', 'day']
```

### Containers

```python
from dsakit.dsu import UnionFind
from dsakit.stack import BoundedStack, StackFullError
from dsakit.heaps import MaxHeap

uf = UnionFind(5)
uf.union_set(0, 1)
uf.is_same_set(0, 1)      # True
uf.size_of_set(1)         # 2
len(uf)                   # 4 disjoint sets

stack = BoundedStack(capacity=2)
stack.push(10)
stack.push(20)
# stack.push(30) raises StackFullError; popping an empty stack raises StackEmptyError

heap = MaxHeap([3, 9, 4])
heap.insert(7)
heap.delete_root()        # 9
```

`MinHeap.delete(key)` removes one occurrence of any stored key and raises
`ValueError` when the key is absent.

### Recursion and backtracking

```python
from dsakit.recursion import inversion_count, hanoi_moves
from dsakit.backtracking import solve_n_queens, rat_in_maze

inversion_count([5, 4, 3, 6, 1, 2, 7])
list(hanoi_moves(2))      # [(1, 'A', 'B'), (2, 'A', 'C'), (1, 'B', 'C')]

solve_n_queens(4)         # first board found, rows of 0 and 1; None if there is none
rat_in_maze(["0000", "000X", "000X", "0X00"])  # every right/down path as a 0/1 grid
```

`hamiltonian_cycles(adjacency, start)` is a generator that yields every
Hamiltonian cycle of an adjacency matrix, each listing `start` first and last.

### Greedy and dynamic programming

```python
from dsakit.greedy import Job, job_sequencing, fractional_knapsack, max_activities
from dsakit.dynamic import knapsack_01, tsp_naive

max_activities([(1, 2), (3, 4), (0, 6), (5, 7)])
fractional_knapsack([(60, 10), (100, 20), (120, 30)], 50)   # (profit, weight) pairs
scheduled, total = job_sequencing([Job(1, 2, 100), Job(2, 1, 19), Job(3, 2, 27)])

knapsack_01([1, 6, 10, 16], [1, 2, 3, 5], 7)
tsp_naive([[0, 10, 15, 20], [10, 0, 35, 25], [15, 35, 0, 30], [20, 25, 30, 0]], 0)  # 80
```

### Graphs

Graph algorithms take plain Python data: adjacency matrices as lists of lists,
edge lists as tuples, and `dsakit.graph.Graph` where a weighted adjacency list
is needed.

```python
import math
from dsakit.graph import Graph
from dsakit.graph_analysis import articulation_points, greedy_coloring
from dsakit.shortest_paths import bellman_ford, dijkstra, floyd_warshall, NegativeCycleError
from dsakit.flow import ford_fulkerson
from dsakit.mst import kruskal, prim

g = Graph()
g.add_edge(0, 1, 4)
g.add_edge(1, 2, 1)
g.add_edge(0, 2, 7)
g.bfs(0), g.dfs(0)
dijkstra(g, 0)            # {0: 0, 1: 4, 2: 5}

greedy_coloring(3, [(0, 1), (1, 2)])   # (2, [0, 1, 0])
articulation_points({0: [1], 1: [0, 2], 2: [1]}, 3)   # [1]

try:
    bellman_ford(3, [(0, 1, 1), (1, 2, -2), (2, 1, 1)], 0)
except NegativeCycleError:
    ...

INF = math.inf
floyd_warshall([[0, 3, INF, 7], [8, 0, 3, INF], [5, INF, 0, 1], [2, INF, INF, 0]])

result = ford_fulkerson([[0, 3, 2], [0, 0, 2], [0, 0, 0]], 0, 2)
result.max_flow, result.paths

kruskal(3, [(0, 1, 1), (1, 2, 2), (0, 2, 3)])   # raises ValueError if not connected
prim([[0, 2, 0], [2, 0, 3], [0, 3, 0]])         # zero means no edge
```

Unreachable vertices get `math.inf` from `bellman_ford` and `dijkstra`.

### Trees

```python
from dsakit.trees import BinarySearchTree, preorder, level_order, height

tree = BinarySearchTree([50, 30, 20, 40, 70, 60, 80])
list(tree)                # [20, 30, 40, 50, 60, 70, 80]
60 in tree                # True
preorder(tree.root)       # [50, 30, 20, 40, 70, 60, 80]
level_order(tree.root)
height(tree.root)         # 3
```

## What it does not do

dsakit is a library only. It has no command-line programs and reads nothing
from standard input; every algorithm is called from Python and returns its
result rather than printing it.

## Running the tests

```
pip install -e ".[test]"
pytest
```