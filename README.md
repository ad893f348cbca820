# algolab

Classic data structures and algorithms in plain Python, using only the
standard library.

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
| `algolab.binary_tree` | `TreeNode` and `BinaryTree`: nodes placed by an `L`/`R` path from the root (`add_node`), `height`, `level_order`, `bfs`, `pre_order`, `in_order`, `post_order`, in-order iteration, `count_two_children_node`, `sum_of_leafs`, `delete_node` |
| `algolab.bst` | `BinarySearchTree`: `add`, `delete`, `find`, `sum_range`, `get_min`, `get_max`, `height`, and value traversals (`level_order`, `pre_order`, `in_order`, `post_order`, iteration in ascending order) |
| `algolab.tree_problems` | `BTNode`, `build_tree` (from level-order values with `None` gaps) and functions on integer trees: `lowest_ancestor`, `distinct_parities`, `enlarge`, `great_ancestor`, `longest_path_sum`, `sum_digit_path`, `largest_diff`, `range_count`, `level_alter_traverse`, `kth_smallest`, `find_target`, `in_range`, `single_child`, `subtree_with_range` |
| `algolab.avl` | `AVLTree` of distinct keys: `insert`, `height`, `balance`, `pre_order`, `tree_structure` (a text drawing) |
| `algolab.splay` | `SplayTree`: `insert`, `search`, `remove`, `pre_order` |
| `algolab.heap` | `MaxHeap`, the helpers `reheap_down` and `reheap_up`, `heap_sort`, `PrinterQueue`, `least_after` |
| `algolab.search` | `binary_search`, `interpolation_search`, `jump_search` (returns the index and the indexes visited), `find_pairs` |
| `algolab.hashing` | `fold_shift`, `rotation`, `mid_square`, `modulo_division`, `digit_extraction`, `pair_matching` |
| `algolab.graphs` | `dijkstra` (adjacency matrix), `number_of_friend_groups`, `Graph` (`bfs`, `dfs`, `adjacency`), `DirectedGraph` (`is_cyclic`), `WeightedGraph` (`kruskal_mst`), `on_the_sand` |
| `algolab.lists` | `ArrayList` (doubling capacity), `LinkedList`, `Stack` and a `Person` record |

Missing items raise the usual Python exceptions: `MaxHeap.peek` and
`MaxHeap.pop` raise `IndexError` on an empty heap, `index_of` methods raise
`ValueError` for absent items, and list indexing out of range raises
`IndexError`. `dijkstra` and `on_the_sand` report unreachable targets as
`algolab.graphs.UNREACHABLE` (infinity).

## Examples

Path-addressed binary tree:

```python
from algolab.binary_tree import BinaryTree

tree = BinaryTree()
tree.add_node("", 2, 4)
tree.add_node("L", 3, 6)
tree.add_node("R", 5, 9)
tree.height()  # 2
tree.bfs()     # "4 6 9 "
```

Binary search tree:

```python
from algolab.bst import BinarySearchTree

tree = BinarySearchTree()
for value in (50, 30, 70, 20, 40):
    tree.add(value)

tree.find(40)           # True
tree.sum_range(25, 60)  # 120
tree.get_min(), tree.get_max()  # (20, 70)
list(tree)              # [20, 30, 40, 50, 70]
```

AVL tree:

```python
from algolab.avl import AVLTree

avl = AVLTree()
for key in (10, 20, 30, 40, 50, 25):
    avl.insert(key)
avl.pre_order()  # [30, 20, 10, 25, 40, 50]
```

Max-heap and priority printing:

```python
from algolab.heap import MaxHeap, PrinterQueue, heap_sort

heap = MaxHeap()
for item in (3, 9, 4):
    heap.push(item)
heap.peek()  # 9

queue = PrinterQueue()
queue.add_new_request(1, "notes.txt")
queue.add_new_request(5, "report.pdf")
queue.print_next()  # "report.pdf"
queue.print_next()  # "notes.txt"
queue.print_next()  # "No file to print"

heap_sort([5, 1, 4])  # [1, 4, 5]
```

Graphs:

```python
from algolab.graphs import Graph, WeightedGraph

g = Graph(4)
g.add_edge(0, 1)
g.add_edge(0, 2)
g.add_edge(2, 3)
g.bfs(0)  # [0, 1, 2, 3]

w = WeightedGraph(3)
w.add_edge(0, 1, 4)
w.add_edge(1, 2, 1)
w.add_edge(0, 2, 3)
w.kruskal_mst()  # 4
```

## What it does not do

algolab is a library only: it has no command-line tool, and nothing is
stored between runs. It has no network-flow algorithms (maximum flow or
minimum-cost flow); the graph module covers shortest paths, components,
traversals, cycle detection, minimum spanning trees and grid distances.