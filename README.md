# treekit

Linked binary trees for Python. The package has plain nodes with parent links,
and binary search trees, AVL trees and max heaps built from those nodes. It also
has a printer that draws a tree as ASCII art.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Nodes

`treekit.tree.Node` holds an integer `value` and links to its `parent`, `left`
and `right` nodes.

```python
from treekit.tree import Node

root = Node(98)
left = root.insert_left(12)
root.insert_right(402)
left.insert_right(54)

list(root.preorder())    # [98, 12, 54, 402]
list(root.inorder())     # [12, 54, 98, 402]
list(root.postorder())   # [54, 12, 402, 98]
root.height()            # 2
left.depth()             # 1
root.size()              # 4
root.leaves()            # 2
root.internal_nodes()    # 2
root.is_full()           # False
left.sibling().value     # 402
```

`insert_left` and `insert_right` place the new node between the parent and any
child that already holds that place. The old child becomes a child of the new
node, on the same side.

Other methods:

- `is_leaf()` and `is_root()`
- `is_perfect()`
- `uncle()`, which returns the sibling of the parent, or `None`
- `balance()`, which gives the height of the left subtree minus the height of
  the right subtree. A missing subtree counts as 0 and a leaf counts as 1.

## Printing

```python
from treekit.printer import render, print_tree

print_tree(root)          # writes to standard output
text = render(root)       # the same drawing as a string
```

Each value is shown zero-padded in parentheses, such as `(098)`. Lines drawn as
`.---` lead down to the children. Every line of the drawing ends in a newline.
`render(None)` returns an empty string. `print_tree` takes an optional `file` to
write to.

## Whole-tree operations

`treekit.analysis` has these functions:

- `levelorder(tree)` yields the values level by level, from left to right.
- `is_complete(tree)` checks that every level is full except the last one, and
  that the last level is filled from the left. An empty tree is not complete.
- `lowest_common_ancestor(first, second)` returns the deepest node that has
  both nodes in its subtree. A node counts as its own ancestor. The function
  returns `None` when the nodes are in different trees.
- `rotate_left(tree)` and `rotate_right(tree)` rotate a subtree and return its
  new root. The new root is linked in under the old parent. The functions return
  `None`, and change nothing, when there is no child to rotate up.

## Search trees, AVL trees and heaps

```python
from treekit.bst import BinarySearchTree, is_bst
from treekit.avl import AVLTree, is_avl
from treekit.heap import MaxHeap, is_heap

bst = BinarySearchTree.from_iterable([98, 402, 12, 46, 128, 256])
bst.search(46)          # the node holding 46, or None
46 in bst               # True
bst.remove(98)          # True if the value was present
list(bst)               # values in ascending order

avl = AVLTree.from_iterable([98, 402, 12, 46, 128, 256])
balanced = AVLTree.from_sorted([1, 2, 3, 4, 5, 6, 7])

heap = MaxHeap.from_iterable([79, 47, 68, 87, 84, 91])
list(heap)              # values in level order, largest first
len(heap)               # 6
```

Search trees and AVL trees:

- `insert` returns the new node. It returns `None` if the value is already
  present, so duplicate values are ignored.
- When `remove` deletes a node with two children, that node takes the value of
  its in-order successor.
- `AVLTree` rebalances after every insertion and removal.
- `AVLTree.from_sorted` builds a balanced tree directly from a sorted sequence.

Max heaps:

- `MaxHeap.insert` adds the value at the next free place in the complete tree.
- It then swaps the value upwards, and returns the node that ends up holding it.

Checking any tree of nodes:

- `is_bst` checks for ascending order with no duplicates.
- `is_avl` checks the search order and that no node has a balance beyond ±1.
- `is_heap` checks that the tree is complete and that no child is larger than
  its parent.

All three return `False` for an empty tree.

## What is not included

`MaxHeap` can only insert values and be read. It has no way to take out the
largest value or to drain the heap into a sorted list. The package is a library
only and has no command-line program.