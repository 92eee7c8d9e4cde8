# bintrees

Small, dependency-free building blocks for working with linked binary trees of
integers. It provides nodes that know their parent, traversals, measurements,
structural checks, a lowest-common-ancestor lookup and an ASCII renderer.

## Installation

```
pip install .
```

## Building a tree

```python
from bintrees.node import Node

root = Node(98)
left = root.insert_left(12)
right = root.insert_right(402)
left.insert_right(54)
right.insert_right(128)
```

`Node(value, parent=None, left=None, right=None)` is a dataclass. Passing a
`parent` only records it. It does not attach the node to that parent, so you
must also assign the node to `parent.left` or `parent.right`.

`insert_left(value)` and `insert_right(value)` create a child, attach it and
return it. If the parent already has a child on that side, the old child moves
down under the new node on the same side.

Nodes compare by identity, not by value.

Each node also answers questions about its place in the tree:

```python
left.is_leaf()      # False: it has a right child (54)
root.is_root()      # True
right.depth()       # 1 (edges up to the root)
left.sibling()      # the 402 node
```

- `sibling()` returns the other child of the node's parent, or `None`.
- `uncle()` returns the sibling of the node's parent, or `None`.

## Traversals

Each traversal is a generator of node values:

```python
from bintrees.traversal import preorder, inorder, postorder, levelorder

list(preorder(root))    # [98, 12, 54, 402, 128]
list(inorder(root))     # [12, 54, 98, 402, 128]
list(postorder(root))   # [54, 12, 128, 402, 98]
list(levelorder(root))  # [98, 12, 402, 54, 128]
```

Every traversal accepts `None` and then yields nothing.

## Measurements and checks

```python
from bintrees.measure import (
    height, size, leaves, inner_nodes, balance, is_full, is_perfect,
)

height(root)       # 2: edges on the longest downward path (0 for None)
size(root)         # 5 nodes
leaves(root)       # 2 nodes with no children
inner_nodes(root)  # 3 nodes with at least one child
balance(root)      # 0: left subtree height minus right subtree height
is_full(root)      # False: every node must have zero or two children
is_perfect(root)   # False: full, with every leaf at the same depth
```

`is_full` and `is_perfect` return `False` for `None`. A single node is both
full and perfect.

```python
from bintrees.heap import is_complete, is_heap
from bintrees.ancestry import lowest_common_ancestor

is_complete(root)  # every level filled, the last one from the left
is_heap(root)      # complete, and no child greater than its parent
lowest_common_ancestor(left, right)  # the root node
```

- `is_complete(None)` and `is_heap(None)` return `False`.
- `lowest_common_ancestor` treats a node as its own ancestor.
- It returns `None` when either argument is `None` or the two nodes are in different trees.

## Printing

`render(tree)` returns the drawing as a string, with one newline-terminated line
per level. It returns `""` for `None`.

`print_tree(tree, file=None)` writes that string to `file`, or to standard
output if no file is given.

```python
from bintrees.node import Node
from bintrees.printing import render, print_tree

tree = Node(98)
a = tree.insert_left(12)
b = tree.insert_right(402)
a.insert_left(6)
a.insert_right(16)
b.insert_left(256)
b.insert_right(512)

print_tree(tree)
```

Each value is drawn as a zero-padded box such as `(098)`. Connecting lines join
parents to their children:

```
       .-------(098)-------.
  .--(012)--.         .--(402)--.
(006)     (016)     (256)     (512)
```

## What it does not do

This is a library only. It has no command-line tool. It also does not provide:

- binary-search-tree insertion, search or removal
- building a tree from a list
- rotations
- heap insertion

Those operations have to be built on top of `Node`.