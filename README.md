# bintree

A small binary tree library. You can build trees of integer nodes by hand,
walk them in the usual orders, measure them, check their shape and draw them
as ASCII art.

## Installation

```
pip install .
```

To run the tests, install the test extra:

```
pip install ".[test]"
pytest
```

## Building a tree

```python
from bintree.tree import Node

root = Node(98)
left = root.insert_left(12)
right = root.insert_right(402)
left.insert_right(54)
right.insert_left(128)
```

`Node(value, parent=None)` creates a node. Each node has the attributes
`value`, `parent`, `left` and `right`.

`insert_left(value)` and `insert_right(value)` create a child, link it to the
node and return it. When the node already has a child on that side, the new
node takes its place and the old child becomes the new node's child on the
same side.

`insert_right` does not accept a value of zero: it raises `ValueError`.
`insert_left` has no such restriction.

## Traversals

`preorder()`, `inorder()` and `postorder()` are generators that yield node
values:

```python
list(root.preorder())   # [98, 12, 54, 402, 128]
list(root.inorder())    # [12, 54, 98, 128, 402]
list(root.postorder())  # [54, 12, 128, 402, 98]
```

## Measurements and checks

| Method             | Meaning                                                        |
|--------------------|----------------------------------------------------------------|
| `height()`         | edges on the longest path down to a leaf; a leaf has height 0  |
| `depth()`          | edges on the path up to the root                               |
| `size()`           | number of nodes in the subtree                                 |
| `leaves()`         | number of nodes in the subtree with no children                |
| `internal_nodes()` | number of nodes in the subtree with at least one child         |
| `balance()`        | height of the left subtree minus height of the right subtree   |
| `is_leaf()`        | the node has no children                                       |
| `is_root()`        | the node has no parent                                         |
| `is_full()`        | every node in the subtree has either zero or two children      |
| `is_perfect()`     | full, and the node's balance factor is zero                    |
| `sibling()`        | the other child of the parent, or `None`                       |
| `uncle()`          | the sibling of the parent, or `None`                           |

For `balance()`, an empty side counts as height 0 and a single node as
height 1, so a leaf and a node with two leaf children both have balance 0.

## Printing

```python
from bintree.printing import render, print_tree

print_tree(root)
```

```
  .-------(098)-------.
(012)--.         .--(402)
     (054)     (128)
```

Each value is shown as three zero-padded digits in parentheses.

`render(tree)` returns the picture as a string, one line for each level,
without a final newline; for `None` it returns an empty string.
`print_tree(tree, file=None)` writes the picture followed by a newline to a
text stream, or to standard output when no stream is given; for `None` it
writes nothing.

## What it does not do

There is no command-line program, and trees are not saved or loaded: they
exist only in memory while your program builds them. There is no search-tree
insertion, removal of single nodes, or rebalancing; nodes are placed only
where you put them with `insert_left` and `insert_right`.