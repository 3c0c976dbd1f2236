# bintrees_kit

A small toolkit for binary trees that hold integers. You can build a tree, walk it, measure it and draw it as text.

## Installing

```
pip install .
```

## Building and inspecting a tree

```python
from bintrees_kit.node import BinaryTreeNode

root = BinaryTreeNode(98)
left = root.insert_left(12)
right = root.insert_right(402)
left.insert_right(54)
right.insert_right(128)

root.height()         # 2
root.size()           # 5
root.leaves()         # 2
root.nodes()          # 3  (nodes with at least one child)
root.balance()        # 0  (levels on the left minus levels on the right)
root.is_full()        # False
root.is_perfect()     # False
list(root.inorder())  # [12, 54, 98, 402, 128]
```

`BinaryTreeNode(value, parent=None)` creates a node. It does not attach itself to the parent. You set `parent.left` or `parent.right` yourself, or you use `insert_left` / `insert_right`. Those methods put a new node between a node and its child on that side. If a child was already there, it becomes the new node's child on the same side.

Each node can also report on itself:

- `is_leaf()` and `is_root()`
- `depth()`: the number of edges up to the root
- `sibling()` and `uncle()`: each returns `None` when there is no such node

`preorder()`, `inorder()` and `postorder()` are generators. They yield the stored values in the order the nodes are visited.

`delete()` removes a node and everything below it. The node is detached from its parent, and every link inside the removed subtree is cleared.

## Drawing a tree

```python
import sys
from bintrees_kit.printer import render, print_tree

text = render(root)                  # one line per level, each ending in "\n"
print_tree(root)                     # writes to standard output
print_tree(root, file=sys.stderr)    # or to any text stream
```

Each value is drawn as a box of at least three digits, such as `(098)`. Branches are drawn with dashes, and a dot marks the point where a branch meets the node below. Passing `None` gives an empty drawing.

## Demo

```
bintrees-demo [EXAMPLE]
```

`EXAMPLE` is a number from `0` to `5`. The default is `0`.

- `0`: draws a seven-node sample tree rooted at 98.
- `1`: draws a small tree, adds nodes with `insert_left`, and draws it again.
- `2`: draws a small tree, adds nodes with `insert_right`, and draws it again.
- `3`: draws a tree, then deletes it.
- `4`: draws a tree and reports which of three nodes are leaves.
- `5`: draws a tree and reports which of three nodes are roots.

## Running the tests

```
pip install ".[test]"
pytest
```