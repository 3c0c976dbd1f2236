"""Command-line demonstrations of building, changing and drawing trees."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from .node import BinaryTreeNode
from .printer import print_tree


def build_sample() -> BinaryTreeNode:
    """Build the seven-node sample tree rooted at 98."""
    root = BinaryTreeNode(98)
    root.left = BinaryTreeNode(12, root)
    root.left.left = BinaryTreeNode(6, root.left)
    root.left.right = BinaryTreeNode(16, root.left)
    root.right = BinaryTreeNode(402, root)
    root.right.left = BinaryTreeNode(256, root.right)
    root.right.right = BinaryTreeNode(512, root.right)
    return root


def _small_tree() -> BinaryTreeNode:
    root = BinaryTreeNode(98)
    root.left = BinaryTreeNode(12, root)
    root.right = BinaryTreeNode(402, root)
    return root


def _grown_tree() -> BinaryTreeNode:
    root = _small_tree()
    root.left.insert_right(54)
    root.insert_right(128)
    return root


def _show_sample() -> None:
    print_tree(build_sample())


def _show_insert_left() -> None:
    root = _small_tree()
    print_tree(root)
    print()
    root.right.insert_left(128)
    root.insert_left(54)
    print_tree(root)


def _show_insert_right() -> None:
    root = _small_tree()
    print_tree(root)
    print()
    root.left.insert_right(54)
    root.insert_right(128)
    print_tree(root)


def _show_delete() -> None:
    root = _grown_tree()
    print_tree(root)
    root.delete()


def _show_leaves() -> None:
    root = _grown_tree()
    print_tree(root)
    for node in (root, root.right, root.right.right):
        print(f"Is {node.value} a leaf: {int(node.is_leaf())}")


def _show_roots() -> None:
    root = _grown_tree()
    print_tree(root)
    for node in (root, root.right, root.right.right):
        print(f"Is {node.value} a root: {int(node.is_root())}")


_EXAMPLES = {
    "0": _show_sample,
    "1": _show_insert_left,
    "2": _show_insert_right,
    "3": _show_delete,
    "4": _show_leaves,
    "5": _show_roots,
}


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Binary tree demonstrations.")
    parser.add_argument(
        "example",
        nargs="?",
        default="0",
        choices=sorted(_EXAMPLES),
        help="which demonstration to run (default: 0)",
    )
    args = parser.parse_args(argv)
    _EXAMPLES[args.example]()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())