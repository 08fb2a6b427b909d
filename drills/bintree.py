"""A set of ordered values stored in an unbalanced binary search tree."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T", bound=Any)


@dataclass
class _Node(Generic[T]):
    value: T
    left: Optional[_Node[T]] = None
    right: Optional[_Node[T]] = None


class BinaryTree(Generic[T]):
    """A container holding each distinct value once, in a binary search tree."""

    def __init__(self) -> None:
        self._root: Optional[_Node[T]] = None
        self._size = 0

    def insert(self, value: T) -> None:
        """Add ``value``; adding a value already present does nothing."""
        if self._root is None:
            self._root = _Node(value)
            self._size += 1
            return
        node = self._root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = _Node(value)
                    break
                node = node.left
            elif node.value < value:
                if node.right is None:
                    node.right = _Node(value)
                    break
                node = node.right
            else:
                return
        self._size += 1

    def __contains__(self, value: object) -> bool:
        node = self._root
        while node is not None:
            if value < node.value:
                node = node.left
            elif node.value < value:
                node = node.right
            else:
                return True
        return False

    def __len__(self) -> int:
        return self._size


def main(argv: list[str] | None = None) -> int:
    argparse.ArgumentParser(description="Demonstrate the binary tree.").parse_args(
        argv
    )
    tree: BinaryTree[str] = BinaryTree()
    tree.insert("foo")
    assert len(tree) == 1
    tree.insert("bar")
    assert "foo" in tree
    print(f"tree holds {len(tree)} values")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())