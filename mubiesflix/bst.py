"""Binary search tree whose nodes hold a key and every value inserted under it."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass
class Node:
    """A tree node. Equality compares key and values only."""

    key: Any
    values: list = field(default_factory=list)
    left: Node | None = field(default=None, repr=False, compare=False)
    right: Node | None = field(default=None, repr=False, compare=False)
    parent: Node | None = field(default=None, repr=False, compare=False)

    def is_root(self) -> bool:
        return self.parent is None

    def has_left(self) -> bool:
        return self.left is not None

    def has_right(self) -> bool:
        return self.right is not None

    def is_external(self) -> bool:
        return self.left is None and self.right is None

    def insert_value(self, value: Any) -> None:
        """Append a value to this node's values."""
        self.values.append(value)

    def depth(self) -> int:
        """Number of ancestors of this node."""
        depth = 0
        node = self.parent
        while node is not None:
            depth += 1
            node = node.parent
        return depth

    def height(self) -> int:
        """Number of levels in the subtree rooted here; a leaf has height 1."""
        height = 0
        level = [self]
        while level:
            height += 1
            level = [
                child
                for node in level
                for child in (node.left, node.right)
                if child is not None
            ]
        return height


class BSTTree:
    """Binary search tree mapping each key to the list of values inserted with it."""

    def __init__(self) -> None:
        self.root: Node | None = None
        self._size = 0

    def __len__(self) -> int:
        """Number of distinct keys."""
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def height(self) -> int:
        return 0 if self.root is None else self.root.height()

    def insert(self, key: Any, value: Any) -> Node:
        """Add a value under a key, creating the node if needed; return the node."""
        parent: Node | None = None
        node = self.root
        while node is not None:
            if key == node.key:
                node.insert_value(value)
                return node
            parent = node
            node = node.left if key < node.key else node.right

        new_node = Node(key, [value], parent=parent)
        if parent is None:
            self.root = new_node
        elif key < parent.key:
            parent.left = new_node
        else:
            parent.right = new_node
        self._size += 1
        return new_node

    def search(self, key: Any) -> Node | None:
        """Return the node holding key, or None."""
        node = self.root
        while node is not None:
            if node.key == key:
                return node
            node = node.left if key < node.key else node.right
        return None

    def values_of(self, key: Any) -> list:
        """Return a copy of the values stored under key; empty if the key is absent."""
        node = self.search(key)
        return [] if node is None else list(node.values)

    def _preorder_nodes(self) -> Iterator[Node]:
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            yield node
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def _inorder_nodes(self, reverse: bool = False) -> Iterator[Node]:
        stack: list[Node] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.right if reverse else node.left
            node = stack.pop()
            yield node
            node = node.left if reverse else node.right

    def _postorder_nodes(self) -> Iterator[Node]:
        # Root-right-left order, reversed, is left-right-root.
        order: list[Node] = []
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            order.append(node)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        yield from reversed(order)

    def preorder(self) -> Iterator[Any]:
        """Yield keys in preorder."""
        return (node.key for node in self._preorder_nodes())

    def inorder(self) -> Iterator[Any]:
        """Yield keys in inorder."""
        return (node.key for node in self._inorder_nodes())

    def postorder(self) -> Iterator[Any]:
        """Yield keys in postorder."""
        return (node.key for node in self._postorder_nodes())

    def nodes(self) -> Iterator[Node]:
        """Yield nodes in inorder."""
        return self._inorder_nodes()

    @staticmethod
    def _print_keys(keys: Iterator[Any]) -> None:
        print("".join(f"{key}, " for key in keys), end="")

    def print_preorder(self) -> None:
        self._print_keys(self.preorder())

    def print_inorder(self) -> None:
        self._print_keys(self.inorder())

    def print_postorder(self) -> None:
        self._print_keys(self.postorder())

    def second_largest_key(self) -> Any:
        """Return the second largest key; ValueError if there are fewer than two."""
        if self._size < 2:
            raise ValueError("the tree has no second largest key")
        descending = self._inorder_nodes(reverse=True)
        next(descending)
        return next(descending).key

    def print_second_largest_key(self) -> None:
        try:
            key = self.second_largest_key()
        except ValueError:
            print("No hi ha segon node més gran.")
        else:
            print(f"El segon node més gran és: {key}")

    def mirror(self) -> None:
        """Swap the left and right children of every node."""
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            node.left, node.right = node.right, node.left
            stack.extend(child for child in (node.left, node.right) if child is not None)

    def leaf_nodes(self) -> list[Node]:
        """Return the leaves from left to right."""
        return [node for node in self._preorder_nodes() if node.is_external()]

    def copy(self) -> BSTTree:
        """Return a deep copy of the tree structure with copied value lists."""
        clone = BSTTree()
        if self.root is None:
            return clone
        clone.root = Node(self.root.key, list(self.root.values))
        stack = [(self.root, clone.root)]
        while stack:
            source, target = stack.pop()
            if source.left is not None:
                target.left = Node(source.left.key, list(source.left.values), parent=target)
                stack.append((source.left, target.left))
            if source.right is not None:
                target.right = Node(source.right.key, list(source.right.values), parent=target)
                stack.append((source.right, target.right))
        clone._size = self._size
        return clone