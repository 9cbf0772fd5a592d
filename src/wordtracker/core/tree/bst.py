from __future__ import annotations

"""
Binary Search Tree Engine.

Generic, unbalanced binary search tree used as the backing store of the word
index. Elements are ordered with the '<' operator alone; two elements that
are not less than each other are considered equal and cannot coexist in the
tree.

All walks (search, insertion, height, traversals) are iterative. Trees built
from already-sorted input degenerate into a chain as deep as the tree is
large, so native recursion is never used on node links.
"""

from dataclasses import dataclass
from typing import Any, Generic, Iterator, List, Optional, Tuple, TypeVar

# Element type. Must provide '<' as a total order.
T = TypeVar("T")


# -----------------------------------------------------------------------------
# NODE MODEL
# -----------------------------------------------------------------------------

@dataclass(eq=False)
class TreeNode(Generic[T]):
    """
    Single node of an OrderedTree.

    A node exclusively owns its children. There are no parent links:
    structural changes always go through the parent's child slot.

    Attributes:
        element: The stored value.
        left: Subtree holding smaller elements.
        right: Subtree holding greater elements.
    """
    element: T
    left: Optional["TreeNode[T]"] = None
    right: Optional["TreeNode[T]"] = None

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def _compare(a: Any, b: Any) -> int:
    """Three-way comparison built on '<' only."""
    if a < b:
        return -1
    if b < a:
        return 1
    return 0


def _require(value: Any, what: str) -> None:
    if value is None:
        raise ValueError(f"{what} cannot be None.")


# -----------------------------------------------------------------------------
# TREE
# -----------------------------------------------------------------------------

class OrderedTree(Generic[T]):
    """
    Unbalanced binary search tree with stack-based traversals.

    The tree rejects elements comparing equal to an element already stored.
    Merging payloads of equal elements is the caller's concern.
    """

    def __init__(self, seed: Optional[T] = None) -> None:
        """
        Create an empty tree, or a single-node tree when a seed is given.

        Args:
            seed: Optional first element.
        """
        self._root: Optional[TreeNode[T]] = None
        self._size = 0
        if seed is not None:
            self._root = TreeNode(seed)
            self._size = 1

    # -------------------------------------------------------------------------
    # Size & Shape
    # -------------------------------------------------------------------------

    @property
    def root(self) -> Optional[TreeNode[T]]:
        return self._root

    def get_root(self) -> TreeNode[T]:
        """
        Return the root node.

        Raises:
            LookupError: If the tree is empty.
        """
        if self._root is None:
            raise LookupError("The tree is empty.")
        return self._root

    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def height(self) -> int:
        """
        Count the levels of the tree (0 when empty, 1 for a lone root).

        Equivalent to 1 + max(height(left), height(right)), evaluated with
        an explicit stack of (node, depth) pairs. Never cached.
        """
        if self._root is None:
            return 0

        best = 0
        stack: List[Tuple[TreeNode[T], int]] = [(self._root, 1)]
        while stack:
            node, depth = stack.pop()
            if depth > best:
                best = depth
            if node.left is not None:
                stack.append((node.left, depth + 1))
            if node.right is not None:
                stack.append((node.right, depth + 1))
        return best

    def clear(self) -> None:
        self._root = None
        self._size = 0

    # -------------------------------------------------------------------------
    # Lookup
    # -------------------------------------------------------------------------

    def search(self, key: T) -> Optional[TreeNode[T]]:
        """
        Find the node holding an element equal to key.

        Args:
            key: Probe element. Only its ordering is used.

        Returns:
            Optional[TreeNode[T]]: The matching node, or None if not found.

        Raises:
            ValueError: If key is None.
        """
        _require(key, "Search key")

        node = self._root
        while node is not None:
            cmp = _compare(key, node.element)
            if cmp == 0:
                return node
            node = node.left if cmp < 0 else node.right
        return None

    def contains(self, key: T) -> bool:
        """
        Report whether an element equal to key is stored.

        Raises:
            ValueError: If key is None.
        """
        _require(key, "Entry")
        return self.search(key) is not None

    def __contains__(self, key: object) -> bool:
        if key is None:
            return False
        return self.search(key) is not None  # type: ignore[arg-type]

    # -------------------------------------------------------------------------
    # Mutation
    # -------------------------------------------------------------------------

    def add(self, element: T) -> bool:
        """
        Insert element as a new leaf.

        Args:
            element: Value to insert.

        Returns:
            bool: True if inserted, False if an equal element already exists
                  (the tree is left untouched).

        Raises:
            ValueError: If element is None.
        """
        _require(element, "New entry")

        if self._root is None:
            self._root = TreeNode(element)
            self._size += 1
            return True

        node = self._root
        while True:
            cmp = _compare(element, node.element)
            if cmp == 0:
                return False
            if cmp < 0:
                if node.left is None:
                    node.left = TreeNode(element)
                    break
                node = node.left
            else:
                if node.right is None:
                    node.right = TreeNode(element)
                    break
                node = node.right

        self._size += 1
        return True

    def remove_min(self) -> Optional[TreeNode[T]]:
        """
        Detach and return the node holding the smallest element.

        The node's right subtree takes its place. Returns None if empty.
        """
        if self._root is None:
            return None

        parent: Optional[TreeNode[T]] = None
        node = self._root
        while node.left is not None:
            parent = node
            node = node.left

        if parent is None:
            self._root = node.right
        else:
            parent.left = node.right

        node.right = None
        self._size -= 1
        return node

    def remove_max(self) -> Optional[TreeNode[T]]:
        """
        Detach and return the node holding the greatest element.

        The node's left subtree takes its place. Returns None if empty.
        """
        if self._root is None:
            return None

        parent: Optional[TreeNode[T]] = None
        node = self._root
        while node.right is not None:
            parent = node
            node = node.right

        if parent is None:
            self._root = node.left
        else:
            parent.right = node.left

        node.left = None
        self._size -= 1
        return node

    # -------------------------------------------------------------------------
    # Traversals
    # -------------------------------------------------------------------------

    def inorder(self) -> "InorderIterator[T]":
        """Iterate elements in ascending order."""
        return InorderIterator(self._root)

    def preorder(self) -> "PreorderIterator[T]":
        """Iterate elements node-first, then left subtree, then right subtree."""
        return PreorderIterator(self._root)

    def postorder(self) -> "PostorderIterator[T]":
        """Iterate elements left subtree, right subtree, then node."""
        return PostorderIterator(self._root)

    def __iter__(self) -> Iterator[T]:
        return self.inorder()

    def __repr__(self) -> str:
        return f"OrderedTree(size={self._size})"


# -----------------------------------------------------------------------------
# ITERATORS
# -----------------------------------------------------------------------------
# Each iterator snapshots nothing but the root it was created from. Mutating
# the tree while an iterator is live gives undefined results.

class InorderIterator(Iterator[T]):
    """Ascending traversal driven by a stack of pending left spines."""

    def __init__(self, root: Optional[TreeNode[T]]) -> None:
        self._stack: List[TreeNode[T]] = []
        self._push_left_spine(root)

    def _push_left_spine(self, node: Optional[TreeNode[T]]) -> None:
        while node is not None:
            self._stack.append(node)
            node = node.left

    def __iter__(self) -> "InorderIterator[T]":
        return self

    def __next__(self) -> T:
        if not self._stack:
            raise StopIteration
        node = self._stack.pop()
        self._push_left_spine(node.right)
        return node.element


class PreorderIterator(Iterator[T]):
    """Node-left-right traversal with a single stack."""

    def __init__(self, root: Optional[TreeNode[T]]) -> None:
        self._stack: List[TreeNode[T]] = [root] if root is not None else []

    def __iter__(self) -> "PreorderIterator[T]":
        return self

    def __next__(self) -> T:
        if not self._stack:
            raise StopIteration
        node = self._stack.pop()
        # Right goes in first so left is popped first.
        if node.right is not None:
            self._stack.append(node.right)
        if node.left is not None:
            self._stack.append(node.left)
        return node.element


class PostorderIterator(Iterator[T]):
    """
    Left-right-node traversal with two stacks.

    Construction drains the first stack into the second in node-right-left
    order; popping the second stack then yields left-right-node.
    """

    def __init__(self, root: Optional[TreeNode[T]]) -> None:
        self._output: List[TreeNode[T]] = []
        pending: List[TreeNode[T]] = [root] if root is not None else []

        while pending:
            node = pending.pop()
            self._output.append(node)
            if node.left is not None:
                pending.append(node.left)
            if node.right is not None:
                pending.append(node.right)

    def __iter__(self) -> "PostorderIterator[T]":
        return self

    def __next__(self) -> T:
        if not self._output:
            raise StopIteration
        return self._output.pop().element
