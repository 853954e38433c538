import copy as _copy
import operator
import sys
from typing import Any, Callable, Dict, Generic, Iterable, Iterator, List, Optional, TextIO, TypeVar

T = TypeVar('T')


class BinarySearchTree(Generic[T]):
    """Unbalanced binary search tree over a totally ordered element type.

    Duplicates are rejected: ``insert`` returns False and leaves the tree
    unchanged when an equal element is already stored. No rebalancing is
    performed, so sorted input degenerates into a chain; every walk below
    uses an explicit stack so that depth is bounded by memory rather than
    by the interpreter's recursion limit.
    """

    class Node:
        def __init__(self, value: T) -> None:
            self.value: T = value
            self.left: Optional['BinarySearchTree.Node'] = None
            self.right: Optional['BinarySearchTree.Node'] = None

    def __init__(self, values: Optional[Iterable[T]] = None, output: Optional[TextIO] = None) -> None:
        self._root: Optional[BinarySearchTree.Node] = None
        self._size: int = 0
        self._output: Optional[TextIO] = output
        if values is not None:
            for value in values:
                self.insert(value)

    def insert(self, value: T) -> bool:
        if self._root is None:
            self._root = BinarySearchTree.Node(value)
            self._size += 1
            return True

        node = self._root
        while True:
            if node.value == value:
                return False
            if node.value > value:
                if node.left is None:
                    node.left = BinarySearchTree.Node(value)
                    self._size += 1
                    return True
                node = node.left
            else:
                if node.right is None:
                    node.right = BinarySearchTree.Node(value)
                    self._size += 1
                    return True
                node = node.right

    def remove(self, value: T) -> bool:
        parent: Optional[BinarySearchTree.Node] = None
        node = self._root
        is_left_child = False

        while node is not None and not node.value == value:
            parent = node
            if node.value > value:
                node = node.left
                is_left_child = True
            else:
                node = node.right
                is_left_child = False

        if node is None:
            return False

        replacement = self._delete_node(node)
        if parent is None:
            self._root = replacement
        elif is_left_child:
            parent.left = replacement
        else:
            parent.right = replacement
        self._size -= 1
        return True

    def _delete_node(self, node: Node) -> Optional[Node]:
        """Unlink ``node`` and return the subtree that takes over its slot."""
        if node.left is None or node.right is None:
            replacement = node.left if node.left is not None else node.right
            node.left = None
            node.right = None
            return replacement

        successor_parent = node
        successor = node.right
        while successor.left is not None:
            successor_parent = successor
            successor = successor.left

        if successor_parent is node:
            node.right = successor.right
        else:
            successor_parent.left = successor.right

        node.value = successor.value
        successor.right = None
        return node

    def search(self, value: T) -> bool:
        node = self._root
        while node is not None:
            if node.value == value:
                return True
            if node.value > value:
                node = node.left
            else:
                node = node.right
        return False

    def contains(self, value: T) -> bool:
        return self.search(value)

    def select(self, k: int) -> Optional[T]:
        """Return the k-th smallest element (0-based), or None if k is out of range."""
        if isinstance(k, bool):
            return None
        try:
            k = operator.index(k)
        except TypeError:
            return None
        if k < 0 or k >= self._size:
            return None

        node = self._root
        while node is not None:
            left_count = self._count(node.left)
            if left_count == k:
                return node.value
            if k < left_count:
                node = node.left
            else:
                k -= left_count + 1
                node = node.right
        return None

    def print(self, file: Optional[TextIO] = None) -> None:
        """Write the elements in ascending order, space separated, then a newline.

        Output goes to ``file`` if given, else to the sink the tree was built
        with, else to the current ``sys.stdout``.
        """
        sink = file if file is not None else self._output
        if sink is None:
            sink = sys.stdout
        for value in self._walk_in_order():
            sink.write(f"{value} ")
        sink.write("\n")

    def count(self) -> int:
        return self._count(self._root)

    def height(self) -> int:
        if self._root is None:
            return 0
        deepest = 0
        stack = [(self._root, 1)]
        while stack:
            node, depth = stack.pop()
            if depth > deepest:
                deepest = depth
            if node.left is not None:
                stack.append((node.left, depth + 1))
            if node.right is not None:
                stack.append((node.right, depth + 1))
        return deepest

    def destroy(self) -> int:
        """Release every node, children before parents. Returns the number released."""
        released = 0
        for node in self._post_order_nodes():
            node.left = None
            node.right = None
            released += 1
        self._root = None
        self._size = 0
        return released

    def clear(self) -> None:
        self.destroy()

    def min(self) -> T:
        if self._root is None:
            raise ValueError("min from empty tree")
        return self._find_min(self._root).value

    def max(self) -> T:
        if self._root is None:
            raise ValueError("max from empty tree")
        return self._find_max(self._root).value

    def is_empty(self) -> bool:
        return self._root is None

    def in_order(self) -> List[T]:
        return list(self._walk_in_order())

    def pre_order(self) -> List[T]:
        result: List[T] = []
        if self._root is None:
            return result
        stack: List[BinarySearchTree.Node] = [self._root]
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return result

    def post_order(self) -> List[T]:
        return [node.value for node in self._post_order_nodes()]

    def copy(self) -> 'BinarySearchTree[T]':
        return self._clone(lambda value: value)

    def _clone(self, copy_value: Callable[[T], T],
               clone: Optional['BinarySearchTree[T]'] = None) -> 'BinarySearchTree[T]':
        if clone is None:
            clone = BinarySearchTree(output=self._output)
        if self._root is None:
            return clone

        root = BinarySearchTree.Node(copy_value(self._root.value))
        stack = [(self._root, root)]
        while stack:
            src, dest = stack.pop()
            if src.left is not None:
                dest.left = BinarySearchTree.Node(copy_value(src.left.value))
                stack.append((src.left, dest.left))
            if src.right is not None:
                dest.right = BinarySearchTree.Node(copy_value(src.right.value))
                stack.append((src.right, dest.right))

        clone._root = root
        clone._size = self._size
        return clone

    def _walk_in_order(self) -> Iterator[T]:
        stack: List[BinarySearchTree.Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def _post_order_nodes(self) -> List[Node]:
        nodes: List[BinarySearchTree.Node] = []
        if self._root is None:
            return nodes
        stack: List[BinarySearchTree.Node] = [self._root]
        while stack:
            node = stack.pop()
            nodes.append(node)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        nodes.reverse()
        return nodes

    def _count(self, node: Optional[Node]) -> int:
        if node is None:
            return 0
        total = 0
        stack = [node]
        while stack:
            node = stack.pop()
            total += 1
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        return total

    def _find_min(self, node: Node) -> Node:
        while node.left is not None:
            node = node.left
        return node

    def _find_max(self, node: Node) -> Node:
        while node.right is not None:
            node = node.right
        return node

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: T) -> bool:
        return self.search(value)

    def __iter__(self) -> Iterator[T]:
        return iter(self.in_order())

    def __copy__(self) -> 'BinarySearchTree[T]':
        return self.copy()

    def __deepcopy__(self, memo: Dict[int, Any]) -> 'BinarySearchTree[T]':
        clone: BinarySearchTree[T] = BinarySearchTree(output=self._output)
        memo[id(self)] = clone
        return self._clone(lambda value: _copy.deepcopy(value, memo), clone)

    def __repr__(self) -> str:
        return f"BinarySearchTree({self.in_order()})"

    def __str__(self) -> str:
        return f"BinarySearchTree(size={self._size})"
