"""
Binary heap with handle-indexed updates.

Each element carries a hashable handle. The heap keeps a handle -> position
map in lock-step with its backing list, which makes it possible to update or
remove an element by handle in O(log n). This is the decrease-key operation
Dijkstra's algorithm needs for its frontier.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 6 (Heapsort, priority queues).
"""

from typing import Callable, Dict, Generic, Hashable, Iterable, List, Optional, TypeVar

from ..diagnostics import check_heap_invariants, is_debug_enabled

T = TypeVar("T")
H = TypeVar("H", bound=Hashable)


class IndexedHeap(Generic[T, H]):
    """
    Min- or max-heap over arbitrary elements, addressable by handle.

    The ordering is supplied as a strict predicate: ``before(a, b)`` is True
    when ``a`` must sit above ``b``. Use ``lambda a, b: a < b`` for a min-heap
    and ``lambda a, b: a > b`` for a max-heap.

    Elements that compare equal under ``before`` come out in an unspecified
    order; no secondary tie-break is applied.

    Complexity:
        - peek: O(1)
        - insert, remove, replace: O(log n)
        - construction from items: O(n)

    Example:
        >>> heap = IndexedHeap(lambda a, b: a[0] < b[0], lambda e: e[1])
        >>> heap.insert((10, "x"))
        >>> heap.insert((5, "y"))
        >>> heap.replace((3, "x"))
        (10, 'x')
        >>> heap.remove()
        (3, 'x')
    """

    def __init__(
        self,
        before: Callable[[T, T], bool],
        handle_of: Callable[[T], H],
        items: Iterable[T] = (),
    ):
        """
        Create a heap, optionally heapifying initial items bottom-up.

        Args:
            before: Strict ordering predicate.
            handle_of: Projection from an element to its unique handle.
            items: Initial elements. Their order does not matter.

        Raises:
            ValueError: If two initial items share a handle.
        """
        self._before = before
        self._handle_of = handle_of
        self._nodes: List[T] = list(items)
        self._handles: Dict[H, int] = {}

        for i, node in enumerate(self._nodes):
            handle = handle_of(node)
            if handle in self._handles:
                raise ValueError(f"Heap already contains an element with handle {handle!r}.")
            self._handles[handle] = i

        for i in range(len(self._nodes) // 2 - 1, -1, -1):
            self._sift_down(i, len(self._nodes))

        self._validate()

    def __len__(self) -> int:
        return len(self._nodes)

    def __bool__(self) -> bool:
        return bool(self._nodes)

    def __contains__(self, handle: H) -> bool:
        return handle in self._handles

    @property
    def is_empty(self) -> bool:
        return not self._nodes

    def peek(self) -> Optional[T]:
        """Return the root element without removing it, or None if empty."""
        return self._nodes[0] if self._nodes else None

    def get(self, handle: H) -> Optional[T]:
        """Return the element currently stored under `handle`, or None."""
        position = self._handles.get(handle)
        return None if position is None else self._nodes[position]

    def insert(self, element: T) -> None:
        """
        Add an element whose handle is not yet in the heap.

        Args:
            element: Element to insert.

        Raises:
            ValueError: If an element with the same handle is present. The
                heap is left unchanged.
        """
        handle = self._handle_of(element)
        if handle in self._handles:
            raise ValueError(f"Heap already contains an element with handle {handle!r}.")
        self._handles[handle] = len(self._nodes)
        self._nodes.append(element)
        self._sift_up(len(self._nodes) - 1)
        self._validate()

    def extend(self, elements: Iterable[T]) -> None:
        """Insert each element in turn."""
        for element in elements:
            self.insert(element)

    def remove(self) -> Optional[T]:
        """
        Remove and return the root element.

        Returns:
            The root, or None if the heap is empty.
        """
        if not self._nodes:
            return None
        if len(self._nodes) == 1:
            self._handles.clear()
            return self._nodes.pop()

        root = self._nodes[0]
        del self._handles[self._handle_of(root)]
        last = self._nodes.pop()
        self._nodes[0] = last
        self._handles[self._handle_of(last)] = 0
        self._sift_down(0, len(self._nodes))
        self._validate()
        return root

    def replace(self, element: T) -> Optional[T]:
        """
        Insert `element`, or update the element that shares its handle.

        Updating removes the old element from its recorded position and
        inserts the new one, so this serves as both decrease-key and
        increase-key.

        Args:
            element: New value for its handle.

        Returns:
            The element previously stored under the handle, or None if this
            was a plain insert.
        """
        position = self._handles.get(self._handle_of(element))
        if position is None:
            self.insert(element)
            return None
        previous = self._remove_at(position)
        self.insert(element)
        return previous

    def _remove_at(self, index: int) -> T:
        last = len(self._nodes) - 1
        if index != last:
            self._swap(index, last)
            self._sift_down(index, last)
            self._sift_up(index)
        node = self._nodes.pop()
        del self._handles[self._handle_of(node)]
        return node

    def _swap(self, i: int, j: int) -> None:
        nodes = self._nodes
        self._handles[self._handle_of(nodes[i])] = j
        self._handles[self._handle_of(nodes[j])] = i
        nodes[i], nodes[j] = nodes[j], nodes[i]

    def _sift_up(self, index: int) -> None:
        nodes = self._nodes
        child = nodes[index]
        while index > 0:
            parent_index = (index - 1) // 2
            parent = nodes[parent_index]
            if not self._before(child, parent):
                break
            nodes[index] = parent
            self._handles[self._handle_of(parent)] = index
            index = parent_index
        nodes[index] = child
        self._handles[self._handle_of(child)] = index

    def _sift_down(self, index: int, end: int) -> None:
        # Only slots below `end` take part; _remove_at parks the removed
        # element at `end` before popping it.
        nodes = self._nodes
        while True:
            left = 2 * index + 1
            right = left + 1
            first = index
            if left < end and self._before(nodes[left], nodes[first]):
                first = left
            if right < end and self._before(nodes[right], nodes[first]):
                first = right
            if first == index:
                return
            self._swap(index, first)
            index = first

    def _validate(self) -> None:
        if is_debug_enabled():
            check_heap_invariants(self)


__all__ = ["IndexedHeap"]
