"""Binary max-heap of vertices keyed on integer priority."""

from dataclasses import dataclass

from adjgraph._errors import EmptyQueueError


@dataclass(slots=True, eq=False)
class QueueItem:
    """A vertex held in a PriorityQueue.

    Attributes:
        vertex: The queued vertex.
        priority: Its priority; higher pops first.
        index: Position in the heap array, or -1 once popped.

    """

    vertex: int
    priority: int
    index: int = -1


class PriorityQueue:
    """Max-priority queue with in-place priority updates.

    Items keep track of their own heap position so that ``update`` can
    repair the heap in O(log n) without searching. The pop order of items
    with equal priority is unspecified.
    """

    def __init__(self) -> None:
        self._heap: list[QueueItem] = []

    def push(self, vertex: int, priority: int) -> QueueItem:
        """Insert a vertex and return the item tracking it."""
        item = QueueItem(vertex, priority, len(self._heap))
        self._heap.append(item)
        self._sift_up(item.index)
        return item

    def pop(self) -> QueueItem:
        """Remove and return the item with the highest priority.

        Raises:
            EmptyQueueError: If the queue is empty.

        """
        if not self._heap:
            msg = "pop from an empty priority queue"
            raise EmptyQueueError(msg)
        last = len(self._heap) - 1
        self._swap(0, last)
        item = self._heap.pop()
        item.index = -1
        if self._heap:
            self._sift_down(0)
        return item

    def peek(self) -> QueueItem:
        if not self._heap:
            msg = "peek into an empty priority queue"
            raise EmptyQueueError(msg)
        return self._heap[0]

    def update(self, item: QueueItem, priority: int) -> None:
        """Change the priority of a queued item and restore heap order.

        Args:
            item: An item returned by ``push`` that has not been popped.
            priority: The new priority.

        Raises:
            ValueError: If the item is not in this queue.

        """
        if not (0 <= item.index < len(self._heap)) or self._heap[item.index] is not item:
            msg = f"Item for vertex {item.vertex} is not in the queue"
            raise ValueError(msg)
        old = item.priority
        item.priority = priority
        if priority > old:
            self._sift_up(item.index)
        elif priority < old:
            self._sift_down(item.index)

    def _sift_up(self, i: int) -> None:
        while i > 0:
            parent = (i - 1) // 2
            if self._heap[parent].priority >= self._heap[i].priority:
                break
            self._swap(i, parent)
            i = parent

    def _sift_down(self, i: int) -> None:
        n = len(self._heap)
        while True:
            largest = i
            for child in (2 * i + 1, 2 * i + 2):
                if child < n and self._heap[child].priority > self._heap[largest].priority:
                    largest = child
            if largest == i:
                return
            self._swap(i, largest)
            i = largest

    def _swap(self, i: int, j: int) -> None:
        heap = self._heap
        heap[i], heap[j] = heap[j], heap[i]
        heap[i].index = i
        heap[j].index = j

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)
