"""First-in first-out queues of Info elements."""

from collections import deque


class Cola:
    """A queue of Info elements; the front is the oldest element."""

    def __init__(self):
        self._items = deque()

    def enqueue(self, info):
        """Add ``info`` at the back of the queue."""
        self._items.append(info)

    def front(self):
        """Return the oldest element."""
        if not self._items:
            raise IndexError("front of an empty cola")
        return self._items[0]

    def dequeue(self):
        """Remove and return the oldest element."""
        if not self._items:
            raise IndexError("dequeue from an empty cola")
        return self._items.popleft()

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        """Iterate from the front to the back."""
        return iter(list(self._items))

    def __repr__(self):
        return f"Cola({list(self._items)!r})"