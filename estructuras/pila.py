"""Last-in first-out stacks of Info elements."""


class Pila:
    """A stack of Info elements; the top is the newest element."""

    def __init__(self):
        self._items = []

    def push(self, info):
        """Put ``info`` on top of the stack."""
        self._items.append(info)

    def top(self):
        """Return the newest element."""
        if not self._items:
            raise IndexError("top of an empty pila")
        return self._items[-1]

    def pop(self):
        """Remove and return the newest element."""
        if not self._items:
            raise IndexError("pop from an empty pila")
        return self._items.pop()

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        """Iterate from the top to the bottom."""
        return iter(self._items[::-1])

    def __repr__(self):
        return f"Pila({self._items!r})"