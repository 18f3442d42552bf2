"""Sequences of natural numbers with an implicit current position."""


class Iterador:
    """An append-only sequence of naturals with a current position.

    The position is undefined when the sequence is empty or after advancing
    past the last element.
    """

    def __init__(self, items=()):
        self._items = list(items)
        self._current = None

    def add(self, elem):
        """Append ``elem``; the current position is unchanged."""
        self._items.append(elem)

    def reset(self):
        """Move the position to the first element, if there is one."""
        self._current = 0 if self._items else None

    def advance(self):
        """Move to the next element, leaving the position undefined after the last."""
        if self._current is not None and self._current + 1 < len(self._items):
            self._current += 1
        else:
            self._current = None

    def is_defined(self):
        """Return True if the current position is defined."""
        return self._current is not None

    def current(self):
        """Return the element at the current position."""
        if self._current is None:
            raise IndexError("current position is not defined")
        return self._items[self._current]

    def __iter__(self):
        return iter(list(self._items))

    def __len__(self):
        return len(self._items)

    def __repr__(self):
        return f"Iterador({self._items!r})"