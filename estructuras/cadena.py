"""Unbounded circular sequences of Info elements."""

from estructuras.info import Info


class _Node:
    __slots__ = ("info", "next", "prev")

    def __init__(self, info):
        self.info = info
        self.next = self
        self.prev = self


class Cadena:
    """A circular doubly linked sequence of Info elements.

    Views made by ``next`` share their nodes with the sequence they come from.
    """

    def __init__(self, items=()):
        self._head = None
        for item in items:
            if isinstance(item, Info):
                self.append(item.natural, item.real)
            else:
                natural, real = item
                self.append(natural, real)

    @classmethod
    def _view(cls, head):
        view = cls()
        view._head = head
        return view

    def _link_before_head(self, natural, real):
        node = _Node(Info(natural, real))
        head = self._head
        if head is None:
            self._head = node
        else:
            node.next = head
            node.prev = head.prev
            head.prev.next = node
            head.prev = node
        return node

    def _unlink(self, node):
        if node.next is node:
            self._head = None
            return
        node.prev.next = node.next
        node.next.prev = node.prev
        if node is self._head:
            self._head = node.next

    def _nodes(self):
        head = self._head
        if head is None:
            return
        node = head
        while True:
            yield node
            node = node.next
            if node is head:
                break

    def append(self, natural, real):
        """Add an element at the end."""
        self._link_before_head(natural, real)

    def prepend(self, natural, real):
        """Add an element at the start."""
        self._head = self._link_before_head(natural, real)

    def remove_first(self):
        """Remove and return the first element."""
        if self._head is None:
            raise IndexError("remove_first from an empty cadena")
        node = self._head
        self._unlink(node)
        return node.info

    def copy(self):
        """Return an independent copy."""
        return Cadena(iter(self))

    def __len__(self):
        return sum(1 for _ in self._nodes())

    def __contains__(self, natural):
        return any(node.info.natural == natural for node in self._nodes())

    def __iter__(self):
        for node in self._nodes():
            yield node.info

    def _find(self, natural):
        for node in self._nodes():
            if node.info.natural == natural:
                return node
        raise KeyError(natural)

    def info(self, natural):
        """Return the first element whose natural component is ``natural``."""
        return self._find(natural).info

    def first(self):
        """Return the first element."""
        if self._head is None:
            raise IndexError("first of an empty cadena")
        return self._head.info

    def next(self):
        """Return a view that starts at the element after the first.

        With fewer than two elements the cadena itself is returned.
        """
        head = self._head
        if head is None or head.next is head:
            return self
        return Cadena._view(head.next)

    def remove(self, natural):
        """Remove the first element whose natural component is ``natural``."""
        self._unlink(self._find(natural))

    def __str__(self):
        return "".join(str(info) for info in self)

    def __repr__(self):
        return f"Cadena({[(i.natural, i.real) for i in self]!r})"