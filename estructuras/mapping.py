"""Bounded mappings from naturals to reals."""


class Mapping:
    """Associations from natural keys to real values, at most ``capacity`` of them."""

    def __init__(self, capacity):
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative: {capacity}")
        self._capacity = capacity
        self._table = {}

    @property
    def capacity(self):
        return self._capacity

    def associate(self, key, value):
        """Associate ``key`` with ``value``; the key must be new and the mapping not full."""
        if self.is_full():
            raise ValueError("mapping is full")
        if key in self._table:
            raise ValueError(f"key already associated: {key}")
        self._table[key] = value

    def dissociate(self, key):
        """Remove the association of ``key``."""
        try:
            del self._table[key]
        except KeyError:
            raise KeyError(key) from None

    def __contains__(self, key):
        return key in self._table

    def value(self, key):
        """Return the value associated with ``key``."""
        try:
            return self._table[key]
        except KeyError:
            raise KeyError(key) from None

    def is_full(self):
        """Return True if the mapping holds ``capacity`` associations."""
        return len(self._table) >= self._capacity

    def __len__(self):
        return len(self._table)

    def __repr__(self):
        return f"Mapping(capacity={self._capacity}, {self._table!r})"