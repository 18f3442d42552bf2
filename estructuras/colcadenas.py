"""Fixed-size collections of Cadena sequences."""

from estructuras.cadena import Cadena


class ColCadenas:
    """A fixed number of cadenas, each identified by a position from 0 to size - 1."""

    def __init__(self, size):
        if size < 0:
            raise ValueError(f"size must be non-negative: {size}")
        self._cadenas = [Cadena() for _ in range(size)]

    def __len__(self):
        return len(self._cadenas)

    def cadena(self, pos):
        """Return the cadena at ``pos``; it is shared, not copied."""
        if not 0 <= pos < len(self._cadenas):
            raise IndexError(f"position {pos} out of range 0..{len(self._cadenas) - 1}")
        return self._cadenas[pos]

    def count(self, pos):
        """Return the number of elements of the cadena at ``pos``."""
        return len(self.cadena(pos))

    def contains(self, natural, pos):
        """Return True if the cadena at ``pos`` has an element with ``natural``."""
        return natural in self.cadena(pos)

    def insert(self, natural, real, pos):
        """Insert an element at the start of the cadena at ``pos``."""
        self.cadena(pos).prepend(natural, real)

    def info(self, natural, pos):
        """Return the first element with ``natural`` in the cadena at ``pos``."""
        return self.cadena(pos).info(natural)

    def remove(self, natural, pos):
        """Remove the first element with ``natural`` from the cadena at ``pos``."""
        self.cadena(pos).remove(natural)