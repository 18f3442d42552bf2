"""Pairs of a natural number and a real number."""

from dataclasses import dataclass

from estructuras.scanner import Scanner


@dataclass(frozen=True)
class Info:
    """An immutable element made of a natural and a real component."""

    natural: int
    real: float

    def __post_init__(self):
        if self.natural < 0:
            raise ValueError(f"natural component must be non-negative: {self.natural}")

    def __str__(self):
        return f"({self.natural},{self.real:4.2f})"


def read_info(scanner):
    """Read an element written as '(natural,real)' from a scanner."""

    def expect(symbol):
        found = scanner.read_char()
        if found != symbol:
            raise ValueError(f"expected {symbol!r}, found {found!r}")

    expect("(")
    natural = scanner.read_nat()
    expect(",")
    real = scanner.read_double()
    expect(")")
    return Info(natural, real)


def parse_info(text):
    """Parse a whole string of the form '(natural,real)'."""
    scanner = Scanner(text)
    info = read_info(scanner)
    if not scanner.at_end():
        raise ValueError(f"trailing text after element: {text!r}")
    return info