"""Sets of words kept as first-child, next-sibling letter trees."""

LEAF = "\0"
ROOT = "~"


class Palabras:
    """A node of a letter tree.

    ``child`` is the first of the node's subtrees and ``sibling`` the next
    tree in the sequence of its parent's subtrees. Siblings are kept in
    increasing order of letter. A word ends at a leaf whose letter is the
    null character, which sorts before every other letter. The root's letter
    is not part of any word.
    """

    __slots__ = ("letter", "child", "sibling")

    def __init__(self, letter=ROOT):
        self.letter = letter
        self.child = None
        self.sibling = None

    @classmethod
    def from_word(cls, word):
        """Return a tree holding ``word`` as its only word."""
        root = cls()
        cursor = root
        for letter in word + LEAF:
            cursor.child = cls(letter)
            cursor = cursor.child
        return root

    def insert(self, word):
        """Add ``word``; adding a word that is already present has no effect."""
        node = self
        for letter in word + LEAF:
            previous = None
            current = node.child
            while current is not None and current.letter < letter:
                previous = current
                current = current.sibling
            if current is None or current.letter != letter:
                created = type(self)(letter)
                created.sibling = current
                if previous is None:
                    node.child = created
                else:
                    previous.sibling = created
                current = created
            node = current

    def __iter__(self):
        """Yield the words of the tree in lexicographic order."""
        return iter_words("", self.child)

    def __repr__(self):
        return f"Palabras({self.letter!r})"


def iter_words(prefix, sequence):
    """Yield ``prefix`` joined with each root-to-leaf path of the trees in ``sequence``.

    ``sequence`` is a chain of sibling trees; the words come out in
    lexicographic order, without the leaf's null character.
    """
    node = sequence
    while node is not None:
        if node.letter == LEAF:
            yield prefix
        else:
            yield from iter_words(prefix + node.letter, node.child)
        node = node.sibling