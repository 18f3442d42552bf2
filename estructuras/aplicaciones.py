"""Algorithms built on cadenas, iterators, trees, queues, stacks and word trees."""

from itertools import cycle, islice

from estructuras.abb import Abb, max_info, remove
from estructuras.cadena import Cadena
from estructuras.cola import Cola
from estructuras.iterador import Iterador
from estructuras.pila import Pila


def _avl_height(tree):
    """Return the height of ``tree``, or None if some node is out of balance."""
    if tree is None:
        return 0
    left = _avl_height(tree.left)
    if left is None:
        return None
    right = _avl_height(tree.right)
    if right is None or abs(left - right) > 1:
        return None
    return max(left, right) + 1


def is_avl(tree):
    """Return True if ``tree`` has the AVL structure property."""
    return _avl_height(tree) is not None


def avl_min(h):
    """Return an AVL tree of height ``h`` with the fewest possible nodes.

    The naturals run from 1 to n in order, the reals are 0, and no right
    subtree has more nodes than its sibling on the left.
    """
    if h < 0:
        raise ValueError(f"height must be non-negative: {h}")
    counter = iter(range(1, 2**h + 1))

    def build(height):
        if height <= 0:
            return None
        if height == 1:
            return Abb(_info(next(counter), 0.0))
        left = build(height - 1)
        root = _info(next(counter), 0.0)
        right = build(height - 2)
        return Abb(root, left, right)

    return build(h)


def _info(natural, real):
    from estructuras.info import Info

    return Info(natural, real)


def filtered_sorted(cad, it):
    """Return a cadena with one element per naturals of ``it`` found in ``cad``.

    Each element's real is the sum of the reals of ``cad`` with that natural.
    ``it`` is read from its current position onwards and is left undefined.
    """
    result = Cadena()
    if len(cad) == 0 or not it.is_defined():
        return result
    sums = {}
    for info in cad:
        sums[info.natural] = sums.get(info.natural, 0.0) + info.real
    while it.is_defined():
        natural = it.current()
        if natural in sums:
            result.append(natural, sums.pop(natural))
        it.advance()
    return result


def is_sorted(cad):
    """Return True if the naturals of ``cad`` are strictly increasing."""
    naturals = [info.natural for info in cad]
    return all(a < b for a, b in zip(naturals, naturals[1:]))


def merge_cadenas(cad1, cad2):
    """Merge two strictly sorted cadenas; on equal naturals ``cad1``'s element wins."""
    first = list(cad1)
    second = list(cad2)
    merged = Cadena()
    i = j = 0
    while i < len(first) and j < len(second):
        a, b = first[i], second[j]
        if a.natural < b.natural:
            merged.append(a.natural, a.real)
            i += 1
        elif a.natural == b.natural:
            merged.append(a.natural, a.real)
            i += 1
            j += 1
        else:
            merged.append(b.natural, b.real)
            j += 1
    for info in first[i:] + second[j:]:
        merged.append(info.natural, info.real)
    return merged


def balanced(infos):
    """Build a tree from strictly sorted ``infos``.

    At every node the right subtree has as many nodes as the left or one more.
    """
    items = list(infos)

    def build(low, high):
        if low > high:
            return None
        middle = (low + high) // 2
        return Abb(items[middle], build(low, middle - 1), build(middle + 1, high))

    return build(0, len(items) - 1)


def union_trees(tree1, tree2):
    """Return a balanced tree with the elements of both trees; ``tree1`` wins on ties."""
    merged = merge_cadenas(linearize(tree1), linearize(tree2))
    return balanced(merged)


def sorted_by_modulo(p, cad):
    """Return a queue of the elements of ``cad`` ordered by natural modulo ``p``.

    Elements with the same remainder keep their order in ``cad``.
    """
    if p < 1:
        raise ValueError(f"modulus must be positive: {p}")
    buckets = [[] for _ in range(p)]
    for info in cad:
        buckets[info.natural % p].append(info)
    queue = Cola()
    for bucket in buckets:
        for info in bucket:
            queue.enqueue(info)
    return queue


def smaller_than_rest(cad, count):
    """Return a stack of the elements smaller than every element after them.

    Only the first ``count`` elements of ``cad`` are considered. The top of
    the stack is the last such element.
    """
    stack = Pila()
    if count <= 0 or len(cad) == 0:
        return stack
    for info in islice(cycle(cad), count):
        while len(stack) > 0 and info.natural <= stack.top().natural:
            stack.pop()
        stack.push(info)
    return stack


def linearize(tree):
    """Return a cadena with the elements of ``tree`` in increasing order."""
    result = Cadena()

    def walk(node):
        while node is not None:
            walk(node.left)
            result.append(node.info.natural, node.info.real)
            node = node.right

    walk(tree)
    return result


def format_tree(tree):
    """Render ``tree`` one element per line in descending order.

    Each line starts with as many dashes as the element's depth.
    """
    lines = []

    def walk(node, depth):
        if node is None:
            return
        walk(node.right, depth + 1)
        lines.append("-" * depth + str(node.info) + "\n")
        walk(node.left, depth + 1)

    walk(tree, 0)
    return "".join(lines)


def is_perfect(tree):
    """Return True if every level of ``tree`` is complete."""

    def perfect_height(node):
        if node is None:
            return 0
        left = perfect_height(node.left)
        if left is None:
            return None
        right = perfect_height(node.right)
        if right is None or right != left:
            return None
        return left + 1

    return perfect_height(tree) is not None


def smaller(limit, tree):
    """Return a new tree with the elements whose real is below ``limit``.

    The shape follows ``tree``. Where a node fails the condition and both
    of its filtered subtrees are non-empty, the largest element of the
    filtered left subtree takes its place.
    """
    if tree is None:
        return None
    left = smaller(limit, tree.left)
    right = smaller(limit, tree.right)
    if tree.info.real < limit:
        return Abb(tree.info, left, right)
    if left is None:
        return right
    if right is None:
        return left
    largest = max_info(left)
    left = remove(largest.natural, left)
    return Abb(largest, left, right)


def ascending_path(key, k, tree):
    """Return an iterator with up to ``k`` naturals on the path from ``key`` up to the root.

    The iterator's position is left undefined.
    """
    path = []
    node = tree
    while node is not None:
        path.append(node.info.natural)
        if key == node.info.natural:
            break
        node = node.left if key < node.info.natural else node.right
    else:
        raise KeyError(key)
    return Iterador(list(reversed(path))[:k])


def short_words(k, palabras):
    """Return the words of ``palabras`` of length at most ``k``, in lexicographic order."""
    words = []

    def walk(node, prefix):
        depth = len(prefix)
        if depth > k:
            return
        while node is not None:
            if node.letter == "\0":
                words.append(prefix)
            else:
                walk(node.child, prefix + node.letter)
            node = node.sibling

    walk(palabras.child, "")
    return words


def find_prefix_end(prefix, palabras):
    """Return the node holding the last letter of ``prefix``, or None if absent."""
    if not prefix:
        return None
    sequence = palabras.child
    found = None
    for letter in prefix:
        node = sequence
        while node is not None and node.letter != letter:
            node = node.sibling
        if node is None:
            return None
        found = node
        sequence = node.child
    return found


def reversed_iterator(it):
    """Return a new iterator with the elements of ``it`` in reverse order.

    ``it`` is reset and walked to the end, so its position is left undefined;
    the result's position is undefined too.
    """
    items = []
    it.reset()
    while it.is_defined():
        items.append(it.current())
        it.advance()
    items.reverse()
    return Iterador(items)