import pytest

from estructuras.abb import Abb, insert
from estructuras.aplicaciones import (
    ascending_path,
    avl_min,
    balanced,
    filtered_sorted,
    find_prefix_end,
    format_tree,
    is_avl,
    is_perfect,
    is_sorted,
    linearize,
    merge_cadenas,
    reversed_iterator,
    short_words,
    smaller,
    smaller_than_rest,
    sorted_by_modulo,
    union_trees,
)
from estructuras.cadena import Cadena
from estructuras.info import Info
from estructuras.iterador import Iterador
from estructuras.palabras import Palabras, iter_words


def _height(tree):
    if tree is None:
        return 0
    return 1 + max(_height(tree.left), _height(tree.right))


def _size(tree):
    if tree is None:
        return 0
    return 1 + _size(tree.left) + _size(tree.right)


def _nodes(tree):
    if tree is None:
        return []
    return [tree] + _nodes(tree.left) + _nodes(tree.right)


def _tree(*keys, real=0.0):
    tree = None
    for key in keys:
        tree = insert(Info(key, real), tree)
    return tree


def _naturals(cad):
    return [info.natural for info in cad]


def test_is_avl_true_for_empty_and_balanced():
    assert is_avl(None)
    assert is_avl(_tree(2, 1, 3))


def test_is_avl_false_for_chain():
    assert not is_avl(_tree(1, 2, 3))


@pytest.mark.parametrize("h", range(7))
def test_avl_min_properties(h):
    tree = avl_min(h)
    assert _height(tree) == h
    assert is_avl(tree)
    n = _size(tree)
    assert _naturals(linearize(tree)) == list(range(1, n + 1))
    for node in _nodes(tree):
        assert _size(node.right) <= _size(node.left)
        assert node.info.real == 0


def test_avl_min_sizes_follow_recurrence():
    sizes = [_size(avl_min(h)) for h in range(8)]
    for h in range(2, 8):
        assert sizes[h] == sizes[h - 1] + sizes[h - 2] + 1


def test_filtered_sorted_sums_reals():
    cad = Cadena([(3, 1.0), (1, 2.0), (3, 4.0), (5, 1.0)])
    it = Iterador([1, 2, 3])
    it.reset()
    result = filtered_sorted(cad, it)
    assert _naturals(result) == [1, 3]
    assert [info.real for info in result] == [2.0, 5.0]
    assert not it.is_defined()


def test_filtered_sorted_empty_inputs():
    it = Iterador([1])
    it.reset()
    assert len(filtered_sorted(Cadena(), it)) == 0
    assert len(filtered_sorted(Cadena([(1, 1.0)]), Iterador([1]))) == 0


def test_is_sorted():
    assert is_sorted(Cadena())
    assert is_sorted(Cadena([(4, 0.0)]))
    assert is_sorted(Cadena([(1, 0.0), (2, 0.0), (7, 0.0)]))
    assert not is_sorted(Cadena([(1, 0.0), (1, 0.0)]))
    assert not is_sorted(Cadena([(3, 0.0), (2, 0.0)]))


def test_merge_cadenas_union_prefers_first():
    cad1 = Cadena([(1, 1.5), (4, 4.5), (6, 6.5)])
    cad2 = Cadena([(2, 2.0), (4, 9.0), (8, 8.0)])
    merged = merge_cadenas(cad1, cad2)
    assert _naturals(merged) == sorted({1, 4, 6, 2, 8})
    assert merged.info(4).real == 4.5
    assert is_sorted(merged)
    assert len(cad1) == 3 and len(cad2) == 3


def test_merge_with_empty_is_copy():
    cad = Cadena([(1, 1.0), (2, 2.0)])
    merged = merge_cadenas(Cadena(), cad)
    assert list(merged) == list(cad)
    merged.remove_first()
    assert len(cad) == 2


@pytest.mark.parametrize("n", [0, 1, 2, 5, 10, 16])
def test_balanced_round_trip_and_shape(n):
    infos = [Info(2 * i + 1, float(i)) for i in range(n)]
    tree = balanced(infos)
    assert list(linearize(tree)) == infos
    for node in _nodes(tree):
        assert _size(node.right) - _size(node.left) in (0, 1)


def test_union_trees():
    tree1 = balanced([Info(i, 1.0) for i in range(0, 20, 2)])
    tree2 = balanced([Info(i, 2.0) for i in range(0, 30, 3)])
    union = union_trees(tree1, tree2)
    expected = merge_cadenas(linearize(tree1), linearize(tree2))
    assert list(linearize(union)) == list(expected)
    assert linearize(union).info(6).real == 1.0
    assert is_avl(union)


def test_sorted_by_modulo_is_stable():
    cad = Cadena([(7, 0.0), (4, 1.0), (10, 2.0), (3, 3.0), (1, 4.0), (6, 5.0)])
    result = list(sorted_by_modulo(3, cad))
    assert result == sorted(cad, key=lambda info: info.natural % 3)


def test_sorted_by_modulo_rejects_zero():
    with pytest.raises(ValueError):
        sorted_by_modulo(0, Cadena([(1, 0.0)]))


def test_smaller_than_rest():
    cad = Cadena([(5, 0.0), (1, 0.0), (3, 0.0), (2, 0.0), (4, 0.0)])
    stack = smaller_than_rest(cad, len(cad))
    assert [info.natural for info in stack] == [4, 2, 1]


def test_smaller_than_rest_invariant():
    cad = Cadena([((i % 13) * (i % 11), 0.0) for i in range(1, 40)])
    items = list(cad)
    result = [info.natural for info in smaller_than_rest(cad, len(cad))]
    kept = [
        info.natural
        for pos, info in enumerate(items)
        if all(info.natural < later.natural for later in items[pos + 1:])
    ]
    assert result == kept[::-1]


def test_linearize_sorted():
    tree = _tree(5, 2, 8, 1, 9, 3)
    assert _naturals(linearize(tree)) == [1, 2, 3, 5, 8, 9]
    assert len(linearize(None)) == 0


def test_format_tree():
    tree = _tree(2, 1, 3)
    assert format_tree(tree) == "-(3,0.00)\n(2,0.00)\n-(1,0.00)\n"
    assert format_tree(None) == ""


def test_is_perfect():
    assert is_perfect(None)
    assert is_perfect(balanced([Info(i, 0.0) for i in range(7)]))
    assert not is_perfect(balanced([Info(i, 0.0) for i in range(6)]))


def test_smaller_replaces_failing_root():
    tree = Abb(Info(2, 5.0), Abb(Info(1, 0.0)), Abb(Info(3, 0.0)))
    result = smaller(1.0, tree)
    assert result.info.natural == 1
    assert result.left is None
    assert result.right.info.natural == 3
    assert _naturals(linearize(tree)) == [1, 2, 3]


def test_smaller_keeps_only_low_reals():
    tree = balanced([Info(i, float(i % 4)) for i in range(1, 32)])
    result = smaller(2.0, tree)
    assert all(info.real < 2.0 for info in linearize(result))
    assert is_sorted(linearize(result))
    expected = [info.natural for info in linearize(tree) if info.real < 2.0]
    assert _naturals(linearize(result)) == expected


def test_ascending_path():
    tree = _tree(5, 3, 8, 1, 4)
    full = ascending_path(4, 10, tree)
    assert list(full) == [4, 3, 5]
    assert not full.is_defined()
    assert list(ascending_path(4, 2, tree)) == [4, 3]
    assert list(ascending_path(5, 0, tree)) == []


def test_ascending_path_missing_key():
    with pytest.raises(KeyError):
        ascending_path(7, 3, _tree(5, 3))


def test_short_words():
    palabras = Palabras()
    words = ["a", "ab", "abc", "b", "bcde", "ca"]
    for word in words:
        palabras.insert(word)
    for k in range(0, 6):
        assert short_words(k, palabras) == [w for w in sorted(words) if len(w) <= k]


def test_find_prefix_end():
    palabras = Palabras()
    for word in ["abc", "abd", "b"]:
        palabras.insert(word)
    node = find_prefix_end("ab", palabras)
    assert node.letter == "b"
    assert list(iter_words("ab", node.child)) == ["abc", "abd"]
    assert find_prefix_end("ac", palabras) is None
    assert find_prefix_end("abcd", palabras) is None
    assert find_prefix_end("", palabras) is None


def test_reversed_iterator():
    it = Iterador([3, 1, 4, 1, 5])
    result = reversed_iterator(it)
    assert list(result) == [5, 1, 4, 1, 3]
    assert not it.is_defined()
    assert not result.is_defined()
    assert list(it) == [3, 1, 4, 1, 5]