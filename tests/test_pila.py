import pytest

from estructuras.info import Info
from estructuras.pila import Pila


def make(*naturals):
    pila = Pila()
    for n in naturals:
        pila.push(Info(n, float(n)))
    return pila


def test_new_pila_is_empty():
    assert len(Pila()) == 0
    assert list(Pila()) == []


def test_top_is_newest():
    pila = make(7, 3, 9)
    assert pila.top() == Info(9, 9.0)
    assert len(pila) == 3


def test_pop_reverses_insertion_order():
    pila = make(4, 1, 8, 2)
    removed = [pila.pop().natural for _ in range(4)]
    assert removed == [2, 8, 1, 4]
    assert len(pila) == 0


def test_iteration_top_to_bottom_without_consuming():
    pila = make(5, 6, 7)
    assert [i.natural for i in pila] == [7, 6, 5]
    assert len(pila) == 3


def test_interleaved_operations():
    pila = make(1, 2)
    pila.pop()
    pila.push(Info(3, 0.0))
    assert [i.natural for i in pila] == [3, 1]


def test_top_of_empty_raises():
    with pytest.raises(IndexError):
        Pila().top()


def test_pop_of_empty_raises():
    pila = make(1)
    pila.pop()
    with pytest.raises(IndexError):
        pila.pop()