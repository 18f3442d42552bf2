from itertools import product

import pytest

from estructuras.palabras import Palabras
from estructuras.timing import (
    populate_vocabulary,
    run_timing,
    time_abb,
    time_cadena,
    time_cola,
    time_colcadenas,
    time_filtered_sorted,
    time_is_avl,
    time_iterador,
    time_map,
    time_menores,
    time_palabras,
    time_pila,
    time_smaller_than_rest,
    time_sorted_by_modulo,
)

OK = "Bien.\n"
BIG = 1000


def test_populate_vocabulary_all_words():
    palabras = populate_vocabulary("", 2, Palabras())
    words = list(palabras)
    expected = {""} | set(_ALL(1)) | set(_ALL(2))
    assert set(words) == expected
    assert words == sorted(words)
    assert len(words) == 21


def _ALL(n):
    return ["".join(p) for p in product("abcd", repeat=n)]


def test_populate_vocabulary_with_prefix():
    palabras = populate_vocabulary("c", 2, Palabras())
    assert list(palabras) == ["c", "ca", "cb", "cc", "cd"]


def test_populate_vocabulary_prefix_too_long():
    with pytest.raises(ValueError):
        populate_vocabulary("abc", 2, Palabras())


@pytest.mark.parametrize(
    "workload, size, iterations",
    [
        (time_is_avl, 20, 5),
        (time_filtered_sorted, 10, 5),
        (time_cadena, 10, 30),
        (time_colcadenas, 10, 5),
        (time_iterador, 10, 30),
        (time_abb, 10, 5),
        (time_menores, 4, 5),
        (time_palabras, 3, 5),
        (time_pila, 10, 5),
        (time_cola, 10, 5),
        (time_sorted_by_modulo, 20, 5),
        (time_smaller_than_rest, 20, 5),
    ],
)
def test_workloads_within_limit(workload, size, iterations):
    assert workload(size, iterations, BIG) == OK


def test_time_map_within_limit():
    assert time_map(5, 1, BIG) == OK


def test_exceeded_limit_message():
    result = time_pila(5, 1, -1)
    assert result.startswith("ERROR, tiempo excedido; ")
    assert result.endswith(" > -1 \n")


def test_time_cadena_empty_raises():
    with pytest.raises(IndexError):
        time_cadena(0, 1, BIG)


def test_time_abb_empty_raises():
    with pytest.raises(ValueError):
        time_abb(0, 1, BIG)


@pytest.mark.parametrize("name", ["tiempo-pila", "pila", "tiempo-ordenadaPorModulo"])
def test_run_timing_dispatch(name):
    assert run_timing(name, 5, 2, BIG) == OK


def test_run_timing_unknown():
    with pytest.raises(ValueError):
        run_timing("tiempo-nada", 1, 1, BIG)