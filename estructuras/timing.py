"""Timed workloads that exercise each structure and compare CPU time with a limit."""

import random
import time

from estructuras.abb import Abb, copy_tree, find_subtree, insert, max_info, min_info, remove
from estructuras.aplicaciones import (
    balanced,
    filtered_sorted,
    is_avl,
    is_sorted,
    merge_cadenas,
    reversed_iterator,
    smaller,
    smaller_than_rest,
    sorted_by_modulo,
    find_prefix_end,
    union_trees,
)
from estructuras.cadena import Cadena
from estructuras.cola import Cola
from estructuras.colcadenas import ColCadenas
from estructuras.info import Info
from estructuras.iterador import Iterador
from estructuras.mapping import Mapping
from estructuras.palabras import Palabras
from estructuras.pila import Pila

_MAP_MODULUS = 1000000
_ALPHABET = "abcd"


def _verdict(elapsed, timeout):
    if elapsed > timeout:
        return f"ERROR, tiempo excedido; {elapsed:.1f} > {timeout} \n"
    return "Bien.\n"


def populate_vocabulary(prefix, limit, palabras):
    """Insert ``prefix`` and every extension of it over 'a'..'d' up to length ``limit``.

    Returns ``palabras``.
    """
    if len(prefix) > limit:
        raise ValueError(f"prefix longer than limit: {len(prefix)} > {limit}")
    palabras.insert(prefix)
    if len(prefix) < limit:
        for letter in _ALPHABET:
            populate_vocabulary(prefix + letter, limit, palabras)
    return palabras


def time_map(size, iterations, timeout):
    """Fill and query bounded mappings with pseudo-random keys."""
    rng = random.Random(1)
    start = time.process_time()
    for _ in range(iterations):
        mapping = Mapping(size)
        for _ in range(1, size):
            key = rng.randrange(_MAP_MODULUS)
            if key in mapping:
                mapping.dissociate(key)
            mapping.associate(key, float(key))
        for _ in range(_MAP_MODULUS):
            key = rng.randrange(_MAP_MODULUS)
            if key in mapping:
                mapping.value(key)
    return _verdict(time.process_time() - start, timeout)


def time_is_avl(size, iterations, timeout):
    """Check the AVL property on a balanced tree and on two unbalanced variants."""
    infos = [Info(i + 2, 0.0) for i in range(size)]
    tree = balanced(infos)
    start = time.process_time()
    for _ in range(iterations):
        is_avl(tree)
    tree = insert(Info(1, 0.0), tree)
    tree = insert(Info(0, 0.0), tree)
    for _ in range(iterations):
        is_avl(tree)
    tree = remove(0, tree)
    tree = insert(Info(size + 3, 0.0), tree)
    tree = insert(Info(size + 4, 0.0), tree)
    for _ in range(iterations):
        is_avl(tree)
    return _verdict(time.process_time() - start, timeout)


def time_filtered_sorted(size, iterations, timeout):
    """Filter a cadena by an iterator whose position was never reset."""
    cad = Cadena()
    it = Iterador()
    for i in range(size + 1):
        cad.prepend(i, 0.0)
        cad.append(i, 0.0)
        it.add(i)
        it.add(0)
    cad.prepend(1234567891, 0.0)
    cad.append(1345678912, 0.0)
    it.add(1234567891)
    it.add(1345678912)
    start = time.process_time()
    for _ in range(iterations):
        filtered_sorted(cad, it)
    return _verdict(time.process_time() - start, timeout)


def time_cadena(size, iterations, timeout):
    """Build, merge and rotate cadenas."""
    start = time.process_time()
    cad = Cadena()
    for i in range(size, 0, -1):
        cad.prepend(i, 0.0)
    second = Cadena()
    for i in range(1, size + 1):
        second.append(2 * i, 0.0)
    if is_sorted(second):
        merge_cadenas(cad, second)
    for _ in range(iterations):
        first = cad.first().natural
        cad.remove_first()
        cad.append(first, 0.0)
        cad = cad.next()
    return _verdict(time.process_time() - start, timeout)


def time_colcadenas(size, iterations, timeout):
    """Fill the ends of a collection of cadenas and read from it repeatedly."""
    output = []
    start = time.process_time()
    col = ColCadenas(size)
    for i in range(1, size + 1):
        col.insert(i, 0.0, 0)
        col.insert(i, 0.0, size - 1)
    for _ in range(iterations):
        col.cadena(0)
        col.cadena(size // 2)
        cadena = col.cadena(size - 1)
        if cadena.first().natural == 0:
            output.append("ERROR: Componente natural igual a 0.\n")
    output.append(_verdict(time.process_time() - start, timeout))
    return "".join(output)


def time_iterador(size, iterations, timeout):
    """Fill, reverse and cycle through an iterator."""
    output = []
    start = time.process_time()
    it = Iterador()
    for i in range(1, size + 1):
        it.add(i)
    reversed_iterator(it)
    for _ in range(iterations):
        if it.is_defined():
            if it.current() == 0:
                output.append("ERROR: actual igual a 0.\n")
            it.advance()
        else:
            it.reset()
    output.append(_verdict(time.process_time() - start, timeout))
    return "".join(output)


def time_abb(size, iterations, timeout):
    """Build, join, copy, search and update binary search trees."""
    odd = [Info(2 * i + 1, 0.0) for i in range(size)]
    even = [Info(2 * i, 0.0) for i in range(size)]
    start = time.process_time()
    tree1 = balanced(odd)
    tree2 = balanced(even)
    joined = union_trees(tree1, tree2)
    if joined is None:
        raise ValueError("size must be positive")
    copy = Abb(joined.info, copy_tree(joined.left), copy_tree(joined.right))
    middle = 2 * (size // 2)
    for _ in range(iterations):
        min_info(joined)
        max_info(copy)
        find_subtree(1, tree2)
        find_subtree(2 * size + 2, tree1)
        find_subtree(middle, tree1)
        find_subtree(middle + 1, tree1)
        tree2 = insert(Info(middle + 1, 0.0), tree2)
        tree2 = remove(middle + 1, tree2)
    return _verdict(time.process_time() - start, timeout)


def time_menores(size, iterations, timeout):
    """Filter a perfect tree of height ``size`` whose odd naturals have large reals."""
    count = 2**size - 1
    infos = [Info(i, 0.0 if i % 2 == 0 else 10.0) for i in range(count)]
    tree = balanced(infos)
    start = time.process_time()
    for _ in range(iterations):
        smaller(1, tree)
    return _verdict(time.process_time() - start, timeout)


def time_palabras(size, iterations, timeout):
    """Search prefixes in a vocabulary of all words over 'a'..'d' up to length ``size``."""
    palabras = populate_vocabulary("", size, Palabras())
    start = time.process_time()
    for _ in range(iterations):
        find_prefix_end("aaaa", palabras)
        find_prefix_end("bcbabcd", palabras)
        find_prefix_end("dddd", palabras)
    return _verdict(time.process_time() - start, timeout)


def time_pila(size, iterations, timeout):
    """Push and pop ``size`` elements, ``iterations`` times."""
    stack = Pila()
    start = time.process_time()
    for _ in range(iterations):
        for j in range(1, size + 1):
            stack.push(Info(j, 0.0))
            len(stack)
        for _ in range(size):
            stack.top()
            stack.pop()
    return _verdict(time.process_time() - start, timeout)


def time_cola(size, iterations, timeout):
    """Enqueue and dequeue ``size`` elements, ``iterations`` times."""
    queue = Cola()
    start = time.process_time()
    for _ in range(iterations):
        for j in range(1, size + 1):
            queue.enqueue(Info(j, 0.0))
            len(queue)
        for _ in range(size):
            queue.front()
            queue.dequeue()
    return _verdict(time.process_time() - start, timeout)


def time_sorted_by_modulo(size, iterations, timeout):
    """Sort a cadena by remainder modulo 2, 7 and 10."""
    cad = Cadena()
    for i in range(1, size + 1):
        cad.prepend(i, 0.0)
    start = time.process_time()
    for _ in range(iterations):
        sorted_by_modulo(2, cad)
        sorted_by_modulo(7, cad)
        sorted_by_modulo(10, cad)
    return _verdict(time.process_time() - start, timeout)


def time_smaller_than_rest(size, iterations, timeout):
    """Find the elements smaller than the rest in a cadena of repeating values."""
    cad = Cadena()
    for i in range(1, size + 1):
        cad.prepend((i % 13) * (i % 11), 0.0)
    start = time.process_time()
    for _ in range(iterations):
        smaller_than_rest(cad, size)
    return _verdict(time.process_time() - start, timeout)


_WORKLOADS = {
    "map": time_map,
    "esAVL": time_is_avl,
    "filtradaOrdenada": time_filtered_sorted,
    "cadena": time_cadena,
    "colCadenas": time_colcadenas,
    "iterador": time_iterador,
    "abb": time_abb,
    "menores": time_menores,
    "palabras": time_palabras,
    "pila": time_pila,
    "cola": time_cola,
    "ordenadaPorModulo": time_sorted_by_modulo,
    "menoresQueElResto": time_smaller_than_rest,
}


def run_timing(name, size, iterations, timeout):
    """Run the workload named ``name`` (with or without the 'tiempo-' prefix)."""
    key = name[len("tiempo-"):] if name.startswith("tiempo-") else name
    try:
        workload = _WORKLOADS[key]
    except KeyError:
        raise ValueError(f"unknown timing workload: {name!r}") from None
    return workload(size, iterations, timeout)