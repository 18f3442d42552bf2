# estructuras

Classic data structures, algorithms built on them, and a command
interpreter that drives them from a text script.

## What is inside

- `estructuras.info`: `Info`, an immutable pair of a natural number and a
  real number. It prints as `(4,2.00)`. `parse_info` parses a whole string of
  that form and `read_info` reads one from a `Scanner`.
- `estructuras.scanner`: `Scanner`, a reader of whitespace-separated
  naturals, integers, reals, characters, words and lines.
- `estructuras.cadena`: `Cadena`, a circular doubly linked sequence of
  `Info` values. `next()` returns a view that starts one element later and
  shares its nodes with the original.
- `estructuras.colcadenas`: `ColCadenas`, a fixed number of cadenas, each
  addressed by its position.
- `estructuras.iterador`: `Iterador`, an append-only sequence of naturals
  with a current position (`reset`, `advance`, `is_defined`, `current`).
- `estructuras.cola` and `estructuras.pila`: `Cola` (a FIFO queue) and
  `Pila` (a LIFO stack) of `Info` values.
- `estructuras.mapping`: `Mapping`, associations from natural keys to reals
  with a fixed capacity. Associating a key that is already present, or adding
  to a full mapping, raises `ValueError`.
- `estructuras.palabras`: `Palabras`, a first-child/next-sibling letter tree
  that holds a set of words, and `iter_words` to list them.
- `estructuras.abb`: binary search trees of `Abb` nodes keyed by the natural
  component. A tree is `None` or an `Abb`. The functions are `insert`,
  `remove`, `find_subtree`, `min_info`, `max_info` and `copy_tree`, plus
  `rotate`, which applies the AVL rotations `LL`, `LR`, `RR` and `RL`.
  Functions that change a tree return its new root.
- `estructuras.aplicaciones`: algorithms over those structures:
  `is_avl`, `avl_min`, `balanced`, `union_trees`, `merge_cadenas`,
  `filtered_sorted`, `is_sorted`, `sorted_by_modulo`, `smaller_than_rest`,
  `linearize`, `format_tree`, `is_perfect`, `smaller`, `ascending_path`,
  `short_words`, `find_prefix_end` and `reversed_iterator`.
- `estructuras.timing`: timed workloads for each structure. Each measures
  CPU time and returns `Bien.` or a line that says the time limit was
  exceeded. `run_timing` selects a workload by name.
- `estructuras.interpreter`: `Interpreter`, which runs named commands
  against one of each structure, and `main`, the entry point of the command
  line.

## Installing

```
pip install .
```

## Using the interpreter

The `estructuras` command reads a script from the file given as its
argument, or from standard input when there is no argument:

```
estructuras commands.txt
estructuras < commands.txt
```

Each command is a name followed by its parameters. Anything after the
parameters on the same line is ignored. Before each command the interpreter
prints a numbered prompt. Given this input:

```
insertarAlFinal 3 1.5
insertarAlFinal 7 2
imprimirCadena
insertarEnAbb (5,0.0)
insertarEnAbb (2,1.0)
imprimirAbb
Fin
```

it prints:

```
1>Se insertó (3,1.50) al final de la cadena.
2>Se insertó (7,2.00) al final de la cadena.
3>(3,1.50)(7,2.00)
4>Se insertó (5,0.00) en el abb.
5>Se insertó (2,1.00) en el abb.
6>
(5,0.00)
-(2,1.00)
7>Fin.
```

Some commands need a particular kind of argument:

- `#` echoes the rest of its line as a comment.
- `reiniciarEstructuras` replaces every structure with an empty one.
- `Fin` ends the session.
- `tiempo-map`, `tiempo-abb`, `tiempo-cadena` and the other `tiempo-...`
  commands run a timing workload. They take a size, a number of iterations
  and a limit in seconds, for example `tiempo-abb 1000 100 5`.

An unknown command prints `Comando no reconocido.` A command whose
precondition does not hold stops the run. Examples are removing a key that
is not there, or reading from an empty stack. The error goes to standard
error and the exit status is 1.

## Using the library

```python
from estructuras.abb import insert
from estructuras.aplicaciones import format_tree, is_avl
from estructuras.info import Info

tree = None
for key in (5, 2, 8):
    tree = insert(Info(key, 0.0), tree)

print(format_tree(tree), end="")
# -(8,0.00)
# (5,0.00)
# -(2,0.00)
print(is_avl(tree))  # True
```

## Running the tests

```
pip install .[test]
pytest
```