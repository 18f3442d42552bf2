"""Command interpreter that drives every structure from a text script."""

import argparse
import sys

from estructuras.abb import (
    Abb,
    copy_tree,
    find_subtree,
    insert,
    max_info,
    min_info,
    remove,
    rotate,
)
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
from estructuras.cola import Cola
from estructuras.colcadenas import ColCadenas
from estructuras.info import read_info
from estructuras.iterador import Iterador
from estructuras.mapping import Mapping
from estructuras.palabras import Palabras, iter_words
from estructuras.pila import Pila
from estructuras.scanner import Scanner
from estructuras.timing import run_timing

MAP_CAPACITY = 10
COLLECTION_SIZE = 10

TIMING_COMMANDS = frozenset(
    "tiempo-" + name
    for name in (
        "map",
        "esAVL",
        "filtradaOrdenada",
        "cadena",
        "colCadenas",
        "iterador",
        "abb",
        "menores",
        "palabras",
        "pila",
        "cola",
        "ordenadaPorModulo",
        "menoresQueElResto",
    )
)


def _require(condition, message):
    if not condition:
        raise ValueError(message)


def _read_cadena(scanner):
    count = scanner.read_nat()
    return Cadena(read_info(scanner) for _ in range(count))


def _read_sorted_infos(scanner, count):
    infos = []
    for _ in range(count):
        info = read_info(scanner)
        if infos:
            _require(info.natural > infos[-1].natural, "elements must be strictly increasing")
        infos.append(info)
    return infos


def _read_tree(scanner):
    tree = None
    for info in _read_cadena(scanner):
        if find_subtree(info.natural, tree) is None:
            tree = insert(info, tree)
    return tree


def _read_sorted_iterator(scanner):
    it = Iterador()
    first = scanner.read_int()
    if first >= 0:
        it.add(first)
        last = first
        current = scanner.read_nat()
        while current > last:
            it.add(current)
            last = current
            current = scanner.read_nat()
    it.reset()
    return it


class Interpreter:
    """Executes named commands against a fixed set of structures."""

    def __init__(self, out=None):
        self._out = out if out is not None else sys.stdout
        self._commands = {
            name[len("_cmd_"):]: getattr(self, name)
            for name in dir(self)
            if name.startswith("_cmd_")
        }
        self._commands["#"] = self._comment
        self.reset()

    def reset(self):
        """Replace every structure with a new empty one."""
        self.mapping = Mapping(MAP_CAPACITY)
        self.cola = Cola()
        self.pila = Pila()
        self.palabras = Palabras()
        self.abb = None
        self.iterador = Iterador()
        self.colcadenas = ColCadenas(COLLECTION_SIZE)
        self.cadena = Cadena()

    def _write(self, text):
        self._out.write(text)

    def execute(self, name, scanner):
        """Run command ``name`` reading its parameters from ``scanner``.

        Returns False when the command ends the session, True otherwise.
        """
        if name == "Fin":
            self._write("Fin.\n")
            return False
        if name in TIMING_COMMANDS:
            size = scanner.read_nat()
            iterations = scanner.read_nat()
            timeout = scanner.read_nat()
            self._write(run_timing(name, size, iterations, timeout))
            return True
        command = self._commands.get(name)
        if command is None:
            self._write("Comando no reconocido.\n")
        else:
            command(scanner)
        return True

    def run(self, text):
        """Run a whole script, writing a numbered prompt before each command.

        Returns True if the script ended with 'Fin', False if it ran out.
        """
        scanner = Scanner(text)
        count = 0
        while not scanner.at_end():
            count += 1
            self._write(f"{count}>")
            name = scanner.read_word()
            if not self.execute(name, scanner):
                return True
            scanner.skip_line()
        return False

    def _comment(self, scanner):
        self._write(f"# {scanner.read_rest_of_line()}.\n")

    # mapping

    def _cmd_asociarEnMap(self, scanner):
        _require(not self.mapping.is_full(), "mapping is full")
        key = scanner.read_nat()
        value = scanner.read_double()
        self.mapping.associate(key, value)
        self._write("Establecida la asociación.\n")

    def _cmd_desasociarEnMap(self, scanner):
        self.mapping.dissociate(scanner.read_nat())
        self._write("Eliminada la asociación.\n")

    def _cmd_esClaveEnMap(self, scanner):
        found = scanner.read_nat() in self.mapping
        self._write("Existe asociacion.\n" if found else "No existe asociacion.\n")

    def _cmd_valorEnMap(self, scanner):
        self._write(f"{self.mapping.value(scanner.read_nat()):.2f}\n")

    def _cmd_estaLlenoMap(self, scanner):
        self._write("LLeno.\n" if self.mapping.is_full() else "No lleno.\n")

    # pila

    def _cmd_cantidadEnPila(self, scanner):
        self._write(f"Cantidad en pila: {len(self.pila)}.\n")

    def _cmd_apilar(self, scanner):
        info = read_info(scanner)
        self.pila.push(info)
        self._write(f"Apilando {info}\n")

    def _cmd_cima(self, scanner):
        _require(len(self.pila) > 0, "pila is empty")
        self._write(f"{self.pila.top()}\n")

    def _cmd_desapilar(self, scanner):
        _require(len(self.pila) > 0, "pila is empty")
        self.pila.pop()
        self._write("Desapilando.\n")

    # cola

    def _cmd_cantidadEnCola(self, scanner):
        self._write(f"Cantidad en cola: {len(self.cola)}.\n")

    def _cmd_encolar(self, scanner):
        info = read_info(scanner)
        self.cola.enqueue(info)
        self._write(f"Encolando {info}\n")

    def _cmd_frente(self, scanner):
        _require(len(self.cola) > 0, "cola is empty")
        self._write(f"{self.cola.front()}\n")

    def _cmd_desencolar(self, scanner):
        _require(len(self.cola) > 0, "cola is empty")
        self.cola.dequeue()
        self._write("Desencolando.\n")

    # palabras

    def _cmd_insertarPalabra(self, scanner):
        word = scanner.read_word()
        self.palabras.insert(word)
        self._write(f"Insertando {word}.\n")

    def _cmd_imprimirPalabrasCortas(self, scanner):
        k = scanner.read_nat()
        self._write("\n")
        self._write("".join(word + "\n" for word in short_words(k, self.palabras)))

    def _cmd_buscarFinPrefijo(self, scanner):
        prefix = scanner.read_word()
        if prefix == "^":
            prefix = ""
        self._write("\n")
        node = find_prefix_end(prefix, self.palabras)
        if node is None:
            self._write(f"palabras no contiene {prefix}.\n")
        else:
            self._write("".join(word + "\n" for word in iter_words(prefix, node.child)))

    # abb

    def _cmd_rotar(self, scanner):
        key = scanner.read_nat()
        kind = scanner.read_char() + scanner.read_char()
        self.abb = rotate(key, kind, self.abb)
        self._write("\n")

    def _cmd_esVacioAbb(self, scanner):
        self._write(f"El abb {'es' if self.abb is None else 'NO es'} vacío.\n")

    def _cmd_buscarSubarbol(self, scanner):
        key = scanner.read_nat()
        found = find_subtree(key, self.abb)
        if found is not None:
            self._write(str(found.info))
        else:
            self._write(f"{key} no está en el abb.")
        self._write("\n")

    def _require_tree(self):
        _require(self.abb is not None, "abb is empty")
        return self.abb

    def _cmd_raiz(self, scanner):
        self._write(f"La raíz del abb es: {self._require_tree().info}\n")

    def _cmd_izquierdo(self, scanner):
        child = self._require_tree().left
        if child is not None:
            self._write(f"La raíz del hijo izquierdo del abb es: {child.info}\n")
        else:
            self._write("El abb no tiene hijo izquierdo.\n")

    def _cmd_derecho(self, scanner):
        child = self._require_tree().right
        if child is not None:
            self._write(f"La raíz del hijo derecho del abb es: {child.info}\n")
        else:
            self._write("El abb no tiene hijo derecho.\n")

    def _cmd_menorEnAbb(self, scanner):
        self._write(f"El menor en el abb es: {min_info(self._require_tree())}\n")

    def _cmd_mayorEnAbb(self, scanner):
        self._write(f"El mayor en el abb es: {max_info(self._require_tree())}\n")

    def _cmd_insertarEnAbb(self, scanner):
        info = read_info(scanner)
        self.abb = insert(info, self.abb)
        self._write(f"Se insertó {info} en el abb.\n")

    def _cmd_removerDeAbb(self, scanner):
        key = scanner.read_nat()
        self.abb = remove(key, self.abb)
        self._write(f"Se removió {key} del abb.\n")

    def _cmd_copiaAbb(self, scanner):
        self._write("\n" + format_tree(copy_tree(self.abb)))

    def _cmd_consAbb(self, scanner):
        info = read_info(scanner)
        left = find_subtree(scanner.read_nat(), self.abb)
        right = find_subtree(scanner.read_nat(), self.abb)
        _require(
            left is None or max_info(left).natural < info.natural,
            "left subtree must be smaller than the root",
        )
        _require(
            right is None or min_info(right).natural > info.natural,
            "right subtree must be larger than the root",
        )
        tree = Abb(info, copy_tree(left), copy_tree(right))
        self._write("\n" + format_tree(tree))

    # iterador

    def _cmd_agregarAIterador(self, scanner):
        elem = scanner.read_nat()
        self.iterador.add(elem)
        self._write(f"Agregando {elem} a it.\n")

    def _cmd_reiniciarIterador(self, scanner):
        self.iterador.reset()
        self._write("Reiniciando it.\n")

    def _cmd_avanzarIterador(self, scanner):
        self.iterador.advance()
        self._write("Avanzando en it.\n")

    def _cmd_actualEnIterador(self, scanner):
        self._write(f"El actual de it es {self.iterador.current()}.\n")

    def _cmd_estaDefinidaActual(self, scanner):
        state = "está" if self.iterador.is_defined() else "NO está"
        self._write(f"Actual de it {state} definida.\n")

    # cadena

    def _cmd_cantidadEnCadena(self, scanner):
        self._write(f"La cantidad es {len(self.cadena)}.\n")

    def _cmd_estaEnCadena(self, scanner):
        natural = scanner.read_nat()
        state = "está" if natural in self.cadena else "no está"
        self._write(f"{natural} {state} en la cadena.\n")

    def _cmd_insertarAlInicio(self, scanner):
        natural = scanner.read_nat()
        real = scanner.read_double()
        self.cadena.prepend(natural, real)
        self._write(f"Se insertó ({natural},{real:4.2f}) al inicio de la cadena.\n")

    def _cmd_insertarAlFinal(self, scanner):
        natural = scanner.read_nat()
        real = scanner.read_double()
        self.cadena.append(natural, real)
        self._write(f"Se insertó ({natural},{real:4.2f}) al final de la cadena.\n")

    def _cmd_primeroEnCadena(self, scanner):
        self._write(f"El primero es {self.cadena.first()}\n")

    def _cmd_infoCadena(self, scanner):
        self._write(f"El elemento es {self.cadena.info(scanner.read_nat())}\n")

    def _cmd_cadenaSiguiente(self, scanner):
        view = self.cadena
        for _ in range(scanner.read_nat()):
            view = view.next()
        self._write(f"{view}\n")

    def _cmd_removerDeCadena(self, scanner):
        natural = scanner.read_nat()
        self.cadena.remove(natural)
        self._write(f"Se removió la primera aparición de {natural} de la cadena.\n")

    def _cmd_removerPrimero(self, scanner):
        self.cadena.remove_first()
        self._write("Se removió el primer elemento de la cadena.\n")

    def _cmd_imprimirCadena(self, scanner):
        self._write(f"{self.cadena}\n")

    def _cmd_copiaCadena(self, scanner):
        self._write(f"{self.cadena.copy()}\n")

    # colCadenas

    def _cmd_cadenaDeColCadenas(self, scanner):
        pos = scanner.read_nat()
        self._write(f"La cadena {pos} es :{self.colcadenas.cadena(pos)}\n")

    def _cmd_tamanioColCadenas(self, scanner):
        self._write(f"La colección tiene {len(self.colcadenas)} cadenas .\n")

    def _cmd_cantidadColCadenas(self, scanner):
        pos = scanner.read_nat()
        count = self.colcadenas.count(pos)
        self._write(f"La cantidad en la cadena {pos} es {count}.\n")

    def _cmd_estaEnColCadenas(self, scanner):
        natural = scanner.read_nat()
        pos = scanner.read_nat()
        state = "está" if self.colcadenas.contains(natural, pos) else "no está"
        self._write(f"{natural} {state} en la cadena {pos}.\n")

    def _cmd_insertarEnColCadenas(self, scanner):
        natural = scanner.read_nat()
        real = scanner.read_double()
        pos = scanner.read_nat()
        self.colcadenas.insert(natural, real, pos)
        self._write(f"Se insertó ({natural},{real:4.2f}) en la cadena {pos}.\n")

    def _cmd_infoEnColCadenas(self, scanner):
        natural = scanner.read_nat()
        pos = scanner.read_nat()
        info = self.colcadenas.info(natural, pos)
        self._write(f"La primera aparición de {natural} en la cadena {pos} es {info}\n")

    def _cmd_removerDeColCadenas(self, scanner):
        natural = scanner.read_nat()
        pos = scanner.read_nat()
        self.colcadenas.remove(natural, pos)
        self._write(f"Se removió la primera aparición de {natural} de la cadena {pos}.\n")

    # aplicaciones

    def _cmd_filtradaOrdenada(self, scanner):
        it = _read_sorted_iterator(scanner)
        self._write(f"{filtered_sorted(self.cadena, it)}\n")

    def _cmd_esAvl(self, scanner):
        self._write("Es AVL.\n" if is_avl(self.abb) else "NO es AVL.\n")

    def _cmd_avlMin(self, scanner):
        self._write(format_tree(avl_min(scanner.read_nat())))

    def _cmd_estaOrdenada(self, scanner):
        state = "está" if is_sorted(self.cadena) else "no está"
        self._write(f"La cadena {state} ordenada.\n")

    def _cmd_mezclaCadenas(self, scanner):
        first = _read_cadena(scanner)
        _require(is_sorted(first), "first cadena must be sorted")
        second = _read_cadena(scanner)
        _require(is_sorted(second), "second cadena must be sorted")
        self._write(f"{merge_cadenas(first, second)}\n")

    def _cmd_crearBalanceado(self, scanner):
        infos = _read_sorted_infos(scanner, scanner.read_nat())
        self._write("\n" + format_tree(balanced(infos)))

    def _cmd_unionAbbs(self, scanner):
        first = _read_tree(scanner)
        second = _read_tree(scanner)
        self._write("\n" + format_tree(union_trees(first, second)))

    def _cmd_ordenadaPorModulo(self, scanner):
        p = scanner.read_nat()
        _require(p > 1, "modulus must be greater than 1")
        queue = sorted_by_modulo(p, self.cadena)
        self._write("".join(str(info) for info in queue) + "\n")

    def _cmd_menoresQueElResto(self, scanner):
        stack = smaller_than_rest(self.cadena, len(self.cadena))
        self._write("".join(str(info) for info in stack) + "\n")

    def _cmd_linealizacion(self, scanner):
        self._write(f"{linearize(self.abb)}\n")

    def _cmd_esPerfecto(self, scanner):
        self._write(f"El abb {'es' if is_perfect(self.abb) else 'NO es'} perfecto.\n")

    def _cmd_imprimirAbb(self, scanner):
        self._write("\n" + format_tree(self.abb))

    def _cmd_menores(self, scanner):
        limit = int(scanner.read_double())
        self._write("\n" + format_tree(smaller(limit, self.abb)))

    def _cmd_caminoAscendente(self, scanner):
        key = scanner.read_nat()
        _require(find_subtree(key, self.abb) is not None, f"{key} is not in the abb")
        k = scanner.read_nat()
        path = ascending_path(key, k, self.abb)
        path.reset()
        parts = []
        while path.is_defined():
            parts.append(f"{path.current()} ")
            path.advance()
        state = "está" if path.is_defined() else "NO está"
        self._write("".join(parts) + f"\nLa posición actual {state} definida.\n")

    def _cmd_reversoDeIterador(self, scanner):
        reverso = reversed_iterator(self.iterador)
        reverso.reset()
        if self.iterador.is_defined():
            self._write("Error: la posición de iter no debe estar definida.\n")
        parts = []
        while reverso.is_defined():
            parts.append(f"{reverso.current()} ")
            reverso.advance()
        self._write("".join(parts) + "\n")

    def _cmd_reiniciarEstructuras(self, scanner):
        self.reset()
        self._write("Estructuras reiniciadas.\n")


def main(argv=None):
    """Run a command script from a file, or from standard input."""
    parser = argparse.ArgumentParser(description="Run a command script over the structures.")
    parser.add_argument("script", nargs="?", help="file with commands (default: standard input)")
    args = parser.parse_args(argv)
    if args.script is None:
        text = sys.stdin.read()
    else:
        with open(args.script, encoding="utf-8") as handle:
            text = handle.read()
    try:
        Interpreter(sys.stdout).run(text)
    except (ValueError, KeyError, IndexError, EOFError) as error:
        sys.stdout.flush()
        print(f"error: {error}", file=sys.stderr)
        return 1
    return 0