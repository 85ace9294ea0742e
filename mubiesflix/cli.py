"""Interactive menu for the film catalogue and small demonstrations of the containers."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator

from .bst import BSTTree
from .catalog import AdditionStrategy, CatalogError, MubiesflixBST
from .hashmap import HashMap
from .peli import Peli

_MENU = (
    "MENÚ MUBIESFLIX BST",
    "1. Oferirà a l'usuari especificar la ruta del fitxer que es vulgui carregar a "
    "Mubiesflix. Us proporcionarem, mitjançant el Campus Virtual, diversos fitxers "
    "pelis-*.txt que haureu d'afegir al directori arrel del vostre projecte.",
    "2. Mostrarà les pel·lícules d’un director concret.",
    "3. Mostrarà la valoració mitjana de les pel·lícules d’un director concret.",
    "4. Mostrarà tots els directors ordenats pel seu identificador i les seves pel·lícules.",
    "5. Mostrarà l’identificador més gran assignat als directors de Mubiesflix",
    "6. Mostrarà l’identificador més petit no assignat a cap dels directors de Mubiesflix",
    "7. Permetrà afegir una nova pel·lícula a un director. Per afegir-la a un director ja "
    "existent a Mubiesflix, s’haurà d’especificar l’identificador del director manualment. "
    "En cas de ser un nou director, es pot especificar manualment un nou identificador o "
    "trobar-ne un de manera automàtica seguint l’estratègia d’assignació pre-establerta.",
    "8. Establir una estratègia alternativa d’assignació automàtica d’identificadors de "
    "nous directors.",
    "9. Sortir",
)


class _Tokens:
    """Reads whitespace-separated tokens from a line-oriented input function."""

    def __init__(self, input_fn: Callable[[str], str]) -> None:
        self._input_fn = input_fn
        self._pending: list[str] = []

    def next(self, prompt: str = "") -> str:
        while not self._pending:
            self._pending = self._input_fn(prompt).split()
        return self._pending.pop(0)

    def next_int(self, prompt: str = "") -> int:
        return int(self.next(prompt))

    def next_float(self, prompt: str = "") -> float:
        return float(self.next(prompt))


def show_all(
    catalog: MubiesflixBST,
    ask: Callable[[str], str] | None = None,
    page_size: int = 2,
) -> int:
    """Print every director and their films, asking to continue after each page.

    Return the number of directors printed.
    """
    if ask is None:
        ask = input
    shown = 0
    for director_id, films in catalog.directors():
        print(f"Director: {director_id}\n===")
        for number, peli in enumerate(films, start=1):
            print(f"Pel·lícula {number}: {peli.info()}")
            print()
        print()
        shown += 1
        if shown % page_size == 0:
            answer = ask(f"Vols veure les següents {page_size} directors? (s/n): ")
            if answer.strip()[:1] == "n":
                break
    return shown


def _add_film(catalog: MubiesflixBST, tokens: _Tokens) -> None:
    print("Afegir Pel·lícula")
    peli_id = tokens.next_int("ID de la pel·lícula: ")
    titol = tokens.next("Títol: ")
    durada = tokens.next_int("Durada (minuts): ")
    valoracio = tokens.next_float("Valoració (0-10): ")
    peli = Peli(peli_id, titol, durada, valoracio)
    choice = tokens.next("Vols assignar manualment el ID director? (s/n): ")
    director_id = None
    if choice[:1] == "s":
        director_id = tokens.next_int("Introdueix ID director: ")
    catalog.add_peli(peli, director_id)
    print("Pel·lícula afegida")


def _run_option(option: int, catalog: MubiesflixBST, tokens: _Tokens) -> None:
    if option == 1:
        path = tokens.next("Introdueix el camí del fitxer (sense espais): ")
        for error in catalog.load_from_file(path):
            print(error)
        print("Fitxer carregat")
    elif option == 2:
        director_id = tokens.next_int("Introdueix l'ID del director: ")
        catalog.show_films_by_director(director_id)
    elif option == 3:
        director_id = tokens.next_int("Introdueix l'ID del director: ")
        print(f"Valoració mitjana: {catalog.average_rating(director_id):g}")
    elif option == 4:
        show_all(catalog, tokens.next)
    elif option == 5:
        print(f"La id més gran és:{catalog.largest_director_id()}")
    elif option == 6:
        try:
            free_id = catalog.smallest_free_director_id()
        except CatalogError as exc:
            print(exc)
        else:
            print(f"El ID del director més petit no assignat és: {free_id}")
    elif option == 7:
        _add_film(catalog, tokens)
    elif option == 8:
        print("1. AFTER_LARGEST_ID")
        print("2. SMALLEST_NOTTAKEN_ID")
        catalog.strategy = AdditionStrategy.from_int(tokens.next_int("Nova estratègia: "))
        print("Estratègia actualitzada")
    elif option == 9:
        print("Adéu!")
    else:
        print("opcio incorrecta")


def run_menu(
    catalog: MubiesflixBST | None = None,
    input_fn: Callable[[str], str] | None = None,
) -> MubiesflixBST:
    """Run the interactive menu until option 9 or end of input; return the catalogue."""
    if catalog is None:
        catalog = MubiesflixBST()
    tokens = _Tokens(input if input_fn is None else input_fn)
    while True:
        print()
        print("\n".join(_MENU))
        try:
            raw = tokens.next("Selecciona una opció: ")
        except EOFError:
            break
        try:
            option = int(raw)
        except ValueError:
            print("opcio incorrecta")
            continue
        try:
            _run_option(option, catalog, tokens)
        except EOFError:
            break
        except (CatalogError, ValueError) as exc:
            print(f"Error: {exc}", file=sys.stderr)
        if option == 9:
            break
    return catalog


def demo_bst() -> BSTTree:
    """Build a small tree, print its traversals, second largest key and leaves."""
    tree = BSTTree()
    for key, value in zip((2, 0, 8, 45, 76, 5, 3, 40), (5, 5, 1, 88, 99, 12, 9, 11)):
        print(f"Inserta a l'arbre la key {key} amb valor {value}")
        tree.insert(key, value)

    for label, printer in (
        ("Preorder", tree.print_preorder),
        ("Inorder", tree.print_inorder),
        ("Postorder", tree.print_postorder),
    ):
        print(f"{label} = [", end="")
        printer()
        print("]")

    tree.print_second_largest_key()
    leaves = " ".join(str(node.key) for node in tree.leaf_nodes())
    print("FULLES De l'arbre = { " + (leaves + " " if leaves else "") + "}")
    print()
    return tree


def _growing_values(keys: tuple[int, ...]) -> Iterator[tuple[int, int]]:
    for count, key in enumerate(keys, start=1):
        for value in range(count):
            yield key, value


def demo_hashmap() -> HashMap:
    """Fill a small hash map, print it and its statistics."""
    table = HashMap()
    keys = (6, 21, 24, 45, 13, 20, 25)
    announced = set()
    for key, value in _growing_values(keys):
        if key not in announced:
            print(f"Inserta al mapa {key}")
            announced.add(key)
        table.put(key, value)
    table.print()

    for key in (0, 6):
        print(f"get({key})")
        print(int(key in table))

    print(f"Size of the map: {len(table)}")
    print(f"Cells on the map {table.cells()} elements ")
    print(f"MaxColisions on the map {table.collisions()} elements ")
    return table


def main(argv: list[str] | None = None) -> int:
    """Entry point: run the menu or one of the demonstrations."""
    parser = argparse.ArgumentParser(prog="mubiesflix", description="Film catalogue by director.")
    parser.add_argument(
        "command",
        nargs="?",
        default="menu",
        choices=("menu", "bst-demo", "hash-demo"),
        help="what to run (default: menu)",
    )
    parser.add_argument("--file", help="catalogue file to load before the menu starts")
    parser.add_argument(
        "--strategy",
        type=int,
        choices=(1, 2),
        default=1,
        help="1: after largest id, 2: smallest free id",
    )
    args = parser.parse_args(argv)

    if args.command == "bst-demo":
        demo_bst()
    elif args.command == "hash-demo":
        demo_hashmap()
    else:
        catalog = MubiesflixBST(AdditionStrategy.from_int(args.strategy))
        if args.file is not None:
            try:
                errors = catalog.load_from_file(args.file)
            except CatalogError as exc:
                print(f"Error: {exc}", file=sys.stderr)
                return 1
            for error in errors:
                print(error)
        run_menu(catalog)
    return 0


if __name__ == "__main__":
    sys.exit(main())