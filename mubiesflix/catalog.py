"""Film catalogue indexed by director id in a binary search tree."""

from __future__ import annotations

import re
from enum import Enum

from .bst import BSTTree
from .peli import Peli


class CatalogError(Exception):
    """Raised when a catalogue query cannot be answered."""


class AdditionStrategy(Enum):
    """How a new director id is chosen when none is given."""

    AFTER_LARGEST_ID = 1
    SMALLEST_NOTTAKEN_ID = 2

    @classmethod
    def from_int(cls, value: int) -> AdditionStrategy:
        """Map the menu numbers 1 and 2 to a strategy."""
        if value == 1:
            return cls.AFTER_LARGEST_ID
        if value == 2:
            return cls.SMALLEST_NOTTAKEN_ID
        raise ValueError("Valor d'estratègia no vàlid")


_INT_PREFIX = re.compile(r"\s*[+-]?\d+")
_FLOAT_PREFIX = re.compile(
    r"\s*[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


def _stoi(text: str) -> int:
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError("stoi")
    return int(match.group())


def _stof(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        raise ValueError("stof")
    return float(match.group())


def _split_fields(line: str) -> list[str]:
    fields = line.split("|")
    # A trailing empty piece is not a field: nothing follows the last separator.
    if fields[-1] == "":
        fields.pop()
    return fields


def _parse_line(line: str) -> tuple[int, Peli]:
    fields = iter(_split_fields(line))

    def take(name: str) -> str:
        try:
            return next(fields)
        except StopIteration:
            raise ValueError(f"Manca {name}") from None

    peli_id = _stoi(take("peliId"))
    director_id = _stoi(take("directorId"))
    titol = take("titol")
    durada = _stoi(take("durada"))
    valoracio = _stof(take("valoracio"))
    return director_id, Peli(peli_id, titol, durada, valoracio)


def _first_gap(ids) -> int:
    missing = 0
    for director_id in ids:
        if director_id > missing:
            break
        missing = director_id + 1
    return missing


class MubiesflixBST:
    """Films grouped by director id, kept in director id order."""

    def __init__(
        self,
        strategy: AdditionStrategy = AdditionStrategy.AFTER_LARGEST_ID,
        file_path: str | None = None,
    ) -> None:
        self.strategy = strategy
        self._tree = BSTTree()
        self.load_errors: list[str] = []
        if file_path is not None:
            self.load_errors = self.load_from_file(file_path)

    def load_from_file(self, file_path: str) -> list[str]:
        """Load 'peliId|directorId|titol|durada|valoracio' lines.

        Malformed lines are skipped; their error messages are returned.
        """
        try:
            handle = open(file_path, encoding="utf-8")
        except OSError as exc:
            raise CatalogError(f"No es pot trobar el fitxer: {file_path}") from exc
        errors = []
        with handle:
            for number, line in enumerate(handle, start=1):
                try:
                    director_id, peli = _parse_line(line.removesuffix("\n"))
                except ValueError as exc:
                    errors.append(f"Error a la línia {number}: {exc}")
                    continue
                self._tree.insert(director_id, peli)
        return errors

    def _require_not_empty(self) -> None:
        if self._tree.root is None:
            raise CatalogError("Arbre buit")

    def films_by_director(self, director_id: int) -> list[Peli]:
        """Films of a director in insertion order."""
        self._require_not_empty()
        node = self._tree.search(director_id)
        if node is None:
            raise CatalogError("Director no trobat")
        return list(node.values)

    def show_films_by_director(self, director_id: int) -> None:
        """Print every film of a director."""
        for number, peli in enumerate(self.films_by_director(director_id), start=1):
            print(f"La pel·lícula {number}: {peli.info()}")
            print()

    def average_rating(self, director_id: int) -> float:
        """Mean rating of a director's films."""
        films = self.films_by_director(director_id)
        if not films:
            raise CatalogError("Director sense pel·lícules")
        return sum(peli.valoracio for peli in films) / len(films)

    def directors(self) -> list[tuple[int, list[Peli]]]:
        """Every director id with its films, in increasing id order."""
        self._require_not_empty()
        return [(node.key, list(node.values)) for node in self._tree.nodes()]

    def largest_director_id(self) -> int:
        self._require_not_empty()
        node = self._tree.root
        while node.right is not None:
            node = node.right
        return node.key

    def smallest_free_director_id(self) -> int:
        """Smallest id not taken, scanning ids upwards from 0."""
        self._require_not_empty()
        return _first_gap(self._tree.inorder())

    def next_director_id(self) -> int:
        """Id a new director receives under the current strategy."""
        if self._tree.root is None:
            return 0
        if self.strategy is AdditionStrategy.SMALLEST_NOTTAKEN_ID:
            return _first_gap(self._tree.inorder())
        return self.largest_director_id() + 1

    def add_peli(self, peli: Peli, director_id: int | None = None) -> int:
        """Add a film; without a director id one is chosen by the strategy. Return the id."""
        if director_id is None:
            director_id = self.next_director_id()
        self._tree.insert(director_id, peli)
        return director_id