# mubiesflix

A small film catalogue in which films are grouped by the director who made
them. Directors are kept in a binary search tree keyed by director id, so
they always come out in id order. A chained hash map with the same kind of
multi-value entries is included as well. The program's messages are in
Catalan.

## Installing

```
pip install .
```

## Commands

```
mubiesflix                      # the interactive catalogue menu
mubiesflix menu --file pelis.txt --strategy 2
mubiesflix bst-demo             # builds a small tree and prints its traversals
mubiesflix hash-demo            # fills a small hash map and prints it
```

`--file` loads a catalogue file before the menu starts; `--strategy` picks
how new director ids are chosen (`1`: after the largest id, the default;
`2`: the smallest free id).

The menu lets you:

1. load films from a file,
2. list the films of one director,
3. show the average rating of a director's films,
4. page through every director and their films, in id order, two at a time,
5. show the largest director id in use,
6. show the smallest director id not yet in use,
7. add a film, with a director id given by hand or chosen automatically,
8. switch the strategy used to choose new director ids,
9. quit.

Answers are read as whitespace-separated words, so a file path or a film
title typed into the menu is a single word. The menu also ends at end of
input.

## File format

One film per line, with fields separated by `|`:

```
film_id|director_id|title|duration_minutes|rating
```

For example:

```
1|3|Solaris|167|8.1
2|3|Stalker|162|8.2
3|0|Playtime|124|7.9
```

Lines that are missing a field or hold a number that cannot be read are
skipped; the rest of the file is still loaded. A file that cannot be opened
raises `CatalogError`.

## Using it from Python

```python
from mubiesflix.catalog import AdditionStrategy, MubiesflixBST
from mubiesflix.peli import Peli

catalog = MubiesflixBST(AdditionStrategy.SMALLEST_NOTTAKEN_ID)
errors = catalog.load_from_file("pelis.txt")   # messages for skipped lines

catalog.films_by_director(3)        # list of Peli, in insertion order
catalog.average_rating(3)
catalog.largest_director_id()
catalog.smallest_free_director_id()
catalog.directors()                 # [(director_id, [Peli, ...]), ...] by id

catalog.add_peli(Peli(10, "Mon oncle", 110, 7.6))       # id from the strategy
catalog.add_peli(Peli(11, "Jour de fête", 87, 7.0), 0)  # explicit director
```

`MubiesflixBST(strategy, file_path)` loads the file on construction and keeps
the skipped-line messages in `load_errors`. `add_peli` returns the director
id the film was filed under; `next_director_id()` tells which id the current
strategy would choose.

Asking about a director that does not exist, or asking anything of an empty
catalogue, raises `CatalogError`. `AdditionStrategy.from_int` maps 1 and 2 to
the strategies and raises `ValueError` for anything else.

Two strategies choose the id of a new director (0 for an empty catalogue):

- `AdditionStrategy.AFTER_LARGEST_ID`: one more than the largest id in use;
- `AdditionStrategy.SMALLEST_NOTTAKEN_ID`: the lowest id, counting up from 0,
  that no director has.

`Peli` is a dataclass with `peli_id`, `titol`, `durada` and `valoracio`;
`info()` returns its four-line description.

### The tree

`mubiesflix.bst.BSTTree` stores a list of values under each key; inserting an
existing key appends to that key's list.

```python
from mubiesflix.bst import BSTTree

tree = BSTTree()
for key, value in [(2, 5), (0, 5), (8, 1), (45, 88), (76, 99), (5, 12), (3, 9), (40, 11)]:
    tree.insert(key, value)

list(tree.preorder())                # [2, 0, 8, 5, 3, 45, 40, 76]
list(tree.inorder())                 # [0, 2, 3, 5, 8, 40, 45, 76]
tree.second_largest_key()            # 45
[n.key for n in tree.leaf_nodes()]   # [0, 3, 40, 76]
tree.values_of(45)                   # [88]
len(tree), tree.height()             # (8, 4)
```

`search(key)` returns the `Node` or `None`; `second_largest_key()` raises
`ValueError` for a tree with fewer than two keys. `copy()` gives an
independent deep copy and `mirror()` swaps every node's children in place.

### The hash map

`mubiesflix.hashmap.HashMap` is a fixed-size table (11 cells by default) of
chained entries keyed by integers, each holding a list of values. It counts
stored values, occupied cells and the deepest chain position reached.

```python
from mubiesflix.hashmap import HashMap

table = HashMap(11)
table.put(6, 0)
table.put(17, 1)     # same cell as 6
17 in table          # True
table.get(17)        # [1]
len(table)           # 2
table.cells()        # 1
table.collisions()   # 2
table.print()
```

## What it does not do

The catalogue lives in memory only: films can be loaded from a file but
nothing is ever written back. The hash map stands on its own; no catalogue
is built on it.