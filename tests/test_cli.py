import pytest

from mubiesflix.catalog import AdditionStrategy, CatalogError, MubiesflixBST
from mubiesflix.cli import demo_bst, demo_hashmap, main, run_menu, show_all
from mubiesflix.peli import Peli


def feeder(*lines):
    it = iter(lines)

    def input_fn(prompt=""):
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return input_fn


def make_catalog(*director_ids):
    catalog = MubiesflixBST()
    for number, director_id in enumerate(director_ids):
        catalog.add_peli(Peli(number, f"Film{number}", 90, 5.0), director_id)
    return catalog


def test_show_all_prints_every_director_in_order(capsys):
    catalog = make_catalog(5, 1, 3)
    prompts = []

    def ask(prompt):
        prompts.append(prompt)
        return "s"

    shown = show_all(catalog, ask, 2)
    out = capsys.readouterr().out
    assert shown == 3
    assert len(prompts) == 1
    positions = [out.index(f"Director: {d}\n===") for d in (1, 3, 5)]
    assert positions == sorted(positions)


def test_show_all_stops_when_answer_is_no(capsys):
    catalog = make_catalog(5, 1, 3)
    shown = show_all(catalog, lambda prompt: "n", 2)
    out = capsys.readouterr().out
    assert shown == 2
    assert "Director: 5" not in out
    assert "Director: 1" in out


def test_show_all_empty_catalog_raises():
    with pytest.raises(CatalogError):
        show_all(MubiesflixBST(), lambda prompt: "s")


def test_menu_adds_film_with_automatic_id():
    catalog = run_menu(MubiesflixBST(), feeder("7", "10 Film 90 7.5 n", "9"))
    assert catalog.directors() == [(0, [Peli(10, "Film", 90, 7.5)])]


def test_menu_adds_film_with_manual_id():
    catalog = run_menu(MubiesflixBST(), feeder("7 10 Film 90 7.5 s 42", "9"))
    assert catalog.films_by_director(42) == [Peli(10, "Film", 90, 7.5)]


def test_menu_changes_strategy_then_fills_gap():
    catalog = make_catalog(0, 1, 3)
    run_menu(catalog, feeder("8 2", "7 11 X 80 6 n", "9"))
    assert catalog.strategy is AdditionStrategy.SMALLEST_NOTTAKEN_ID
    assert [d for d, _ in catalog.directors()] == [0, 1, 2, 3]


def test_menu_invalid_strategy_reports_error(capsys):
    catalog = run_menu(MubiesflixBST(), feeder("8 5", "9"))
    assert "Error: Valor d'estratègia no vàlid" in capsys.readouterr().err
    assert catalog.strategy is AdditionStrategy.AFTER_LARGEST_ID


def test_menu_largest_id(capsys):
    run_menu(make_catalog(4, 17, 9), feeder("5", "9"))
    assert "La id més gran és:17" in capsys.readouterr().out


def test_menu_smallest_free_id(capsys):
    run_menu(make_catalog(0, 1, 3), feeder("6", "9"))
    assert "El ID del director més petit no assignat és: 2" in capsys.readouterr().out


def test_menu_smallest_free_id_on_empty_catalog(capsys):
    run_menu(MubiesflixBST(), feeder("6", "9"))
    assert "Arbre buit" in capsys.readouterr().out


def test_menu_average_rating(capsys):
    catalog = MubiesflixBST()
    catalog.add_peli(Peli(1, "A", 90, 6.0), 3)
    catalog.add_peli(Peli(2, "B", 90, 8.0), 3)
    run_menu(catalog, feeder("3 3", "9"))
    assert "Valoració mitjana: 7" in capsys.readouterr().out


def test_menu_missing_director_reports_error(capsys):
    run_menu(make_catalog(1), feeder("2 99", "9"))
    assert "Error: Director no trobat" in capsys.readouterr().err


def test_menu_invalid_option(capsys):
    run_menu(MubiesflixBST(), feeder("42", "9"))
    assert "opcio incorrecta" in capsys.readouterr().out


def test_menu_exit_ignores_remaining_input(capsys):
    catalog = run_menu(MubiesflixBST(), feeder("9", "7 10 Film 90 7.5 n"))
    assert "Adéu!" in capsys.readouterr().out
    with pytest.raises(CatalogError):
        catalog.directors()


def test_menu_loads_file(tmp_path, capsys):
    path = tmp_path / "pelis.txt"
    path.write_text("1|4|Alpha|100|7.5\nbad line\n2|4|Beta|95|6.5\n", encoding="utf-8")
    catalog = run_menu(MubiesflixBST(), feeder(f"1 {path}", "9"))
    out = capsys.readouterr().out
    assert "Fitxer carregat" in out
    assert "Error a la línia 2" in out
    assert [p.titol for p in catalog.films_by_director(4)] == ["Alpha", "Beta"]


def test_menu_show_all_uses_same_input(capsys):
    run_menu(make_catalog(1, 2, 3), feeder("4 n", "9"))
    out = capsys.readouterr().out
    assert "Director: 2" in out
    assert "Director: 3" not in out


def test_demo_bst(capsys):
    tree = demo_bst()
    out = capsys.readouterr().out
    assert list(tree.inorder()) == sorted([2, 0, 8, 45, 76, 5, 3, 40])
    assert "Inorder = [0, 2, 3, 5, 8, 40, 45, 76, ]" in out
    assert "El segon node més gran és: 45" in out
    assert list(tree.preorder())[0] == 2


def test_demo_hashmap(capsys):
    table = demo_hashmap()
    out = capsys.readouterr().out
    assert table.get(25) == [0, 1, 2, 3, 4, 5, 6]
    assert table.get(6) == [0]
    assert 0 not in table
    assert "get(0)\n0\nget(6)\n1\n" in out
    assert f"Size of the map: {len(table)}" in out


def test_main_runs_bst_demo(capsys):
    assert main(["bst-demo"]) == 0
    assert "Preorder = [" in capsys.readouterr().out


def test_main_missing_file_fails(tmp_path, capsys):
    assert main(["menu", "--file", str(tmp_path / "absent.txt")]) == 1
    assert "No es pot trobar el fitxer" in capsys.readouterr().err