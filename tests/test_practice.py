import io

import pytest

from algokit.practice import array_sums, less_than, lookup_definitions, main, prepend_all


def test_array_passed_by_value_is_unchanged():
    first, second = array_sums(by_value=True)
    assert first == second == array_sums(by_value=False)[0]


def test_prepend_all_reverses():
    assert prepend_all([1, 2, 3, 4]) == [4, 3, 2, 1]


def test_prepend_all_empty():
    assert prepend_all([]) == []


def test_lookup_found_and_missing():
    entries = [("cat", "animal"), ("oak", "tree")]
    assert lookup_definitions(entries, ["oak", "dog", "cat"]) == ["tree", "Not found", "animal"]


def test_lookup_first_entry_wins():
    entries = [("key", "first"), ("key", "second")]
    assert lookup_definitions(entries, ["key"]) == ["first"]


@pytest.mark.parametrize(
    ("values", "limit", "expected"),
    [([5, 1, 8, 3, 9], 5, [1, 3]), ([], 10, []), ([4, 4], 4, [])],
)
def test_less_than(values, limit, expected):
    assert less_than(values, limit) == expected


def test_less_than_keeps_order_and_bound():
    values = [7, -2, 6, 0, 10, 3]
    result = less_than(values, 6)
    assert all(value < 6 for value in result)
    assert result == [value for value in values if value in result]


def test_main_array_exercises(capsys):
    assert main(["array1"]) == 0
    first, second = array_sums(by_value=False)
    assert capsys.readouterr().out == f"Sum1: {first}\nSum2: {second}\n"
    assert main(["array2"]) == 0
    first, second = array_sums(by_value=True)
    assert capsys.readouterr().out == f"Sum1: {first}\nSum2: {second}\n"


def test_main_list(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n10 20 30\n"))
    assert main(["list1"]) == 0
    assert capsys.readouterr().out == "30 20 10 \n"


def test_main_map(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\nsun star\nmoon rock\nmoon sky sun\n"))
    assert main(["map1"]) == 0
    assert capsys.readouterr().out == "rock\nNot found\nstar\n"


def test_main_vector(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("4\n3 8 1 6\n5\n"))
    assert main(["vector1"]) == 0
    assert capsys.readouterr().out == "3 1 "


def test_main_short_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n1 2\n"))
    assert main(["list1"]) == 1
    assert capsys.readouterr().out == ""