import io

import pytest

from algokit.stackmachine import format_registers, is_number, main, run


@pytest.mark.parametrize(
    ("text", "expected"),
    [("123", True), ("0", True), ("", True), ("-1", False), ("12a", False), ("A", False)],
)
def test_is_number(text, expected):
    assert is_number(text) is expected


def test_registers_start_at_zero():
    assert run(["EXIT"]) == {"A": 0, "B": 0, "C": 0, "D": 0}


def test_push_then_pop_into_register():
    registers = run("PUSH 42 POP C EXIT".split())
    assert registers["C"] == 42
    assert registers["A"] == 0


def test_pop_order_is_last_in_first_out():
    registers = run("PUSH 1 PUSH 2 POP A POP B".split())
    assert (registers["A"], registers["B"]) == (2, 1)


def test_push_register_copies_value():
    registers = run("PUSH 7 POP A PUSH A PUSH A POP B POP D EXIT".split())
    assert registers["A"] == registers["B"] == registers["D"] == 7


def test_register_named_by_first_character():
    registers = run("PUSH 9 POP Alpha".split())
    assert registers["A"] == 9


def test_exit_stops_processing():
    registers = run("PUSH 3 POP A EXIT PUSH 5 POP A".split())
    assert registers["A"] == 3


def test_unknown_register_push_is_ignored():
    registers = run("PUSH 4 PUSH Z POP B".split())
    assert registers["B"] == 4


def test_pop_from_empty_stack_raises():
    with pytest.raises(IndexError):
        run("POP A".split())


def test_missing_operand_raises():
    with pytest.raises(ValueError):
        run(["PUSH"])


def test_format_registers_lines():
    text = format_registers({"A": 1, "B": 2, "C": 3, "D": 4})
    assert text == "A = 1\nB = 2\nC = 3\nD = 4\n"


def test_main_prints_registers(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("PUSH 5\nPOP D\nEXIT\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == format_registers({"D": 5})


def test_main_reports_empty_stack(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("POP A\n"))
    assert main([]) == 1
    assert capsys.readouterr().out == ""