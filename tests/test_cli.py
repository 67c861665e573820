import io
import sys

import pytest

from cfsolve.cli import main
from cfsolve.div_a import easy_problem
from cfsolve.div_c import RegistrationSystem
from cfsolve.div_d import yarik_notes


def _run(monkeypatch, capsys, argv, text):
    monkeypatch.setattr(sys, "stdin", io.StringIO(text))
    status = main(argv)
    captured = capsys.readouterr()
    return status, captured.out, captured.err


def test_registration_matches_system(monkeypatch, capsys):
    names = ["abacaba", "acaba", "abacaba", "acab", "abacaba"]
    text = f"{len(names)}\n" + "\n".join(names) + "\n"
    status, out, _ = _run(monkeypatch, capsys, ["registration"], text)
    system = RegistrationSystem()
    expected = [system.register(name) for name in names]
    assert status == 0
    assert out.splitlines() == expected


def test_registration_first_request_is_ok(monkeypatch, capsys):
    status, out, _ = _run(monkeypatch, capsys, ["registration"], "1\nuser\n")
    assert status == 0
    assert out.splitlines() == ["OK"]


def test_easy_problem_matches_solver(monkeypatch, capsys):
    values = [2, 4, 6, 100, 200, 201]
    text = f"{len(values)}\n" + "\n".join(map(str, values)) + "\n"
    status, out, _ = _run(monkeypatch, capsys, ["easy-problem"], text)
    assert status == 0
    assert out.splitlines() == [str(easy_problem(v)) for v in values]


@pytest.mark.parametrize("n,k", [(4, 2), (6, 1), (8, 3), (1, 1)])
def test_kevin_permutation_outputs_permutation(monkeypatch, capsys, n, k):
    status, out, _ = _run(monkeypatch, capsys, ["kevin-permutation"], f"1\n{n} {k}\n")
    assert status == 0
    lines = out.splitlines()
    assert len(lines) == 1
    assert sorted(int(tok) for tok in lines[0].split()) == list(range(1, n + 1))


def test_kevin_permutation_several_cases(monkeypatch, capsys):
    status, out, _ = _run(monkeypatch, capsys, ["kevin-permutation"], "3\n4 2\n6 1\n8 3\n")
    assert status == 0
    assert [len(line.split()) for line in out.splitlines()] == [4, 6, 8]


def test_yarik_notes_matches_solver(monkeypatch, capsys):
    cases = [[2], [3, 1, 3, 2], [1000, 1000], [1, 1, 1], [1, 2, 1, 2]]
    text = f"{len(cases)}\n" + "".join(
        f"{len(case)}\n{' '.join(map(str, case))}\n" for case in cases
    )
    status, out, _ = _run(monkeypatch, capsys, ["yarik-notes"], text)
    assert status == 0
    assert out.splitlines() == [str(yarik_notes(case)) for case in cases]


def test_yarik_single_note_is_zero(monkeypatch, capsys):
    status, out, _ = _run(monkeypatch, capsys, ["yarik-notes"], "1\n1\n7\n")
    assert status == 0
    assert out.splitlines() == ["0"]


def test_truncated_input_fails(monkeypatch, capsys):
    status, out, err = _run(monkeypatch, capsys, ["easy-problem"], "3\n2\n")
    assert status == 1
    assert "unexpected end of input" in err


def test_non_integer_input_fails(monkeypatch, capsys):
    status, _, err = _run(monkeypatch, capsys, ["yarik-notes"], "1\n2\n1 x\n")
    assert status == 1
    assert "'x'" in err


def test_negative_count_fails(monkeypatch, capsys):
    status, _, err = _run(monkeypatch, capsys, ["registration"], "-1\n")
    assert status == 1
    assert "negative" in err


def test_invalid_window_fails(monkeypatch, capsys):
    status, _, err = _run(monkeypatch, capsys, ["kevin-permutation"], "1\n3 0\n")
    assert status == 1
    assert err.startswith("cfsolve:")


def test_unknown_problem_exits(monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO(""))
    with pytest.raises(SystemExit) as info:
        main(["no-such-problem"])
    assert info.value.code == 2


def test_empty_case_count_prints_nothing(monkeypatch, capsys):
    status, out, _ = _run(monkeypatch, capsys, ["easy-problem"], "0\n")
    assert status == 0
    assert out == ""