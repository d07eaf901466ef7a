import io
import sys

import pytest

from cpsolvers.cli import main
from cpsolvers.problems_a import cheap_travel, mex_spiral
from cpsolvers.problems_c import has_median_split
from cpsolvers.problems_d import min_desk_length


def run(monkeypatch, capsys, problem, text):
    monkeypatch.setattr(sys, "stdin", io.StringIO(text))
    code = main([problem])
    captured = capsys.readouterr()
    return code, captured.out, captured.err


def test_cheap_travel_sample(monkeypatch, capsys):
    code, out, _ = run(monkeypatch, capsys, "cheap-travel", "6 2 1 2\n")
    assert code == 0
    assert out == "6\n"


@pytest.mark.parametrize(
    "n, m, a, b", [(5, 2, 2, 3), (10, 3, 5, 1), (1, 1, 1, 1), (7, 10, 3, 20)]
)
def test_cheap_travel_matches_library(monkeypatch, capsys, n, m, a, b):
    code, out, _ = run(monkeypatch, capsys, "cheap-travel", f"{n} {m} {a} {b}")
    assert code == 0
    assert int(out) == cheap_travel(n, m, a, b)


def test_cheap_travel_zero_ride_ticket_is_error(monkeypatch, capsys):
    code, out, err = run(monkeypatch, capsys, "cheap-travel", "5 0 1 1")
    assert code == 1
    assert out == ""
    assert "positive" in err


def test_mex_grid_prints_each_case(monkeypatch, capsys):
    code, out, _ = run(monkeypatch, capsys, "mex-grid", "2\n3\n4\n")
    assert code == 0
    rows = [list(map(int, line.split())) for line in out.splitlines()]
    assert rows == mex_spiral(3) + mex_spiral(4)
    assert sorted(v for row in rows[:3] for v in row) == list(range(9))


def test_t_primes_sample(monkeypatch, capsys):
    code, out, _ = run(monkeypatch, capsys, "t-primes", "3\n4 5 6\n")
    assert code == 0
    assert out.split() == ["YES", "NO", "NO"]


def test_sort_array_reversal(monkeypatch, capsys):
    code, out, _ = run(monkeypatch, capsys, "sort-array", "3\n3 2 1\n")
    assert code == 0
    assert out.splitlines() == ["yes", "1 3"]


def test_sort_array_already_sorted(monkeypatch, capsys):
    code, out, _ = run(monkeypatch, capsys, "sort-array", "2\n1 2\n")
    assert code == 0
    assert out.splitlines() == ["yes", "1 1"]


def test_sort_array_impossible(monkeypatch, capsys):
    code, out, _ = run(monkeypatch, capsys, "sort-array", "4\n3 1 2 4\n")
    assert code == 0
    assert out.splitlines() == ["no"]


def test_registration_sample(monkeypatch, capsys):
    text = "4\nabacaba\nacaba\nabacaba\nacab\n"
    code, out, _ = run(monkeypatch, capsys, "registration", text)
    assert code == 0
    assert out.splitlines() == ["OK", "OK", "abacaba1", "OK"]


def test_registration_repeats_number_in_order(monkeypatch, capsys):
    code, out, _ = run(monkeypatch, capsys, "registration", "3\nfirst\nfirst\nfirst\n")
    assert code == 0
    lines = out.splitlines()
    assert lines[0] == "OK"
    assert lines[1:] == ["first1", "first2"]


def test_median_splits_matches_library(monkeypatch, capsys):
    cases = [([3, 2, 1], 2), ([10, 20, 30, 40], 5), ([1, 1, 1, 1, 1], 1)]
    text = f"{len(cases)}\n" + "".join(
        f"{len(values)} {k}\n{' '.join(map(str, values))}\n" for values, k in cases
    )
    code, out, _ = run(monkeypatch, capsys, "median-splits", text)
    assert code == 0
    expected = ["YES" if has_median_split(v, k) else "NO" for v, k in cases]
    assert out.split() == expected


def test_olympiad_matches_library(monkeypatch, capsys):
    cases = [(3, 4, 7), (5, 5, 5), (1, 13, 2), (2, 10, 20)]
    text = f"{len(cases)}\n" + "".join(f"{n} {m} {k}\n" for n, m, k in cases)
    code, out, _ = run(monkeypatch, capsys, "olympiad", text)
    assert code == 0
    answers = list(map(int, out.split()))
    assert answers == [min_desk_length(n, m, k) for n, m, k in cases]
    assert all(1 <= ans <= m for ans, (_, m, _) in zip(answers, cases))


def test_input_file_option(tmp_path, capsys):
    source = tmp_path / "input.txt"
    source.write_text("3\n4 5 6\n")
    code = main(["t-primes", "--input", str(source)])
    assert code == 0
    assert capsys.readouterr().out.split() == ["YES", "NO", "NO"]


def test_truncated_input_is_error(monkeypatch, capsys):
    code, out, err = run(monkeypatch, capsys, "olympiad", "2\n1 2 3\n")
    assert code == 1
    assert out == ""
    assert "unexpected end of input" in err


def test_non_integer_input_is_error(monkeypatch, capsys):
    code, _, err = run(monkeypatch, capsys, "cheap-travel", "6 two 1 2")
    assert code == 1
    assert "'two'" in err


def test_unknown_problem_exits_with_usage_error(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["no-such-problem"])
    assert excinfo.value.code == 2