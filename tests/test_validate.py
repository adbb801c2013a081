import pytest

from satsearch.problem import ProblemError
from satsearch.validate import main, program_name, read_solution

PROBLEM_TEXT = "3 2 2\n1 -2\n-3 2\n"


@pytest.fixture
def problem_file(tmp_path):
    path = tmp_path / "problem.txt"
    path.write_text(PROBLEM_TEXT)
    return path


def test_read_solution(tmp_path):
    path = tmp_path / "s.txt"
    path.write_text("1 -1 1 ")
    assert read_solution(path, 3) == [1, -1, 1]


def test_read_solution_ignores_extra(tmp_path):
    path = tmp_path / "s.txt"
    path.write_text("-1 1 -1 1 1")
    assert read_solution(path, 2) == [-1, 1]


def test_read_solution_too_short(tmp_path):
    path = tmp_path / "s.txt"
    path.write_text("1 -1")
    with pytest.raises(ProblemError, match="#3 proposition"):
        read_solution(path, 3)


def test_read_solution_missing_file(tmp_path):
    with pytest.raises(ProblemError, match="Cannot open solution file"):
        read_solution(tmp_path / "absent.txt", 2)


@pytest.mark.parametrize(
    "path, name",
    [
        ("C:\\tools\\bcsp_validate.exe", "bcsp_validate.exe"),
        ("/usr/local/bin/validate", "validate"),
        ("validate", "validate"),
        ("dir/sub\\prog", "prog"),
    ],
)
def test_program_name(path, name):
    assert program_name(path) == name


def test_main_accepts_solution(tmp_path, problem_file, capsys):
    solution = tmp_path / "s.txt"
    solution.write_text("1 1 1 ")
    assert main([str(problem_file), str(solution)]) == 0
    assert capsys.readouterr().out == "ok!\n"


def test_main_rejects_non_solution(tmp_path, problem_file, capsys):
    solution = tmp_path / "s.txt"
    solution.write_text("-1 1 1 ")
    assert main([str(problem_file), str(solution)]) == 0
    assert capsys.readouterr().out == "Error\n"


def test_main_rejects_zero_value(tmp_path, problem_file, capsys):
    solution = tmp_path / "s.txt"
    solution.write_text("1 1 0 ")
    assert main([str(problem_file), str(solution)]) == 0
    assert capsys.readouterr().out == "Error\n"


def test_main_missing_solution(tmp_path, problem_file, capsys):
    assert main([str(problem_file), str(tmp_path / "none.txt")]) == 1
    assert "Cannot open solution file" in capsys.readouterr().out


def test_main_wrong_argument_count(capsys):
    assert main(["only"]) == 1
    assert "<problem> <solution>" in capsys.readouterr().out