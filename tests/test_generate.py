import random

import pytest

from satsearch.generate import (
    format_problem,
    instance_filename,
    main,
    random_problem,
)
from satsearch.problem import Problem, parse_problem


def test_default_shape():
    problem = random_problem(rng=random.Random(3))
    assert problem.num_props == 10
    assert problem.num_clauses == 650
    assert all(len(clause) == 6 for clause in problem.clauses)


@pytest.mark.parametrize("seed", range(4))
def test_clauses_use_distinct_propositions(seed):
    problem = random_problem(8, 40, 5, random.Random(seed))
    for clause in problem.clauses:
        props = [abs(lit) for lit in clause]
        assert len(set(props)) == len(props)
        assert all(1 <= p <= 8 for p in props)


def test_reproducible_with_seed():
    first = random_problem(6, 10, 3, random.Random(11))
    second = random_problem(6, 10, 3, random.Random(11))
    assert first.num_props == 6
    assert first.num_clauses == 10
    assert format_problem(first) == format_problem(second)


def test_clause_too_large():
    with pytest.raises(ValueError):
        random_problem(3, 5, 4, random.Random(0))


def test_format_round_trip():
    problem = random_problem(7, 20, 3, random.Random(5))
    assert parse_problem(format_problem(problem)) == problem


def test_format_layout():
    text = format_problem(Problem(3, ((1, -2), (3, -1))))
    assert text == "3 2 2\n1 -2\n3 -1\n"


def test_default_header():
    text = format_problem(random_problem(rng=random.Random(1)))
    assert text.splitlines()[0] == "10 650 6"


def test_instance_filename():
    assert instance_filename("test", 1) == "test_1.txt"


def test_main_writes_instances(tmp_path):
    prefix = str(tmp_path / "inst")
    assert main([prefix, "2", "4"]) == 0
    names = sorted(p.name for p in tmp_path.iterdir())
    assert names == ["inst_2.txt", "inst_3.txt", "inst_4.txt"]
    for path in tmp_path.iterdir():
        assert parse_problem(path.read_text()).num_clauses == 650


@pytest.mark.parametrize("ids", [("0", "3"), ("3", "2"), ("abc", "2"), ("1", "-1")])
def test_main_rejects_bad_ids(tmp_path, capsys, ids):
    assert main([str(tmp_path / "inst"), *ids]) == 1
    assert "Constraints: id1>0, id2>0, id1<=id2." in capsys.readouterr().out
    assert list(tmp_path.iterdir()) == []


def test_main_wrong_argument_count(capsys):
    assert main(["only"]) == 1
    assert "Wrong number of arguments. Use correct syntax:" in capsys.readouterr().out