"""Generation of random satisfiability instances."""

from __future__ import annotations

import random
import re
import sys
from pathlib import Path
from typing import Sequence

from satsearch.problem import Problem

NUM_PROPS = 10
NUM_CLAUSES = 650
CLAUSE_SIZE = 6


def random_problem(
    num_props: int = NUM_PROPS,
    num_clauses: int = NUM_CLAUSES,
    clause_size: int = CLAUSE_SIZE,
    rng: random.Random | None = None,
) -> Problem:
    """Random clauses, each over distinct propositions with random signs.

    The resulting instance may be unsatisfiable.
    """
    if clause_size > num_props:
        raise ValueError("clause size cannot exceed the number of propositions")
    rng = rng or random.Random()
    clauses = []
    for _ in range(num_clauses):
        used: set[int] = set()
        clause = []
        for _ in range(clause_size):
            prop = rng.randrange(num_props) + 1
            while prop in used:
                prop = rng.randrange(num_props) + 1
            used.add(prop)
            clause.append(-prop if rng.randrange(100) < 50 else prop)
        clauses.append(tuple(clause))
    return Problem(num_props, tuple(clauses))


def format_problem(problem: Problem) -> str:
    """Render a problem in the instance file format."""
    header = f"{problem.num_props} {problem.num_clauses} {problem.clause_size}\n"
    body = "".join(
        " ".join(str(lit) for lit in clause) + "\n" for clause in problem.clauses
    )
    return header + body


def instance_filename(prefix: str, index: int) -> str:
    """File name of the instance with the given number."""
    return f"{prefix}_{index}.txt"


def _leading_int(text: str) -> int:
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def _syntax_message() -> None:
    print("Use syntax:\n")
    print("\tbcsp_generator.exe <prefix> <id1> <id2>\n")
    print("where:\n ", end="")
    print("\t<prefix> = the prefix of the filename of the instances to be generated")
    print("\t<id1> = a number indicating the suffix of the first instance.")
    print("\t<id2> = a number indicating the suffix of the last instance.\n")
    print(
        "e.g. the call \n\n\tgenerator test 1 10\n\n"
        "generates 10 instances with names ranging from test1.txt to test10.txt."
    )
    print("Constraints: id1>0, id2>0, id1<=id2.")


def main(argv: Sequence[str] | None = None) -> int:
    """Command line: ``<prefix> <id1> <id2>``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 3:
        print("Wrong number of arguments. Use correct syntax:")
        _syntax_message()
        return 1

    prefix = args[0]
    first, last = _leading_int(args[1]), _leading_int(args[2])
    if first <= 0 or last <= 0 or first > last:
        _syntax_message()
        return 1

    rng = random.Random()
    for index in range(first, last + 1):
        problem = random_problem(rng=rng)
        Path(instance_filename(prefix, index)).write_text(format_problem(problem))
    return 0


if __name__ == "__main__":
    sys.exit(main())