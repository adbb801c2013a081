"""Checking a candidate solution against a problem."""

from __future__ import annotations

import re
import sys
from pathlib import Path
from typing import Sequence

from satsearch.problem import ProblemError, read_problem


def read_solution(path: str | Path, num_props: int) -> list[int]:
    """Read the first ``num_props`` integers of a solution file."""
    try:
        text = Path(path).read_text()
    except OSError as err:
        raise ProblemError("Cannot open solution file.") from err
    tokens = iter(text.split())
    values = []
    for index in range(1, num_props + 1):
        try:
            values.append(int(next(tokens)))
        except (StopIteration, ValueError):
            raise ProblemError(
                f"Cannot read the value of the #{index} proposition "
                "in the solution file."
            ) from None
    return values


def program_name(path: str) -> str:
    """The part of a path after its last slash or backslash."""
    return re.split(r"[\\/]", path)[-1]


def _syntax_error(prog: str) -> None:
    print("Use syntax:\n")
    print(f"{program_name(prog)} <problem> <solution>\n")
    print("where:")
    print("<problem> is the name of a file containing a problem description")
    print(
        "<solution> is the name of a file containing a vector with values "
        "for the propositions of the problem"
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Command line: ``<problem> <solution>``; prints ``ok!`` or ``Error``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        _syntax_error(sys.argv[0] if sys.argv and sys.argv[0] else "satsearch-validate")
        return 1

    try:
        problem = read_problem(args[0])
        values = read_solution(args[1], problem.num_props)
    except ProblemError as exc:
        print(f"{exc} Now exiting...")
        return 1

    print("ok!" if problem.is_solution(values) else "Error")
    return 0


if __name__ == "__main__":
    sys.exit(main())