"""Boolean satisfiability problems given as clauses of literals."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Sequence


class ProblemError(ValueError):
    """Raised when a problem or a solution cannot be read."""


def _literal_true(literal: int, assignment: Sequence[int]) -> bool:
    if literal > 0:
        return assignment[literal - 1] == 1
    return assignment[-literal - 1] == -1


def _literal_possible(literal: int, assignment: Sequence[int]) -> bool:
    if literal > 0:
        return assignment[literal - 1] >= 0
    return assignment[-literal - 1] <= 0


@dataclass(frozen=True)
class Problem:
    """A set of clauses over propositions numbered from 1 to ``num_props``.

    A literal ``p`` stands for proposition ``p`` and ``-p`` for its negation.
    Assignments hold 1 (true), -1 (false) or 0 (not yet assigned).
    """

    num_props: int
    clauses: tuple[tuple[int, ...], ...]

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "clauses", tuple(tuple(clause) for clause in self.clauses)
        )

    @property
    def num_clauses(self) -> int:
        return len(self.clauses)

    @property
    def clause_size(self) -> int:
        return len(self.clauses[0]) if self.clauses else 0

    def count_unsatisfied(self, assignment: Sequence[int]) -> int:
        """Number of clauses not satisfied by a complete assignment."""
        return sum(
            1
            for clause in self.clauses
            if not any(_literal_true(lit, assignment) for lit in clause)
        )

    def is_consistent(self, assignment: Sequence[int]) -> bool:
        """True unless some clause is already falsified by a partial assignment."""
        return all(
            any(_literal_possible(lit, assignment) for lit in clause)
            for clause in self.clauses
        )

    def is_solution(self, assignment: Sequence[int]) -> bool:
        """True if every proposition has a value and every clause holds."""
        if any(value == 0 for value in assignment[: self.num_props]):
            return False
        return self.is_consistent(assignment)

    def describe(self) -> str:
        """Human-readable listing of the clauses."""
        lines = ["The current problem:", "===================="]
        for clause in self.clauses:
            lines.append(
                " or ".join(f"P{lit}" if lit > 0 else f"not P{-lit}" for lit in clause)
            )
        return "\n".join(lines) + "\n"


def _read_int(tokens: Iterator[str], message: str) -> int:
    try:
        return int(next(tokens))
    except (StopIteration, ValueError):
        raise ProblemError(message) from None


def parse_problem(text: str) -> Problem:
    """Parse ``N M K`` followed by M clauses of K literals each."""
    tokens = iter(text.split())

    num_props = _read_int(tokens, "Cannot read the number of propositions.")
    if num_props < 1:
        raise ProblemError("Small number of propositions.")

    num_clauses = _read_int(tokens, "Cannot read the number of sentences.")
    if num_clauses < 1:
        raise ProblemError("Low number of sentences.")

    clause_size = _read_int(
        tokens, "Cannot read the number of propositions per sentence."
    )
    if clause_size < 2:
        raise ProblemError("Low number of propositions per sentence.")

    clauses = []
    for i in range(1, num_clauses + 1):
        clause = []
        for j in range(1, clause_size + 1):
            literal = _read_int(
                tokens, f"Cannot read the #{j} proposition of the #{i} sentence."
            )
            if literal == 0 or abs(literal) > num_props:
                raise ProblemError(
                    f"Wrong value for the #{j} proposition of the #{i} sentence."
                )
            clause.append(literal)
        clauses.append(tuple(clause))

    return Problem(num_props, tuple(clauses))


def read_problem(path: str | Path) -> Problem:
    """Read and parse a problem file."""
    try:
        text = Path(path).read_text()
    except OSError as err:
        raise ProblemError("Cannot open input file.") from err
    return parse_problem(text)


def format_assignment(assignment: Sequence[int]) -> str:
    """Render an assignment as ``P1=true  P2=false  ...``."""
    return "".join(
        f"P{index}={'true' if value == 1 else 'false'}  "
        for index, value in enumerate(assignment, 1)
    )