"""Hill-climbing and depth-first search for satisfying assignments."""

from __future__ import annotations

import random
import sys
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from satsearch.problem import Problem, ProblemError, format_assignment, read_problem

TIMEOUT = 60.0


@dataclass(frozen=True)
class SearchResult:
    """Outcome of a search run."""

    assignment: tuple[int, ...] | None
    steps: int
    elapsed: float
    restarts: int = 0
    timed_out: bool = False

    @property
    def solved(self) -> bool:
        return self.assignment is not None


def random_assignment(num_props: int, rng: random.Random) -> list[int]:
    """A complete assignment with each proposition true or false at random."""
    return [1 if rng.randrange(100) >= 50 else -1 for _ in range(num_props)]


def _flipped(assignment: Sequence[int], index: int) -> list[int]:
    result = list(assignment)
    result[index] = -result[index]
    return result


def hill_climbing(
    problem: Problem, timeout: float = TIMEOUT, rng: random.Random | None = None
) -> SearchResult:
    """Greedy local search with random restarts."""
    rng = rng or random.Random()
    start = time.process_time()
    assignment = random_assignment(problem.num_props, rng)
    restarts = steps = 0
    unsatisfied = problem.count_unsatisfied(assignment)

    while unsatisfied > 0:
        elapsed = time.process_time() - start
        if elapsed > timeout:
            return SearchResult(None, steps, elapsed, restarts, timed_out=True)
        steps += 1
        best_count, best_index = min(
            (
                (problem.count_unsatisfied(_flipped(assignment, i)), i)
                for i in range(problem.num_props)
            ),
            default=(unsatisfied, -1),
        )
        if best_count < unsatisfied:
            assignment = _flipped(assignment, best_index)
        else:
            assignment = random_assignment(problem.num_props, rng)
            restarts += 1
        unsatisfied = problem.count_unsatisfied(assignment)

    return SearchResult(
        tuple(assignment), steps, time.process_time() - start, restarts
    )


def depth_first(problem: Problem, timeout: float = TIMEOUT) -> SearchResult:
    """Systematic search that either finds a solution or proves there is none."""
    start = time.process_time()
    stack: list[tuple[int, ...]] = [(0,) * problem.num_props]
    steps = 0

    while stack:
        elapsed = time.process_time() - start
        if elapsed > timeout:
            return SearchResult(None, steps, elapsed, timed_out=True)
        state = stack.pop()
        steps += 1
        if problem.is_solution(state):
            return SearchResult(state, steps, time.process_time() - start)
        try:
            index = state.index(0)
        except ValueError:
            continue
        for value in (-1, 1):
            child = state[:index] + (value,) + state[index + 1 :]
            if problem.is_consistent(child):
                stack.append(child)

    return SearchResult(None, steps, time.process_time() - start)


def write_solution(path: str | Path, assignment: Sequence[int]) -> None:
    """Write the assignment as space-terminated integers."""
    Path(path).write_text("".join(f"{value} " for value in assignment))


def _syntax_error() -> None:
    print("Use the following syntax:\n")
    print("satsearch <method> <inputfile> <outputfile>\n")
    print("where:")
    print("<method> is either 'hill' or 'depth' (without the quotes)")
    print("<inputfile> is the name of the file with the problem description")
    print("<outputfile> is the name of the output file with the solution")


def _save(output_path: str, assignment: Sequence[int]) -> None:
    try:
        write_solution(output_path, assignment)
    except OSError:
        print("Cannot open output file. Now exiting...")


def _report_hill(result: SearchResult, output_path: str) -> None:
    if result.solved:
        print("\n\nSolution found with hill-climbing!")
        print(format_assignment(result.assignment))
    else:
        print("\n\nNO SOLUTION found with hill-climbing...")
    print(f"Time spent: {result.elapsed:f} secs")
    print(f"Number of restarts: {result.restarts}")
    print(f"Number of steps: {result.steps}")
    if result.solved:
        _save(output_path, result.assignment)


def _report_depth(result: SearchResult, output_path: str) -> None:
    if result.solved:
        print("\n\nSolution found with depth-first!")
        print(format_assignment(result.assignment))
    elif result.timed_out:
        print("\n\nNO SOLUTION found with depth-first within the time limit...")
    else:
        print("\n\nNO SOLUTION EXISTS. Proved by depth-first!")
    print(f"Time spent: {result.elapsed:f} secs")
    print(f"Number of steps: {result.steps}")
    if result.solved:
        _save(output_path, result.assignment)


def main(argv: Sequence[str] | None = None) -> int:
    """Command line: ``<method> <inputfile> <outputfile>``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 3:
        print("Wrong number of arguments. Now exiting...")
        _syntax_error()
        return 1

    method, input_path, output_path = args
    try:
        problem = read_problem(input_path)
    except ProblemError as exc:
        print(f"{exc} Now exiting...")
        return 1

    if method == "hill":
        _report_hill(hill_climbing(problem), output_path)
    elif method == "depth":
        _report_depth(depth_first(problem), output_path)
    else:
        _syntax_error()
    return 0


if __name__ == "__main__":
    sys.exit(main())