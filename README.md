# satsearch

satsearch solves Boolean satisfiability (SAT) problems in clause form. It
offers two search methods:

- **hill**: greedy hill-climbing with random restarts. At each step it flips
  the one proposition that most reduces the number of unsatisfied sentences.
  If no flip helps, it restarts from a new random assignment. It can find a
  solution, but it cannot prove that none exists.
- **depth**: systematic depth-first search over partial assignments. It
  prunes any branch in which a sentence is already false. It either finds a
  solution or proves that there is none.

Both methods stop after 60 seconds of processor time. The time limit is
measured with `time.process_time`.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install .[test]
```

## Problem files

A problem file holds integers separated by whitespace. The first three are:

1. `N`, the number of propositions. It must be at least 1.
2. `M`, the number of sentences. It must be at least 1.
3. `K`, the number of propositions per sentence. It must be at least 2.

These are followed by `M × K` literals. Each literal is non-zero and lies
between `-N` and `N`. The literal `3` stands for `P3` and `-3` stands for
`not P3`. Each group of `K` literals is one disjunction. A solution must make
every sentence true.

```
3 2 2
1 -2
2 3
```

If the file is malformed, the commands print a message and exit with status 1.
Examples of such messages are `Wrong value for the #2 proposition of the #1
sentence.` and `Low number of sentences.`.

## Commands

### Solve a problem

```
satsearch hill problem.txt solution.txt
satsearch depth problem.txt solution.txt
```

The command prints whether a solution was found. If one was found, it also
prints the assignment (`P1=true  P2=false  ...`). It then prints the time
spent and the number of steps. For `hill` it also prints the number of
restarts.

If a solution was found, the command writes it to the output file. The file
holds one value per proposition, in order, each followed by a space. `1` means
true and `-1` means false.

If no solution was found, `depth` prints one of two messages. It reports
that no solution exists, or it reports that the time limit was reached.

### Generate random instances

```
satsearch-generate test 1 10
```

This command writes the files `test_1.txt` through `test_10.txt`. Each file
holds a random instance with 10 propositions and 650 sentences. Each sentence
has 6 distinct propositions, and each literal is negated with probability
one half. Generated instances may have no solution. Both numbers must be
positive, and the first must not exceed the second.

### Check a solution

```
satsearch-validate problem.txt solution.txt
```

The command reads the first `N` integers of the solution file. It prints
`ok!` if every proposition has a value and every sentence is satisfied.
Otherwise it prints `Error`.

## Library use

```python
import random

from satsearch.problem import parse_problem, format_assignment
from satsearch.solver import depth_first, hill_climbing, write_solution

problem = parse_problem("3 2 2  1 -2  2 3")

result = depth_first(problem, timeout=60)
if result.solved:
    print(format_assignment(result.assignment))
    write_solution("solution.txt", result.assignment)

result = hill_climbing(problem, timeout=60, rng=random.Random(1))
print(result.solved, result.steps, result.restarts, result.timed_out)
```

### `satsearch.problem`

- `Problem` holds `num_props` and `clauses`.
  - `count_unsatisfied(assignment)` counts the sentences that are not
    satisfied.
  - `is_consistent(assignment)` checks whether a partial assignment still
    leaves every sentence satisfiable.
  - `is_solution(assignment)` checks whether the assignment is complete and
    satisfies every sentence.
  - `describe()` lists the sentences in readable form.
- Assignments use `1` for true, `-1` for false and `0` for unassigned.
- `parse_problem(text)` and `read_problem(path)` read the file format. They
  raise `ProblemError`, a subclass of `ValueError`, if the input is invalid.

### `satsearch.solver`

- `hill_climbing(problem, timeout, rng)` runs the hill-climbing search.
- `depth_first(problem, timeout)` runs the depth-first search.
- Both return a `SearchResult`.
- `random_assignment(num_props, rng)` returns a random assignment.
- `write_solution(path, assignment)` writes an assignment to a file.

### `satsearch.generate`

- `random_problem(num_props, num_clauses, clause_size, rng)` builds a random
  instance.
- `format_problem(problem)` renders an instance in the file format.
- `instance_filename(prefix, index)` gives the name of an instance file.

### `satsearch.validate`

- `read_solution(path, num_props)` loads an assignment file.

## Limitations

- Only the format described above is read and written. Other SAT file formats
  such as DIMACS CNF are not supported.
- The time limit of the command-line solver is fixed at 60 seconds.
- The size of generated instances is fixed for `satsearch-generate`. Other
  sizes are available only through `random_problem`.