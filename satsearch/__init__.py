"""Boolean satisfiability by hill-climbing and depth-first search, with an instance generator and a solution checker."""

__version__ = "0.1.0"
__all__ = ["problem", "solver", "generate", "validate"]