"""Sort integers with push-swap stack operations: stacks, sorters, parsing and a command line."""

__version__ = "0.1.0"
__all__ = ["cli", "greedy", "lis", "operations", "parsing", "runs"]