"""Classic online-judge exercises as small, tested Python functions."""

__version__ = "0.1.0"

__all__ = [
    "arithmetic",
    "ascii_art",
    "brute_force",
    "conditionals",
    "everyday",
    "number_theory",
    "queues",
    "searching",
    "sequences",
    "sorting",
    "stacks",
    "stats",
    "text",
    "wordplay",
]