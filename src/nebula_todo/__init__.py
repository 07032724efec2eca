"""nebula-todo: a small local task tracker for the terminal."""

__version__ = "0.1.0"
