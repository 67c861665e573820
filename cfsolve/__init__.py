"""Competitive-programming solvers as plain Python functions, with a small command-line front end."""

__version__ = "0.1.0"