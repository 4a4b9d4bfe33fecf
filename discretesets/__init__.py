"""Finite set operations, Cartesian products and Euler paths."""

__version__ = "0.1.0"
__all__ = ["euler", "numeric_sets", "letter_sets", "relations"]