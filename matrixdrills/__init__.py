"""Packed special matrices, sparse representations, bitmask and recursion drills."""

__version__ = "0.1.0"

__all__ = ["bits", "matrix", "menu", "recursion", "sparse", "toeplitz", "triangular"]