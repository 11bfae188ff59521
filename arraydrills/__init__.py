"""Routines for classic array, string and grid problems."""

__version__ = "0.1.0"
__all__ = ["grid", "lookup", "permutations", "rearrange", "sequences", "text"]