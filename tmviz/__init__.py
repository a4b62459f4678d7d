"""Parse, simulate and animate single-tape Turing machines in the terminal."""

__version__ = "0.1.0"