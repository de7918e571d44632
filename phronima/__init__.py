"""A small stack language with a simulator and a Brainfuck compiler."""

__version__ = "0.1.0"
__all__ = ["__version__"]