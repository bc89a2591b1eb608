"""Compile arithmetic statements over x, y, z to register-machine assembly and simulate it."""

__version__ = "0.1.0"