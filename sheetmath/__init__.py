"""Solvers for small number-theory and arithmetic exercises, with a command-line front end."""

__version__ = "0.1.0"
__all__ = ["primes", "divisors", "arithmetic", "digits", "cli"]