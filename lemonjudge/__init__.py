"""Compilers, judge configuration, colour themes and translations for a contest judging environment."""

__version__ = "0.1.0"