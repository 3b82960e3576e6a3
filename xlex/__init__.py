"""Regular expressions to NFA, DFA and minimised DFA, with YAML reader building blocks."""

__version__ = "0.1.0"