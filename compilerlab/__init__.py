"""Small compiler-construction tools: epsilon closures, NFA conversions, FIRST/FOLLOW sets, a lexer and two expression parsers."""

__version__ = "0.1.0"