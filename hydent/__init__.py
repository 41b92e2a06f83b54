"""Hydent front end: tokenizer, symbols, spans, arena, diagnostics and syntax-tree nodes."""

__version__ = "0.1.0"