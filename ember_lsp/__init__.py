"""Ember Language Server and REPL integration package.

This package provides:
- A pygls-based Language Server reporting reader errors as diagnostics.
- An indexer that reads every top-level datum of a document with its span.
- A simple TCP REPL server that reads and writes data via the Ember Repl.

Note: The LSP never evaluates user buffers; it only reads them.
"""
