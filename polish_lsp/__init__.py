"""Polish Language Server package.

This package provides:
- A pygls-based Language Server for Polish source files.
- An indexer that scans declarations and reports parse errors without evaluation.

Note: The LSP does not evaluate user buffers; it parses them against a fresh
environment.
"""

__all__ = [
    "server",
    "indexer",
]
