"""
Bookshelf - Interactive Resource Catalog.

A PySide6 desktop application that renders a curated catalog of books
grouped by technology, with category filters, free-text search and an
adaptive sticky header.
"""

__version__ = "0.1.0"
