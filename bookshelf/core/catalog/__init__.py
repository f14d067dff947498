"""
Catalog data: categories of curated books and the JSON loader.
"""
from bookshelf.core.catalog.models import CatalogEntry, CatalogIndex, Category, Item
from bookshelf.core.catalog.loader import CatalogLoadError, load_catalog, parse_catalog

__all__ = [
    "CatalogEntry",
    "CatalogIndex",
    "Category",
    "Item",
    "CatalogLoadError",
    "load_catalog",
    "parse_catalog",
]
