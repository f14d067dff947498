"""
Catalog loader.

Reads the catalog JSON document into a CatalogIndex. Two document shapes
are accepted:

    {"categories": [{"name": "React", "items": [...]}]}
    {"libros": {"categorias": [{"nombre": "React", "libros": [...]}]}}

A bare list of categories is accepted as well.
"""
import json
from pathlib import Path
from typing import Any, Union

from loguru import logger
from pydantic import ValidationError

from bookshelf.core.catalog.models import CatalogIndex


class CatalogLoadError(Exception):
    """Raised when the catalog document cannot be read or parsed."""


def _extract_categories(raw: Any) -> Any:
    if isinstance(raw, list):
        return raw
    if isinstance(raw, dict):
        if "categories" in raw:
            return raw["categories"]
        books = raw.get("libros")
        if isinstance(books, dict) and "categorias" in books:
            return books["categorias"]
    raise CatalogLoadError("Catalog document has no category list")


def parse_catalog(raw: Any) -> CatalogIndex:
    """
    Build a CatalogIndex from an already decoded JSON document.

    Raises:
        CatalogLoadError: If the document does not describe categories
    """
    categories = _extract_categories(raw)
    try:
        return CatalogIndex.model_validate({"categories": categories})
    except ValidationError as e:
        raise CatalogLoadError(f"Invalid catalog document: {e}") from e


def load_catalog(path: Union[str, Path]) -> CatalogIndex:
    """
    Load catalog from a JSON file.

    Args:
        path: Path to the catalog document

    Returns:
        CatalogIndex with categories in document order

    Raises:
        CatalogLoadError: If the file cannot be read or parsed
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = json.load(f)
    except OSError as e:
        raise CatalogLoadError(f"Cannot read catalog {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise CatalogLoadError(f"Catalog {path} is not valid JSON: {e}") from e

    index = parse_catalog(raw)
    logger.info(
        f"Loaded catalog {path.name}: {len(index)} categories, {index.total_items} items"
    )
    return index


def default_catalog_path() -> Path:
    """Path of the sample catalog shipped with the package."""
    return Path(__file__).resolve().parents[2] / "data" / "books.json"
