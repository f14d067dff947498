"""
Catalog Data Models.

Pydantic models for the static catalog document. Field aliases accept
both the English keys and the keys of the Spanish data file
(`titulo`, `autor`, `porQue`, ...).
"""
from typing import Optional, Tuple
from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class Item(BaseModel):
    """
    A single curated resource.

    Attributes:
        title: Book title
        author: Author name(s)
        publisher: Publishing house
        edition: Edition or year
        level: Audience level (beginner, intermediate...)
        rationale: Why the book is recommended
        resource_link: External link to the resource
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    title: str = Field(..., validation_alias=AliasChoices("title", "titulo"))
    author: str = Field("", validation_alias=AliasChoices("author", "autor"))
    publisher: str = Field("", validation_alias=AliasChoices("publisher", "editorial"))
    edition: str = Field("", validation_alias=AliasChoices("edition", "edicion"))
    level: str = Field("", validation_alias=AliasChoices("level", "nivel"))
    rationale: str = Field("", validation_alias=AliasChoices("rationale", "porQue"))
    resource_link: str = Field(
        "", validation_alias=AliasChoices("resource_link", "resourceLink", "linkCompra")
    )

    def matches_text(self, text: str) -> bool:
        """
        Check if title or author contains text (case-insensitive).

        Empty text matches everything.
        """
        if not text:
            return True
        needle = text.lower()
        return needle in self.title.lower() or needle in self.author.lower()


class CatalogEntry(Item):
    """Item stamped with the name of the category it was taken from."""
    topic: str

    @classmethod
    def from_item(cls, item: Item, topic: str) -> "CatalogEntry":
        return cls(**item.model_dump(), topic=topic)


class Category(BaseModel):
    """Named group of items; order of items is display order."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(..., validation_alias=AliasChoices("name", "nombre"))
    items: Tuple[Item, ...] = Field(
        default_factory=tuple, validation_alias=AliasChoices("items", "libros")
    )

    def __len__(self) -> int:
        return len(self.items)


class CatalogIndex(BaseModel):
    """Ordered, immutable collection of categories."""
    model_config = ConfigDict(frozen=True)

    categories: Tuple[Category, ...] = ()

    def __len__(self) -> int:
        return len(self.categories)

    @property
    def topic_names(self) -> list[str]:
        """Category names in catalog order."""
        return [category.name for category in self.categories]

    @property
    def total_items(self) -> int:
        return sum(len(category) for category in self.categories)

    def get(self, name: str) -> Optional[Category]:
        for category in self.categories:
            if category.name == name:
                return category
        return None

    def has_topic(self, name: str) -> bool:
        return self.get(name) is not None
