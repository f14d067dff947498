"""
Icon and brand color per technology category.

Known categories are enum members; any other name resolves to DEFAULT.
"""
from enum import Enum
from typing import Optional

ALL_FILTER_GLYPH = "🔍"


class CategoryStyle(Enum):
    """Display style of a category: (name, glyph, color)."""

    CSS = ("CSS", "🎨", "#1572b6")
    JAVASCRIPT = ("JavaScript", "JS", "#f7df1e")
    REACT = ("React", "⚛", "#61dafb")
    HTML = ("HTML", "</>", "#e34c26")
    NODEJS = ("Node.js", "⬢", "#339933")
    TYPESCRIPT = ("TypeScript", "TS", "#3178c6")
    DEFAULT = ("", "📚", "#6b7280")

    def __init__(self, category_name: str, glyph: str, color: str):
        self.category_name = category_name
        self.glyph = glyph
        self.color = color

    @classmethod
    def resolve(cls, name: Optional[str]) -> "CategoryStyle":
        """Style for a category name; DEFAULT when the name is unknown."""
        for style in cls:
            if style is not cls.DEFAULT and style.category_name == name:
                return style
        return cls.DEFAULT

    @property
    def is_default(self) -> bool:
        return self is CategoryStyle.DEFAULT


def css_slug(name: str) -> str:
    """Class-safe form of a category name ("Node.js" -> "nodejs")."""
    return name.lower().replace(".", "").replace(" ", "-")
