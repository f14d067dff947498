import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtWidgets import QApplication

from bookshelf.core.catalog.loader import parse_catalog


@pytest.fixture(scope="session")
def qapp():
    """Ensure a QApplication exists for QObject/QWidget tests."""
    app = QApplication.instance() or QApplication([])
    yield app


def make_item(title: str, author: str = "Anonymous") -> dict:
    return {
        "title": title,
        "author": author,
        "publisher": "Press",
        "edition": "1st",
        "level": "Beginner",
        "rationale": "Recommended",
        "resource_link": "https://example.com",
    }


@pytest.fixture
def small_catalog():
    """React with two books, CSS with one."""
    return parse_catalog({
        "categories": [
            {
                "name": "React",
                "items": [
                    make_item("Learning React Hooks", "Alex Banks"),
                    make_item("Fluent React", "Tejas Kumar"),
                ],
            },
            {
                "name": "CSS",
                "items": [make_item("CSS Secrets", "Lea Verou")],
            },
        ]
    })


@pytest.fixture
def large_catalog():
    """One category with 20 books: enough content to pin at 1300x900."""
    return parse_catalog({
        "categories": [
            {
                "name": "JavaScript",
                "items": [make_item(f"JavaScript Volume {n}", "Kyle Simpson") for n in range(20)],
            },
        ]
    })
