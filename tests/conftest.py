"""Shared fixtures."""

import pytest

from pubcatalog import storage
from pubcatalog.catalog.store import load_catalog, parse_catalog
from pubcatalog.config import DEFAULT_DATA_FILE


@pytest.fixture
def seed_catalog():
    """The packaged eight-record catalogue."""
    return load_catalog(DEFAULT_DATA_FILE)


@pytest.fixture
def small_catalog():
    return parse_catalog({
        "author": {"name": "Тестовый автор"},
        "publications": [
            {"id": 10, "title": "Бета", "type": "Статьи", "year": 2020,
             "description": "первая запись", "pages": "1-10"},
            {"id": 11, "title": "альфа", "type": "Монографии", "year": 2020,
             "description": "Вторая запись", "pages": "200"},
            {"id": 12, "title": "Ёлка", "type": "Литература", "year": 2018,
             "description": "третья"},
            {"id": 13, "title": "Ель", "type": "Статьи", "year": 2022,
             "description": "четвёртая запись", "journal": "Вестник"},
        ],
    })


@pytest.fixture(autouse=True)
def clear_sessions():
    yield
    storage.SESSIONS.clear()
