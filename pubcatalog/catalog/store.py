"""
Read-only data store for the catalogue.

The seed JSON file holds the publication list, the author profile shown
on the "about" page and optional display rules. It is loaded once and
wrapped in a frozen ``Catalog``; nothing mutates it afterwards. Routes
receive the catalogue through the ``get_catalog`` dependency so tests
can substitute their own fixtures.
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..config import get_settings
from ..errors import CatalogLoadError
from .display import DisplayRules
from .schemas import AuthorProfile, Publication


logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


class Catalog(BaseModel):
    """The fixed set of publications plus the data shown around it."""

    model_config = ConfigDict(frozen=True)

    publications: Tuple[Publication, ...]
    author: AuthorProfile
    display: DisplayRules = Field(default_factory=DisplayRules)

    def get(self, pub_id: int) -> Optional[Publication]:
        return next((p for p in self.publications if p.id == pub_id), None)


def parse_catalog(raw: Dict[str, Any]) -> Catalog:
    """Validate a decoded seed document and build a ``Catalog``.

    Raises
    ------
    CatalogLoadError
        When a record is malformed, a category is unknown or two
        publications share an id.
    """
    if not isinstance(raw, dict):
        raise CatalogLoadError("Seed document must be a JSON object")
    try:
        catalog = Catalog(
            publications=tuple(raw.get("publications") or []),
            author=raw.get("author") or {"name": ""},
            display=raw.get("display") or {},
        )
    except ValidationError as exc:
        raise CatalogLoadError(f"Invalid seed data: {exc}") from exc

    seen = set()
    for pub in catalog.publications:
        if pub.id in seen:
            raise CatalogLoadError(f"Duplicate publication id {pub.id}")
        seen.add(pub.id)
    return catalog


def load_catalog(path: Union[str, Path]) -> Catalog:
    """Load and validate the seed file at ``path``."""
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as f:
            raw = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        logger.error("Cannot read catalogue seed %s: %s", path, exc)
        raise CatalogLoadError(f"Cannot read {path}: {exc}") from exc
    catalog = parse_catalog(raw)
    logger.info("Loaded %d publications from %s", len(catalog.publications), path)
    return catalog


@lru_cache(maxsize=1)
def get_catalog() -> Catalog:
    """FastAPI dependency returning the catalogue from the configured seed file."""
    return load_catalog(get_settings().data_file)
