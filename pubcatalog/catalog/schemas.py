"""
Pydantic schema definitions for the catalog module.

The ``Publication`` model captures one entry of the fixed catalogue.
Records are frozen: the catalogue is loaded once from the seed file and
never changes afterwards. ``PublicationCard`` is the display shape a
front‑end walks to render a card, and ``PublicationList`` bundles the
cards with the result count and the empty-state message.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class PublicationType(str, Enum):
    """Closed set of publication categories, labelled in the content language."""

    ARTICLES = "Статьи"
    TEXTBOOKS = "Учебные пособия"
    MONOGRAPHS = "Монографии"
    ESSAYS = "Публицистика"
    LITERATURE = "Литература"
    INTERVIEWS = "Интервью"


# Label of the "no category filter" option.
ALL_CATEGORIES = "Все"


class CategoryFilter(str, Enum):
    """Category selector values: every publication type plus "All"."""

    ALL = ALL_CATEGORIES
    ARTICLES = PublicationType.ARTICLES.value
    TEXTBOOKS = PublicationType.TEXTBOOKS.value
    MONOGRAPHS = PublicationType.MONOGRAPHS.value
    ESSAYS = PublicationType.ESSAYS.value
    LITERATURE = PublicationType.LITERATURE.value
    INTERVIEWS = PublicationType.INTERVIEWS.value


class SortOrder(str, Enum):
    YEAR_DESC = "year-desc"
    YEAR_ASC = "year-asc"
    TITLE = "title"


SORT_LABELS = {
    SortOrder.YEAR_DESC: "Сначала новые",
    SortOrder.YEAR_ASC: "Сначала старые",
    SortOrder.TITLE: "По названию",
}


class Publication(BaseModel):
    """A single catalogue entry.

    ``journal`` is only present for journal-associated works. ``pages``
    holds either a page count (``"320"``) or a range (``"45-62"``); its
    format is not validated.
    """

    model_config = ConfigDict(frozen=True)

    id: int
    title: str = Field(min_length=1)
    type: PublicationType
    year: int
    description: str = Field(min_length=1)
    journal: Optional[str] = None
    pages: Optional[str] = None


class PublicationCard(BaseModel):
    """Display-ready card for one publication."""

    id: int
    title: str
    badge: str
    year: int
    journal: Optional[str] = None
    # Page count or range with the per-category suffix already applied.
    pages_label: Optional[str] = None
    description: str


class PublicationList(BaseModel):
    """Result of a catalogue query, ready to render."""

    total: int
    count_label: Optional[str] = None
    empty_message: Optional[str] = None
    items: List[PublicationCard]


class SortOption(BaseModel):
    value: SortOrder
    label: str


class CatalogFilters(BaseModel):
    """Selector options exposed by ``/categories``."""

    categories: List[str]
    sort_options: List[SortOption]


class AuthorProfile(BaseModel):
    """Profile rendered on the "about" tab."""

    model_config = ConfigDict(frozen=True)

    name: str
    headline: str = ""
    biography: List[str] = Field(default_factory=list)
    affiliation: Optional[str] = None
    email: Optional[str] = None
