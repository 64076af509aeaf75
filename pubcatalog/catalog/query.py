"""
Filtering and sorting of the publication catalogue.

``query_publications`` is a pure function of its inputs: it never
touches module state, so calling it twice with the same arguments
returns the same list. An empty result is a normal outcome, not an
error.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Union

from .schemas import ALL_CATEGORIES, CategoryFilter, Publication, PublicationType, SortOrder


def _norm(s: Optional[str]) -> str:
    """Lower-case a string for case-insensitive substring matching."""
    return (s or "").lower()


def collation_key(s: str) -> str:
    """Sort key for titles in the content language.

    Case is folded and ``ё`` is collated together with ``е``, matching
    Russian dictionary order for the Cyrillic alphabet. Beyond that the
    order is by code point: Latin titles sort before Cyrillic ones,
    unlike a Russian locale collation which puts Cyrillic first.
    """
    return s.casefold().replace("ё", "е")


def matches_search(pub: Publication, query: Optional[str]) -> bool:
    """True when ``query`` occurs in the title or the description.

    The comparison is case-insensitive; an empty query matches every
    publication.
    """
    nq = _norm(query)
    if not nq:
        return True
    return nq in _norm(pub.title) or nq in _norm(pub.description)


def matches_category(
    pub: Publication,
    category: Union[CategoryFilter, PublicationType, str, None],
) -> bool:
    if category is None:
        return True
    value = category.value if isinstance(category, (CategoryFilter, PublicationType)) else category
    return value == ALL_CATEGORIES or pub.type.value == value


def sort_publications(items: List[Publication], sort: Optional[SortOrder]) -> List[Publication]:
    """Return ``items`` ordered by ``sort``.

    ``list.sort`` is stable, so records with equal keys keep their
    catalogue order. ``None`` keeps the catalogue order unchanged.
    """
    items = list(items)
    if sort is None:
        return items
    sort = SortOrder(sort)
    if sort == SortOrder.YEAR_DESC:
        items.sort(key=lambda p: p.year, reverse=True)
    elif sort == SortOrder.YEAR_ASC:
        items.sort(key=lambda p: p.year)
    elif sort == SortOrder.TITLE:
        items.sort(key=lambda p: collation_key(p.title))
    return items


def query_publications(
    publications: Iterable[Publication],
    search: Optional[str] = "",
    category: Union[CategoryFilter, PublicationType, str, None] = ALL_CATEGORIES,
    sort: Optional[SortOrder] = None,
) -> List[Publication]:
    """Filter ``publications`` by text and category, then sort.

    Parameters
    ----------
    publications : Iterable[Publication]
        The catalogue, in seed order.
    search : Optional[str]
        Free text matched against title and description.
    category : CategoryFilter | PublicationType | str | None
        ``"Все"`` (or ``None``) disables the category filter.
    sort : Optional[SortOrder]
        Ordering to apply after filtering; ``None`` keeps seed order.

    Returns
    -------
    List[Publication]
        The matching publications. Possibly empty.
    """
    items = [
        p for p in publications
        if matches_search(p, search) and matches_category(p, category)
    ]
    return sort_publications(items, sort)
