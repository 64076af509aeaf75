"""
Route definitions for the catalogue API.

Endpoints under /api/catalog:
- GET  /publications          : list publications with search, category and sort
- GET  /publications/{pub_id} : get one publication
- GET  /categories            : category and sort selector options
"""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from .display import build_publication_list
from .query import query_publications
from .schemas import (
    ALL_CATEGORIES,
    SORT_LABELS,
    CatalogFilters,
    CategoryFilter,
    Publication,
    PublicationList,
    PublicationType,
    SortOption,
    SortOrder,
)
from .store import Catalog, get_catalog


router = APIRouter(prefix="/api/catalog", tags=["catalog"])


@router.get("/publications", response_model=PublicationList)
def list_publications(
    q: Optional[str] = Query(default=None, description="Поиск по названию или описанию"),
    category: CategoryFilter = Query(default=CategoryFilter.ALL, description="Фильтр по типу"),
    sort: Optional[SortOrder] = Query(default=None, description="Сортировка"),
    catalog: Catalog = Depends(get_catalog),
) -> PublicationList:
    """
    Returns the publications matching the text and category filters.

    Without ``sort`` the seed order is kept.
    """
    items = query_publications(catalog.publications, search=q, category=category, sort=sort)
    return build_publication_list(items, catalog.display)


@router.get("/publications/{pub_id}", response_model=Publication)
def get_publication(pub_id: int, catalog: Catalog = Depends(get_catalog)) -> Publication:
    pub = catalog.get(pub_id)
    if pub is None:
        raise HTTPException(status_code=404, detail="Publication not found")
    return pub


@router.get("/categories", response_model=CatalogFilters)
def list_categories() -> CatalogFilters:
    # "All" leads the selector, followed by the categories in declaration order.
    categories: List[str] = [ALL_CATEGORIES] + [c.value for c in PublicationType]
    return CatalogFilters(
        categories=categories,
        sort_options=[SortOption(value=o, label=SORT_LABELS[o]) for o in SortOrder],
    )
