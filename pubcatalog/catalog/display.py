"""
Display rules for publication cards.

Page information is shown as ``"<pages> <suffix>"`` where the suffix
depends on the category: page ranges of journal articles are printed
bare (``"45-62"``) while books get ``"стр."`` (``"320 стр."``). The
mapping lives in ``DisplayRules`` so a seed file can override it.
"""

from typing import Any, Dict, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .schemas import Publication, PublicationCard, PublicationList, PublicationType

DEFAULT_PAGE_SUFFIX = "стр."

EMPTY_MESSAGE = "По вашему запросу ничего не найдено"
SEARCH_PLACEHOLDER = "Поиск по названию или описанию..."


def _default_page_suffix() -> Dict[PublicationType, str]:
    suffixes = {t: DEFAULT_PAGE_SUFFIX for t in PublicationType}
    suffixes[PublicationType.ARTICLES] = ""
    return suffixes


class DisplayRules(BaseModel):
    model_config = ConfigDict(frozen=True)

    page_suffix: Dict[PublicationType, str] = Field(default_factory=_default_page_suffix)

    @field_validator("page_suffix", mode="before")
    @classmethod
    def _merge_defaults(cls, value: Any) -> Any:
        # A partial mapping only overrides the categories it names.
        if not isinstance(value, dict):
            return value
        merged: Dict[Any, Any] = dict(_default_page_suffix())
        merged.update({PublicationType(k): v for k, v in value.items()})
        return merged

    def suffix_for(self, pub_type: PublicationType) -> str:
        return self.page_suffix.get(pub_type, DEFAULT_PAGE_SUFFIX)


def format_pages(pub: Publication, rules: DisplayRules) -> Optional[str]:
    """Return the page label for ``pub`` or ``None`` when it has no page info."""
    if not pub.pages:
        return None
    return f"{pub.pages} {rules.suffix_for(pub.type)}".strip()


def count_label(total: int) -> str:
    return f"Найдено публикаций: {total}"


def to_card(pub: Publication, rules: DisplayRules) -> PublicationCard:
    return PublicationCard(
        id=pub.id,
        title=pub.title,
        badge=pub.type.value,
        year=pub.year,
        journal=pub.journal,
        pages_label=format_pages(pub, rules),
        description=pub.description,
    )


def build_publication_list(items: Sequence[Publication], rules: DisplayRules) -> PublicationList:
    """Wrap query results into cards with the count footer or the empty-state message."""
    total = len(items)
    return PublicationList(
        total=total,
        count_label=count_label(total) if total else None,
        empty_message=None if total else EMPTY_MESSAGE,
        items=[to_card(p, rules) for p in items],
    )
