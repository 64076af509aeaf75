# pubcatalog/models.py
from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .catalog.schemas import AuthorProfile, CategoryFilter, PublicationList, SortOrder


class Tab(str, Enum):
    CATALOG = "catalog"
    ABOUT = "about"


class ContactForm(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = ""
    email: str = ""
    message: str = ""


class Acknowledgment(BaseModel):
    message: str = "Сообщение отправлено! Спасибо, я отвечу в ближайшее время."
    sent_at: datetime


class ViewState(BaseModel):
    """Session-local selections. Every transition returns a new instance."""

    model_config = ConfigDict(frozen=True)

    search_query: str = ""
    selected_type: CategoryFilter = CategoryFilter.ALL
    sort_order: SortOrder = SortOrder.YEAR_DESC
    active_tab: Tab = Tab.CATALOG
    contact_form: ContactForm = Field(default_factory=ContactForm)
    submitting: bool = False


class ContactView(BaseModel):
    form: ContactForm
    submitting: bool
    # Submit control is enabled only when every field is filled and nothing is pending.
    can_submit: bool


class AboutView(BaseModel):
    author: AuthorProfile
    contact: ContactView


class SessionView(BaseModel):
    """Everything a front‑end needs to render the current tab."""

    session_id: Optional[str] = None
    state: ViewState
    catalog: Optional[PublicationList] = None
    about: Optional[AboutView] = None


class SearchUpdate(BaseModel):
    query: str = ""


class CategoryUpdate(BaseModel):
    category: CategoryFilter


class SortUpdate(BaseModel):
    order: SortOrder


class TabUpdate(BaseModel):
    tab: Tab
