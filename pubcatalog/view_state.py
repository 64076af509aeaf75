# pubcatalog/view_state.py
"""Transitions of the session view state and the view-model built from it.

Setters never mutate: each returns a new ``ViewState`` with one field
replaced. ``build_view`` recomputes the whole view-model from scratch on
every call; the catalogue is immutable so nothing needs invalidating.
"""

from .catalog.display import build_publication_list
from .catalog.query import query_publications
from .catalog.schemas import CategoryFilter, SortOrder
from .catalog.store import Catalog
from .models import AboutView, ContactForm, ContactView, SessionView, Tab, ViewState


def set_search(state: ViewState, text: str) -> ViewState:
    return state.model_copy(update={"search_query": text or ""})


def set_category(state: ViewState, category) -> ViewState:
    """Select a category filter.

    ``category`` must be a category label or ``"Все"``; anything else
    raises ``ValueError``.
    """
    return state.model_copy(update={"selected_type": CategoryFilter(category)})


def set_sort(state: ViewState, order) -> ViewState:
    return state.model_copy(update={"sort_order": SortOrder(order)})


def set_tab(state: ViewState, tab) -> ViewState:
    # Search, category and sort stay as they are while the other tab is shown.
    return state.model_copy(update={"active_tab": Tab(tab)})


def form_complete(form: ContactForm) -> bool:
    return all(v.strip() for v in (form.name, form.email, form.message))


def build_view(state: ViewState, catalog: Catalog, session_id=None) -> SessionView:
    """Recompute the view-model for the active tab."""
    view = SessionView(session_id=session_id, state=state)
    if state.active_tab == Tab.CATALOG:
        items = query_publications(
            catalog.publications,
            search=state.search_query,
            category=state.selected_type,
            sort=state.sort_order,
        )
        view.catalog = build_publication_list(items, catalog.display)
    else:
        view.about = AboutView(
            author=catalog.author,
            contact=ContactView(
                form=state.contact_form,
                submitting=state.submitting,
                can_submit=not state.submitting and form_complete(state.contact_form),
            ),
        )
    return view
