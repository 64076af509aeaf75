"""
Route definitions for browsing sessions.

A session keeps the search text, category filter, sort order, active
tab and contact form of one visitor. Every endpoint returns the freshly
recomputed view for the session. Handlers are coroutines so
that session state and the pending submission task are only touched
from the event loop thread.

Endpoints under /api/sessions:
- POST   /                         : start a session
- GET    /{session_id}             : current view
- PUT    /{session_id}/search      : replace the search text
- PUT    /{session_id}/category    : replace the category filter
- PUT    /{session_id}/sort        : replace the sort order
- PUT    /{session_id}/tab         : switch between catalog and about
- PUT    /{session_id}/contact     : replace the contact form fields (409 while submitting)
- POST   /{session_id}/contact/submit : start the simulated submission
- GET    /{session_id}/acknowledgments : acknowledgments received so far
- DELETE /{session_id}             : end the session
"""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response

from . import storage
from .catalog.store import Catalog, get_catalog
from .config import Settings, get_settings
from .errors import ContactValidationError, SubmissionInProgress
from .models import (
    Acknowledgment,
    CategoryUpdate,
    ContactForm,
    SearchUpdate,
    SessionView,
    SortUpdate,
    TabUpdate,
)
from .view_state import build_view, set_category, set_search, set_sort, set_tab


router = APIRouter(prefix="/api/sessions", tags=["sessions"])


def _session_or_404(session_id: str) -> storage.Session:
    session = storage.get_session(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Session not found")
    return session


def _view(session: storage.Session, catalog: Catalog) -> SessionView:
    return build_view(session.state, catalog, session_id=session.id)


@router.post("", response_model=SessionView, status_code=201)
async def start_session(
    settings: Settings = Depends(get_settings),
    catalog: Catalog = Depends(get_catalog),
) -> SessionView:
    session = storage.create_session(settings.contact_delay, settings.session_ttl)
    return _view(session, catalog)


@router.get("/{session_id}", response_model=SessionView)
async def read_session(session_id: str, catalog: Catalog = Depends(get_catalog)) -> SessionView:
    return _view(_session_or_404(session_id), catalog)


@router.put("/{session_id}/search", response_model=SessionView)
async def update_search(
    session_id: str, body: SearchUpdate, catalog: Catalog = Depends(get_catalog)
) -> SessionView:
    session = _session_or_404(session_id)
    session.state = set_search(session.state, body.query)
    return _view(session, catalog)


@router.put("/{session_id}/category", response_model=SessionView)
async def update_category(
    session_id: str, body: CategoryUpdate, catalog: Catalog = Depends(get_catalog)
) -> SessionView:
    session = _session_or_404(session_id)
    session.state = set_category(session.state, body.category)
    return _view(session, catalog)


@router.put("/{session_id}/sort", response_model=SessionView)
async def update_sort(
    session_id: str, body: SortUpdate, catalog: Catalog = Depends(get_catalog)
) -> SessionView:
    session = _session_or_404(session_id)
    session.state = set_sort(session.state, body.order)
    return _view(session, catalog)


@router.put("/{session_id}/tab", response_model=SessionView)
async def update_tab(
    session_id: str, body: TabUpdate, catalog: Catalog = Depends(get_catalog)
) -> SessionView:
    session = _session_or_404(session_id)
    session.state = set_tab(session.state, body.tab)
    return _view(session, catalog)


@router.put("/{session_id}/contact", response_model=SessionView)
async def update_contact(
    session_id: str, body: ContactForm, catalog: Catalog = Depends(get_catalog)
) -> SessionView:
    session = _session_or_404(session_id)
    try:
        session.contact.update_form(body)
    except SubmissionInProgress as e:
        raise HTTPException(status_code=409, detail=str(e))
    return _view(session, catalog)


@router.post("/{session_id}/contact/submit", response_model=SessionView, status_code=202)
async def submit_contact(session_id: str, catalog: Catalog = Depends(get_catalog)) -> SessionView:
    """
    Start the simulated submission of the session's contact form.

    The response reports ``submitting=true``; the form is cleared and an
    acknowledgment recorded once the configured delay has elapsed.
    """
    session = _session_or_404(session_id)
    try:
        session.contact.submit()
    except ContactValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except SubmissionInProgress as e:
        raise HTTPException(status_code=409, detail=str(e))
    return _view(session, catalog)


@router.get("/{session_id}/acknowledgments", response_model=List[Acknowledgment])
async def list_acknowledgments(session_id: str) -> List[Acknowledgment]:
    return list(_session_or_404(session_id).contact.acknowledgments)


@router.delete("/{session_id}", status_code=204)
async def delete_session(session_id: str) -> Response:
    if not storage.end_session(session_id):
        raise HTTPException(status_code=404, detail="Session not found")
    return Response(status_code=204)
