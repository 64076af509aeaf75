# pubcatalog/storage.py
import asyncio
import logging
import time
import uuid
from typing import Dict, List, Optional

from .contact import ContactSubmission
from .models import ViewState


logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


class Session:
    """One browsing session: selections plus the contact form stub."""

    def __init__(self, session_id: str, contact_delay: float, ttl: float) -> None:
        self.id = session_id
        self.ttl = ttl
        self.last_seen = time.monotonic()
        self.contact = ContactSubmission(delay=contact_delay)
        self._state = ViewState()

    @property
    def state(self) -> ViewState:
        # Form contents and the submitting flag are owned by the contact stub.
        return self._state.model_copy(
            update={"contact_form": self.contact.form, "submitting": self.contact.submitting}
        )

    @state.setter
    def state(self, value: ViewState) -> None:
        self._state = value

    def expired(self, now: float) -> bool:
        return now - self.last_seen > self.ttl


SESSIONS: Dict[str, Session] = {}


def _discard(session: Session) -> Optional[asyncio.Task]:
    """Cancel the session's pending submission, returning the cancelled task."""
    task = session.contact.cancel()
    if task is not None:
        logger.info("Session %s ended with a pending submission; cancelled", session.id)
    else:
        logger.info("Session %s ended", session.id)
    return task


def expire_sessions(now: Optional[float] = None) -> List[str]:
    """End every session idle for longer than its TTL."""
    now = time.monotonic() if now is None else now
    stale = [sid for sid, s in SESSIONS.items() if s.expired(now)]
    for sid in stale:
        end_session(sid)
    if stale:
        logger.info("Expired %d idle sessions", len(stale))
    return stale


def create_session(contact_delay: float, ttl: float = 1800.0) -> Session:
    expire_sessions()
    session = Session(uuid.uuid4().hex, contact_delay, ttl)
    SESSIONS[session.id] = session
    logger.info("Session %s started", session.id)
    return session


def get_session(session_id: str) -> Optional[Session]:
    """Return a live session and mark it as seen."""
    expire_sessions()
    session = SESSIONS.get(session_id)
    if session is not None:
        session.last_seen = time.monotonic()
    return session


def end_session(session_id: str) -> bool:
    """Discard a session, cancelling any pending contact submission."""
    session = SESSIONS.pop(session_id, None)
    if session is None:
        return False
    _discard(session)
    return True


def end_all_sessions() -> List[asyncio.Task]:
    """End every session. Returns the cancelled submission tasks for the caller to await."""
    tasks = []
    for sid in list(SESSIONS):
        task = _discard(SESSIONS.pop(sid))
        if task is not None:
            tasks.append(task)
    return tasks
