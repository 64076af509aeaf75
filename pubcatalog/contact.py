"""
Simulated contact form submission.

There is no mail transport: a submission only waits ``delay`` seconds
and then reports success. The pending wait is an asyncio task that can
be cancelled (a session ending cancels it). While a submission is
pending, further submissions are rejected rather than queued.
"""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timezone
from enum import Enum
from typing import Callable, List, Optional

from .errors import ContactValidationError, SubmissionInProgress
from .models import Acknowledgment, ContactForm


logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)

REQUIRED_FIELDS = ("name", "email", "message")


class SubmissionState(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"


def missing_fields(form: ContactForm) -> List[str]:
    """Names of required fields that are empty. Email format is not checked."""
    return [f for f in REQUIRED_FIELDS if not getattr(form, f).strip()]


class ContactSubmission:
    """Two-state machine (``idle`` / ``submitting``) around one contact form."""

    def __init__(
        self,
        delay: float = 1.0,
        on_acknowledge: Optional[Callable[[Acknowledgment], None]] = None,
    ) -> None:
        self.delay = delay
        self.on_acknowledge = on_acknowledge
        self.form = ContactForm()
        self.state = SubmissionState.IDLE
        self.acknowledgments: List[Acknowledgment] = []
        self._task: Optional[asyncio.Task] = None

    @property
    def submitting(self) -> bool:
        return self.state == SubmissionState.SUBMITTING

    def update_form(self, form: ContactForm) -> None:
        """Replace the form fields.

        Rejected with ``SubmissionInProgress`` while a submission is pending,
        since completion clears the form.
        """
        if self.submitting:
            raise SubmissionInProgress("Cannot edit the form while a submission is pending")
        self.form = form

    def submit(self) -> asyncio.Task:
        """Start a submission of the current form.

        Must be called from a running event loop. Returns the pending task,
        which resolves to the acknowledgment.

        Raises
        ------
        ContactValidationError
            A required field is empty; the state is left untouched.
        SubmissionInProgress
            A previous submission has not completed yet.
        """
        if self.submitting:
            raise SubmissionInProgress("A submission is already pending")
        missing = missing_fields(self.form)
        if missing:
            raise ContactValidationError(missing)

        self.state = SubmissionState.SUBMITTING
        logger.info("Contact submission started (delay %.2fs)", self.delay)
        self._task = asyncio.get_running_loop().create_task(self._complete())
        return self._task

    async def _complete(self) -> Acknowledgment:
        try:
            await asyncio.sleep(self.delay)
        except asyncio.CancelledError:
            # cancel() has already returned the machine to idle.
            logger.info("Contact submission cancelled")
            raise

        # The submitted data is discarded; only the acknowledgment survives.
        ack = Acknowledgment(sent_at=datetime.now(timezone.utc))
        self.form = ContactForm()
        self.state = SubmissionState.IDLE
        self._task = None
        self.acknowledgments.append(ack)
        logger.info("Contact submission acknowledged")
        if self.on_acknowledge is not None:
            self.on_acknowledge(ack)
        return ack

    def cancel(self) -> Optional[asyncio.Task]:
        """Cancel a pending submission.

        Returns the cancelled task so the caller can await its completion,
        or ``None`` when nothing was pending.

        The form keeps its contents so the user can submit again.
        """
        task = self._task
        if task is None or task.done():
            return None
        task.cancel()
        self.state = SubmissionState.IDLE
        self._task = None
        return task
