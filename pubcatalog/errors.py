"""Exceptions raised by the catalogue core and mapped to HTTP errors by the routers."""


class PubCatalogError(Exception):
    """Base class for every error raised by this package."""


class CatalogLoadError(PubCatalogError):
    """The seed file is missing, malformed or violates a catalogue invariant."""


class ContactValidationError(PubCatalogError):
    """A required contact form field is empty."""

    def __init__(self, missing):
        self.missing = list(missing)
        super().__init__("Missing required fields: " + ", ".join(self.missing))


class SubmissionInProgress(PubCatalogError):
    """A contact submission is already pending for this form."""
