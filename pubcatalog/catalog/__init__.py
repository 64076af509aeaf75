"""
Catalog package for the publications API.

This package holds the publication schemas, the read-only store loaded
from the seed file, the filter/sort query engine and the display rules
used to turn publications into cards. The routes under
``/api/catalog`` expose the catalogue statelessly; the session routes
reuse the same query engine for per-session view state.
"""

from .router import router as catalog_router  # noqa: F401
