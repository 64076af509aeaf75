"""Publications catalog service: searchable list of works and an about page."""

__version__ = "1.0.0"
