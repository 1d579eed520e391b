"""
Actor Search REST API.

This module provides a FastAPI-based REST API over the search and
detail pipelines, for a browser page that renders result cards and
a person's detail panel.
"""

from api.main import app

__all__ = ["app"]
