"""Command-line interface for echochat."""

from .app import app

__all__ = ["app"]
