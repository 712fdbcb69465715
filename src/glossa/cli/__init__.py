"""Command-line interface for glossa."""

from glossa.cli.main import app

__all__ = ["app"]
