"""Command-line interface for wiz."""

from .app import app, main
from .render import Renderer

__all__ = ["Renderer", "app", "main"]
