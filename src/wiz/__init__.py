"""wiz - ask a model for a shell command, or for a spelling pass over a file."""

__version__ = "0.1.0"
