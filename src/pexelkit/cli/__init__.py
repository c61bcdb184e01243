"""Command-line interface for pexelkit."""

from .cli import cli

__all__ = ["cli"]
