"""Command-line interface for slack_reports."""

from .main import cli

__all__ = ['cli']
