"""Upkeep tasks for Notion workspaces: title whitespace trimming."""

__version__ = "0.1.0"
