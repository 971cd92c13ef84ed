"""Notion access: client construction and the page directory."""

from concept.notion.client import build_notion_client
from concept.notion.directory import PageDirectory

__all__ = [
    "build_notion_client",
    "PageDirectory",
]
