"""Data models for pages, blocks and rich text titles."""

from concept.models.page import BlockChildren, ChildBlock, Page, Parent, ParentKind
from concept.models.rich_text import (
    EquationSegment,
    MentionSegment,
    RichTextSegment,
    TextContent,
    TextSegment,
    dump_title,
    parse_title,
)

__all__ = [
    "BlockChildren",
    "ChildBlock",
    "dump_title",
    "EquationSegment",
    "MentionSegment",
    "Page",
    "Parent",
    "ParentKind",
    "parse_title",
    "RichTextSegment",
    "TextContent",
    "TextSegment",
]
