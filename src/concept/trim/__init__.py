"""Title trimming: pure segment logic, single-page normalizer, subtree walker."""

from concept.trim.normalizer import normalize_title
from concept.trim.title import SEPARATOR, render_plain, trim_title
from concept.trim.walker import discover_child_pages, walk_and_normalize

__all__ = [
    "discover_child_pages",
    "normalize_title",
    "render_plain",
    "SEPARATOR",
    "trim_title",
    "walk_and_normalize",
]
