"""Breadth-first title normalization over a page subtree.

Processes one level of pages at a time. Each page is normalized, then its
child listing is paginated to exhaustion and every child page is resolved
into the next level. Failures are collected per node or edge and never
stop the traversal.
"""

import logging
from typing import TextIO

from concept.errors import ConceptError
from concept.models.page import Page
from concept.notion.directory import PageDirectory
from concept.trim.normalizer import normalize_title

logger = logging.getLogger(__name__)


def discover_child_pages(
    page: Page,
    directory: PageDirectory,
    errors: list[ConceptError],
) -> list[Page]:
    """Return the page's child pages in listing order.

    A failed listing request or a child that cannot be resolved ends
    pagination for this page at that point; children resolved before the
    failure are kept and the failure is appended to errors.
    """
    children: list[Page] = []
    cursor: str | None = None
    while True:
        try:
            listing = directory.list_child_blocks(page.id, cursor)
        except ConceptError as exc:
            errors.append(exc)
            return children

        for block in listing.results:
            if not block.is_child_page:
                continue
            try:
                children.append(directory.fetch_page(block.id))
            except ConceptError as exc:
                errors.append(exc)
                return children

        if not listing.has_more or not listing.next_cursor:
            return children
        cursor = listing.next_cursor


def walk_and_normalize(
    root: Page,
    directory: PageDirectory,
    out: TextIO,
    skip_unchanged: bool = False,
) -> list[ConceptError]:
    """Normalize the titles of root and all of its descendant pages.

    Never raises for per-page failures; returns them in the order they
    occurred. Pages already visited are not queued again.
    """
    errors: list[ConceptError] = []
    visited = {root.id}
    level = [root]
    depth = 0

    while level:
        logger.info("Processing level %d (%d pages)", depth, len(level))
        next_level: list[Page] = []
        for page in level:
            try:
                normalize_title(page, directory, out, skip_unchanged=skip_unchanged)
            except ConceptError as exc:
                errors.append(exc)

            for child in discover_child_pages(page, directory, errors):
                if child.id in visited:
                    logger.warning("Page %s already visited, not descending again", child.id)
                    continue
                visited.add(child.id)
                next_level.append(child)

        level = next_level
        depth += 1

    logger.info("Traversal finished: %d pages, %d errors", len(visited), len(errors))
    return errors
