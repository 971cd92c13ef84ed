"""Title normalization for a single page."""

import logging
from typing import TextIO

from concept.errors import UnsupportedContainerError
from concept.models.page import Page, ParentKind
from concept.notion.directory import PageDirectory
from concept.trim.title import render_plain, trim_title

logger = logging.getLogger(__name__)


def normalize_title(
    page: Page,
    directory: PageDirectory,
    out: TextIO,
    skip_unchanged: bool = False,
) -> bool:
    """Trim the page title and write it back.

    The title is persisted even when trimming changed nothing, unless
    skip_unchanged is set. Returns whether the title changed.

    Raises UnsupportedContainerError for pages inside databases (nothing is
    written) and lets RemotePersistError from the directory propagate.
    """
    if page.parent.kind == ParentKind.DATABASE:
        raise UnsupportedContainerError(page.id, page.parent.kind.value)

    out.write(f"trimming title for page {page.id} ({render_plain(page.title)})\n")

    trimmed = trim_title(page.title)
    changed = trimmed != page.title

    if not changed and skip_unchanged:
        logger.info("Title of %s already trimmed, skipping update", page.id)
        return False

    directory.update_page_title(page.id, trimmed, property_name=page.title_property)
    logger.info("Updated title of %s (changed=%s)", page.id, changed)
    return changed
