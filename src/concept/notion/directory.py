"""Page directory: the three Notion calls the trim command needs.

Wraps a notion_client.Client and turns client, transport and payload
errors into the ConceptError hierarchy so callers handle one error type.
Nothing is retried.
"""

import logging

import httpx
from notion_client import Client
from notion_client import errors as notion_errors

from concept.errors import NotFoundError, RemoteFetchError, RemotePersistError
from concept.models.page import BlockChildren, Page
from concept.models.rich_text import RichTextSegment, dump_title

logger = logging.getLogger(__name__)

_TRANSPORT_ERRORS = (
    notion_errors.RequestTimeoutError,
    notion_errors.HTTPResponseError,
    httpx.HTTPError,
)


def _fetch_error(page_id: str, exc: Exception) -> RemoteFetchError:
    """Classify a read failure, separating missing pages from everything else."""
    if (
        isinstance(exc, notion_errors.APIResponseError)
        and exc.code == notion_errors.APIErrorCode.ObjectNotFound
    ):
        return NotFoundError(page_id, f"page {page_id} not found: {exc}")
    return RemoteFetchError(page_id, f"failed to fetch {page_id}: {exc}")


class PageDirectory:
    """Remote page store backed by the Notion API."""

    def __init__(self, client: Client, page_size: int = 100) -> None:
        self._client = client
        self._page_size = page_size

    def fetch_page(self, page_id: str) -> Page:
        """Retrieve a page and parse its parent and title."""
        try:
            payload = self._client.pages.retrieve(page_id=page_id)
        except _TRANSPORT_ERRORS as exc:
            raise _fetch_error(page_id, exc) from exc

        try:
            return Page.from_api(payload)
        except ValueError as exc:  # includes pydantic.ValidationError
            raise RemoteFetchError(page_id, f"unreadable page {page_id}: {exc}") from exc

    def list_child_blocks(self, page_id: str, cursor: str | None = None) -> BlockChildren:
        """Return one page of the block's children, starting at cursor."""
        params: dict = {"block_id": page_id, "page_size": self._page_size}
        if cursor:
            params["start_cursor"] = cursor
        try:
            response = self._client.blocks.children.list(**params)
        except _TRANSPORT_ERRORS as exc:
            raise _fetch_error(page_id, exc) from exc

        try:
            return BlockChildren.model_validate(response)
        except ValueError as exc:
            raise RemoteFetchError(
                page_id, f"unreadable children listing for {page_id}: {exc}"
            ) from exc

    def update_page_title(
        self,
        page_id: str,
        title: list[RichTextSegment],
        property_name: str = "title",
    ) -> dict:
        """Persist the title segments on the page."""
        logger.debug("Updating title of %s (%d segments)", page_id, len(title))
        try:
            return self._client.pages.update(
                page_id=page_id,
                properties={property_name: {"title": dump_title(title)}},
            )
        except _TRANSPORT_ERRORS as exc:
            raise RemotePersistError(
                page_id, f"failed to update title of {page_id}: {exc}"
            ) from exc
