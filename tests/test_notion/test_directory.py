"""Tests for the Notion-backed page directory."""

from unittest.mock import MagicMock

import httpx
import pytest
from factories import mention, text
from notion_client import errors as notion_errors

from concept.errors import NotFoundError, RemoteFetchError, RemotePersistError
from concept.models.page import ParentKind
from concept.notion.directory import PageDirectory


def _api_error(code: notion_errors.APIErrorCode, status: int) -> notion_errors.APIResponseError:
    """Build an APIResponseError the way notion_client raises it."""
    request = httpx.Request("GET", "https://api.notion.com/v1/pages/page-1")
    response = httpx.Response(status, request=request, text="{}")
    return notion_errors.APIResponseError(response, "api error", code)


def _page_payload(**overrides) -> dict:
    payload = {
        "object": "page",
        "id": "page-1",
        "parent": {"type": "page_id", "page_id": "parent-1"},
        "properties": {
            "title": {
                "id": "title",
                "type": "title",
                "title": [
                    {
                        "type": "text",
                        "text": {"content": " Hello ", "link": None},
                        "annotations": {"bold": False},
                        "plain_text": " Hello ",
                        "href": None,
                    }
                ],
            }
        },
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def client() -> MagicMock:
    return MagicMock()


# --- fetch_page ---


def test_fetch_page_parses_payload(client):
    """pages.retrieve payload becomes a Page with typed title segments."""
    client.pages.retrieve.return_value = _page_payload()

    page = PageDirectory(client).fetch_page("page-1")

    client.pages.retrieve.assert_called_once_with(page_id="page-1")
    assert page.id == "page-1"
    assert page.parent.kind == ParentKind.PAGE
    assert page.title[0].content == " Hello "


def test_fetch_page_not_found(client):
    """object_not_found maps to NotFoundError."""
    client.pages.retrieve.side_effect = _api_error(notion_errors.APIErrorCode.ObjectNotFound, 404)

    with pytest.raises(NotFoundError) as exc_info:
        PageDirectory(client).fetch_page("page-1")

    assert exc_info.value.page_id == "page-1"


def test_fetch_page_other_api_error(client):
    """Other API errors map to RemoteFetchError, not NotFoundError."""
    client.pages.retrieve.side_effect = _api_error(notion_errors.APIErrorCode.Unauthorized, 401)

    with pytest.raises(RemoteFetchError) as exc_info:
        PageDirectory(client).fetch_page("page-1")

    assert not isinstance(exc_info.value, NotFoundError)


def test_fetch_page_transport_error(client):
    """Network failures map to RemoteFetchError with the cause attached."""
    cause = httpx.ConnectError("connection refused")
    client.pages.retrieve.side_effect = cause

    with pytest.raises(RemoteFetchError) as exc_info:
        PageDirectory(client).fetch_page("page-1")

    assert exc_info.value.__cause__ is cause


def test_fetch_page_without_title_property(client):
    """A payload without a title property is reported as a fetch error."""
    client.pages.retrieve.return_value = _page_payload(properties={})

    with pytest.raises(RemoteFetchError):
        PageDirectory(client).fetch_page("page-1")


@pytest.mark.parametrize(
    "payload",
    [
        {k: v for k, v in _page_payload().items() if k != "id"},
        _page_payload(properties=["not", "a", "dict"]),
        _page_payload(properties={"title": "not a dict"}),
        _page_payload(properties={"title": {"type": "title", "title": None}}),
        _page_payload(parent={"type": ["page_id"]}),
        None,
    ],
    ids=["no-id", "properties-list", "property-str", "title-null", "parent-type-list", "null"],
)
def test_fetch_page_malformed_payload(client, payload):
    """Payloads of the wrong shape are reported as fetch errors, never raw exceptions."""
    client.pages.retrieve.return_value = payload

    with pytest.raises(RemoteFetchError) as exc_info:
        PageDirectory(client).fetch_page("page-1")

    assert exc_info.value.page_id == "page-1"


# --- list_child_blocks ---


def test_list_child_blocks_first_page(client):
    """First request omits start_cursor and uses the configured page size."""
    client.blocks.children.list.return_value = {
        "object": "list",
        "results": [{"object": "block", "id": "c1", "type": "child_page", "child_page": {"title": "C"}}],
        "next_cursor": "cursor-1",
        "has_more": True,
    }

    result = PageDirectory(client, page_size=50).list_child_blocks("page-1")

    client.blocks.children.list.assert_called_once_with(block_id="page-1", page_size=50)
    assert result.has_more is True
    assert result.next_cursor == "cursor-1"
    assert result.results[0].is_child_page


def test_list_child_blocks_with_cursor(client):
    """Subsequent requests pass the cursor through."""
    client.blocks.children.list.return_value = {"results": [], "next_cursor": None, "has_more": False}

    PageDirectory(client).list_child_blocks("page-1", "cursor-1")

    client.blocks.children.list.assert_called_once_with(
        block_id="page-1", page_size=100, start_cursor="cursor-1"
    )


def test_list_child_blocks_timeout(client):
    """Request timeouts map to RemoteFetchError."""
    client.blocks.children.list.side_effect = notion_errors.RequestTimeoutError()

    with pytest.raises(RemoteFetchError):
        PageDirectory(client).list_child_blocks("page-1")


# --- update_page_title ---


def test_update_page_title_payload(client):
    """Title is sent under the named property; opaque segments unchanged."""
    segment = mention("X")

    PageDirectory(client).update_page_title("page-1", [text("Hi"), segment], property_name="Name")

    kwargs = client.pages.update.call_args.kwargs
    assert kwargs["page_id"] == "page-1"
    sent = kwargs["properties"]["Name"]["title"]
    assert sent[0] == {"type": "text", "text": {"content": "Hi"}, "plain_text": "Hi"}
    assert sent[1]["mention"] == {"type": "page", "page": {"id": "page-X"}}
    assert sent[1]["annotations"] == {"bold": False, "color": "default"}


def test_update_page_title_failure(client):
    """API errors on update map to RemotePersistError."""
    client.pages.update.side_effect = _api_error(notion_errors.APIErrorCode.ValidationError, 400)

    with pytest.raises(RemotePersistError) as exc_info:
        PageDirectory(client).update_page_title("page-1", [])

    assert exc_info.value.page_id == "page-1"
