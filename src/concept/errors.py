"""Error types raised while trimming page titles.

Every error carries the id of the page it concerns so that the recursive
walker can collect them and the CLI can report them after traversal.
"""


class ConceptError(Exception):
    """Base class for all page-level failures."""

    def __init__(self, page_id: str, message: str) -> None:
        super().__init__(message)
        self.page_id = page_id


class UnsupportedContainerError(ConceptError):
    """The page lives in a container whose titles must not be touched."""

    def __init__(self, page_id: str, kind: str) -> None:
        super().__init__(page_id, f"page type {kind} not supported")
        self.kind = kind


class RemoteFetchError(ConceptError):
    """Reading a page or its children from Notion failed."""


class NotFoundError(RemoteFetchError):
    """The page does not exist or is not shared with the integration."""


class RemotePersistError(ConceptError):
    """Writing the trimmed title back to Notion failed."""
