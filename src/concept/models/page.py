"""Page and block models parsed from Notion API payloads."""

from enum import Enum

from pydantic import BaseModel

from concept.models.rich_text import RichTextSegment, parse_title


class ParentKind(str, Enum):
    """Kind of container a page lives in."""

    PAGE = "page"
    DATABASE = "database"
    WORKSPACE = "workspace"
    BLOCK = "block"


# Notion parent.type -> container kind. Data sources are databases since API 2025-09-03.
_PARENT_TYPES = {
    "page_id": ParentKind.PAGE,
    "database_id": ParentKind.DATABASE,
    "data_source_id": ParentKind.DATABASE,
    "workspace": ParentKind.WORKSPACE,
    "block_id": ParentKind.BLOCK,
}


class Parent(BaseModel):
    """Reference to the container a page belongs to."""

    kind: ParentKind
    id: str | None = None

    @classmethod
    def from_api(cls, payload: dict) -> "Parent":
        parent_type = payload.get("type", "")
        if not isinstance(parent_type, str) or parent_type not in _PARENT_TYPES:
            raise ValueError(f"unknown parent type: {parent_type!r}")
        parent_id = payload.get(parent_type)
        return cls(
            kind=_PARENT_TYPES[parent_type],
            id=parent_id if isinstance(parent_id, str) else None,
        )


class _PagePayload(BaseModel):
    """Shape check for a raw pages.retrieve response."""

    id: str
    parent: dict = {}
    properties: dict[str, dict] = {}


class Page(BaseModel):
    """A page with its parent reference and title segments."""

    id: str
    parent: Parent
    title: list[RichTextSegment]
    title_property: str = "title"  # property name to write the title back to

    @classmethod
    def from_api(cls, payload: dict) -> "Page":
        """Build a Page from a pages.retrieve response.

        The title lives in whichever property has type "title"; for pages
        outside databases that property is named "title". Any malformed
        payload raises ValueError (pydantic.ValidationError included).
        """
        raw = _PagePayload.model_validate(payload)
        for name, prop in raw.properties.items():
            if prop.get("type") == "title":
                return cls(
                    id=raw.id,
                    parent=Parent.from_api(raw.parent),
                    title=parse_title(prop.get("title", [])),
                    title_property=name,
                )
        raise ValueError(f"page {raw.id} has no title property")


class ChildBlock(BaseModel):
    """Entry of a blocks.children.list response."""

    id: str
    type: str

    @property
    def is_child_page(self) -> bool:
        return self.type == "child_page"


class BlockChildren(BaseModel):
    """One page of a blocks.children.list response."""

    results: list[ChildBlock] = []
    next_cursor: str | None = None
    has_more: bool = False
