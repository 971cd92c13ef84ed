"""Rich text segments as returned by the Notion API.

A title is an ordered list of segments. Only text segments carry content
that may be edited; mentions and equations are kept verbatim, including
any keys this model does not know about, so they round-trip unchanged.
"""

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class _Segment(BaseModel):
    """Fields shared by every rich text segment."""

    model_config = ConfigDict(extra="allow")

    annotations: dict | None = None
    plain_text: str | None = None
    href: str | None = None


class TextContent(BaseModel):
    """Payload of a text segment."""

    model_config = ConfigDict(extra="allow")

    content: str
    link: dict | None = None


class TextSegment(_Segment):
    """Plain text segment. The only kind whose content is trimmed."""

    type: Literal["text"] = "text"
    text: TextContent

    @property
    def content(self) -> str:
        return self.text.content

    def with_content(self, content: str) -> "TextSegment":
        """Return a copy with new content; annotations and link are kept."""
        return self.model_copy(
            update={
                "text": self.text.model_copy(update={"content": content}),
                "plain_text": content,
            }
        )


class MentionSegment(_Segment):
    """Mention of a page, user, date, etc. Opaque."""

    type: Literal["mention"] = "mention"
    mention: dict


class EquationSegment(_Segment):
    """Inline equation. Opaque."""

    type: Literal["equation"] = "equation"
    equation: dict


RichTextSegment = Annotated[
    TextSegment | MentionSegment | EquationSegment,
    Field(discriminator="type"),
]

_title_adapter = TypeAdapter(list[RichTextSegment])


def parse_title(payload: list[dict]) -> list[RichTextSegment]:
    """Validate a raw rich_text array into typed segments."""
    return _title_adapter.validate_python(payload)


def dump_title(title: list[RichTextSegment]) -> list[dict]:
    """Serialize segments back into the rich_text array shape Notion accepts."""
    return [segment.model_dump(mode="json", exclude_none=True) for segment in title]
