"""Pure functions for trimming and rendering rich text titles.

Trimming only touches text segments at the two ends of a title. It stops
at the first segment that still has content after stripping, and at the
first non-text segment, whichever comes first. Segments emptied by the
strip are dropped; everything between the two ends is left as is.
"""

from concept.models.rich_text import RichTextSegment, TextSegment

SEPARATOR = "•"

# str.isspace() also accepts the ASCII information separators, which are not whitespace.
_INFORMATION_SEPARATORS = frozenset("\x1c\x1d\x1e\x1f")


def _is_space(char: str) -> bool:
    return char.isspace() and char not in _INFORMATION_SEPARATORS


def _strip_left(content: str) -> str:
    start = 0
    while start < len(content) and _is_space(content[start]):
        start += 1
    return content[start:]


def _strip_right(content: str) -> str:
    end = len(content)
    while end > 0 and _is_space(content[end - 1]):
        end -= 1
    return content[:end]


def trim_title(title: list[RichTextSegment]) -> list[RichTextSegment]:
    """Strip leading and trailing Unicode whitespace from a title.

    Returns a new list; the input list and its segments are not modified.
    An all-whitespace title collapses to an empty list.
    """
    if not title:
        return list(title)

    segments = list(title)

    first = 0
    while first < len(segments):
        segment = segments[first]
        if not isinstance(segment, TextSegment):
            break
        stripped = _strip_left(segment.content)
        if stripped != segment.content:
            segments[first] = segment.with_content(stripped)
        if stripped:
            break
        first += 1

    last = len(segments) - 1
    while last >= first:
        segment = segments[last]
        if not isinstance(segment, TextSegment):
            break
        stripped = _strip_right(segment.content)
        if stripped != segment.content:
            segments[last] = segment.with_content(stripped)
        if stripped:
            break
        last -= 1

    return segments[first : last + 1]


def render_plain(title: list[RichTextSegment]) -> str:
    """Flatten a title to plain text, joining segments with a bullet."""
    parts = []
    for segment in title:
        if isinstance(segment, TextSegment):
            parts.append(segment.content)
        else:
            parts.append(segment.plain_text or "")
    return SEPARATOR.join(parts)
