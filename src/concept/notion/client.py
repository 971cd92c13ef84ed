"""Synchronous Notion client construction from settings."""

from notion_client import Client

from concept.config import Settings


def build_notion_client(settings: Settings) -> Client:
    """Return a Notion client authenticated with the configured token.

    Raises ValueError if no token is configured.
    """
    if not settings.token:
        raise ValueError("Notion integration token is required (--token or CONCEPT_TOKEN)")
    options: dict = {"auth": settings.token}
    if settings.timeout_ms is not None:
        options["timeout_ms"] = settings.timeout_ms
    return Client(**options)
