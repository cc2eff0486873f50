"""
Confluence content data model.

Provides the typed records decoded from API responses (spaces, pages,
paginated collections) and the request bodies used to create and update
pages.
"""

from confluence_client.content.models import (
    Body,
    BodyView,
    Links,
    Page,
    PageChildren,
    PaginatedResponse,
    PostAncestor,
    PostBody,
    PostPage,
    PostSpace,
    PostStorage,
    PostVersion,
    Space,
    SpaceContentResult,
    SpaceExpandable,
    SpacesResult,
    Version,
)

__all__ = [
    "Body",
    "BodyView",
    "Links",
    "Page",
    "PageChildren",
    "PaginatedResponse",
    "PostAncestor",
    "PostBody",
    "PostPage",
    "PostSpace",
    "PostStorage",
    "PostVersion",
    "Space",
    "SpaceContentResult",
    "SpaceExpandable",
    "SpacesResult",
    "Version",
]
