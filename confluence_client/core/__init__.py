"""
Core functionality for the Confluence API client.

This module contains the core components:
- Authentication (Basic auth with an API key)
- Authenticated session and page operations
- Pagination-following for space listings
- Configuration management
- Exception definitions
"""

from confluence_client.core.auth import BasicAuthenticator, encode_basic_auth
from confluence_client.core.config import ConfluenceConfig
from confluence_client.core.exceptions import (
    ConfluenceClientError,
    DecodeError,
    RemoteError,
    TransportError,
)
from confluence_client.core.pagination import PageCollectionWalker, strip_page_segment
from confluence_client.core.session import ConfluenceSession

__all__ = [
    "ConfluenceSession",
    "PageCollectionWalker",
    "BasicAuthenticator",
    "ConfluenceConfig",
    "encode_basic_auth",
    "strip_page_segment",
    "ConfluenceClientError",
    "TransportError",
    "RemoteError",
    "DecodeError",
]
