"""
Confluence API Client Library.

A small Python client for Confluence's REST API using Basic authentication
with an API key.

This package provides authenticated access to spaces and pages: reading a
page, listing spaces, listing every page of a space (following pagination
links), and creating and updating pages.

Main Components:
    - ConfluenceSession: Authenticated session exposing the page/space operations
    - PageCollectionWalker: Pagination-following for space content listings
    - ConfluenceConfig: Configuration management with environment variable support
    - TransportError / RemoteError / DecodeError: the error taxonomy

Quick Start:
    >>> from confluence_client import ConfluenceConfig
    >>>
    >>> # Load configuration from environment variables
    >>> config = ConfluenceConfig.from_env()
    >>> session = config.create_session()
    >>>
    >>> # Read
    >>> spaces = session.get_spaces()
    >>> pages = session.get_pages_for_space("DOC")
    >>>
    >>> # Write
    >>> page = session.add_new_page("DOC", None, "Hello", "<p>World</p>")
    >>> session.update_page("DOC", int(page.id), page.version.number + 1, "Hello", "<p>Again</p>")
"""

# Core functionality
from confluence_client.core import (
    BasicAuthenticator,
    ConfluenceClientError,
    ConfluenceConfig,
    ConfluenceSession,
    DecodeError,
    PageCollectionWalker,
    RemoteError,
    TransportError,
    encode_basic_auth,
    strip_page_segment,
)

# Data model
from confluence_client.content import Page, PostPage, Space

# Page publishing manifest
from confluence_client.page_manifest import ManifestEntry, PageManifest, load_page_manifest

__all__ = [
    "ConfluenceSession",
    "PageCollectionWalker",
    "BasicAuthenticator",
    "ConfluenceConfig",
    "encode_basic_auth",
    "strip_page_segment",
    "Page",
    "PostPage",
    "Space",
    "ManifestEntry",
    "PageManifest",
    "load_page_manifest",
    "ConfluenceClientError",
    "TransportError",
    "RemoteError",
    "DecodeError",
]

__version__ = "1.0.0"
