"""
Integration tests for the Confluence session.

These tests verify that the session can authenticate against and read from
a real Confluence instance. They only read; nothing is created or updated.

Requires environment variables:
    - CONFLUENCE_BASE_URL
    - CONFLUENCE_USERNAME
    - CONFLUENCE_API_KEY
"""

import pytest
from confluence_client import (
    ConfluenceSession,
    RemoteError,
)


@pytest.mark.integration
class TestConnection:
    """Test suite for the live connection."""

    def test_session_initialization(self, live_session: ConfluenceSession):
        """Test that the session can be initialized."""
        assert live_session.base_url
        assert live_session.auth_header.startswith("Basic ")

    def test_connection_success(self, live_session: ConfluenceSession):
        """Test that the credentials are accepted."""
        assert live_session.test_connection() is True

    def test_get_spaces(self, live_session: ConfluenceSession):
        """Test listing global spaces."""
        spaces = live_session.get_spaces()

        assert isinstance(spaces, list)
        for space in spaces:
            assert space.key
            assert space.name is not None

    def test_walk_first_space(self, live_session: ConfluenceSession):
        """Test walking every page of the first global space."""
        spaces = live_session.get_spaces()
        if not spaces:
            pytest.skip("No global spaces visible to this account")

        pages = live_session.get_pages_for_space(spaces[0].key)

        ids = [p.id for p in pages]
        assert len(ids) == len(set(ids))

    def test_error_handling_unknown_page(self, live_session: ConfluenceSession):
        """Test that an unknown page id is reported as RemoteError."""
        with pytest.raises(RemoteError) as exc_info:
            live_session.get_page_by_id(1)

        assert exc_info.value.status_code in (403, 404)
