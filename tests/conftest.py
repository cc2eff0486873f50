"""
Pytest configuration and shared fixtures.
"""

import json
from collections.abc import Generator
from typing import Any, Callable, Dict, Optional
from unittest.mock import patch

import pytest
import requests

from confluence_client import ConfluenceConfig, ConfluenceSession

BASE_URL = "https://wiki.example.com/wiki"


def _build_response(
    status_code: int = 200,
    json_data: Any = None,
    text: Optional[str] = None,
) -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    if json_data is not None:
        response._content = json.dumps(json_data).encode("utf-8")
        response.headers["Content-Type"] = "application/json"
    else:
        response._content = (text or "").encode("utf-8")
    response.encoding = "utf-8"
    return response


def _page_payload(page_id: str, title: Optional[str] = None, version: int = 1) -> Dict[str, Any]:
    return {
        "id": page_id,
        "type": "page",
        "status": "current",
        "title": title or f"Page {page_id}",
        "space": {
            "id": 98305,
            "key": "DOC",
            "name": "Documentation",
            "_expandable": {"homepage": "/rest/api/content/65601"},
        },
        "body": {"view": {"value": f"<p>Body of {page_id}</p>", "representation": "view"}},
        "version": {"number": version, "when": "2024-01-01T12:00:00.000Z", "message": ""},
        "_links": {
            "self": f"{BASE_URL}/rest/api/content/{page_id}",
            "webui": f"/spaces/DOC/pages/{page_id}",
        },
    }


def _content_envelope(results, next_link: Optional[str] = None, start: int = 0) -> Dict[str, Any]:
    links = {"self": f"{BASE_URL}/rest/api/space/DOC/content/page", "base": BASE_URL}
    if next_link is not None:
        links["next"] = next_link
    return {
        "page": {
            "results": results,
            "start": start,
            "limit": 2,
            "size": len(results),
            "_links": links,
        },
        "_links": {"base": BASE_URL},
    }


@pytest.fixture
def make_response() -> Callable[..., requests.Response]:
    """Factory for real ``requests.Response`` objects with a JSON or text body."""
    return _build_response


@pytest.fixture
def page_payload() -> Callable[..., Dict[str, Any]]:
    """Factory for a page as returned by the content API (fully expanded)."""
    return _page_payload


@pytest.fixture
def content_envelope() -> Callable[..., Dict[str, Any]]:
    """Factory for one page of the space content listing."""
    return _content_envelope


@pytest.fixture
def session() -> ConfluenceSession:
    return ConfluenceSession(username="bob", api_key="secret", base_url=BASE_URL)


@pytest.fixture
def transport(session: ConfluenceSession) -> Generator:
    """
    Stub the HTTP transport of ``session``.

    Set ``transport.return_value`` or ``transport.side_effect`` to the
    responses the server should produce; inspect ``transport.call_args_list``
    for the requests that were issued.
    """
    with patch.object(session._session, "request") as request:
        yield request


@pytest.fixture(scope="session")
def confluence_config() -> ConfluenceConfig:
    """
    Load Confluence configuration from environment variables.

    This fixture reads configuration from environment variables:
    - CONFLUENCE_BASE_URL
    - CONFLUENCE_USERNAME
    - CONFLUENCE_API_KEY
    """
    try:
        return ConfluenceConfig.from_env()
    except ValueError as e:
        pytest.skip(f"Missing required environment variables: {e}")


@pytest.fixture(scope="session")
def live_session(confluence_config: ConfluenceConfig) -> ConfluenceSession:
    """Session against a real Confluence instance, shared across the test session."""
    return confluence_config.create_session()


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests (require actual Confluence credentials)"
    )
