"""
Authenticated session for the Confluence REST API.

This module provides ``ConfluenceSession``, which owns the base URL and a
``requests`` session pre-configured with a Basic ``Authorization`` header,
and exposes the page and space operations of the library.
"""

import logging
from typing import Any, Dict, List, Optional

import requests

from confluence_client.content.models import Page, PostPage, Space, SpacesResult
from confluence_client.core.auth import BasicAuthenticator
from confluence_client.core.decoding import decode_json, decode_model
from confluence_client.core.exceptions import RemoteError, TransportError
from confluence_client.core.pagination import PageCollectionWalker

logger = logging.getLogger(__name__)


class ConfluenceSession:
    """
    Authenticated client for Confluence spaces and pages.

    The session issues exactly one HTTP request per operation, except for
    ``get_pages_for_space`` which follows pagination links. Nothing is
    retried: every failure is raised to the caller as one of
    ``TransportError``, ``RemoteError`` or ``DecodeError``.

    The base URL and credentials are fixed at construction, so a single
    session can be shared by independent callers.

    Attributes:
        CONTENT_EXPAND: Expand query sent with every page request.
        DEFAULT_TIMEOUT: Default per-request timeout in seconds (30).

    Examples:
        >>> from confluence_client import ConfluenceSession
        >>>
        >>> session = ConfluenceSession(
        ...     username="bob@example.com",
        ...     api_key="your_api_key",
        ...     base_url="https://example.atlassian.net/wiki",
        ... )
        >>> spaces = session.get_spaces()
        >>> pages = session.get_pages_for_space(spaces[0].key)
    """

    CONTENT_EXPAND = "body.view,space,children.page,version"
    DEFAULT_TIMEOUT = 30

    def __init__(
        self,
        username: str,
        api_key: str,
        base_url: str,
        timeout: Optional[float] = DEFAULT_TIMEOUT,
        authenticator: Optional[BasicAuthenticator] = None,
    ):
        """
        Initialize the session.

        Args:
            username: Account name or e-mail address.
            api_key: API key used as the Basic auth password.
            base_url: Base URL of the Confluence instance, e.g.
                ``https://example.atlassian.net/wiki``.
            timeout: Per-request timeout in seconds, or None for no timeout.
                This bounds a single round trip, not a whole pagination walk.
            authenticator: Optional pre-built authenticator
                (useful for dependency injection).
        """
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout

        self._authenticator = authenticator or BasicAuthenticator(username, api_key)

        self._session = requests.Session()
        self._session.headers.update({"Accept": "application/json"})
        self._authenticator.apply(self._session)

    @property
    def base_url(self) -> str:
        """Base URL every endpoint is joined onto."""
        return self._base_url

    @property
    def timeout(self) -> Optional[float]:
        """Per-request timeout in seconds, or None for no timeout."""
        return self._timeout

    @property
    def auth_header(self) -> str:
        """The ``Authorization`` header value sent with every request."""
        return self._authenticator.header_value

    @property
    def content_params(self) -> Dict[str, str]:
        """Query parameters carrying the standard page expand set."""
        return {"expand": self.CONTENT_EXPAND}

    def _make_request(
        self,
        method: str,
        endpoint: str,
        params: Optional[Dict[str, Any]] = None,
        json_data: Optional[Dict[str, Any]] = None,
    ) -> requests.Response:
        """
        Make an authenticated HTTP request to the Confluence API.

        Args:
            method: HTTP method string ("GET", "POST" or "PUT").
            endpoint: Path relative to the base URL, starting with "/".
            params: Optional query parameters.
            json_data: Optional dictionary sent as the JSON request body.

        Returns:
            The ``requests.Response`` of a successful (< 400) request.

        Raises:
            TransportError: If no response was received.
            RemoteError: If the response status is 4xx or 5xx.
        """
        url = f"{self._base_url}{endpoint}"
        logger.debug("%s %s", method, url)

        request_kwargs: Dict[str, Any] = {"timeout": self._timeout}
        if params:
            request_kwargs["params"] = params
        if json_data is not None:
            request_kwargs["json"] = json_data

        try:
            response = self._session.request(method, url, **request_kwargs)
        except requests.exceptions.RequestException as e:
            logger.error("Network error during %s %s: %s", method, url, e)
            raise TransportError(f"Network error: {e}") from e

        if response.status_code >= 400:
            body = response.text
            logger.error("%s %s failed with %d: %s", method, url, response.status_code, body)
            raise RemoteError(
                f"API request failed with status {response.status_code}: {body}",
                status_code=response.status_code,
                response_body=body,
            )

        return response

    def get(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """
        Make a GET request and return the decoded JSON body.

        Args:
            endpoint: API path relative to the base URL (e.g. "/rest/api/space").
            params: Optional query parameters.

        Raises:
            TransportError: If no response was received.
            RemoteError: If the server rejected the request.
            DecodeError: If the body is not JSON.
        """
        return decode_json(self._make_request("GET", endpoint, params=params))

    def post(
        self,
        endpoint: str,
        json_data: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Make a POST request with a JSON body and return the decoded JSON body."""
        return decode_json(self._make_request("POST", endpoint, params=params, json_data=json_data))

    def put(
        self,
        endpoint: str,
        json_data: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Make a PUT request with a JSON body and return the decoded JSON body."""
        return decode_json(self._make_request("PUT", endpoint, params=params, json_data=json_data))

    def test_connection(self) -> bool:
        """
        Test the connection and credentials against the Confluence API.

        Returns:
            True if the space listing could be read.

        Raises:
            ConfluenceClientError: If the connection test fails.
        """
        self.get("/rest/api/space", params={"limit": 1})
        return True

    def get_page_by_id(self, page_id: int) -> Page:
        """
        Fetch a single page with body, space, children and version expanded.

        Args:
            page_id: Numeric page identifier.

        Returns:
            The decoded page.

        Raises:
            TransportError: If no response was received.
            RemoteError: If the page does not exist or access is denied.
            DecodeError: If the response does not look like a page.

        Examples:
            >>> page = session.get_page_by_id(65601)
            >>> print(page.title, page.version.number)
        """
        data = self.get(f"/rest/api/content/{page_id}", params=self.content_params)
        return decode_model(data, Page.from_dict, "page")

    def get_spaces(self) -> List[Space]:
        """
        List global spaces in the order returned by the server.

        Raises:
            TransportError, RemoteError, DecodeError
        """
        data = self.get("/rest/api/space", params={"type": "global"})
        return decode_model(data, SpacesResult.from_dict, "space listing").results

    def get_pages_for_space(self, space_key: str, starting_link: Optional[str] = None) -> List[Page]:
        """
        Fetch every page of a space, following pagination links.

        Args:
            space_key: Key of the space to list.
            starting_link: Optional continuation link previously returned by
                the server, to resume a listing mid-way.

        Returns:
            All pages, in server order across result pages.

        Raises:
            TransportError, RemoteError, DecodeError: From any result page.
                No partial results are returned.
        """
        return PageCollectionWalker(self).walk(space_key, starting_link)

    def add_new_page(
        self,
        space_key: str,
        ancestor: Optional[int],
        title: str,
        body: Optional[str] = None,
    ) -> Page:
        """
        Create a page.

        Args:
            space_key: Key of the space to create the page in.
            ancestor: Optional id of the parent page.
            title: Title of the page; must be unique within the space.
            body: Optional content in storage format.

        Returns:
            The created page, including its server-assigned id.

        Raises:
            TransportError: If no response was received.
            RemoteError: If the server rejected the page (e.g. duplicate
                title or unknown ancestor).
            DecodeError: If the response could not be decoded. The page may
                have been created anyway.
        """
        payload = PostPage.new_page(title, ancestor=ancestor, space_key=space_key, body=body)
        data = self.post("/rest/api/content", json_data=payload.to_dict(), params=self.content_params)
        return decode_model(data, Page.from_dict, "page")

    def update_page(
        self,
        space_key: str,
        page_id: int,
        new_version: int,
        title: str,
        body: Optional[str] = None,
    ) -> Page:
        """
        Update a page, creating version ``new_version``.

        The caller is responsible for optimistic concurrency: pass the
        current version number plus one. If the page has moved on, the
        server rejects the update and ``RemoteError`` is raised; the session
        never refetches the current version or retries.

        Args:
            space_key: Key of the space the page lives in.
            page_id: Id of the page to update.
            new_version: Version number the update creates.
            title: New title of the page.
            body: Optional new content in storage format.

        Returns:
            The updated page.

        Raises:
            TransportError, RemoteError, DecodeError

        Examples:
            >>> page = session.get_page_by_id(65601)
            >>> session.update_page("DOC", 65601, page.version.number + 1, page.title, "<p>Hi</p>")
        """
        payload = PostPage.update_page(page_id, title, space_key, body=body, new_version=new_version)
        data = self.put(
            f"/rest/api/content/{page_id}",
            json_data=payload.to_dict(),
            params=self.content_params,
        )
        return decode_model(data, Page.from_dict, "page")
