"""
Basic authentication for the Confluence REST API.

Confluence Cloud accepts HTTP Basic authentication where the password is an
API key. The header value is computed once when the authenticator is built;
the API key itself is not retained afterwards.
"""

import base64

import requests


def encode_basic_auth(username: str, api_key: str) -> str:
    """
    Build the value of a Basic ``Authorization`` header.

    Args:
        username: Account name or e-mail address.
        api_key: API key used as the password.

    Returns:
        ``"Basic "`` followed by base64 of ``username:api_key``.

    Examples:
        >>> encode_basic_auth("bob", "secret")
        'Basic Ym9iOnNlY3JldA=='
    """
    credentials = f"{username}:{api_key}"
    encoded = base64.b64encode(credentials.encode("utf-8")).decode("ascii")
    return f"Basic {encoded}"


class BasicAuthenticator:
    """
    Holds the Basic authentication header for one set of credentials.

    The credentials are fixed for the lifetime of the instance. To rotate an
    API key, build a new authenticator (and a new session) rather than
    mutating this one.

    Attributes:
        username: The account name the header was built for.

    Examples:
        >>> authenticator = BasicAuthenticator("bob", "secret")
        >>> authenticator.header_value
        'Basic Ym9iOnNlY3JldA=='
    """

    def __init__(self, username: str, api_key: str):
        """
        Initialize the authenticator.

        Encoding errors (for example a lone surrogate in the username) are not
        caught: a session must never be built with a broken header.

        Args:
            username: Account name or e-mail address.
            api_key: API key used as the password.
        """
        self.username = username
        self._header_value = encode_basic_auth(username, api_key)

    @property
    def header_value(self) -> str:
        """The full ``Authorization`` header value."""
        return self._header_value

    def apply(self, session: requests.Session) -> None:
        """
        Install the header as a default on every request of ``session``.

        Args:
            session: The ``requests`` session to configure.
        """
        session.headers["Authorization"] = self._header_value
