"""
Response decoding helpers shared by the session and the pagination walker.

Both helpers map every way a successful response can fail to decode onto
``DecodeError``.
"""

from typing import Any, Callable, TypeVar

import requests

from confluence_client.core.exceptions import DecodeError

T = TypeVar("T")


def decode_json(response: requests.Response) -> Any:
    """
    Parse the JSON body of a successful response.

    Raises:
        DecodeError: If the body is not valid JSON.
    """
    try:
        return response.json()
    except ValueError as e:
        raise DecodeError(f"Response is not valid JSON: {e}", cause=e) from e


def decode_model(data: Any, factory: Callable[[Any], T], what: str) -> T:
    """
    Build a model object from decoded JSON.

    Args:
        data: Decoded JSON body.
        factory: A ``from_dict`` constructor.
        what: Name of the expected response, used in the error message.

    Raises:
        DecodeError: If ``factory`` raised ``KeyError``, ``TypeError`` or
            ``ValueError`` (missing key, wrong shape, wrong type).
    """
    try:
        return factory(data)
    except (KeyError, TypeError, ValueError) as e:
        raise DecodeError(f"Unexpected {what} response: {e!r}", cause=e) from e
