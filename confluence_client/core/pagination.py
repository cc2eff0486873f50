"""
Pagination-following for the space content listing.

The content listing of a space is returned one page at a time inside a
``{"page": {..., "_links": {"next": ...}, "results": [...]}}`` envelope.
``PageCollectionWalker`` fetches the first page, then keeps following the
``next`` link until the server stops sending one, and returns every record
in the order the server produced them.
"""

import logging
from typing import TYPE_CHECKING, List, Optional

from confluence_client.content.models import Page, SpaceContentResult
from confluence_client.core.decoding import decode_model

if TYPE_CHECKING:
    from confluence_client.core.session import ConfluenceSession

logger = logging.getLogger(__name__)

# The ``next`` links of the space content listing point at the
# ``.../content/page`` sub-resource, which the listing endpoint rejects.
PAGE_SEGMENT = "/page"


def strip_page_segment(link: str) -> str:
    """
    Turn a continuation link into a path usable against the listing endpoint.

    Every occurrence of ``/page`` is removed. Only continuation links go
    through this; the first request of a walk is built from the space key.

    Examples:
        >>> strip_page_segment("/rest/api/space/DOC/content/page?start=25")
        '/rest/api/space/DOC/content?start=25'
        >>> strip_page_segment("/rest/api/space/DOC/content?start=25")
        '/rest/api/space/DOC/content?start=25'
    """
    return link.replace(PAGE_SEGMENT, "")


class PageCollectionWalker:
    """
    Walks the paginated content listing of one space.

    Requests are issued strictly one after another. A walk is all or
    nothing: if any request fails, the error propagates and the records
    gathered so far are discarded. The walker trusts the server to stop
    sending ``next`` links and imposes no bound on the number of pages;
    callers needing a deadline must impose one around the whole walk.

    The walker keeps no state between calls to ``walk``.

    Examples:
        >>> walker = PageCollectionWalker(session)
        >>> pages = walker.walk("DOC")
    """

    def __init__(self, session: "ConfluenceSession"):
        self._session = session

    @staticmethod
    def first_endpoint(space_key: str) -> str:
        return f"/rest/api/space/{space_key}/content"

    def walk(self, space_key: str, starting_link: Optional[str] = None) -> List[Page]:
        """
        Fetch all pages of ``space_key``.

        Args:
            space_key: Key of the space to list.
            starting_link: Continuation link to start from instead of the
                first page of the listing.

        Returns:
            Every page record, earlier result pages first.

        Raises:
            TransportError, RemoteError, DecodeError: From any request.
        """
        if starting_link is None:
            endpoint = self.first_endpoint(space_key)
        else:
            endpoint = strip_page_segment(starting_link)

        pages: List[Page] = []
        fetched = 0
        while True:
            data = self._session.get(endpoint, params=self._session.content_params)
            collection = decode_model(data, SpaceContentResult.from_dict, "space content").page
            fetched += 1
            pages.extend(collection.results)

            if collection.next_link is None:
                break
            endpoint = strip_page_segment(collection.next_link)

        logger.debug(
            "Fetched %d page(s) for space %s across %d request(s)",
            len(pages),
            space_key,
            fetched,
        )
        return pages
