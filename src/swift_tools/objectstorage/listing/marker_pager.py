"""Marker-based pagination over the account listing endpoint.

Swift returns at most a server-configured number of names per listing
request. The next page is requested with ``marker=<last name seen>`` and the
listing is complete once a page comes back empty. Because each request
depends on the previous page, pages are always fetched one after another.
"""

from typing import Dict, Iterator, List, Optional

import httpx

from swift_tools.core import get_logger
from swift_tools.objectstorage.clients import RequestExecutor, ServiceClient

from .results import ListResult, extract_names

logger = get_logger(__name__)

LIST_OK_CODES = (200, 204)


class MarkerPager:
    """Single-pass iterator over the pages of a marker-paginated listing.

    A page is fetched only when the caller asks for it, and never twice.
    The pager cannot be rewound; list again to start over.
    """

    def __init__(
        self,
        client: ServiceClient,
        url: str,
        headers: Optional[Dict[str, str]] = None,
        executor: Optional[RequestExecutor] = None,
    ):
        """Initialize marker pager.

        Args:
            client: Service client providing credentials
            url: Listing URL including any caller query parameters
            headers: Extra request headers sent with every page request
            executor: Request executor; one is created (and closed) if omitted
        """
        self.client = client
        self.url = url
        self.headers = dict(headers or {})
        self.request_count = 0
        self._owns_executor = executor is None
        self._executor = executor or RequestExecutor.for_client(client)
        self._marker: Optional[str] = None
        self._exhausted = False

    def _page_url(self) -> str:
        if self._marker is None:
            return self.url
        return str(httpx.URL(self.url).copy_set_param("marker", self._marker))

    def next_page(self) -> Optional[ListResult]:
        """Fetch the next non-empty page, or return None when the listing is done.

        Raises:
            TransportError: If a page request could not be completed
            UnexpectedStatusError: If the server rejected a page request
            ParseError: If a page body cannot be decoded into names
        """
        if self._exhausted:
            return None

        headers = self.client.authenticated_headers()
        headers.update(self.headers)
        url = self._page_url()

        try:
            self.request_count += 1
            response = self._executor.request(
                "GET", url, headers=headers, ok_codes=LIST_OK_CODES, operation="list"
            )
            page = ListResult.from_response(response)
            names = extract_names(page)
        except Exception:
            self.close()
            raise

        if not names:
            logger.info(
                "Container listing finished",
                url=self.url,
                requests=self.request_count,
            )
            self.close()
            return None

        logger.debug(
            "Listing page fetched", marker=self._marker, name_count=len(names)
        )
        self._marker = names[-1]
        return page

    def names(self) -> Iterator[str]:
        """Iterate over container names across the remaining pages."""
        for page in self:
            yield from extract_names(page)

    def all_names(self) -> List[str]:
        """Fetch every remaining page and return all container names."""
        return list(self.names())

    def close(self) -> None:
        """Stop the listing and release the executor if this pager created it."""
        self._exhausted = True
        if self._owns_executor:
            self._executor.close()

    def __iter__(self) -> "MarkerPager":
        return self

    def __next__(self) -> ListResult:
        page = self.next_page()
        if page is None:
            raise StopIteration
        return page

    def __enter__(self) -> "MarkerPager":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
