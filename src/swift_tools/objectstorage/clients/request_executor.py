"""HTTP request execution on top of httpx."""

from typing import Collection, Dict, Optional

import httpx

from swift_tools.core import get_logger, get_tracer, settings
from swift_tools.core.exceptions import (
    TransportError,
    UnexpectedStatusError,
    ValidationError,
)

logger = get_logger(__name__)
tracer = get_tracer(__name__)


class RequestExecutor:
    """Performs single HTTP requests and checks their status codes."""

    def __init__(
        self,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """Initialize request executor.

        Args:
            timeout: Request timeout in seconds
            transport: Optional httpx transport, mainly for tests
        """
        self.timeout = timeout if timeout is not None else settings.request_timeout
        self._transport = transport
        self._client: Optional[httpx.Client] = None

    @classmethod
    def for_client(cls, client) -> "RequestExecutor":
        """Create an executor using the timeout of a ServiceClient."""
        return cls(timeout=client.timeout)

    @property
    def client(self) -> httpx.Client:
        """Get or create the underlying httpx client."""
        if self._client is None:
            self._client = httpx.Client(
                timeout=self.timeout, transport=self._transport
            )
        return self._client

    def request(
        self,
        method: str,
        url: str,
        *,
        ok_codes: Collection[int],
        operation: str,
        headers: Optional[Dict[str, str]] = None,
    ) -> httpx.Response:
        """Issue one request and return the response.

        Args:
            method: HTTP method
            url: Absolute request URL, query string included
            ok_codes: Status codes that count as success
            operation: Operation name used in logs and errors
            headers: Request headers

        Returns:
            The httpx response, body already read

        Raises:
            TransportError: If the request could not be completed
            ValidationError: If a header name or value is not ASCII
            UnexpectedStatusError: If the status is not in ok_codes
        """
        with tracer.start_as_current_span(f"swift.{operation}") as span:
            span.set_attribute("http.request.method", method)
            span.set_attribute("url.full", url)
            try:
                response = self.client.request(method, url, headers=headers)
            except httpx.RequestError as e:
                error_msg = f"{operation} request to {url} failed: {e}"
                logger.error(error_msg, operation=operation, error=str(e))
                raise TransportError(error_msg) from e
            except UnicodeEncodeError as e:
                error_msg = f"{operation} request headers must be ASCII: {e}"
                logger.error(error_msg, operation=operation)
                raise ValidationError(error_msg) from e
            span.set_attribute("http.response.status_code", response.status_code)

        logger.debug(
            "HTTP request completed",
            operation=operation,
            method=method,
            url=url,
            status_code=response.status_code,
        )

        if response.status_code not in ok_codes:
            logger.error(
                "Unexpected response status",
                operation=operation,
                url=url,
                status_code=response.status_code,
                expected=sorted(ok_codes),
            )
            raise UnexpectedStatusError(
                operation, response.status_code, url, response.text
            )
        return response

    def close(self) -> None:
        """Close the underlying httpx client, if one was created."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> "RequestExecutor":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
