"""Container operations for Swift-compatible object storage.

Each operation is a single request/response exchange: it either succeeds
with one of the status codes the operation accepts or raises. Listing is the
exception, returning a MarkerPager that issues one request per page.
"""

from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional
from urllib.parse import quote

import httpx

from swift_tools.core import get_logger
from swift_tools.objectstorage.clients import RequestExecutor, ServiceClient
from swift_tools.objectstorage.listing import MarkerPager
from swift_tools.schemas import (
    ContainerOpts,
    CreateOpts,
    DeleteOpts,
    GetOpts,
    ListOpts,
    UpdateOpts,
)

logger = get_logger(__name__)

METADATA_HEADER_PREFIX = "X-Container-Meta-"

# A container is a plain name -> value mapping; "name" is always present
Container = Dict[str, str]


@dataclass(frozen=True)
class GetResult:
    """Outcome of a container HEAD request, with lower-cased header names."""

    status_code: int
    headers: Dict[str, str] = field(default_factory=dict)

    def _int_header(self, name: str) -> Optional[int]:
        value = self.headers.get(name)
        if value is None:
            return None
        try:
            return int(value)
        except ValueError:
            logger.warning("Non-integer usage header ignored", header=name, value=value)
            return None

    @property
    def object_count(self) -> Optional[int]:
        return self._int_header("x-container-object-count")

    @property
    def bytes_used(self) -> Optional[int]:
        return self._int_header("x-container-bytes-used")


def metadata_header(key: str) -> str:
    """Return the request header name carrying a metadata key.

    >>> metadata_header("color")
    'X-Container-Meta-Color'
    >>> metadata_header("content-owner")
    'X-Container-Meta-Content-Owner'
    """
    return METADATA_HEADER_PREFIX + "-".join(
        part.capitalize() for part in key.split("-")
    )


def header_value(value: str) -> str:
    """Percent-encode a header value that is not plain ASCII.

    Swift stores metadata as UTF-8; HTTP header values must be ASCII.

    >>> header_value("Jos\u00e9")
    'Jos%C3%A9'
    """
    return value if value.isascii() else quote(value, safe="")


def _build_headers(client: ServiceClient, opts: ContainerOpts) -> Dict[str, str]:
    """Authenticated headers, then caller overrides, then metadata."""
    headers = client.authenticated_headers()
    for key, value in opts.headers.items():
        headers[key] = header_value(value)
    for key, value in opts.metadata.items():
        headers[metadata_header(key)] = header_value(value)
    return headers


def _with_query(url: str, params: Mapping[str, str]) -> str:
    if not params:
        return url
    return str(httpx.URL(url).copy_merge_params(dict(params)))


def _send(
    client: ServiceClient,
    executor: Optional[RequestExecutor],
    method: str,
    url: str,
    headers: Dict[str, str],
    ok_codes: tuple,
    operation: str,
) -> httpx.Response:
    if executor is not None:
        return executor.request(
            method, url, headers=headers, ok_codes=ok_codes, operation=operation
        )
    with RequestExecutor.for_client(client) as owned:
        return owned.request(
            method, url, headers=headers, ok_codes=ok_codes, operation=operation
        )


# Listing
def list_containers(
    client: ServiceClient,
    opts: Optional[ListOpts] = None,
    executor: Optional[RequestExecutor] = None,
) -> MarkerPager:
    """List the containers of the account, one page at a time.

    Nothing is requested until the returned pager is advanced.

    Args:
        client: Service client for the account
        opts: Listing options; plain names by default
        executor: Request executor to reuse; the pager makes its own if omitted

    Returns:
        A MarkerPager yielding ListResult pages
    """
    opts = opts or ListOpts()
    url = _with_query(client.account_url(), opts.params)

    headers: Dict[str, str] = {}
    if opts.full:
        headers["Accept"] = "application/json"
    else:
        headers["Content-Type"] = "text/plain"

    logger.info("Listing containers", url=url, full=opts.full)
    return MarkerPager(client, url, headers=headers, executor=executor)


# Mutating operations
def create_container(
    client: ServiceClient,
    opts: CreateOpts,
    executor: Optional[RequestExecutor] = None,
) -> Container:
    """Create a container, or update it if it already exists.

    Raises:
        UnexpectedStatusError: If the server answers anything but 201 or 204
        TransportError: If the request could not be completed
    """
    logger.info("Creating container", container=opts.name)
    _send(
        client,
        executor,
        "PUT",
        client.container_url(opts.name),
        _build_headers(client, opts),
        (201, 204),
        "create",
    )
    logger.info("Container created", container=opts.name)
    return {"name": opts.name}


def delete_container(
    client: ServiceClient,
    opts: DeleteOpts,
    executor: Optional[RequestExecutor] = None,
) -> None:
    """Delete a container.

    Raises:
        UnexpectedStatusError: If the server answers anything but 204, for
            example 404 for a missing container or 409 for a non-empty one
        TransportError: If the request could not be completed
    """
    logger.info("Deleting container", container=opts.name, params=opts.params)
    _send(
        client,
        executor,
        "DELETE",
        _with_query(client.container_url(opts.name), opts.params),
        _build_headers(client, opts),
        (204,),
        "delete",
    )
    logger.info("Container deleted", container=opts.name)


def update_container(
    client: ServiceClient,
    opts: UpdateOpts,
    executor: Optional[RequestExecutor] = None,
) -> None:
    """Create, update, or remove a container's metadata.

    Raises:
        UnexpectedStatusError: If the server answers anything but 204
        TransportError: If the request could not be completed
    """
    logger.info(
        "Updating container", container=opts.name, metadata_keys=list(opts.metadata)
    )
    _send(
        client,
        executor,
        "POST",
        client.container_url(opts.name),
        _build_headers(client, opts),
        (204,),
        "update",
    )


def get_container(
    client: ServiceClient,
    opts: GetOpts,
    executor: Optional[RequestExecutor] = None,
) -> GetResult:
    """Fetch a container's metadata with a HEAD request.

    Pass the result to extract_metadata() for the user metadata.

    Raises:
        UnexpectedStatusError: If the server answers anything but 204
        TransportError: If the request could not be completed
    """
    logger.info("Fetching container metadata", container=opts.name)
    response = _send(
        client,
        executor,
        "HEAD",
        client.container_url(opts.name),
        _build_headers(client, opts),
        (204,),
        "get",
    )
    return GetResult(
        status_code=response.status_code, headers=dict(response.headers.items())
    )


def extract_metadata(result: GetResult) -> Dict[str, str]:
    """Return the user metadata of a container, keyed without the header prefix."""
    prefix = METADATA_HEADER_PREFIX.lower()
    return {
        key[len(prefix):]: value
        for key, value in result.headers.items()
        if key.lower().startswith(prefix)
    }
