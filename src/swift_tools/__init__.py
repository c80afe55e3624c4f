"""A client library and CLI for Swift object-storage containers.

This package turns container-level calls into authenticated HTTP requests
against an OpenStack Swift style storage account and decodes the responses
into typed results.

Key Features:
    - Marker-paginated container listing (plain names or JSON details)
    - Create, delete, update and inspect containers
    - Container metadata via X-Container-Meta-* headers
    - CLI interface

Recommended Usage:
    >>> from swift_tools import ServiceClient, ListOpts, extract_names, list_containers
    >>> client = ServiceClient(
    ...     endpoint="https://swift.example.com/v1/AUTH_demo", auth_token="token"
    ... )
    >>> for page in list_containers(client, ListOpts()):
    ...     print(extract_names(page))

Advanced Usage:
    Share one RequestExecutor across calls to reuse connections:

    >>> from swift_tools import RequestExecutor, CreateOpts, create_container
    >>> with RequestExecutor.for_client(client) as executor:
    ...     create_container(client, CreateOpts(name="photos"), executor=executor)
"""

__version__ = "0.1.0"

from .objectstorage import (
    Container,
    ContainerInfo,
    GetResult,
    ListResult,
    MarkerPager,
    RequestExecutor,
    ServiceClient,
    create_container,
    delete_container,
    extract_info,
    extract_metadata,
    extract_names,
    get_container,
    list_containers,
    update_container,
)
from .schemas import CreateOpts, DeleteOpts, GetOpts, ListOpts, UpdateOpts

__all__ = [
    # Client
    "RequestExecutor",
    "ServiceClient",
    # Options
    "CreateOpts",
    "DeleteOpts",
    "GetOpts",
    "ListOpts",
    "UpdateOpts",
    # Operations
    "create_container",
    "delete_container",
    "get_container",
    "list_containers",
    "update_container",
    # Results
    "Container",
    "ContainerInfo",
    "GetResult",
    "ListResult",
    "MarkerPager",
    "extract_info",
    "extract_metadata",
    "extract_names",
]
