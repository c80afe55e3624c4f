"""Container operations for Swift-compatible object storage."""

from .clients import RequestExecutor, ServiceClient
from .container_operations import (
    METADATA_HEADER_PREFIX,
    Container,
    GetResult,
    create_container,
    delete_container,
    extract_metadata,
    get_container,
    header_value,
    list_containers,
    metadata_header,
    update_container,
)
from .listing import (
    ContainerInfo,
    ListResult,
    MarkerPager,
    extract_info,
    extract_names,
)

__all__ = [
    "METADATA_HEADER_PREFIX",
    "Container",
    "ContainerInfo",
    "GetResult",
    "ListResult",
    "MarkerPager",
    "RequestExecutor",
    "ServiceClient",
    "create_container",
    "delete_container",
    "extract_info",
    "extract_metadata",
    "extract_names",
    "get_container",
    "header_value",
    "list_containers",
    "metadata_header",
    "update_container",
]
