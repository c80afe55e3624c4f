"""Service client configuration and HTTP request execution."""

from .request_executor import RequestExecutor
from .service_client import AUTH_TOKEN_HEADER, ServiceClient

__all__ = ["AUTH_TOKEN_HEADER", "RequestExecutor", "ServiceClient"]
