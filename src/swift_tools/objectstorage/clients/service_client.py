"""Service client configuration for a Swift storage account.

The ServiceClient is an immutable value describing where a storage account
lives and how to authenticate against it. It never holds a connection;
requests are performed by a RequestExecutor, so a single ServiceClient can
be shared freely between callers and threads.

Authentication:
    The caller supplies an already issued token (for example from Keystone
    or a tempauth endpoint). It is sent as the X-Auth-Token header. Token
    acquisition and refresh are not handled here.

Example:
    client = ServiceClient(
        endpoint="https://swift.example.com/v1/AUTH_demo",
        auth_token="gAAAAABk...",
    )
    client.container_url("photos")
    # 'https://swift.example.com/v1/AUTH_demo/photos'
"""

from typing import Dict, Optional
from urllib.parse import quote

from pydantic import BaseModel, ConfigDict, Field, field_validator

from swift_tools.core import get_logger, settings
from swift_tools.core.exceptions import ValidationError

logger = get_logger(__name__)

AUTH_TOKEN_HEADER = "X-Auth-Token"


class ServiceClient(BaseModel):
    """Immutable connection settings for one storage account."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    endpoint: str = Field(..., description="Storage account URL")
    auth_token: Optional[str] = Field(
        None, description="Token sent as X-Auth-Token on every request"
    )
    timeout: float = Field(
        default_factory=lambda: settings.request_timeout,
        description="Request timeout in seconds",
    )

    @field_validator("endpoint")
    @classmethod
    def _normalize_endpoint(cls, value: str) -> str:
        if not value.startswith(("http://", "https://")):
            raise ValueError(f"endpoint must be an http(s) URL: {value}")
        return value if value.endswith("/") else value + "/"

    @classmethod
    def from_settings(
        cls,
        endpoint: Optional[str] = None,
        auth_token: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> "ServiceClient":
        """Build a client, falling back to SWIFT_TOOLS_* settings.

        Raises:
            ValidationError: If no endpoint is given or configured
        """
        endpoint = endpoint or settings.storage_url
        if not endpoint:
            raise ValidationError(
                "No storage URL given; pass one or set SWIFT_TOOLS_STORAGE_URL"
            )
        return cls(
            endpoint=endpoint,
            auth_token=auth_token or settings.auth_token,
            timeout=timeout if timeout is not None else settings.request_timeout,
        )

    def authenticated_headers(self) -> Dict[str, str]:
        """Return a fresh header dict carrying the current credentials."""
        headers: Dict[str, str] = {}
        if self.auth_token:
            headers[AUTH_TOKEN_HEADER] = self.auth_token
        return headers

    def account_url(self) -> str:
        """URL of the account resource, used for container listing."""
        return self.endpoint

    def container_url(self, name: str) -> str:
        """URL of a single container, with the name percent-encoded."""
        url = self.endpoint + quote(name, safe="")
        logger.debug("Container URL built", container=name, url=url)
        return url
