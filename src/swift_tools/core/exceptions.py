"""Exception hierarchy for swift-tools."""

from typing import Optional


class SwiftToolsError(Exception):
    """Base exception for all swift-tools errors."""

    pass


class ValidationError(SwiftToolsError):
    """Raised when validation fails."""

    pass


class UnexpectedStatusError(SwiftToolsError):
    """Raised when a response status is not one the operation accepts."""

    def __init__(
        self,
        operation: str,
        status_code: int,
        url: str,
        body: Optional[str] = None,
    ):
        self.operation = operation
        self.status_code = status_code
        self.url = url
        self.body = body
        super().__init__(
            f"{operation} failed: unexpected status {status_code} from {url}"
        )


class TransportError(SwiftToolsError):
    """Raised when the HTTP request could not be completed."""

    pass


class ParseError(SwiftToolsError):
    """Raised when a listing response body cannot be decoded."""

    pass
