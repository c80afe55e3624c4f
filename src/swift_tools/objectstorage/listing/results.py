"""Listing pages and the extraction of container names and details."""

import json
from dataclasses import dataclass, field
from typing import Dict, List, Optional

import httpx

from swift_tools.core import get_logger
from swift_tools.core.exceptions import ParseError

logger = get_logger(__name__)


@dataclass(frozen=True)
class ContainerInfo:
    """Details of one container from a JSON listing."""

    name: str
    count: int
    bytes: int
    last_modified: Optional[str] = None
    subdir: bool = False


@dataclass(frozen=True)
class ListResult:
    """One page of a container listing.

    Holds its own copy of the response data so it stays valid after the
    underlying connection is closed.
    """

    url: str
    status_code: int
    headers: Dict[str, str] = field(default_factory=dict)
    body: str = ""

    @classmethod
    def from_response(cls, response: httpx.Response) -> "ListResult":
        return cls(
            url=str(response.request.url),
            status_code=response.status_code,
            headers=dict(response.headers.items()),
            body=response.text,
        )

    @property
    def content_type(self) -> str:
        """Media type of the body, without parameters."""
        return self.headers.get("content-type", "").split(";")[0].strip().lower()

    def is_empty(self) -> bool:
        """Return True if the page holds no container names."""
        return not extract_names(self)

    def last_marker(self) -> str:
        """Return the last container name on the page, or "" if there is none."""
        names = extract_names(self)
        return names[-1] if names else ""


def _decode_json(page: ListResult) -> list:
    try:
        payload = json.loads(page.body)
    except json.JSONDecodeError as e:
        raise ParseError(f"Listing body from {page.url} is not valid JSON: {e}")
    if not isinstance(payload, list):
        raise ParseError(
            f"Listing body from {page.url} must be a JSON array, "
            f"got {type(payload).__name__}"
        )
    return payload


def extract_info(page: ListResult) -> List[ContainerInfo]:
    """Decode the container details of a JSON listing page.

    Args:
        page: Page produced by a listing with full=True

    Returns:
        Container details in server order

    Raises:
        ParseError: If the page is not JSON or its items are malformed
    """
    if page.status_code == 204 or not page.body.strip():
        return []
    if page.content_type != "application/json":
        raise ParseError(
            f"Cannot extract container info from content type "
            f"'{page.content_type or 'unknown'}'"
        )

    infos = []
    for item in _decode_json(page):
        # delimiter listings roll names up into {"subdir": "<prefix>"} items
        if isinstance(item, dict) and isinstance(item.get("subdir"), str):
            infos.append(
                ContainerInfo(name=item["subdir"], count=0, bytes=0, subdir=True)
            )
            continue
        if not isinstance(item, dict) or not isinstance(item.get("name"), str):
            raise ParseError(f"Listing item without a name: {item!r}")
        try:
            infos.append(
                ContainerInfo(
                    name=item["name"],
                    count=int(item.get("count", 0)),
                    bytes=int(item.get("bytes", 0)),
                    last_modified=item.get("last_modified"),
                )
            )
        except (TypeError, ValueError) as e:
            raise ParseError(f"Malformed listing item {item!r}: {e}")
    return infos


def extract_names(page: ListResult) -> List[str]:
    """Decode the container names of a listing page.

    Plain-text pages carry one name per line, split on line feeds only since
    names may contain other line-break characters. JSON pages carry an array
    of objects with a "name" (or "subdir") member. A 204 or an empty body
    means no names.

    Raises:
        ParseError: If the content type is unsupported or the body is malformed
    """
    if page.status_code == 204 or not page.body:
        return []

    content_type = page.content_type
    if content_type == "application/json":
        return [info.name for info in extract_info(page)]
    if content_type == "text/plain":
        return [line for line in page.body.split("\n") if line]

    logger.error("Unsupported listing content type", content_type=content_type)
    raise ParseError(
        f"Cannot extract names from response with content type "
        f"'{content_type or 'unknown'}'"
    )
