"""Container listing: marker pagination and page decoding."""

from .marker_pager import MarkerPager
from .results import ContainerInfo, ListResult, extract_info, extract_names

__all__ = [
    "ContainerInfo",
    "ListResult",
    "MarkerPager",
    "extract_info",
    "extract_names",
]
