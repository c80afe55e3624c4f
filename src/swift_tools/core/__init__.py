"""Core utilities and shared components for swift-tools."""

from .config import settings
from .exceptions import SwiftToolsError, ValidationError
from .observability import get_logger, get_tracer

__all__ = ["settings", "SwiftToolsError", "ValidationError", "get_logger", "get_tracer"]
