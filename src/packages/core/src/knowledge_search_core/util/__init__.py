"""Utility modules."""
from knowledge_search_core.util.errors import (
    AdapterError,
    AuthError,
    ClientInputError,
    PayloadTooLargeError,
    StartupConfigError,
    UpstreamError,
)

__all__ = [
    "AdapterError",
    "AuthError",
    "ClientInputError",
    "PayloadTooLargeError",
    "StartupConfigError",
    "UpstreamError",
]
