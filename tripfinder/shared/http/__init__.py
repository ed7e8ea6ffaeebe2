"""HTTP transport utilities."""

from tripfinder.shared.http.client import ServiceClient

__all__ = ["ServiceClient"]
