"""
Discovery client.

Queries the discovery endpoint for destinations matching a canonical
query and keeps the top results.
"""

from tripfinder.discovery.client import DiscoveryClient, DISCOVERY_PATH

__all__ = ["DiscoveryClient", "DISCOVERY_PATH"]
