"""
Tripfinder: destination discovery and trip cost estimation client.

This package contains:
- shared/: Common infrastructure (config, errors, HTTP transport, logging, contracts)
- query/: Canonical search query and its normalizer
- discovery/: Discovery client for the top destination list
- details/: Detail client and the destination profile defaults step
- estimation/: Trip cost estimator
- view/: Destinations view state machine and card view-models
"""

from tripfinder.query.normalizer import normalize_query
from tripfinder.estimation.cost import estimate_total_cost
from tripfinder.view.machine import DestinationsView

__all__ = ["normalize_query", "estimate_total_cost", "DestinationsView"]
