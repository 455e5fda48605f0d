"""
core/data - Data Services Layer

Modules:
    - inventory: Resource metadata aggregation (list + enrich + merge)

Usage:
    from core.data.inventory import AggregationEngine, ResourceKind
"""

from .inventory import AggregationEngine, AggregationResult, ResourceKind

__all__ = [
    "AggregationEngine",
    "AggregationResult",
    "ResourceKind",
]
