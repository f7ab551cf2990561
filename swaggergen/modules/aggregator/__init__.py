"""Aggregation of module Swagger documents."""

from .aggregator import (
    AggregatedDocument,
    Conflict,
    SpecificationAggregator,
    extract_base_path,
    extract_host,
)
from .errors import AggregationError

__all__ = [
    "AggregatedDocument",
    "Conflict",
    "SpecificationAggregator",
    "extract_base_path",
    "extract_host",
    "AggregationError",
]
