class AggregationError(Exception):
    """The aggregated document could not be produced or written."""
    pass
