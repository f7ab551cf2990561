from pathlib import Path
from typing import Optional

from ....models.config import AggregatorConfig
from ...logging import BaseLogger
from ..aggregator import SpecificationAggregator


class AggregateCommand:
    """Command class for merging module documents."""

    def __init__(self, logger: BaseLogger):
        self.logger = logger

    def run(self, config: AggregatorConfig) -> Optional[Path]:
        """
        Run the aggregation.

        Returns:
            Path of the written document, or None when skipped or there was nothing to merge

        Raises:
            AggregationError: If the output cannot be written
        """
        if config.skip:
            self.logger.log_info("Skipping OpenAPI aggregation as requested")
            return None

        self.logger.log_info("Starting OpenAPI specification aggregation...")
        return SpecificationAggregator(config, self.logger).run()
