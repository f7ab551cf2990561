from pathlib import Path
from typing import Optional

from ....models.config import GeneratorConfig
from ...discovery import PackageScanner
from ...logging import BaseLogger
from ...swagger import SwaggerParser
from ..errors import GenerationError
from ..specification_builder import SpecificationBuilder


class GenerateCommand:
    """Command class for generating a document from scanned handlers."""

    def __init__(self, logger: BaseLogger, scanner: Optional[PackageScanner] = None):
        """
        Initialize the generate command.

        Args:
            logger: Logger instance
            scanner: Handler discovery, defaults to a PackageScanner
        """
        self.logger = logger
        self.scanner = scanner or PackageScanner(logger)

    def run(self, config: GeneratorConfig) -> Optional[Path]:
        """
        Run the generation.

        Returns:
            Path of the written document, or None when skipped

        Raises:
            GenerationError: If the output cannot be written
        """
        if config.skip:
            self.logger.log_info("Skipping OpenAPI generation as requested")
            return None

        output_dir = Path(config.output_directory)
        try:
            output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise GenerationError(f"Cannot create output directory {output_dir}: {str(e)}") from e

        self.logger.log_info(f"Scanning packages: {', '.join(config.scan_packages) or '(none)'}")
        found = self.scanner.scan(config.scan_packages)
        if not found.resource_handlers:
            self.logger.log_warning("No resource handlers found")

        document = SpecificationBuilder(
            config, found.resource_handlers, found.search_handlers, self.logger
        ).build()

        try:
            output_path = SwaggerParser.save_swagger_spec(document, output_dir, config.filename)
        except OSError as e:
            raise GenerationError(f"Failed to write OpenAPI specification: {str(e)}") from e

        self.logger.log_info(f"OpenAPI specification generated successfully: {output_path.absolute()}")
        return output_path
