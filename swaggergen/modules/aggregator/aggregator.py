"""Merges independently generated Swagger documents into one."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Union

from ...models.config import AggregatorConfig
from ..logging import BaseLogger
from ..swagger import SwaggerParser, SwaggerParserError
from ..swagger.schema import (
    Contact, Info, License, Parameter, PathItem, Response, SchemaModel, Scheme, SwaggerSpec,
)
from .errors import AggregationError

AGGREGATED_CONTACT = Contact(name="OpenMRS", url="https://openmrs.org")
AGGREGATED_LICENSE = License(name="MPL 2.0", url="https://www.mozilla.org/en-US/MPL/2.0/")
OPENMRS_BASE_PATH = "/openmrs"


@dataclass(frozen=True)
class Conflict:
    """A path, definition or shared parameter or response defined by more than one document."""
    kind: str  # "path", "definition", "parameter" or "response"
    key: str


@dataclass
class AggregatedDocument:
    spec: SwaggerSpec
    conflicts: List[Conflict] = field(default_factory=list)


def extract_host(base_url: str) -> str:
    """``http://localhost:8080/openmrs`` -> ``localhost:8080/openmrs``."""
    for prefix in ("http://", "https://"):
        if base_url.startswith(prefix):
            return base_url[len(prefix):]
    return base_url


def extract_base_path(base_url: str) -> str:
    return OPENMRS_BASE_PATH if OPENMRS_BASE_PATH in base_url else ""


class SpecificationAggregator:
    """
    Combines module documents with a last-write-wins policy.

    Paths, definitions and the shared parameters and responses are replaced
    whole when a later document defines the same key again; every
    replacement is logged and recorded as a conflict. Security definitions
    come from the first document having any. Info, host, base path and
    schemes are taken from the configuration.
    """

    def __init__(self, config: AggregatorConfig, logger: BaseLogger,
                 parser: Optional[SwaggerParser] = None):
        self.config = config
        self.logger = logger
        self.parser = parser or SwaggerParser()

    def collect_specs(self, directory: Union[str, Path]) -> List[SwaggerSpec]:
        """Load every ``*.json`` document of ``directory`` in file name order.

        Unreadable documents are skipped with a warning.
        """
        specs: List[SwaggerSpec] = []
        for spec_file in sorted(Path(directory).glob("*.json")):
            if not spec_file.is_file():
                continue
            try:
                self.logger.log_debug(f"Reading specification from: {spec_file.name}")
                specs.append(self.parser.parse(spec_file))
            except SwaggerParserError as e:
                self.logger.log_warning(f"Failed to load specification from {spec_file.name}: {str(e)}")
        return specs

    def validate_specs(self, specs: Sequence[SwaggerSpec]) -> None:
        for i, spec in enumerate(specs):
            if not spec.paths:
                self.logger.log_warning(f"Specification {i} has no paths")
            if not spec.definitions:
                self.logger.log_warning(f"Specification {i} has no definitions")

    def aggregate(self, specs: Sequence[SwaggerSpec]) -> AggregatedDocument:
        aggregated = SwaggerSpec(
            info=Info(
                title=self.config.api_title,
                description=self.config.api_description,
                version=self.config.api_version,
                contact=AGGREGATED_CONTACT.model_copy(),
                license=AGGREGATED_LICENSE.model_copy(),
            ),
            host=extract_host(self.config.base_url),
            base_path=extract_base_path(self.config.base_url),
            schemes=[Scheme.HTTP, Scheme.HTTPS],
        )
        conflicts: List[Conflict] = []
        paths: Dict[str, PathItem] = {}
        definitions: Dict[str, SchemaModel] = {}
        parameters: Dict[str, Parameter] = {}
        responses: Dict[str, Response] = {}

        for spec in specs:
            for template, path_item in spec.paths.items():
                if template in paths:
                    self.logger.log_warning(f"Path conflict detected: {template}. Using the last one.")
                    conflicts.append(Conflict("path", template))
                paths[template] = path_item.model_copy(deep=True)

            for name, model in spec.definitions.items():
                if name in definitions:
                    self.logger.log_warning(f"Definition conflict detected: {name}. Using the last one.")
                    conflicts.append(Conflict("definition", name))
                definitions[name] = model.model_copy(deep=True)

            for name, param in (spec.parameters or {}).items():
                if name in parameters:
                    self.logger.log_warning(f"Parameter conflict detected: {name}. Using the last one.")
                    conflicts.append(Conflict("parameter", name))
                parameters[name] = param.model_copy(deep=True)

            for name, response in (spec.responses or {}).items():
                if name in responses:
                    self.logger.log_warning(f"Response conflict detected: {name}. Using the last one.")
                    conflicts.append(Conflict("response", name))
                responses[name] = response.model_copy(deep=True)

            if spec.security_definitions and aggregated.security_definitions is None:
                aggregated.security_definitions = dict(spec.security_definitions)

        aggregated.paths = paths
        aggregated.definitions = definitions
        aggregated.parameters = parameters or None
        aggregated.responses = responses or None
        return AggregatedDocument(spec=aggregated, conflicts=conflicts)

    def run(self) -> Optional[Path]:
        """
        Aggregate the configured input directory into the configured output file.

        Returns:
            Path of the written document, or None when there was nothing to aggregate
        """
        input_dir = Path(self.config.input_directory)
        output_dir = Path(self.config.output_directory)
        self.logger.log_info(f"Input directory: {input_dir.absolute()}")
        self.logger.log_info(f"Output directory: {output_dir.absolute()}")

        if not input_dir.is_dir():
            self.logger.log_warning(f"Input directory does not exist: {input_dir.absolute()}")
            return None

        try:
            output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise AggregationError(f"Cannot create output directory {output_dir}: {str(e)}") from e

        specs = self.collect_specs(input_dir)
        self.logger.log_info(f"Found {len(specs)} module specifications")
        if not specs:
            self.logger.log_warning("No module specifications found to aggregate")
            return None

        if self.config.validate_specs:
            self.validate_specs(specs)

        result = self.aggregate(specs)
        try:
            output_path = SwaggerParser.save_swagger_spec(result.spec, output_dir, self.config.output_filename)
        except OSError as e:
            raise AggregationError(f"Failed to write aggregated specification: {str(e)}") from e
        self.logger.log_info(f"Aggregated OpenAPI specification generated successfully: {output_path.absolute()}")
        self.logger.log_summary(len(result.spec.paths), len(result.spec.definitions))
        return output_path
