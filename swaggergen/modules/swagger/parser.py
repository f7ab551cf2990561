"""Loading and saving of Swagger 2.0 documents."""

import os
import json
import tempfile
import yaml
from pathlib import Path
from typing import Dict, Any, Union

from pydantic import ValidationError

from .schema import SwaggerSpec


class SwaggerParserError(Exception):
    """Error raised during Swagger parsing."""
    pass


class SwaggerParser:
    """Parser for Swagger 2.0 specifications."""

    def __init__(self):
        """Initialize the parser."""
        self.cache: Dict[str, SwaggerSpec] = {}

    def parse(self, source: Union[str, Path]) -> SwaggerSpec:
        """
        Parse a Swagger specification file.

        Args:
            source: Path to a local JSON or YAML document

        Returns:
            SwaggerSpec: Parsed Swagger specification

        Raises:
            SwaggerParserError: If loading or parsing fails
        """
        source = str(source)
        if source in self.cache:
            return self.cache[source]

        try:
            spec_data = self._load_spec(source)
        except Exception as e:
            raise SwaggerParserError(f"Failed to load Swagger spec from {source}: {str(e)}")

        swagger_spec = self.parse_data(spec_data)
        self.cache[source] = swagger_spec
        return swagger_spec

    def parse_data(self, spec_data: Any) -> SwaggerSpec:
        """
        Build a SwaggerSpec from already loaded document data.

        Raises:
            SwaggerParserError: If the data is not a Swagger 2.0 document
        """
        if not isinstance(spec_data, dict):
            raise SwaggerParserError("Swagger spec must be a JSON/YAML object")

        self._check_version(spec_data)

        try:
            return SwaggerSpec.model_validate(spec_data)
        except ValidationError as e:
            raise SwaggerParserError(f"Failed to parse Swagger spec: {str(e)}")

    def _load_spec(self, source: str) -> Dict[str, Any]:
        """
        Load a Swagger specification from a file.

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If the content is neither JSON nor YAML
        """
        if not os.path.exists(source):
            raise FileNotFoundError(f"Swagger spec file not found: {source}")

        with open(source, 'r', encoding='utf-8') as f:
            content = f.read()

        # Try to parse as JSON, fall back to YAML
        try:
            return json.loads(content)
        except json.JSONDecodeError:
            try:
                return yaml.safe_load(content)
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid Swagger spec format: {str(e)}")

    def _check_version(self, spec_data: Dict[str, Any]) -> None:
        version = str(spec_data.get('swagger', ''))
        if not version.startswith('2.'):
            if 'openapi' in spec_data:
                raise SwaggerParserError(f"Unsupported OpenAPI version: {spec_data['openapi']}")
            raise SwaggerParserError("Unknown Swagger/OpenAPI specification version")

    @staticmethod
    def save_swagger_spec(spec: SwaggerSpec, directory: Union[str, Path], filename: str) -> Path:
        """
        Write a spec as JSON into ``directory``, creating it when needed.

        The document is written to a temporary file first and moved into
        place, so an interrupted write never leaves a truncated file behind.

        Returns:
            Path: Path to the saved spec file
        """
        target_dir = Path(directory)
        target_dir.mkdir(parents=True, exist_ok=True)
        filepath = target_dir / filename

        fd, tmp_path = tempfile.mkstemp(dir=target_dir, prefix=f".{filename}.", suffix=".tmp")
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                f.write(spec.to_json())
            os.replace(tmp_path, filepath)
        except BaseException:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise

        return filepath
