from typing import List, Optional

from pydantic import BaseModel, field_validator, model_validator

from ..modules.swagger.schema import Scheme


class InfoDefaults:
    TITLE = "OpenMRS API Docs"
    DESCRIPTION = "OpenMRS RESTful API documentation generated by Swagger"
    CONTACT_NAME = "OpenMRS"
    CONTACT_URL = "http://openmrs.org"
    LICENSE_NAME = "MPL-2.0 w/ HD"
    LICENSE_URL = "http://openmrs.org/license"
    EXTERNAL_DOCS_DESCRIPTION = "Find more info on REST Module Wiki"
    EXTERNAL_DOCS_URL = "https://wiki.openmrs.org/x/xoAaAQ"


class GeneratorConfig(BaseModel):
    scan_packages: List[str] = []
    output_directory: str = "target"
    output_filename: Optional[str] = None  # defaults to openapi-<version>.json
    version: str = "2.4"
    host: str = "localhost:8080/openmrs"
    base_path: str = "/openmrs"
    schemes: List[Scheme] = [Scheme.HTTP, Scheme.HTTPS]
    domain_namespaces: List[str] = []  # derived from the resources when empty
    title: str = InfoDefaults.TITLE
    description: str = InfoDefaults.DESCRIPTION
    skip: bool = False

    @field_validator('scan_packages', 'domain_namespaces', mode='before')
    @classmethod
    def split_comma_separated(cls, value):
        if isinstance(value, str):
            return [item.strip() for item in value.split(',') if item.strip()]
        return value

    @property
    def filename(self) -> str:
        return self.output_filename or f"openapi-{self.version}.json"


class AggregatorConfig(BaseModel):
    input_directory: str = "target/module-specs"
    output_directory: str = "target/generated-sources/openapi"
    output_filename: str = "openapi-aggregated.json"
    base_url: str = "http://localhost:8080/openmrs"
    api_version: str = "1.0.0"
    api_title: str = "OpenMRS REST API (Aggregated)"
    api_description: str = "Aggregated OpenMRS REST API specification"
    skip: bool = False
    validate_specs: bool = True

    @model_validator(mode='after')
    def validate_filename(self) -> 'AggregatorConfig':
        if not self.output_filename.endswith(".json"):
            raise ValueError("output_filename must be a .json file")
        return self


class SwaggergenConfig(BaseModel):
    """Contents of a ``--config`` file; each command reads its own section."""
    generate: GeneratorConfig = GeneratorConfig()
    aggregate: AggregatorConfig = AggregatorConfig()
