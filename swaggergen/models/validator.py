from typing import Any, Dict, List, Optional, TextIO, TypeVar
from pydantic import BaseModel, ValidationError
from pydantic_core import ErrorDetails
import yaml
from .config import SwaggergenConfig

ModelT = TypeVar("ModelT", bound=BaseModel)


def _build_validation_error_message(errors: List[ErrorDetails]) -> str:
    """Build a ValueError from a list of Pydantic validation errors."""
    messages = []
    for error in errors:
        field_path = " -> ".join(str(loc) for loc in error['loc'])
        msg = error['msg']
        messages.append(f"Error in field '{field_path}': {msg}")

    return "\n".join(messages)


class ConfigYamlValidator:
    """Validates YAML content and creates SwaggergenConfig instances."""

    @classmethod
    def validate_and_load(cls, yaml_content: str) -> SwaggergenConfig:
        """
        Validate YAML content and create a SwaggergenConfig instance.

        Args:
            yaml_content: The YAML content to validate

        Returns:
            SwaggergenConfig: The validated configuration

        Raises:
            ValueError: If the YAML content is invalid
        """
        try:
            data = yaml.safe_load(yaml_content)
            if data is None:
                data = {}
            if not isinstance(data, dict):
                raise ValueError("Config must be a YAML object")

            return SwaggergenConfig.model_validate(data)

        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML format: {str(e)}")
        except ValidationError as e:
            raise ValueError(_build_validation_error_message(e.errors()))


def load_config(config_file: Optional[TextIO]) -> SwaggergenConfig:
    """Configuration from an open YAML file, or the defaults when there is none."""
    if config_file is None:
        return SwaggergenConfig()
    return ConfigYamlValidator.validate_and_load(config_file.read())


def apply_overrides(config: ModelT, overrides: Dict[str, Any]) -> ModelT:
    """
    Return ``config`` with every override that is not None applied.

    Raises:
        ValueError: If the result does not validate
    """
    values = config.model_dump()
    values.update({key: value for key, value in overrides.items() if value is not None})
    try:
        return type(config).model_validate(values)
    except ValidationError as e:
        raise ValueError(_build_validation_error_message(e.errors()))
