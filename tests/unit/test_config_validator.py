import pytest
from swaggergen.models.config import AggregatorConfig, GeneratorConfig, SwaggergenConfig
from swaggergen.models.validator import ConfigYamlValidator, apply_overrides, load_config
from swaggergen.modules.swagger import Scheme


def test_empty_yaml_uses_defaults():
    """Test that an empty file yields the default configuration."""
    config = ConfigYamlValidator.validate_and_load("")

    assert isinstance(config, SwaggergenConfig)
    assert config.generate.output_directory == "target"
    assert config.generate.filename == "openapi-2.4.json"
    assert config.generate.schemes == [Scheme.HTTP, Scheme.HTTPS]
    assert config.aggregate.input_directory == "target/module-specs"
    assert config.aggregate.validate_specs


def test_validate_complete_yaml():
    """Test validating a configuration with both sections."""
    yaml_content = """
    generate:
      scan_packages: app.resources, app.search
      version: "2.5"
      host: demo.openmrs.org
      schemes: [https]
    aggregate:
      input_directory: specs
      base_url: https://demo.openmrs.org/openmrs
      validate_specs: false
    """

    config = ConfigYamlValidator.validate_and_load(yaml_content)

    assert config.generate.scan_packages == ["app.resources", "app.search"]
    assert config.generate.filename == "openapi-2.5.json"
    assert config.generate.host == "demo.openmrs.org"
    assert config.generate.schemes == [Scheme.HTTPS]
    assert config.aggregate.input_directory == "specs"
    assert config.aggregate.base_url == "https://demo.openmrs.org/openmrs"
    assert not config.aggregate.validate_specs


def test_domain_namespaces_accept_lists():
    """Test that list values are taken as they are."""
    config = ConfigYamlValidator.validate_and_load("generate:\n  domain_namespaces: [org.openmrs, app]\n")

    assert config.generate.domain_namespaces == ["org.openmrs", "app"]


def test_invalid_yaml():
    """Test that malformed YAML is reported."""
    with pytest.raises(ValueError, match="Invalid YAML format"):
        ConfigYamlValidator.validate_and_load("generate: [unclosed")


def test_non_mapping_yaml():
    """Test that a top-level list is rejected."""
    with pytest.raises(ValueError, match="Config must be a YAML object"):
        ConfigYamlValidator.validate_and_load("- generate")


def test_invalid_field_names_the_field():
    """Test that validation errors carry the field path."""
    yaml_content = """
    generate:
      schemes: [ftp]
    """

    with pytest.raises(ValueError, match="Error in field 'generate -> schemes -> 0'"):
        ConfigYamlValidator.validate_and_load(yaml_content)


def test_aggregate_output_must_be_json():
    """Test that a non-JSON output file name is rejected."""
    with pytest.raises(ValueError, match="output_filename must be a .json file"):
        ConfigYamlValidator.validate_and_load("aggregate:\n  output_filename: merged.yaml\n")


def test_load_config_without_file():
    assert load_config(None) == SwaggergenConfig()


def test_load_config_from_file(tmp_path):
    source = tmp_path / "swaggergen.yaml"
    source.write_text("generate:\n  output_filename: api.json\n")

    with open(source) as config_file:
        config = load_config(config_file)

    assert config.generate.filename == "api.json"


def test_apply_overrides_ignores_none():
    config = GeneratorConfig(host="from-file", base_path="/file")

    result = apply_overrides(config, {"host": "from-cli", "base_path": None})

    assert result.host == "from-cli"
    assert result.base_path == "/file"
    assert config.host == "from-file"


def test_apply_overrides_validates():
    with pytest.raises(ValueError, match="output_filename must be a .json file"):
        apply_overrides(AggregatorConfig(), {"output_filename": "merged.txt"})


def test_apply_overrides_splits_packages():
    result = apply_overrides(GeneratorConfig(), {"scan_packages": "a.b,c.d"})

    assert result.scan_packages == ["a.b", "c.d"]
