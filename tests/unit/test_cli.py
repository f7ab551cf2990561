import json
import pytest
from click.testing import CliRunner
from swaggergen.main import cli


@pytest.fixture
def runner():
    return CliRunner()


def invoke(runner, *args):
    return runner.invoke(cli, ["--output", "plain", *args])


def test_generate(runner, tmp_path):
    result = invoke(runner, "generate", "--scan-packages", "tests.fixtures.handlers",
                    "--output-dir", str(tmp_path), "--version", "2.5")

    assert result.exit_code == 0
    document = json.loads((tmp_path / "openapi-2.5.json").read_text())
    assert document["info"]["version"] == "2.5"
    assert "/concept" in document["paths"]
    assert "/concept/{parent-uuid}/name/{uuid}" in document["paths"]
    assert "FetchAll" in document["definitions"]


def test_generate_with_config_file(runner, tmp_path):
    config = tmp_path / "swaggergen.yaml"
    config.write_text(
        "generate:\n"
        "  scan_packages: tests.fixtures.handlers.concept\n"
        f"  output_directory: {tmp_path / 'from-file'}\n"
        "  output_filename: api.json\n"
    )

    result = invoke(runner, "generate", "--config", str(config), "--output-filename", "cli.json")

    assert result.exit_code == 0
    assert (tmp_path / "from-file" / "cli.json").exists()
    assert not (tmp_path / "from-file" / "api.json").exists()


def test_generate_skip(runner, tmp_path):
    output_dir = tmp_path / "target"

    result = invoke(runner, "generate", "--skip", "--output-dir", str(output_dir))

    assert result.exit_code == 0
    assert not output_dir.exists()


def test_invalid_config_aborts(runner, tmp_path):
    config = tmp_path / "swaggergen.yaml"
    config.write_text("generate:\n  schemes: [gopher]\n")

    result = invoke(runner, "generate", "--config", str(config))

    assert result.exit_code == 1
    assert "Configuration error" in result.output


def test_aggregate(runner, tmp_path):
    input_dir = tmp_path / "specs"
    output_dir = tmp_path / "out"
    input_dir.mkdir()
    (input_dir / "module.json").write_text(json.dumps({
        "swagger": "2.0",
        "info": {"title": "module", "version": "1"},
        "paths": {"/concept": {"get": {"responses": {"200": {"description": "ok"}}}}},
    }))

    result = invoke(runner, "aggregate", "--input-dir", str(input_dir), "--output-dir", str(output_dir),
                    "--api-version", "9.9.9", "--no-validate")

    assert result.exit_code == 0
    document = json.loads((output_dir / "openapi-aggregated.json").read_text())
    assert document["info"]["version"] == "9.9.9"
    assert list(document["paths"]) == ["/concept"]


def test_aggregate_empty_directory(runner, tmp_path):
    input_dir = tmp_path / "specs"
    output_dir = tmp_path / "out"
    input_dir.mkdir()

    result = invoke(runner, "aggregate", "--input-dir", str(input_dir), "--output-dir", str(output_dir))

    assert result.exit_code == 0
    assert not (output_dir / "openapi-aggregated.json").exists()


def test_aggregate_rejects_non_json_output(runner, tmp_path):
    result = invoke(runner, "aggregate", "--input-dir", str(tmp_path), "--output-filename", "merged.yaml")

    assert result.exit_code == 1
