import click
from typing import Optional, TextIO

from ...models.validator import apply_overrides, load_config
from .command.aggregate import AggregateCommand
from .errors import AggregationError


def create_aggregate_command() -> click.Command:
    """Create the aggregate command."""

    @click.command(name='aggregate')
    @click.option('--config', 'config_file', type=click.File('r'),
                  help='YAML file with an "aggregate" section', envvar='SWAGGERGEN_CONFIG')
    @click.option('--input-dir', help='Directory holding the module documents (*.json)',
                  envvar='SWAGGERGEN_INPUT_DIR')
    @click.option('--output-dir', help='Directory the merged document is written to',
                  envvar='SWAGGERGEN_OUTPUT_DIR')
    @click.option('--output-filename', help='File name of the merged document')
    @click.option('--base-url', help='Base URL the host and base path are derived from')
    @click.option('--api-version', help='Version of the merged API')
    @click.option('--api-title', help='Title of the merged API')
    @click.option('--api-description', help='Description of the merged API')
    @click.option('--validate/--no-validate', 'validate_specs', default=None,
                  help='Warn about documents without paths or definitions')
    @click.option('--skip', is_flag=True, help='Do nothing', envvar='SWAGGERGEN_SKIP')
    @click.pass_context
    def aggregate(ctx, config_file: Optional[TextIO], input_dir: Optional[str], output_dir: Optional[str],
                  output_filename: Optional[str], base_url: Optional[str], api_version: Optional[str],
                  api_title: Optional[str], api_description: Optional[str],
                  validate_specs: Optional[bool], skip: bool):
        """Merge module Swagger documents into one.

        Later documents win when paths or definitions collide.
        """
        logger = ctx.obj.logger
        try:
            config = apply_overrides(load_config(config_file).aggregate, {
                "input_directory": input_dir,
                "output_directory": output_dir,
                "output_filename": output_filename,
                "base_url": base_url,
                "api_version": api_version,
                "api_title": api_title,
                "api_description": api_description,
                "validate_specs": validate_specs,
                "skip": skip or None,
            })
            AggregateCommand(logger).run(config)
        except ValueError as err:
            logger.log_error(f"Configuration error: {str(err)}")
            raise click.Abort()
        except AggregationError as err:
            logger.log_error(f"Failed to aggregate OpenAPI specifications: {str(err)}")
            raise click.Abort()

    return aggregate
