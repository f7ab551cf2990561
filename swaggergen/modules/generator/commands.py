import click
from typing import Optional, TextIO, Tuple

from ...models.validator import apply_overrides, load_config
from .command.generate import GenerateCommand
from .errors import GenerationError


def create_generate_command() -> click.Command:
    """Create the generate command."""

    @click.command(name='generate')
    @click.option('--config', 'config_file', type=click.File('r'),
                  help='YAML file with a "generate" section', envvar='SWAGGERGEN_CONFIG')
    @click.option('--scan-packages', help='Comma separated packages to scan for handlers',
                  envvar='SWAGGERGEN_SCAN_PACKAGES')
    @click.option('--output-dir', help='Directory the document is written to',
                  envvar='SWAGGERGEN_OUTPUT_DIR')
    @click.option('--output-filename', help='File name of the document (default openapi-<version>.json)')
    @click.option('--version', 'spec_version', help='API version written into the document info')
    @click.option('--host', help='Host the API is served from')
    @click.option('--base-path', help='Base path of the API')
    @click.option('--domain-namespace', 'domain_namespaces', multiple=True,
                  help='Package holding domain types; may be repeated')
    @click.option('--skip', is_flag=True, help='Do nothing', envvar='SWAGGERGEN_SKIP')
    @click.pass_context
    def generate(ctx, config_file: Optional[TextIO], scan_packages: Optional[str], output_dir: Optional[str],
                 output_filename: Optional[str], spec_version: Optional[str], host: Optional[str],
                 base_path: Optional[str], domain_namespaces: Tuple[str, ...], skip: bool):
        """Generate a Swagger 2.0 document from resource handlers.

        Examples:
            swaggergen generate --scan-packages myapp.resources --output-dir target
        """
        logger = ctx.obj.logger
        try:
            config = apply_overrides(load_config(config_file).generate, {
                "scan_packages": scan_packages,
                "output_directory": output_dir,
                "output_filename": output_filename,
                "version": spec_version,
                "host": host,
                "base_path": base_path,
                "domain_namespaces": list(domain_namespaces) or None,
                "skip": skip or None,
            })
            GenerateCommand(logger).run(config)
        except ValueError as err:
            logger.log_error(f"Configuration error: {str(err)}")
            raise click.Abort()
        except GenerationError as err:
            logger.log_error(f"Failed to generate OpenAPI specification: {str(err)}")
            raise click.Abort()

    return generate
