import click
from swaggergen.modules.generator.commands import create_generate_command
from swaggergen.modules.aggregator.commands import create_aggregate_command
from swaggergen.modules.logging import LOG_LEVELS, OUTPUT_TYPES, BaseLogger, create_logger


class SwaggergenContext:
    """State shared by the generate and aggregate commands."""
    def __init__(self):
        self.logger: BaseLogger | None = None

pass_context = click.make_pass_decorator(SwaggergenContext, ensure=True)

@click.group()
@click.version_option(package_name='swaggergen')
@click.option('--output', '-o',
              type=click.Choice(OUTPUT_TYPES),
              default='colorful',
              help='Log format (colorful for a terminal, plain for CI/file, json for machine parsing)',
              envvar='SWAGGERGEN_OUTPUT')
@click.option('--log-level', '-l',
              type=click.Choice(LOG_LEVELS),
              default='INFO',
              help='Set the logging level; DEBUG also lists every resource and path',
              envvar='SWAGGERGEN_LOG_LEVEL')
@pass_context
def cli(ctx, output, log_level):
    """Generate and merge Swagger 2.0 documents for REST resource handlers."""
    ctx.logger = create_logger(output, log_level)

cli.add_command(create_generate_command())
cli.add_command(create_aggregate_command())

def main():
    cli()

if __name__ == '__main__':
    main()
