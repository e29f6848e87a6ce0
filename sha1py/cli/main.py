"""Main CLI entry point for sha1py."""

import click
from colorama import init

from sha1py import __version__
from sha1py.core.logs import configure_logging
from sha1py.cli.output import BANNER
from sha1py.cli.commands import sum_cmd, check_cmd, bench_cmd, config_cmd

# Initialize colorama for cross-platform colored output
init(autoreset=True)


class Sha1Group(click.Group):
    """Custom Group class to display banner before help."""

    def format_help(self, ctx, formatter):
        """Override to add banner before help text."""
        click.echo(BANNER)
        super().format_help(ctx, formatter)


@click.group(cls=Sha1Group)
@click.version_option(version=__version__)
@click.option('-v', '--verbose', is_flag=True, help='Log debug events to stderr')
def cli(verbose):
    configure_logging(verbose)


# Register commands
cli.add_command(sum_cmd)
cli.add_command(check_cmd)
cli.add_command(bench_cmd)
cli.add_command(config_cmd)


def main():
    """Main entry point."""
    cli()


if __name__ == '__main__':
    main()
