"""Bench command - compare sha1py speed with hashlib."""

import click
from colorama import Fore, Style

from sha1py.core.bench import run_benchmarks
from sha1py.core.config import get_config
from sha1py.cli.output import error, info


@click.command('bench')
@click.option('-n', '--iterations', type=click.IntRange(min=1), default=None,
              help='Calls per implementation (default: bench.iterations)')
@click.option('--size', type=click.IntRange(min=1), default=None,
              help='Size of the large payload in bytes (default: bench.size)')
@click.option('--no-color', is_flag=True, help='Disable colored output')
def bench_cmd(iterations, size, no_color):
    """
    Time sha1py against hashlib.

    Both implementations hash the "Hello, world!" message and a larger
    generated buffer. Digests are compared before timing starts.

    Examples:
        sha1py bench
        sha1py bench -n 100 --size 65536
    """
    config = get_config()
    try:
        if iterations is None:
            iterations = config.get_int('bench', 'iterations')
        if size is None:
            size = config.get_int('bench', 'size')
        results = run_benchmarks(iterations, size)
    except ValueError as e:
        click.echo(error(str(e)))
        raise click.Abort()

    click.echo(info(f"{iterations} iteration(s) per implementation"))
    click.echo()
    click.echo(f"{'payload':<20} {'impl':<10} {'bytes':>10} {'us/call':>12} {'MiB/s':>10}")

    for result in results:
        impl = result.implementation
        if not no_color:
            color = Fore.CYAN if impl == 'sha1py' else Fore.WHITE
            impl = f"{color}{impl:<10}{Style.RESET_ALL}"
        else:
            impl = f"{impl:<10}"
        click.echo(
            f"{result.payload:<20} {impl} {result.size:>10} "
            f"{result.per_call_us:>12.2f} {result.throughput_mib:>10.2f}"
        )
