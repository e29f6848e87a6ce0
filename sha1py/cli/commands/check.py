"""Check command - verify files against a checksum list."""

import re

import click
from colorama import Fore, Style

from sha1py.core.hash import hash_file
from sha1py.cli.commands.sum import resolve_chunk_size, unescape_filename
from sha1py.cli.output import warning

# "<40 hex>  <path>" or "<40 hex> *<path>" (binary mode marker); a leading
# backslash means the path holds \\ or \n escapes
CHECK_LINE = re.compile(r'^(\\)?([0-9a-fA-F]{40}) [ *](.+)$')


def parse_check_line(line):
    """
    Parse one checksum list line.

    Returns:
        Tuple (hex digest, path), or None if the line is malformed
    """
    match = CHECK_LINE.match(line)
    if not match:
        return None
    escaped, digest, path = match.groups()
    if escaped:
        path = unescape_filename(path)
        if path is None:
            return None
    return digest.lower(), path


@click.command('check')
@click.option('-q', '--quiet', is_flag=True, help="Don't print OK for each verified file")
@click.option('--chunk-size', type=click.IntRange(min=1), default=None,
              help='Bytes per read (default: core.chunksize)')
@click.argument('listfile', type=click.File('r'))
@click.pass_context
def check_cmd(ctx, quiet, chunk_size, listfile):
    """
    Verify files listed in LISTFILE.

    LISTFILE holds lines produced by 'sha1py sum' (or sha1sum). Blank
    lines and lines starting with # are ignored. Use - for stdin.

    Examples:
        sha1py check SHA1SUMS
        sha1py check --quiet SHA1SUMS
    """
    chunk_size = resolve_chunk_size(chunk_size)

    mismatched = 0
    unreadable = 0
    malformed = 0

    for raw in listfile:
        line = raw.rstrip('\r\n')
        if not line.strip() or line.startswith('#'):
            continue

        parsed = parse_check_line(line)
        if parsed is None:
            malformed += 1
            continue
        expected, path = parsed

        try:
            actual = hash_file(path, chunk_size)
        except OSError:
            click.echo(f"{path}: {Fore.RED}FAILED open or read{Style.RESET_ALL}")
            unreadable += 1
            continue

        if actual == expected:
            if not quiet:
                click.echo(f"{path}: {Fore.GREEN}OK{Style.RESET_ALL}")
        else:
            click.echo(f"{path}: {Fore.RED}FAILED{Style.RESET_ALL}")
            mismatched += 1

    if malformed:
        click.echo(warning(f"{malformed} line(s) improperly formatted"), err=True)
    if unreadable:
        click.echo(warning(f"{unreadable} listed file(s) could not be read"), err=True)
    if mismatched:
        click.echo(warning(f"{mismatched} computed checksum(s) did NOT match"), err=True)

    if malformed or unreadable or mismatched:
        ctx.exit(1)
