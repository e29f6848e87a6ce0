"""Sum command - print SHA-1 digests of files."""

import click

from sha1py.core.config import get_config
from sha1py.core.hash import digest_to_hex
from sha1py.core.sha1 import digest_file, digest_stream
from sha1py.cli.output import error


def escape_filename(name):
    """
    Escape a name the way sha1sum does.

    Backslashes and newlines become \\\\ and \\n. The caller marks the
    line with a leading backslash when anything was escaped.

    Returns:
        Tuple (escaped name, whether escaping was needed)
    """
    if '\\' not in name and '\n' not in name:
        return name, False
    return name.replace('\\', '\\\\').replace('\n', '\\n'), True


def unescape_filename(name):
    """Undo escape_filename. Returns None for an unknown escape sequence."""
    out = []
    chars = iter(name)
    for ch in chars:
        if ch != '\\':
            out.append(ch)
            continue
        nxt = next(chars, '')
        if nxt == '\\':
            out.append('\\')
        elif nxt == 'n':
            out.append('\n')
        else:
            return None
    return ''.join(out)


def resolve_chunk_size(chunk_size):
    """Use the --chunk-size option if given, else core.chunksize from config."""
    if chunk_size is not None:
        return chunk_size
    try:
        return get_config().get_int('core', 'chunksize')
    except ValueError as e:
        click.echo(error(str(e)), err=True)
        raise click.Abort()


@click.command('sum')
@click.option('--size', 'show_size', is_flag=True, help='Also print the number of bytes hashed')
@click.option('--chunk-size', type=click.IntRange(min=1), default=None,
              help='Bytes per read (default: core.chunksize)')
@click.argument('files', nargs=-1, type=click.Path(allow_dash=True))
@click.pass_context
def sum_cmd(ctx, show_size, chunk_size, files):
    """
    Print SHA-1 digests of FILES.

    With no FILES, or when a FILE is -, read standard input.
    Output uses the same "<digest>  <name>" layout as sha1sum, so it
    can be verified later with 'sha1py check'.

    Examples:
        sha1py sum setup.py             # Hash one file
        sha1py sum *.py > SHA1SUMS      # Write a checksum list
        cat data.bin | sha1py sum       # Hash standard input
        sha1py sum --size big.iso       # Include the byte count
    """
    chunk_size = resolve_chunk_size(chunk_size)
    failed = False

    for name in files or ('-',):
        try:
            if name == '-':
                words, size = digest_stream(click.get_binary_stream('stdin'), chunk_size)
            else:
                words, size = digest_file(name, chunk_size)
        except OSError as e:
            click.echo(error(f"{name}: {e.strerror or e}"), err=True)
            failed = True
            continue

        shown, escaped = escape_filename(name)
        line = f"{digest_to_hex(words)}  {shown}"
        if escaped:
            line = '\\' + line
        if show_size:
            line += f"  {size}"
        click.echo(line)

    if failed:
        ctx.exit(1)
