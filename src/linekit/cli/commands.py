"""
Click commands, one per utility.

Each command rejects conflicting flags before any input is opened.
"""

import re
import sys
from typing import Optional, Tuple

import click

from linekit.cli.common import cli_error_handler, stderr_reporter, verbose_option
from linekit.errors import ConfigurationError
from linekit.tools.cat import Concatenator, NumberingMode
from linekit.tools.echo import echo as render_echo
from linekit.tools.find import EntryType, TreeFilter
from linekit.tools.head import HeadLimiter, HeadMode
from linekit.tools.uniq import DuplicateCollapser
from linekit.tools.wc import StreamCounter, select_fields


def _binary_streams():
    return sys.stdin.buffer, sys.stdout.buffer


@click.command()
@click.argument("files", nargs=-1, metavar="[FILE]...")
@click.option("-n", "--number", is_flag=True, help="Number all output lines, starting at 1.")
@click.option("-b", "--number-nonblank", is_flag=True, help="Number non-blank output lines, starting at 1.")
@click.option("-s", "--squeeze", is_flag=True, help="Squeeze runs of blank lines into one.")
@verbose_option
def cat(files: Tuple[str, ...], number: bool, number_nonblank: bool, squeeze: bool) -> None:
    """Concatenate FILE(s) to standard output. "-" or no FILE reads stdin."""
    if number and number_nonblank:
        raise click.UsageError("--number and --number-nonblank are mutually exclusive")

    if number:
        mode = NumberingMode.ALL
    elif number_nonblank:
        mode = NumberingMode.NONBLANK
    else:
        mode = NumberingMode.NONE

    stdin, stdout = _binary_streams()
    runner = Concatenator(mode, squeeze, on_error=stderr_reporter(Concatenator.error_prefix))
    with cli_error_handler():
        runner.run(files, stdout, stdin=stdin)
        stdout.flush()


@click.command()
@click.argument("files", nargs=-1, metavar="[FILE]...")
@click.option("-n", "--lines", type=click.IntRange(min=1), default=None,
              help="Number of lines to print (default 10).")
@click.option("-c", "--bytes", "byte_count", type=click.IntRange(min=1), default=None,
              help="Number of bytes to print.")
@verbose_option
def head(files: Tuple[str, ...], lines: Optional[int], byte_count: Optional[int]) -> None:
    """Print the first lines (or bytes) of each FILE."""
    if lines is not None and byte_count is not None:
        raise click.UsageError("--lines and --bytes are mutually exclusive")

    stdin, stdout = _binary_streams()
    with cli_error_handler():
        if byte_count is not None:
            runner = HeadLimiter(byte_count, HeadMode.BYTES, on_error=stderr_reporter())
        else:
            runner = HeadLimiter(lines, HeadMode.LINES, on_error=stderr_reporter())
        runner.run(files, stdout, stdin=stdin)
        stdout.flush()


@click.command()
@click.argument("input_file", required=False, default="-")
@click.argument("output_file", required=False)
@click.option("-c", "--count", is_flag=True,
              help="Prefix each line with the number of adjacent occurrences.")
@verbose_option
def uniq(input_file: str, output_file: Optional[str], count: bool) -> None:
    """Collapse adjacent duplicate lines of INPUT_FILE, appending to OUTPUT_FILE if given."""
    stdin, stdout = _binary_streams()
    with cli_error_handler():
        DuplicateCollapser(count).run(input_file, output_file, stdin=stdin, stdout=stdout)
        stdout.flush()


@click.command()
@click.argument("files", nargs=-1, metavar="[FILE]...")
@click.option("-l", "--lines", is_flag=True, help="Print the line count.")
@click.option("-w", "--words", is_flag=True, help="Print the word count.")
@click.option("-c", "--bytes", "byte_counts", is_flag=True, help="Print the byte count.")
@click.option("-m", "--chars", is_flag=True, help="Print the character count.")
@verbose_option
def wc(files: Tuple[str, ...], lines: bool, words: bool, byte_counts: bool, chars: bool) -> None:
    """Print line, word and byte counts for each FILE, and a total for several."""
    if byte_counts and chars:
        raise click.UsageError("--bytes and --chars are mutually exclusive")

    fields = select_fields(lines=lines, words=words, byte_count=byte_counts, chars=chars)
    stdin, stdout = _binary_streams()
    runner = StreamCounter(fields, on_error=stderr_reporter(StreamCounter.error_prefix))
    with cli_error_handler():
        runner.run(files, stdout, stdin=stdin)
        stdout.flush()


def _check_patterns(ctx: click.Context, param: click.Parameter, value: Tuple[str, ...]) -> Tuple[str, ...]:
    for pattern in value:
        try:
            re.compile(pattern)
        except re.error as e:
            raise click.BadParameter(f"invalid regex {pattern!r}: {e}")
    return value


@click.command()
@click.argument("paths", nargs=-1, metavar="[PATH]...")
@click.option("-n", "--name", "names", multiple=True, callback=_check_patterns,
              help="Match entries whose file name matches this regex (repeatable).")
@click.option("-t", "--type", "types", multiple=True,
              type=click.Choice([t.value for t in EntryType]),
              help="Match entries of this type: d, f or l (repeatable).")
@verbose_option
def find(paths: Tuple[str, ...], names: Tuple[str, ...], types: Tuple[str, ...]) -> None:
    """Recursively list entries under each PATH (default ".") that match."""
    def report(error: OSError) -> None:
        click.echo(str(error), err=True)

    tree = TreeFilter([EntryType(t) for t in types], names, on_error=report)
    tree.find(paths or (".",)).foreach(click.echo)


@click.command()
@click.argument("text", nargs=-1, required=True)
@click.option("-n", "omit_newline", is_flag=True, help="Do not print the trailing newline.")
def echo(text: Tuple[str, ...], omit_newline: bool) -> None:
    """Print TEXT separated by single spaces."""
    try:
        line = render_echo(text, omit_newline)
    except ConfigurationError as e:
        raise click.UsageError(str(e))
    click.echo(line, nl=False)
