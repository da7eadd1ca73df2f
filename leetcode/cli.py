import logging
import os
import sys

import click

from leetcode.moveZerosEnd import moveZerosToEnd

LOG_LEVEL = os.getenv('MOVEZEROS_LOG_LEVEL', 'INFO')


def setup_logging(verbose):
    level = logging.DEBUG if verbose else LOG_LEVEL.upper()
    logging.basicConfig(
        level=level,
        stream=sys.stdout,
        format="%(asctime)s [%(levelname)s] %(message)s",
        force=True
    )


@click.command()
@click.argument('numbers', nargs=-1, type=int)
@click.option('--separator', default=' ', help='Separator used when printing the result.')
@click.option('-v', '--verbose', is_flag=True, help='Enable debug logging.')
def main(numbers, separator, verbose):
    """Move every zero in NUMBERS to the end, keeping the order of the rest."""
    setup_logging(verbose)
    result = moveZerosToEnd(list(numbers))
    click.echo(separator.join(str(n) for n in result))


if __name__ == '__main__':
    main()
