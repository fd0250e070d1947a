import argparse
import logging
import sys
from logging.handlers import TimedRotatingFileHandler

from widetable import constants
from widetable.util import table

logger = logging.getLogger('widetable')

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR')


def setup(level, log_file=None):
    # logging to stderr, and to a file rotated daily if asked for
    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(TimedRotatingFileHandler(log_file, when='D',
                                                 backupCount=constants.LOG_BACKUP_COUNT, utc=True))
    logging.basicConfig(format=constants.LOG_FORMAT, style='{',
                        datefmt=constants.LOG_DATE_FORMAT, level=level, handlers=handlers)


def _positive_int(option, value):
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f'{option} expects an integer, got {value!r}') from None
    if n <= 0:
        raise argparse.ArgumentTypeError(f'{option} must be positive, got {n}')
    return n


def _delimiter(value):
    if not value:
        raise argparse.ArgumentTypeError('delimiter must not be empty')
    return value


def _log_level(value):
    # also applied to the default taken from the environment
    level = value.upper()
    if level not in LOG_LEVELS:
        raise argparse.ArgumentTypeError(
            f'invalid log level {value!r} (choose from {", ".join(LOG_LEVELS)})')
    return level


def parse_column(spec):
    """Parses ``HEADER[:right][:min=N][:max=N]`` into a Column.

    Options are taken from the end of the spec, so the header itself may
    contain colons.
    """
    parts = spec.split(':')
    align_right = False
    min_width = max_width = None
    while len(parts) > 1:
        option = parts[-1]
        if option == 'right':
            align_right = True
        elif option == 'left':
            align_right = False
        elif option.startswith('min='):
            min_width = _positive_int('min', option[4:])
        elif option.startswith('max='):
            max_width = _positive_int('max', option[4:])
        else:
            break
        parts.pop()
    return table.Column(':'.join(parts), align_right, min_width, max_width)


def build_parser():
    parser = argparse.ArgumentParser(
        prog='widetable',
        description='Lay out delimited rows read from stdin as an aligned text table.')
    parser.add_argument('-c', '--column', dest='columns', action='append', type=parse_column,
                        required=True, metavar='SPEC',
                        help='column definition HEADER[:right][:min=N][:max=N], repeatable')
    parser.add_argument('-s', '--separator',
                        default=constants.env_default(constants.SEPARATOR_ENV,
                                                      constants.DEFAULT_SEPARATOR),
                        help='string placed between columns')
    parser.add_argument('-d', '--delimiter',
                        default=constants.env_default(constants.DELIMITER_ENV,
                                                      constants.DEFAULT_DELIMITER),
                        type=_delimiter,
                        help='field delimiter of the input lines (default: tab)')
    parser.add_argument('--no-header', action='store_true', help='do not print the header line')
    parser.add_argument('--log-level',
                        default=constants.env_default(constants.LOG_LEVEL_ENV, 'WARNING'),
                        type=_log_level, metavar='{' + ','.join(LOG_LEVELS) + '}')
    parser.add_argument('--log-file', help='also log to this file, rotated daily')
    return parser


def read_rows(lines, delimiter):
    """Yields (line number, fields) for every non-blank line."""
    for lineno, line in enumerate(lines, start=1):
        line = line.rstrip('\r\n')
        if line:
            yield lineno, line.split(delimiter)


def main(argv=None, stdin=None, stdout=None):
    args = build_parser().parse_args(argv)
    setup(args.log_level, args.log_file)
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout.buffer

    try:
        t = table.Table(args.columns, separator=args.separator, no_header=args.no_header)
        for lineno, row in read_rows(stdin, args.delimiter):
            try:
                t.add_row(*row)
            except table.RowError as e:
                raise table.RowError(f'line {lineno}: {e}') from e
    except table.TableError as e:
        logger.error(str(e))
        return 1

    logger.info(f'Rendering {len(t)} rows in {len(t.columns)} columns')
    t.show(stdout)
    return 0


if __name__ == '__main__':
    sys.exit(main())
