import logging
import sys
from typing import Iterable, List, NamedTuple, Optional, Tuple

from widetable import constants
from widetable.util import convert
from widetable.util.width import truncate, width

logger = logging.getLogger(__name__)


class TableError(Exception):
    pass


class SchemaError(TableError):
    pass


class RowError(TableError):
    pass


class EmptyRowError(RowError):
    def __init__(self):
        super().__init__('No row data.')


class TooManyValuesError(RowError):
    def __init__(self, nvalues, ncols):
        super().__init__(f'Row has {nvalues} values but the table has only {ncols} columns.')
        self.nvalues = nvalues
        self.ncols = ncols


class Column(NamedTuple):
    """Definition of one table column.

    Width limits are unset when ``None``, zero or negative. Content wider than ``max_width``,
    header included, is truncated to it.
    """
    header: str
    align_right: bool = False
    min_width: Optional[int] = None
    max_width: Optional[int] = None


def _limit(column, name):
    limit = getattr(column, name)
    if limit is None:
        return None
    if isinstance(limit, bool) or not isinstance(limit, int):
        raise SchemaError(f'{name} of column {column.header!r} must be an integer, '
                          f'got {limit!r}.')
    # zero or less leaves the column unlimited
    return limit if limit > 0 else None


def validate(column: Column) -> Column:
    """Returns ``column`` with non-positive width limits cleared.

    Raises SchemaError if the header is not text, a limit is not an integer,
    or min_width exceeds max_width.
    """
    if not isinstance(column.header, str):
        raise SchemaError(f'Column header must be a string, got {type(column.header).__name__}.')
    column = column._replace(min_width=_limit(column, 'min_width'),
                             max_width=_limit(column, 'max_width'))
    if (column.min_width is not None and column.max_width is not None
            and column.min_width > column.max_width):
        raise SchemaError(f'Column {column.header!r} has min_width {column.min_width} larger '
                          f'than max_width {column.max_width}.')
    return column


def initial_width(column: Column) -> Tuple[str, int]:
    """Returns the header as it will be shown and the column's starting width."""
    header = column.header
    w = width(header)
    if column.min_width is not None and column.min_width > w:
        w = column.min_width
    if column.max_width is not None and column.max_width < w:
        header = truncate(header, column.max_width)
        w = column.max_width
    return header, w


def settle(current: int, cell_width: int, max_width: Optional[int]) -> int:
    """Returns a column's width after a cell of ``cell_width`` is added to it.

    Widths never shrink, and never grow past ``max_width`` when it is set.
    """
    if cell_width <= current:
        return current
    if max_width is not None and cell_width > max_width:
        return max_width
    return cell_width


class Table:
    def __init__(self, columns: Iterable[Column], *, separator=constants.DEFAULT_SEPARATOR,
                 no_header=False):
        columns = list(columns)
        if not columns:
            raise SchemaError('No columns.')
        schema = []
        self._widths: List[int] = []
        for column in columns:
            column = validate(Column(*column))
            header, w = initial_width(column)
            if header != column.header:
                logger.debug('Header %r truncated to %r', column.header, header)
                column = column._replace(header=header)
            schema.append(column)
            self._widths.append(w)
        self._columns: Tuple[Column, ...] = tuple(schema)
        self.separator = separator
        self.no_header = no_header
        self._rows: List[Tuple[str, ...]] = []

    @property
    def columns(self) -> Tuple[Column, ...]:
        return self._columns

    @property
    def rows(self) -> Tuple[Tuple[str, ...], ...]:
        """Rows added so far, as stored after truncation."""
        return tuple(self._rows)

    @property
    def widths(self) -> Tuple[int, ...]:
        """Current settled width of each column."""
        return tuple(self._widths)

    def __len__(self):
        return len(self._rows)

    def add_row(self, *values: str) -> None:
        """Adds a row of already stringified values.

        A row may hold fewer values than there are columns; they fill the
        leading columns. Nothing is stored if the row is rejected.
        """
        if not values:
            raise EmptyRowError()
        if len(values) > len(self.columns):
            raise TooManyValuesError(len(values), len(self.columns))
        row = []
        widths = self._widths[:]
        for i, s in enumerate(values):
            if not isinstance(s, str):
                raise TypeError(f'Row value at position {i} is {type(s).__name__}, not str.')
            max_width = self.columns[i].max_width
            w = width(s)
            widths[i] = settle(widths[i], w, max_width)
            if max_width is not None and w > max_width:
                logger.debug('Value %r truncated to width %d', s, max_width)
                s = truncate(s, max_width)
            row.append(s)
        self._widths = widths
        self._rows.append(tuple(row))

    def append(self, *values):
        """Converts ``values`` to text and adds them as a row. Returns the table."""
        self.add_row(*convert.to_row(values))
        return self

    def _cell(self, i, s, last):
        column = self.columns[i]
        pad = ' ' * (self._widths[i] - width(s))
        if column.align_right:
            return pad + s
        if i < last:
            return s + pad
        return s

    def _line(self, cells):
        last = len(cells) - 1
        return self.separator.join(self._cell(i, s, last) for i, s in enumerate(cells)) + '\n'

    def render(self) -> str:
        lines = []
        if not self.no_header:
            lines.append(self._line([column.header for column in self._columns]))
        lines.extend(self._line(row) for row in self._rows)
        return ''.join(lines)
    __str__ = render

    def write_to(self, sink, encoding=constants.DEFAULT_ENCODING) -> int:
        """Writes the rendered table to a binary sink and returns the bytes written."""
        data = self.render().encode(encoding)
        n = sink.write(data)
        return len(data) if n is None else n

    def show(self, file=None) -> int:
        if file is None:
            file = sys.stdout.buffer
        n = self.write_to(file)
        file.flush()
        return n


def new_table(*columns: Column, separator=constants.DEFAULT_SEPARATOR, no_header=False) -> Table:
    return Table(columns, separator=separator, no_header=no_header)
