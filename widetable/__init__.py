from widetable.util.convert import ConversionError, to_row, to_text
from widetable.util.table import (
    Column,
    EmptyRowError,
    RowError,
    SchemaError,
    Table,
    TableError,
    TooManyValuesError,
    new_table,
)
from widetable.util.width import truncate, width

__all__ = [
    'Column',
    'ConversionError',
    'EmptyRowError',
    'RowError',
    'SchemaError',
    'Table',
    'TableError',
    'TooManyValuesError',
    'new_table',
    'to_row',
    'to_text',
    'truncate',
    'width',
]
