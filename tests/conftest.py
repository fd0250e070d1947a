"""Shared fixtures for all tests."""

import pytest


@pytest.fixture
def make_table():
    """Factory fixture returning a builder for tables from header specs.

    A spec is either a header string or a ``(header, options)`` pair, where
    ``options`` are keyword arguments of Column.
    """
    from widetable.util.table import Column, Table

    def _make(*specs, separator=' ', no_header=False):
        columns = []
        for spec in specs:
            if isinstance(spec, str):
                columns.append(Column(spec))
            else:
                header, options = spec
                columns.append(Column(header, **options))
        return Table(columns, separator=separator, no_header=no_header)

    return _make


@pytest.fixture
def mixed_table(make_table):
    """Three columns, the middle one right aligned, with a short row."""
    t = make_table('COL1', ('COL2', {'align_right': True}), 'COL3')
    t.add_row('foo', 'bar', 'baz')
    t.add_row('test', 'sample')
    t.add_row('あ', 'い', 'う')
    return t
