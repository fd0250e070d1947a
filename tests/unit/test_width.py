"""Tests for widetable.util.width — display width and truncation."""

import pytest

from widetable.util.width import char_width, truncate, width


class TestWidth:
    def test_ascii(self):
        assert width('hello') == 5

    def test_empty(self):
        assert width('') == 0

    def test_east_asian_wide(self):
        assert width('你好') == 4

    def test_mixed(self):
        assert width('hi你') == 4

    def test_fullwidth_forms(self):
        assert width('ＡＢ') == 4

    def test_halfwidth_katakana(self):
        assert width('ｱｲｳ') == 3

    def test_ambiguous_is_narrow(self):
        assert width('αβ') == 2

    @pytest.mark.parametrize('s', ['abc', 'naïve', 'x y\tz', 'Ωmega', '→'])
    def test_narrow_text_width_is_length(self, s):
        assert width(s) == len(s)


class TestCharWidth:
    def test_wide(self):
        assert char_width('柿') == 2

    def test_narrow(self):
        assert char_width('a') == 1


class TestTruncate:
    def test_fits_unchanged(self):
        s = 'foo'
        assert truncate(s, 3) is s

    def test_ascii(self):
        assert truncate('test', 3) == 'tes'

    def test_zero_limit(self):
        assert truncate('abc', 0) == ''

    def test_negative_limit(self):
        assert truncate('abc', -1) == ''

    def test_empty(self):
        assert truncate('', 0) == ''

    def test_wide_exact(self):
        assert truncate('りんご', 4) == 'りん'

    def test_wide_does_not_split(self):
        # 'ん' would need columns 3-4, only column 3 is left
        assert truncate('りんご', 3) == 'り'

    def test_wide_glyph_larger_than_budget(self):
        assert truncate('柿', 1) == ''

    def test_mixed(self):
        assert truncate('a柿b', 2) == 'a'
        assert truncate('a柿b', 3) == 'a柿'

    @pytest.mark.parametrize('s', ['', 'abc', 'りんご', 'a柿b柿c', 'ＡＢＣdef'])
    @pytest.mark.parametrize('limit', [0, 1, 2, 3, 5, 8])
    def test_bound_and_idempotent(self, s, limit):
        t = truncate(s, limit)
        assert width(t) <= limit
        assert s.startswith(t)
        assert truncate(t, limit) == t

    @pytest.mark.parametrize('s', ['abc', 'りんご', 'a柿b柿c'])
    def test_longest_prefix(self, s):
        for limit in range(width(s)):
            t = truncate(s, limit)
            assert width(s[:len(t) + 1]) > limit
