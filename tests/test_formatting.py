import pytest

from core.formatting import parse_number, parse_series, rupiah


@pytest.mark.parametrize('value, expected', [
    (0, 'Rp 0'),
    (950, 'Rp 950'),
    (1234567, 'Rp 1.234.567'),
    (125000.6, 'Rp 125.001'),
    ('150000', 'Rp 150.000'),
    (None, 'Rp 0'),
    ('abc', 'Rp 0'),
])
def test_rupiah(value, expected):
    assert rupiah(value) == expected


def test_parse_series_accepts_commas_and_whitespace():
    assert parse_series('120000, 150000 140000\n160000') == [120000.0, 150000.0, 140000.0, 160000.0]


def test_parse_series_skips_blank_and_invalid_tokens():
    assert parse_series(' 1,, 2, x, 3, ') == [1.0, 2.0, 3.0]
    assert parse_series('nan, inf, 4') == [4.0]
    assert parse_series('') == []
    assert parse_series(None) == []


def test_parse_number():
    assert parse_number(' 12.5 ') == 12.5
    assert parse_number('') is None
    assert parse_number(None) is None
    assert parse_number('dua') is None


def test_parse_series_ignores_edge_separators():
    # a trailing or leading separator must not add a 0 to the series
    assert parse_series('1, 2, ') == [1.0, 2.0]
    assert parse_series(', 1, 2') == [1.0, 2.0]
