import pytest

from crudbuilder.utils import has_text, has_value


@pytest.mark.parametrize(
    'value, expected', [
        ['users', True],
        [' x ', True],
        ['', False],
        [' \t\n', False],
        ['\xa0', True],
        ['\u2007\u202f', True],
        ['\u2003', False],
        [None, False],
        [1, False],
    ]
)
def test_has_text(value, expected):
    assert has_text(value) is expected


@pytest.mark.parametrize(
    'value, expected', [
        ['kim', True],
        [0, True],
        [False, True],
        [0.0, True],
        [[], True],
        ['', False],
        ['   ', False],
        ['\xa0', True],
        [None, False],
    ]
)
def test_has_value(value, expected):
    assert has_value(value) is expected
