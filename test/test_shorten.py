from pathlabels.config import PathStyle
from pathlabels.shorten import shorten

import itertools
import pytest


WIN = PathStyle.windows()
POSIX = PathStyle.posix()


@pytest.mark.parametrize('paths, expected', [
    # nothing to shorten
    (['a'], ['a']),
    (['a', 'b'], ['a', 'b']),
    (['a', 'b', 'c'], ['a', 'b', 'c']),
    # completely different paths
    (['a\\b', 'c\\d', 'e\\f'], ['…\\b', '…\\d', '…\\f']),
    # same beginning
    (['a', 'a\\b'], ['a', '…\\b']),
    (['a\\b', 'a\\b\\c'], ['…\\b', '…\\c']),
    (['a', 'a\\b', 'a\\b\\c'], ['a', '…\\b', '…\\c']),
    (['x:\\a\\b', 'x:\\a\\c'], ['x:\\…\\b', 'x:\\…\\c']),
    (['\\\\a\\b', '\\\\a\\c'], ['\\\\a\\b', '\\\\a\\c']),
    # same ending
    (['a', 'b\\a'], ['a', 'b\\…']),
    (['a\\b\\c', 'd\\b\\c'], ['a\\…', 'd\\…']),
    (['a\\b\\c\\d', 'f\\b\\c\\d'], ['a\\…', 'f\\…']),
    (['d\\e\\a\\b\\c', 'd\\b\\c'], ['…\\a\\…', 'd\\b\\…']),
    (['a\\b\\c', 'x:\\0\\a\\b\\c'], ['a\\b\\c', 'x:\\0\\…']),
    (['x:\\a\\b', 'y:\\a\\b'], ['x:\\…', 'y:\\…']),
    (['x:\\a', 'x:\\c'], ['x:\\a', 'x:\\c']),
    (['\\\\x\\b', '\\\\y\\b'], ['\\\\x\\…', '\\\\y\\…']),
    # same name ending
    (['a\\b', 'a\\c', 'a\\e-b'], ['a\\b', '…\\c', '…\\e-b']),
    # same in the middle
    (['a\\b\\c', 'd\\b\\e'], ['…\\c', '…\\e']),
    # case-sensitive
    (['a\\b\\c', 'd\\b\\C'], ['…\\c', '…\\C']),
    # mixed
    (['a', 'a\\b', 'b'], ['a', 'a\\b', 'b']),
    (['', 'a', 'b', 'b\\c', 'a\\c'], ['.', 'a', 'b', 'b\\c', 'a\\c']),
])
def test_shorten_windows(paths, expected):
    assert shorten(paths, WIN) == expected


@pytest.mark.parametrize('paths, expected', [
    (['a'], ['a']),
    (['a/b', 'c/d', 'e/f'], ['…/b', '…/d', '…/f']),
    (['a/b/c', 'd/b/c'], ['a/…', 'd/…']),
    (['/a/b', '/a/c'], ['/a/b', '/a/c']),
    (['/x/a/b', '/x/a/c'], ['/x/…/b', '/x/…/c']),
    (['/x/b', '/y/b'], ['/x/…', '/y/…']),
    (['//x/b', '//y/b'], ['//x/…', '//y/…']),
    (
        ['/usr/local/bin/node', '/usr/local/bin/nodejs', '/usr/bin/node'],
        ['/usr/local/bin/node', '/usr/…/nodejs', '/usr/bin/…'],
    ),
])
def test_shorten_posix(paths, expected):
    assert shorten(paths, POSIX) == expected


def test_empty_and_none():
    assert shorten(['', None], WIN) == ['.', None]
    assert shorten([], WIN) == []


def test_root_is_kept_for_single_path():
    assert shorten(['', None, '/a/b'], POSIX) == ['.', None, '/a/b']
    assert shorten(['/a/b/c'], POSIX) == ['/a/…/c']


def test_single_path():
    assert shorten(['file.txt'], POSIX) == ['file.txt']
    assert shorten(['a/b/c'], POSIX) == ['…/c']


def test_duplicates_use_full_path():
    assert shorten(['/a/b/c', '/a/b/c'], POSIX) == ['/a/b/c', '/a/b/c']
    assert shorten(['x:\\a', 'x:\\a', 'x:\\b'], WIN) == ['x:\\a', 'x:\\a', 'x:\\b']


def test_empty_and_none_are_not_compared():
    assert shorten(['a/b', '', None, 'c/b'], POSIX) == ['a/…', '.', None, 'c/…']


def test_separator_is_injected():
    # with '/' as separator, backslashes are ordinary characters
    assert shorten(['a\\b', 'c\\b'], POSIX) == ['a\\b', 'c\\b']
    assert shorten(['a/b', 'c/b'], POSIX) == ['a/…', 'c/…']


def test_custom_ellipsis():
    style = PathStyle(separator='/', drive_letters=False, ellipsis='...')
    assert shorten(['a/b', 'c/d'], style) == ['.../b', '.../d']


@pytest.mark.parametrize('paths, expected', [
    # absolute and relative forms of the same path
    (['/a/b', 'a/b'], ['/a/b', 'a/b']),
    (['a/b', '/a/b'], ['a/b', '/a/b']),
    # suffix of one path is a complete other path
    (['a/b', 'c/a/b'], ['a/b', 'c/…']),
    # trailing segment is also a prefix of another segment
    (['x/a', 'y/ab'], ['…/a', '…/ab']),
    # end-anchored candidate inside a longer remainder
    (['/x/a', 'x/a/b'], ['/x/a', '…/b']),
])
def test_shorten_adversarial(paths, expected):
    assert shorten(paths, POSIX) == expected


SAMPLE_PATHS = [
    '/usr/local/bin/node',
    '/usr/local/bin/nodejs',
    '/usr/bin/node',
    '/home/user/project/src/main.py',
    '/home/user/project/test/main.py',
    '/home/user/other/src/main.py',
    'src/main.py',
    'lib/util.py',
    '/etc/hosts',
    '//server/share/docs/readme.md',
    '//server/share/readme.md',
]


def test_distinct_inputs_give_distinct_outputs():
    for count in range(2, 5):
        for paths in itertools.combinations(SAMPLE_PATHS, count):
            result = shorten(list(paths), POSIX)
            assert len(set(result)) == len(result), f'{paths} -> {result}'


def test_index_alignment():
    paths = [None, '/a/b', '', '/a/c', None]
    result = shorten(paths, POSIX)
    assert len(result) == len(paths)
    assert result[0] is None and result[4] is None
    assert result[2] == '.'
