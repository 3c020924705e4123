from __future__ import annotations

from .config import PathStyle

import logging
from typing import Sequence



def shorten(paths: Sequence[str|None], style: PathStyle|None = None) -> list[str|None]:
    """
    Shortens the paths but keeps them easy to distinguish.

    Every path is reduced to the shortest run of segments that no other path contains,
    and elided segments are replaced by an ellipsis. Every shortened path matches only
    one original path and vice versa; only exact duplicates end up with the same label.

    Empty strings become '.', None stays None.
    """
    style = style or PathStyle.native()
    shortened: list[str|None] = []

    for path_index, path in enumerate(paths):

        if path is None:
            shortened.append(None)
            continue
        if path == '':
            shortened.append('.')
            continue

        prefix, segments = _split_prefix(path, style.separator)
        anchor = _find_unique_subpath(path_index, segments, paths, style.separator)
        if anchor is None:
            logging.debug(f'No unique subpath for <{path}>; using full path')
            shortened.append(path)
            continue

        start, length = anchor
        shortened.append(_format_label(prefix, segments, start, length, style))

    return shortened



def _split_prefix(path: str, sep: str) -> tuple[str,list[str]]:
    """ Splits off a network share ('//') or root ('/') prefix, and returns (prefix, segments) """
    if path.startswith(sep + sep):
        prefix = sep + sep
    elif path.startswith(sep):
        prefix = sep
    else:
        prefix = ''
    return prefix, path[len(prefix):].split(sep)


def _collides(subpath: str, is_subpath_ending: bool, other_path: str) -> bool:
    if subpath not in other_path:
        return False
    # a trailing 'x' does not match the 'x' in 'x/y'
    return not is_subpath_ending or other_path.endswith(subpath)


def _find_unique_subpath(path_index: int, segments: list[str], paths: Sequence[str|None], sep: str) -> tuple[int,int]|None:
    """
    Finds the shortest run of segments that no other path contains, preferring runs
    closer to the end. Returns (start, length), or None if every run collides.
    """
    segment_count = len(segments)
    other_paths = [p for i,p in enumerate(paths) if i != path_index and p]

    for length in range(1, segment_count + 1):
        for start in range(segment_count - length, -1, -1):
            subpath = sep.join(segments[start:start+length])
            is_ending = start + length == segment_count
            if not any(_collides(subpath, is_ending, other) for other in other_paths):
                return start, length

    return None


def _format_label(prefix: str, segments: list[str], start: int, length: int, style: PathStyle) -> str:
    sep, ellipsis = style.separator, style.ellipsis
    result = ''

    # keep the drive or root in front
    if segments[0].endswith(':') or prefix != '':
        if start == 1:
            start, length = 0, length + 1
        if start > 0:
            result = segments[0] + sep
        result = prefix + result

    if start > 0:
        result += ellipsis + sep

    result += sep.join(segments[start:start+length])

    if start + length < len(segments):
        result += sep + ellipsis

    return result
