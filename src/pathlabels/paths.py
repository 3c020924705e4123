"""
Separator-aware string helpers for paths.

Nothing in here touches the filesystem: paths are plain strings, and both '/' and '\\'
are accepted as separators on input.
"""
from __future__ import annotations

from .config import PathStyle

import re



_REX_ROOT = re.compile(r'^(?:[a-zA-Z]:/?|//|/)')


def _split_root(path: str) -> tuple[str,str]:
    """ Returns (root, remainder) of a path that uses '/' as separator """
    if m := _REX_ROOT.match(path):
        root = m.group(0)
        return root, path[len(root):]
    return '', path


def normalize(path: str, style: PathStyle|None = None, to_os_path: bool = False) -> str:
    """
    Collapses repeated separators, resolves '.' and '..', and drops a trailing separator.

    With `to_os_path` the result uses the separator of `style`, otherwise '/'.
    """
    if not path:
        return path
    style = style or PathStyle.native()

    root, remainder = _split_root(path.replace('\\', '/'))

    parts: list[str] = []
    for part in remainder.split('/'):
        if part in ('', '.'):
            continue
        if part == '..':
            if parts and parts[-1] != '..':
                parts.pop()
                continue
            if root:
                continue  # cannot go above the root
        parts.append(part)

    result = root + '/'.join(parts)
    if not result:
        result = '.'

    if to_os_path:
        result = result.replace('/', style.separator)
    return result


def is_equal_or_parent(path: str, candidate: str, style: PathStyle|None = None) -> bool:
    """ True if `path` is `candidate` itself, or lies somewhere below it """
    if path == candidate:
        return True
    if not path or not candidate:
        return False
    style = style or PathStyle.native()

    path, candidate = normalize(path, style), normalize(candidate, style)
    if not style.case_sensitive:
        path, candidate = path.lower(), candidate.lower()

    if path == candidate:
        return True
    if not path.startswith(candidate):
        return False
    if candidate.endswith('/'):
        return True  # candidate is a root like '/' or 'c:/'
    return path[len(candidate)] == '/'
