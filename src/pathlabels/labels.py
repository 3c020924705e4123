from __future__ import annotations

from .config import PathStyle
from .paths import normalize, is_equal_or_parent
from .resolve import PathLike, get_path

import logging



def get_path_label(resource: PathLike|None, base: PathLike|None = None, style: PathStyle|None = None) -> str|None:
    """
    Returns the label to display for a path: relative to `base` if the path lies below it,
    otherwise the full path (with an upper-case drive letter on drive-letter platforms).
    """
    style = style or PathStyle.native()

    absolute_path = get_path(resource)
    if not absolute_path:
        logging.debug(f'No path for <{resource!r}>; no label')
        return None

    base_path = get_path(base) if base else None

    if base_path and is_equal_or_parent(absolute_path, base_path, style):
        if base_path == absolute_path:
            return ''  # no label if paths are identical
        # slice the normalized forms; is_equal_or_parent compared those
        normalized_path, normalized_base = normalize(absolute_path, style), normalize(base_path, style)
        relative_path = normalized_path[len(normalized_base):].lstrip('/')
        return normalize(relative_path, style, to_os_path=True) if relative_path else ''

    if style.drive_letters and absolute_path[1:2] == ':':
        # c:\something => C:\something
        return normalize(absolute_path[0].upper() + absolute_path[1:], style, to_os_path=True)

    return normalize(absolute_path, style, to_os_path=True)



class PathLabelProvider:
    """ Labels paths relative to a fixed root """

    def __init__(self, root: PathLike|None = None, style: PathStyle|None = None):
        self.root = get_path(root) if root else None
        self.style = style or PathStyle.native()

    def get_label(self, resource: PathLike|None) -> str|None:
        return get_path_label(resource, self.root, self.style)
