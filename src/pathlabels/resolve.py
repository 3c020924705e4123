from __future__ import annotations

import logging
import os
from typing import Protocol, Union, runtime_checkable



@runtime_checkable
class PathResource(Protocol):
    """ Anything that knows its own filesystem path, e.g. a file URI """
    fs_path: str



class Workspace(Protocol):
    resource: PathResource



@runtime_checkable
class WorkspaceProvider(Protocol):
    def get_workspace(self) -> Workspace|None: ...



PathLike = Union[str, os.PathLike, PathResource, WorkspaceProvider]



def get_path(arg: PathLike|None) -> str|None:
    """ Resolves a path-like argument to a plain path string, or None if it cannot be resolved """

    if not arg:
        return None

    if isinstance(arg, str):
        return arg

    if callable(getattr(arg, 'get_workspace', None)):
        workspace = arg.get_workspace()
        return workspace.resource.fs_path if workspace else None

    if isinstance(arg, os.PathLike):
        path = os.fspath(arg)
        return path if isinstance(path, str) else os.fsdecode(path)

    if isinstance(arg, PathResource):
        return arg.fs_path

    logging.warning(f'Cannot resolve <{arg!r}> to a path')
    return None
