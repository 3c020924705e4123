from __future__ import annotations

from .base_config import BaseConfig

import enum
import os
import sys
from typing import Self



ELLIPSIS = '…'



class Platform(enum.StrEnum):
    Native = 'native'
    Posix = 'posix'
    Windows = 'windows'



class PathStyle(BaseConfig):
    """ How paths are split and compared; injected so results do not depend on the host """

    separator: str = os.sep
    drive_letters: bool = sys.platform == 'win32'
    case_sensitive: bool = sys.platform.startswith('linux')
    ellipsis: str = ELLIPSIS


    def __init__(self, separator: str = None, drive_letters: bool = None, case_sensitive: bool = None, ellipsis: str = None):
        super().__init__()
        if separator is not None:
            self.separator = separator
        if drive_letters is not None:
            self.drive_letters = drive_letters
        if case_sensitive is not None:
            self.case_sensitive = case_sensitive
        if ellipsis is not None:
            self.ellipsis = ellipsis
        for name in ('separator', 'ellipsis'):
            if error := self.check_setting(name, self.__dict__[name]):
                raise ValueError(error)


    def check_setting(self, name: str, value) -> str|None:
        if name == 'separator' and len(value) != 1:
            return f'Separator must be a single character, got <{value}>'
        if name == 'ellipsis' and value == '':
            return 'Ellipsis must not be empty'
        return None


    @classmethod
    def posix(cls) -> Self:
        return cls(separator='/', drive_letters=False, case_sensitive=True)

    @classmethod
    def windows(cls) -> Self:
        return cls(separator='\\', drive_letters=True, case_sensitive=False)

    @classmethod
    def native(cls) -> Self:
        return cls()

    @classmethod
    def for_platform(cls, platform: Platform|str) -> Self:
        match Platform(platform):
            case Platform.Native: return cls.native()
            case Platform.Posix: return cls.posix()
            case Platform.Windows: return cls.windows()
        raise ValueError(f'Unknown platform <{platform}>')



class LabelConfig(BaseConfig):

    style: PathStyle = PathStyle()
    base_path: str = None
    csv_separator: str = ','


    def __init__(self):
        super().__init__(format_version_str='Path Labels Config v0.1')
