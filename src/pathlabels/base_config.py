from __future__ import annotations

import copy
import json
import logging
import typing
from typing import Self, Any



class BaseConfig:
    """
    Base class for settings that can be persisted as JSON.

    Subclasses declare their settings as annotated class attributes; the class-level
    value is the default, and every instance gets its own deep copy of it.
    """


    FILE_FORMAT_KEY = 'file_format'


    def __new__(cls, *args, **kwargs):
        obj = object.__new__(cls)
        obj._member_types = {}
        obj._member_defaults = {}
        for name,typ in typing.get_type_hints(cls).items():
            if name.startswith('_') or typing.get_origin(typ) is typing.ClassVar:
                continue
            obj._member_types[name] = typ
            obj._member_defaults[name] = getattr(cls, name)
        return obj


    def __init__(self, format_version_str: str = None):
        for name,value in self._member_defaults.items():
            self.__dict__[name] = copy.deepcopy(value)
        self._format_version_str = format_version_str


    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return all(self.__dict__[name] == other.__dict__[name] for name in self._member_types.keys())


    def __repr__(self):
        members = ', '.join(f'{name}={self.__dict__[name]!r}' for name in self._member_types.keys())
        return f'{type(self).__name__}({members})'


    def check_setting(self, name: str, value: Any) -> str|None:
        """ Returns an error message if `value` is not acceptable for setting `name`; override to restrict values """
        return None


    def save(self, path_or_fp):
        data = self._serialize()
        if hasattr(path_or_fp, 'write') and callable(path_or_fp.write):
            json.dump(data, path_or_fp, indent=4)
        else:
            with open(path_or_fp, 'w', encoding='utf-8') as fp:
                json.dump(data, fp, indent=4)


    @classmethod
    def load(cls, path_or_fp) -> Self:
        if hasattr(path_or_fp, 'read') and callable(path_or_fp.read):
            data = json.load(path_or_fp)
        else:
            with open(path_or_fp, 'r', encoding='utf-8') as fp:
                data = json.load(fp)
        if not isinstance(data, dict):
            raise ValueError(f'Expected a JSON object, got <{type(data).__name__}>')
        return cls._deserialize(data)


    def _serialize(self) -> dict:
        data = dict()

        if self._format_version_str:
            data[BaseConfig.FILE_FORMAT_KEY] = self._format_version_str

        def serialize(obj):
            if isinstance(obj, BaseConfig):
                return obj._serialize()
            return obj

        for name,typ in self._member_types.items():
            value = self.__dict__[name]
            if typing.get_origin(typ) is list:
                data[name] = [serialize(element) for element in value]
            else:
                data[name] = serialize(value)

        return data


    @classmethod
    def _deserialize(cls, data: dict) -> Self:
        obj = cls()

        if obj._format_version_str:
            file_format_version_str = data.get(BaseConfig.FILE_FORMAT_KEY)
            if file_format_version_str is None:
                logging.warning(f'File format not specified in loaded file (expected "{obj._format_version_str}"), ignoring')
            elif file_format_version_str != obj._format_version_str:
                logging.warning(f'Expected file format "{obj._format_version_str}", but loaded file contains "{file_format_version_str}", ignoring')

        expected_keys = set(obj._member_types.keys())
        found_keys = set([k for k in data.keys() if k != BaseConfig.FILE_FORMAT_KEY])

        missing_keys = expected_keys - found_keys
        excess_keys = found_keys - expected_keys
        if len(missing_keys) > 0:
            logging.warning(f'The following settings were not found in the loaded file: {sorted(missing_keys)}; using defaults')
        if len(excess_keys) > 0:
            logging.warning(f'The following settings were found in the loaded file, but are unknown: {sorted(excess_keys)}; ignoring')

        def deserialize(name: str, value: Any, typ: type):
            if value is None:
                return None
            if isinstance(typ, type) and issubclass(typ, BaseConfig):
                if not isinstance(value, dict):
                    logging.warning(f'Expected an object for setting "{name}", got <{value}>; ignoring')
                    return None
                return typ._deserialize(value)
            if typ is typing.Any:
                return value
            try:
                return typ(value)
            except (TypeError, ValueError) as ex:
                logging.warning(f'Cannot cast <{value}> to <{typ}> for setting "{name}" ({ex}); ignoring')
                return None

        for name in expected_keys & found_keys:
            typ = obj._member_types[name]
            if typing.get_origin(typ) is list:
                element_type = typing.get_args(typ)[0]
                elements = [deserialize(name, element, element_type) for element in data[name]]
                deserialized = [element for element in elements if element is not None]
            else:
                deserialized = deserialize(name, data[name], typ)

            if deserialized is None:
                continue
            if error := obj.check_setting(name, deserialized):
                logging.warning(f'Invalid value <{deserialized}> for setting "{name}" ({error}); using default')
                continue
            obj.__dict__[name] = deserialized

        return obj
