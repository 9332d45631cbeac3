"""Loader for JSON dumps of a host reflection universe"""

import json
from pathlib import Path
from typing import Any, Optional

from .errors import UniverseError
from .reflection import (
    FieldKind, ReflectedFieldDescriptor, ReflectedPackage, ReflectedType, TypeCategory,
)

DEFAULT_KEY = 'FlatBufferDefault'
DEPRECATED_KEY = 'Deprecated'
PRIORITY_KEY = 'Priority'


class UniverseLoader:
    """Parses a reflected universe from JSON text

    Layout: {"packages": [{"name": ..., "types": [<type>, ...]}]} where a
    type carries name, category, metadata, fields, underlying_type,
    enumerators and children.
    """

    def __init__(self, content: str):
        self.content = content

    def load(self) -> list[ReflectedPackage]:
        try:
            data = json.loads(self.content)
        except json.JSONDecodeError as e:
            raise UniverseError(f"Invalid universe JSON: {e}") from e

        if not isinstance(data, dict) or not isinstance(data.get('packages'), list):
            raise UniverseError("Universe JSON must be an object with a 'packages' list")

        return [self._parse_package(p) for p in data['packages']]

    def _parse_package(self, data: Any) -> ReflectedPackage:
        self._expect_object(data, 'package')
        name = str(data.get('name', ''))
        return ReflectedPackage(
            name=name,
            types=[self._parse_type(t) for t in self._list(data, 'types', name or 'package')],
        )

    def _parse_type(self, data: Any) -> ReflectedType:
        self._expect_object(data, 'type')
        name = self._require(data, 'name', 'type')
        return ReflectedType(
            name=name,
            category=TypeCategory.parse(str(data.get('category', 'other'))),
            metadata=self._parse_metadata(data.get('metadata'), name),
            fields=[self._parse_field(f) for f in self._list(data, 'fields', name)],
            underlying_type=self._optional_str(data, 'underlying_type', name),
            enumerators=[self._parse_enumerator(e, name) for e in self._list(data, 'enumerators', name)],
            children=[self._parse_type(c) for c in self._list(data, 'children', name)],
        )

    def _parse_field(self, data: Any, element: bool = False) -> ReflectedFieldDescriptor:
        self._expect_object(data, 'field')
        # Container elements are anonymous
        name = str(data.get('name', '')) if element else self._require(data, 'name', 'field')
        metadata = self._parse_metadata(data.get('metadata'), name)

        element_data = data.get('element')
        return ReflectedFieldDescriptor(
            name=name,
            kind=FieldKind.parse(str(data.get('kind', 'unsupported'))),
            type_name=self._optional_str(data, 'type_name', name),
            element=self._parse_field(element_data, element=True) if element_data else None,
            default_override=_meta(metadata, DEFAULT_KEY),
            deprecated=_meta(metadata, DEPRECATED_KEY) is not None,
            priority=self._parse_priority(_meta(metadata, PRIORITY_KEY), name),
        )

    def _parse_enumerator(self, data: Any, enum_name: str) -> tuple[str, int]:
        if isinstance(data, dict):
            raw_name, value = data.get('name'), data.get('value')
        elif isinstance(data, (list, tuple)) and len(data) == 2:
            raw_name, value = data
        else:
            raise UniverseError(f"Malformed enumerator in {enum_name}: {data!r}")
        try:
            return str(raw_name), int(value)
        except (TypeError, ValueError) as e:
            raise UniverseError(f"Enumerator {raw_name!r} in {enum_name} needs an integer value") from e

    def _parse_metadata(self, data: Any, owner: str) -> dict[str, str]:
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise UniverseError(f"Metadata of {owner} must be an object")
        return {str(k): '' if v is None else str(v) for k, v in data.items()}

    def _parse_priority(self, value: Optional[str], owner: str) -> Optional[int]:
        if value is None:
            return None
        try:
            return int(value)
        except ValueError as e:
            raise UniverseError(f"Priority of {owner} must be an integer, got {value!r}") from e

    @staticmethod
    def _expect_object(data: Any, what: str):
        if not isinstance(data, dict):
            raise UniverseError(f"Expected a {what} object, got {type(data).__name__}")

    @staticmethod
    def _expect_list(data: Any, what: str):
        if not isinstance(data, list):
            raise UniverseError(f"Expected a list for {what}, got {type(data).__name__}")

    def _list(self, data: dict, key: str, owner: str) -> list:
        """Optional list-valued key; missing means empty"""
        value = data.get(key, [])
        self._expect_list(value, f"'{key}' of {owner}")
        return value

    @staticmethod
    def _optional_str(data: dict, key: str, owner: str) -> Optional[str]:
        value = data.get(key)
        if value is not None and not isinstance(value, str):
            raise UniverseError(f"'{key}' of {owner} must be a string, got {type(value).__name__}")
        return value

    @staticmethod
    def _require(data: dict, key: str, what: str) -> str:
        if key not in data:
            raise UniverseError(f"{what} is missing required key '{key}'")
        return str(data[key])


def _meta(metadata: dict[str, str], key: str) -> Optional[str]:
    """Metadata lookup with a case-insensitive key"""
    wanted = key.lower()
    for k, v in metadata.items():
        if k.lower() == wanted:
            return v
    return None

def load_universe(path: Path) -> list[ReflectedPackage]:
    """Load a universe dump from a file"""
    return UniverseLoader(Path(path).read_text()).load()
