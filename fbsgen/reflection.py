"""Reflected type descriptors handed over by a host reflection system

A host adapter translates its native reflection nodes into these types
before the generator sees them. Nothing here depends on a particular
reflection API.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class FieldKind(Enum):
    """Closed set of field kinds the type mapper understands"""

    BOOL = 'bool'
    UINT8 = 'uint8'
    INT8 = 'int8'
    INT16 = 'int16'
    UINT16 = 'uint16'
    INT32 = 'int32'
    UINT32 = 'uint32'
    INT64 = 'int64'
    UINT64 = 'uint64'
    FLOAT = 'float'
    DOUBLE = 'double'
    STRING = 'string'
    NAME = 'name'
    TEXT = 'text'
    NUMERIC = 'numeric'
    OBJECT = 'object'
    CLASS = 'class'
    INTERFACE = 'interface'
    FIELD_PATH = 'field_path'
    DELEGATE = 'delegate'
    MULTICAST_DELEGATE = 'multicast_delegate'
    VERSE_VALUE = 'verse_value'
    VOID = 'void'
    MAP = 'map'
    OPTIONAL = 'optional'
    STRUCT = 'struct'
    ENUM = 'enum'
    ARRAY = 'array'
    SET = 'set'
    UNSUPPORTED = 'unsupported'

    @classmethod
    def parse(cls, text: str) -> 'FieldKind':
        """Look up a kind by name; unknown names become UNSUPPORTED"""
        try:
            return cls(text.strip().lower())
        except ValueError:
            return cls.UNSUPPORTED

    @property
    def is_container(self) -> bool:
        return self in (FieldKind.ARRAY, FieldKind.SET)


class TypeCategory(Enum):
    """What a node in the reflected universe declares"""

    STRUCT = 'struct'
    ENUM = 'enum'
    CLASS = 'class'
    OTHER = 'other'

    @classmethod
    def parse(cls, text: str) -> 'TypeCategory':
        try:
            return cls(text.strip().lower())
        except ValueError:
            return cls.OTHER


@dataclass
class ReflectedFieldDescriptor:
    """One reflected field (or container element when used as `element`)"""
    name: str
    kind: FieldKind
    # Nested struct or enum name, when the kind refers to one
    type_name: Optional[str] = None
    element: Optional['ReflectedFieldDescriptor'] = None
    default_override: Optional[str] = None
    deprecated: bool = False
    priority: Optional[int] = None


@dataclass
class ReflectedRecordDescriptor:
    """Annotated record to emit as its own schema file"""
    record_name: str
    namespace_hint: str
    fields: list[ReflectedFieldDescriptor] = field(default_factory=list)


@dataclass
class ReflectedEnumDescriptor:
    """Reflected enum with raw (possibly scope-qualified) enumerator names"""
    name: str
    underlying_width_hint: str
    enumerators: list[tuple[str, int]] = field(default_factory=list)


@dataclass
class ReflectedType:
    """Node of the reflected type tree"""
    name: str
    category: TypeCategory = TypeCategory.OTHER
    metadata: dict[str, str] = field(default_factory=dict)
    fields: list[ReflectedFieldDescriptor] = field(default_factory=list)
    underlying_type: Optional[str] = None
    enumerators: list[tuple[str, int]] = field(default_factory=list)
    children: list['ReflectedType'] = field(default_factory=list)

    def meta(self, key: str) -> Optional[str]:
        """Metadata lookup with a case-insensitive key"""
        wanted = key.lower()
        for k, v in self.metadata.items():
            if k.lower() == wanted:
                return v
        return None

    def walk(self):
        """Yield this node and all descendants, pre-order"""
        yield self
        for child in self.children:
            yield from child.walk()


@dataclass
class ReflectedPackage:
    """Top-level container of reflected types, e.g. one module"""
    name: str
    types: list[ReflectedType] = field(default_factory=list)

    def walk(self):
        for t in self.types:
            yield from t.walk()
