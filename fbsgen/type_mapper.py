"""Type mapping from reflected field kinds to FlatBuffers schema types"""

from dataclasses import dataclass
from typing import Optional

from .reflection import FieldKind, ReflectedFieldDescriptor
from .types import IdlField


# Reserved name of the built-in 3-float vector struct
VEC3 = 'Vec3'


@dataclass
class MappedType:
    """Result of mapping one field"""
    type_expr: str
    referenced_enum: Optional[str] = None
    needs_vec3: bool = False


class TypeMapper:
    """Maps reflected field descriptors to FlatBuffers types"""

    # Direct scalar mappings
    FBS_TYPES = {
        FieldKind.BOOL: 'bool',
        FieldKind.UINT8: 'ubyte',
        FieldKind.INT8: 'byte',
        FieldKind.INT16: 'short',
        FieldKind.UINT16: 'ushort',
        FieldKind.INT32: 'int',
        FieldKind.UINT32: 'uint',
        FieldKind.INT64: 'long',
        FieldKind.UINT64: 'ulong',
        FieldKind.FLOAT: 'float',
        FieldKind.DOUBLE: 'double',
        FieldKind.STRING: 'string',
        FieldKind.NAME: 'string',
        FieldKind.TEXT: 'string',
        FieldKind.NUMERIC: 'int',
        # References can't be expressed, degrade to an identifier
        FieldKind.OBJECT: 'string',
        FieldKind.CLASS: 'string',
        FieldKind.INTERFACE: 'string',
        FieldKind.FIELD_PATH: 'string',
        FieldKind.DELEGATE: 'string',
        FieldKind.MULTICAST_DELEGATE: 'string',
        FieldKind.VERSE_VALUE: 'string',
        FieldKind.VOID: 'string',
        # Opaque placeholders, no structural mapping
        FieldKind.MAP: 'table',
        FieldKind.OPTIONAL: 'table',
    }

    FALLBACK = 'string'

    # Host struct names that map onto the built-in Vec3
    VECTOR_STRUCTS = {'fvector'}

    @classmethod
    def map_field_type(cls, descriptor: ReflectedFieldDescriptor) -> MappedType:
        """Map a field descriptor to its schema type"""
        kind = descriptor.kind

        if kind.is_container:
            if descriptor.element is None:
                return MappedType('[]')
            inner = cls.map_field_type(descriptor.element)
            return MappedType(f'[{inner.type_expr}]', inner.referenced_enum, inner.needs_vec3)

        if kind is FieldKind.ENUM:
            if descriptor.type_name:
                return MappedType(descriptor.type_name, referenced_enum=descriptor.type_name)
            return MappedType('int')

        if kind is FieldKind.STRUCT:
            if descriptor.type_name and descriptor.type_name.lower() in cls.VECTOR_STRUCTS:
                return MappedType(VEC3, needs_vec3=True)
            return MappedType('table')

        return MappedType(cls.FBS_TYPES.get(kind, cls.FALLBACK))

    @classmethod
    def default_value(cls, descriptor: ReflectedFieldDescriptor) -> Optional[str]:
        """Default comes only from an explicit override, never from the type"""
        return descriptor.default_override or None

    @classmethod
    def attributes(cls, descriptor: ReflectedFieldDescriptor) -> Optional[str]:
        """Format field attributes as "(a, b)", or None if there are none"""
        attrs = []
        if descriptor.deprecated:
            attrs.append('deprecated')
        if descriptor.priority is not None:
            attrs.append(f'priority: {descriptor.priority}')
        if not attrs:
            return None
        return f"({', '.join(attrs)})"

    @classmethod
    def field_name(cls, descriptor: ReflectedFieldDescriptor) -> str:
        return descriptor.name.lower()

    @classmethod
    def to_field(cls, descriptor: ReflectedFieldDescriptor) -> tuple[IdlField, MappedType]:
        """Build the schema field for a descriptor together with its mapping"""
        mapped = cls.map_field_type(descriptor)
        fld = IdlField(
            name=cls.field_name(descriptor),
            type_expr=mapped.type_expr,
            default_value=cls.default_value(descriptor),
            attributes=cls.attributes(descriptor),
        )
        return fld, mapped

