"""Schema Assembler - builds one self-contained schema document per record"""

import logging
from typing import Optional

from .fbs_generator import render
from .reflection import ReflectedRecordDescriptor
from .type_mapper import VEC3, TypeMapper
from .types import IdlDocument, IdlEnum, IdlEnumValue, IdlField, IdlRecord

logger = logging.getLogger(__name__)

# Declares the field attribute vocabulary every document uses
FILE_ATTRIBUTES = ('priority',)


def vec3_struct() -> IdlRecord:
    """Built-in struct Vec3 { x: float; y: float; z: float; }"""
    return IdlRecord(VEC3, is_table=False, fields=[
        IdlField('x', 'float'),
        IdlField('y', 'float'),
        IdlField('z', 'float'),
    ])


class SchemaAssembler:
    """Assembles schema documents against a fixed enum universe

    Each record gets its own namespace, <hint>.<RecordName>, since every
    record is compiled as an independent schema file.
    """

    def __init__(self, known_enums: list[IdlEnum]):
        self.known_enums = known_enums

    def find_enum(self, name: str) -> Optional[IdlEnum]:
        """First known enum matching name, case-insensitively"""
        wanted = name.lower()
        for enum in self.known_enums:
            if enum.name.lower() == wanted:
                return enum
        return None

    def assemble(self, record: ReflectedRecordDescriptor) -> IdlDocument:
        doc = IdlDocument(namespace=f"{record.namespace_hint}.{record.record_name}")
        doc.file_attributes.extend(FILE_ATTRIBUTES)

        table = IdlRecord(record.record_name, is_table=True)
        # lowercased name -> name as first referenced
        enum_refs: dict[str, str] = {}
        needs_vec3 = False

        for descriptor in record.fields:
            fld, mapped = TypeMapper.to_field(descriptor)
            table.fields.append(fld)
            if mapped.referenced_enum:
                enum_refs.setdefault(mapped.referenced_enum.lower(), mapped.referenced_enum)
            if mapped.needs_vec3:
                needs_vec3 = True

        for name in enum_refs.values():
            match = self.find_enum(name)
            if match is None:
                logger.debug("%s: enum '%s' is not known, skipping", record.record_name, name)
                continue
            doc.enums.append(_copy_enum(match))

        if needs_vec3:
            doc.records.append(vec3_struct())
        doc.records.append(table)
        doc.root_type = record.record_name

        doc.validate()
        return doc


def _copy_enum(enum: IdlEnum) -> IdlEnum:
    return IdlEnum(enum.name, enum.underlying_type,
                   [IdlEnumValue(v.name, v.explicit_value) for v in enum.values])


def assemble(record: ReflectedRecordDescriptor, known_enums: list[IdlEnum]) -> IdlDocument:
    return SchemaAssembler(known_enums).assemble(record)


def build_schema(record: ReflectedRecordDescriptor, known_enums: list[IdlEnum]) -> str:
    """Assemble and render the schema text for a single record"""
    return render(assemble(record, known_enums))
