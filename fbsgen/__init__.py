"""
FlatBuffers Schema Generator Package

Turns reflected type metadata into FlatBuffers schemas:
  1. Collects enums and annotated structs from a reflected universe
  2. Maps each field onto a schema type
  3. Assembles and renders one self-contained .fbs per struct
  4. Compiles each schema with flatc and aggregates the generated headers
"""

from .types import IdlDocument, IdlEnum, IdlEnumValue, IdlField, IdlRecord, IdlUnion
from .reflection import (
    FieldKind, TypeCategory,
    ReflectedFieldDescriptor, ReflectedRecordDescriptor, ReflectedEnumDescriptor,
    ReflectedType, ReflectedPackage,
)
from .errors import (
    FbsGenError, SchemaError, UniverseError,
    CompilerError, CompilerInvocationError, CompilerNotFoundError,
)
from .fbs_generator import FbsGenerator, render
from .type_mapper import TypeMapper, MappedType
from .enum_collector import collect_enums
from .discovery import find_records
from .assembler import SchemaAssembler, assemble, build_schema
from .loader import UniverseLoader, load_universe
from .compiler import FlatcCompiler
from .aggregator_generator import AggregatorGenerator
from .exporter import SchemaExporter, ExportConfig, ExportResult

__all__ = [
    'IdlDocument', 'IdlEnum', 'IdlEnumValue', 'IdlField', 'IdlRecord', 'IdlUnion',
    'FieldKind', 'TypeCategory',
    'ReflectedFieldDescriptor', 'ReflectedRecordDescriptor', 'ReflectedEnumDescriptor',
    'ReflectedType', 'ReflectedPackage',
    'FbsGenError', 'SchemaError', 'UniverseError',
    'CompilerError', 'CompilerInvocationError', 'CompilerNotFoundError',
    'FbsGenerator', 'render', 'TypeMapper', 'MappedType',
    'collect_enums', 'find_records',
    'SchemaAssembler', 'assemble', 'build_schema',
    'UniverseLoader', 'load_universe',
    'FlatcCompiler', 'AggregatorGenerator',
    'SchemaExporter', 'ExportConfig', 'ExportResult',
]
