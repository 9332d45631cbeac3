"""Discovery of records annotated for schema generation"""

from typing import Iterable

from .reflection import ReflectedPackage, ReflectedRecordDescriptor, ReflectedType, TypeCategory

CATEGORY_KEY = 'Category'
CATEGORY_VALUE = 'flatbuffer'
NAMESPACE_KEY = 'FlatBufferNamespace'
DEFAULT_NAMESPACE = 'Default.Namespace'


def is_annotated(node: ReflectedType) -> bool:
    category = node.meta(CATEGORY_KEY)
    return category is not None and category.strip().lower() == CATEGORY_VALUE


def resolve_namespace(node: ReflectedType, package: ReflectedPackage) -> str:
    """Explicit metadata wins, then the package path, then a fixed default"""
    explicit = node.meta(NAMESPACE_KEY)
    if explicit:
        return explicit
    if package.name:
        return package.name.replace('/', '.').replace('\\', '.')
    return DEFAULT_NAMESPACE


def find_records(universe: Iterable[ReflectedPackage]) -> list[ReflectedRecordDescriptor]:
    """Find every annotated struct, pre-order, including nested types"""
    records = []
    for package in universe:
        for node in package.walk():
            if node.category is not TypeCategory.STRUCT or not is_annotated(node):
                continue
            records.append(ReflectedRecordDescriptor(
                record_name=node.name or 'UnknownStruct',
                namespace_hint=resolve_namespace(node, package),
                fields=list(node.fields),
            ))
    return records
