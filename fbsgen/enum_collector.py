"""Enum collection over a reflected universe"""

import logging
from typing import Iterable

from .reflection import ReflectedEnumDescriptor, ReflectedPackage, TypeCategory
from .types import IdlEnum, IdlEnumValue

logger = logging.getLogger(__name__)

SCOPE_SEPARATOR = '::'

UNDERLYING_TYPES = {
    'uint8': 'byte',
    'uint16': 'byte',
    'int8': 'byte',
    'int16': 'short',
    'uint32': 'int',
    'int32': 'int',
    'int64': 'long',
    'uint64': 'long',
}


def normalize_underlying_type(hint: str) -> str:
    """Map a host width hint onto a schema integer type, defaulting to int"""
    return UNDERLYING_TYPES.get(hint.strip().lower(), 'int')


def strip_scope_prefix(name: str) -> str:
    """Keep the last scope segment, e.g. ECharacterType::AI -> AI"""
    return name.split(SCOPE_SEPARATOR)[-1]


def enum_from_descriptor(descriptor: ReflectedEnumDescriptor) -> IdlEnum:
    return IdlEnum(
        name=descriptor.name,
        underlying_type=normalize_underlying_type(descriptor.underlying_width_hint),
        values=[IdlEnumValue(strip_scope_prefix(raw), value)
                for raw, value in descriptor.enumerators],
    )


def find_enum_descriptors(universe: Iterable[ReflectedPackage]) -> list[ReflectedEnumDescriptor]:
    """Pre-order walk collecting every reflected enum"""
    found = []
    for package in universe:
        for node in package.walk():
            if node.category is not TypeCategory.ENUM:
                continue
            found.append(ReflectedEnumDescriptor(
                name=node.name or 'UnknownEnum',
                underlying_width_hint=node.underlying_type or 'byte',
                enumerators=list(node.enumerators),
            ))
    return found


def collect_enums(universe: Iterable[ReflectedPackage]) -> list[IdlEnum]:
    """Collect all enums in discovery order.

    Duplicates are kept: an enum reachable through several paths appears
    once per path. The assembler resolves references to the first match.
    """
    enums = []
    for descriptor in find_enum_descriptors(universe):
        enum = enum_from_descriptor(descriptor)
        logger.info("Found enum: %s with underlying type: %s", enum.name, enum.underlying_type)
        enums.append(enum)
    return enums
