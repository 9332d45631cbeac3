import pytest

from fbsgen import (
    FieldKind, ReflectedFieldDescriptor, ReflectedPackage, ReflectedRecordDescriptor,
    ReflectedType, TypeCategory,
)
from fbsgen.enum_collector import collect_enums


@pytest.fixture
def character_type_node():
    return ReflectedType(
        name='ECharacterType',
        category=TypeCategory.ENUM,
        underlying_type='uint8',
        enumerators=[
            ('ECharacterType::UseDefault', 0),
            ('ECharacterType::Player', 1),
            ('ECharacterType::AI', 2),
        ],
    )


@pytest.fixture
def health_record():
    return ReflectedRecordDescriptor(
        record_name='FHealth',
        namespace_hint='Game',
        fields=[
            ReflectedFieldDescriptor('Current', FieldKind.INT32),
            ReflectedFieldDescriptor('Max', FieldKind.INT32, priority=1),
            ReflectedFieldDescriptor('Status', FieldKind.ENUM, type_name='ECharacterType'),
        ],
    )


@pytest.fixture
def universe(character_type_node):
    health = ReflectedType(
        name='FHealth',
        category=TypeCategory.STRUCT,
        metadata={'Category': 'FlatBuffer'},
        fields=[
            ReflectedFieldDescriptor('Current', FieldKind.INT32),
            ReflectedFieldDescriptor('Max', FieldKind.INT32, priority=1),
            ReflectedFieldDescriptor('Status', FieldKind.ENUM, type_name='ECharacterType'),
        ],
    )
    transform = ReflectedType(
        name='FTransformData',
        category=TypeCategory.STRUCT,
        metadata={'category': 'flatbuffer'},
        fields=[ReflectedFieldDescriptor('Pos', FieldKind.STRUCT, type_name='FVector')],
    )
    actor = ReflectedType(
        name='AFlatbufferTestActor',
        category=TypeCategory.CLASS,
        children=[transform],
    )
    plain = ReflectedType(name='FNotExported', category=TypeCategory.STRUCT)
    return [ReflectedPackage('Game/Module', [character_type_node, health, actor, plain])]


@pytest.fixture
def known_enums(universe):
    return collect_enums(universe)
