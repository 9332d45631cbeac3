import pytest

from fbsgen import (
    FieldKind, IdlEnum, IdlEnumValue, ReflectedFieldDescriptor, ReflectedRecordDescriptor,
    SchemaAssembler, SchemaError, assemble, build_schema, render,
)


def test_health_example(health_record, known_enums):
    assert build_schema(health_record, known_enums) == "\n".join([
        "namespace Game.FHealth;",
        "",
        'attribute "priority";',
        "",
        "enum ECharacterType : byte { UseDefault = 0, Player = 1, AI = 2 }",
        "table FHealth {",
        "  current: int;",
        "  max: int (priority: 1);",
        "  status: ECharacterType;",
        "}",
        "root_type FHealth;",
    ])


def test_document_structure(health_record, known_enums):
    doc = assemble(health_record, known_enums)
    assert doc.namespace == 'Game.FHealth'
    assert doc.file_attributes == ['priority']
    assert [r.name for r in doc.records] == ['FHealth']
    assert doc.records[0].is_table
    assert doc.root_type == 'FHealth'


def test_field_order_matches_discovery_order():
    names = ['Zeta', 'Alpha', 'Mid', 'Beta']
    record = ReflectedRecordDescriptor('FOrder', 'NS', [
        ReflectedFieldDescriptor(n, FieldKind.INT32) for n in names])
    doc = assemble(record, [])
    assert [f.name for f in doc.records[0].fields] == [n.lower() for n in names]


def test_vec3_injected_before_main_record():
    record = ReflectedRecordDescriptor('FTransformData', 'Game', [
        ReflectedFieldDescriptor('Pos', FieldKind.STRUCT, type_name='FVector'),
        ReflectedFieldDescriptor('Velocity', FieldKind.STRUCT, type_name='FVector'),
    ])
    text = build_schema(record, [])
    vec3 = "struct Vec3 {\n  x: float;\n  y: float;\n  z: float;\n}"
    assert text.count(vec3) == 1
    assert text.index(vec3) < text.index("table FTransformData {")
    assert "  pos: Vec3;" in text


def test_no_vec3_without_vector_field(health_record, known_enums):
    assert "Vec3" not in build_schema(health_record, known_enums)


def test_unknown_enum_is_dropped_silently():
    record = ReflectedRecordDescriptor('FItem', 'Game', [
        ReflectedFieldDescriptor('Rarity', FieldKind.ENUM, type_name='ERarity'),
    ])
    doc = assemble(record, [IdlEnum('EOther', 'byte', [IdlEnumValue('A', 0)])])
    assert doc.enums == []
    text = render(doc)
    assert "enum " not in text
    assert "  rarity: ERarity;" in text


def test_enum_references_are_case_insensitive_and_deduplicated():
    known = [
        IdlEnum('EColor', 'byte', [IdlEnumValue('Red', 0)]),
        IdlEnum('EShape', 'int', [IdlEnumValue('Box', 0)]),
    ]
    record = ReflectedRecordDescriptor('FPaint', 'Art', [
        ReflectedFieldDescriptor('Shape', FieldKind.ENUM, type_name='EShape'),
        ReflectedFieldDescriptor('Primary', FieldKind.ENUM, type_name='ecolor'),
        ReflectedFieldDescriptor('Secondary', FieldKind.ENUM, type_name='EColor'),
        ReflectedFieldDescriptor('Palette', FieldKind.ARRAY,
                                 element=ReflectedFieldDescriptor('', FieldKind.ENUM, type_name='EColor')),
    ])
    doc = assemble(record, known)
    assert [e.name for e in doc.enums] == ['EShape', 'EColor']


def test_duplicate_known_enums_resolve_to_first():
    known = [
        IdlEnum('EColor', 'byte', [IdlEnumValue('Red', 0)]),
        IdlEnum('EColor', 'int', [IdlEnumValue('Blue', 0)]),
    ]
    record = ReflectedRecordDescriptor('FPaint', 'Art', [
        ReflectedFieldDescriptor('Color', FieldKind.ENUM, type_name='EColor'),
    ])
    doc = assemble(record, known)
    assert len(doc.enums) == 1
    assert doc.enums[0].underlying_type == 'byte'


def test_known_enums_are_not_mutated(health_record, known_enums):
    before = [(e.name, list(e.values)) for e in known_enums]
    doc = SchemaAssembler(known_enums).assemble(health_record)
    doc.enums[0].values.append(IdlEnumValue('Extra'))
    assert [(e.name, list(e.values)) for e in known_enums] == before


def test_defaults_and_deprecated_attributes():
    record = ReflectedRecordDescriptor('FStats', 'Game', [
        ReflectedFieldDescriptor('Mana', FieldKind.INT32, default_override='150'),
        ReflectedFieldDescriptor('Legacy', FieldKind.STRING, deprecated=True, priority=2),
        ReflectedFieldDescriptor('Plain', FieldKind.BOOL),
    ])
    text = build_schema(record, [])
    assert "  mana: int = 150;" in text
    assert "  legacy: string (deprecated, priority: 2);" in text
    assert "  plain: bool;" in text
    assert "()" not in text


def test_record_named_vec3_with_vector_field_fails_loudly():
    record = ReflectedRecordDescriptor('Vec3', 'Game', [
        ReflectedFieldDescriptor('Pos', FieldKind.STRUCT, type_name='FVector'),
    ])
    with pytest.raises(SchemaError):
        assemble(record, [])
