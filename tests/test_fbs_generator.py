from fbsgen import (
    FbsGenerator, IdlDocument, IdlEnum, IdlEnumValue, IdlField, IdlRecord, IdlUnion, render,
)


def _document():
    return IdlDocument(
        namespace='Game.FWeapon',
        file_attributes=['priority'],
        enums=[IdlEnum('EColor', 'byte', [
            IdlEnumValue('Red', 0), IdlEnumValue('Green'), IdlEnumValue('Blue', 5),
        ])],
        records=[
            IdlRecord('Vec3', is_table=False, fields=[
                IdlField('x', 'float'), IdlField('y', 'float'), IdlField('z', 'float'),
            ]),
            IdlRecord('FWeapon', fields=[
                IdlField('damage', 'int', '100', '(priority: 2)'),
                IdlField('color', 'EColor'),
                IdlField('tags', '[string]', attributes='(deprecated)'),
            ]),
        ],
        unions=[IdlUnion('Any', ['FWeapon', 'Vec3'])],
        root_type='FWeapon',
    )


def test_full_document():
    assert render(_document()) == "\n".join([
        "namespace Game.FWeapon;",
        "",
        'attribute "priority";',
        "",
        "enum EColor : byte { Red = 0, Green, Blue = 5 }",
        "struct Vec3 {",
        "  x: float;",
        "  y: float;",
        "  z: float;",
        "}",
        "table FWeapon {",
        "  damage: int = 100 (priority: 2);",
        "  color: EColor;",
        "  tags: [string] (deprecated);",
        "}",
        "union Any { FWeapon, Vec3 }",
        "root_type FWeapon;",
    ])


def test_render_is_deterministic():
    doc = _document()
    assert render(doc) == render(doc) == FbsGenerator(doc).generate()


def test_empty_namespace_and_attributes_are_omitted():
    doc = IdlDocument(records=[IdlRecord('T', fields=[IdlField('a', 'int')])])
    assert render(doc) == "table T {\n  a: int;\n}"


def test_empty_document_renders_empty():
    assert render(IdlDocument()) == ""


def test_field_without_default_or_attributes():
    assert FbsGenerator.generate_field(IdlField('hp', 'int')) == "hp: int;"
    assert FbsGenerator.generate_field(IdlField('hp', 'int', '', '')) == "hp: int;"


def test_output_has_no_trailing_whitespace():
    text = render(_document())
    assert text == text.rstrip()
    assert not text.endswith("\n")
