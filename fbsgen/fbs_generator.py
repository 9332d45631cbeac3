"""FBS Generator - renders a schema document as FlatBuffers IDL text"""

from .types import IdlDocument, IdlEnum, IdlField, IdlRecord, IdlUnion


class FbsGenerator:
    """Generates .fbs text from an IdlDocument

    Output is a pure function of the document: every collection is an
    ordered list, so repeated calls produce identical text.
    """

    INDENT = '  '

    def __init__(self, doc: IdlDocument):
        self.doc = doc

    def generate(self) -> str:
        """Generate the complete schema file"""
        lines = []

        if self.doc.namespace.strip():
            lines.append(f"namespace {self.doc.namespace};")
            lines.append("")

        for attr in self.doc.file_attributes:
            lines.append(f'attribute "{attr}";')
        if self.doc.file_attributes:
            lines.append("")

        for enum in self.doc.enums:
            lines.append(self.generate_enum(enum))

        for record in self.doc.records:
            lines.extend(self.generate_record(record))

        for union in self.doc.unions:
            lines.append(self.generate_union(union))

        if self.doc.root_type:
            lines.append(f"root_type {self.doc.root_type};")

        return "\n".join(lines).rstrip()

    @staticmethod
    def generate_enum(enum: IdlEnum) -> str:
        """Single-line enum: enum Name : byte { A = 0, B, C = 5 }"""
        items = []
        for value in enum.values:
            if value.explicit_value is not None:
                items.append(f"{value.name} = {value.explicit_value}")
            else:
                items.append(value.name)
        return f"enum {enum.name} : {enum.underlying_type} {{ {', '.join(items)} }}"

    @classmethod
    def generate_record(cls, record: IdlRecord) -> list[str]:
        lines = [f"{record.keyword} {record.name} {{"]
        for fld in record.fields:
            lines.append(cls.INDENT + cls.generate_field(fld))
        lines.append("}")
        return lines

    @staticmethod
    def generate_field(fld: IdlField) -> str:
        text = f"{fld.name}: {fld.type_expr}"
        if fld.default_value:
            text += f" = {fld.default_value}"
        if fld.attributes:
            text += f" {fld.attributes}"
        return text + ";"

    @staticmethod
    def generate_union(union: IdlUnion) -> str:
        return f"union {union.name} {{ {', '.join(union.member_type_names)} }}"


def render(doc: IdlDocument) -> str:
    """Render a document to .fbs text"""
    return FbsGenerator(doc).generate()
