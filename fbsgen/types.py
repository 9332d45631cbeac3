"""Data types for the FlatBuffers schema document model"""

from dataclasses import dataclass, field
from typing import Optional

from .errors import SchemaError


@dataclass
class IdlEnumValue:
    """Single enumerator, optionally with an explicit value"""
    name: str
    explicit_value: Optional[int] = None


@dataclass
class IdlEnum:
    """Enum declaration with an integral underlying type"""
    name: str
    underlying_type: str
    values: list[IdlEnumValue] = field(default_factory=list)


@dataclass
class IdlField:
    """Field of a struct or table"""
    name: str
    type_expr: str
    default_value: Optional[str] = None
    # Pre-formatted, e.g. "(deprecated, priority: 1)"
    attributes: Optional[str] = None


@dataclass
class IdlRecord:
    """Struct (fixed inline layout) or table (optional fields) declaration"""
    name: str
    is_table: bool = True
    fields: list[IdlField] = field(default_factory=list)

    @property
    def keyword(self) -> str:
        return 'table' if self.is_table else 'struct'


@dataclass
class IdlUnion:
    """Union over a set of record types"""
    name: str
    member_type_names: list[str] = field(default_factory=list)


@dataclass
class IdlDocument:
    """Complete schema file"""
    namespace: str = ""
    file_attributes: list[str] = field(default_factory=list)
    enums: list[IdlEnum] = field(default_factory=list)
    records: list[IdlRecord] = field(default_factory=list)
    unions: list[IdlUnion] = field(default_factory=list)
    root_type: Optional[str] = None

    def find_record(self, name: str) -> Optional[IdlRecord]:
        for record in self.records:
            if record.name == name:
                return record
        return None

    def validate(self):
        """Raise SchemaError if the document breaks its invariants.

        Checked: the root type names an existing record, and enum and
        record names are each unique within the document.
        """
        if self.root_type and self.find_record(self.root_type) is None:
            raise SchemaError(
                f"root_type '{self.root_type}' does not name a record in "
                f"namespace '{self.namespace}'"
            )
        _check_unique('enum', [e.name for e in self.enums])
        _check_unique('record', [r.name for r in self.records])
        for enum in self.enums:
            _check_unique(f'enumerator of {enum.name}', [v.name for v in enum.values])


def _check_unique(what: str, names: list[str]):
    seen = set()
    for name in names:
        if name in seen:
            raise SchemaError(f"Duplicate {what} name '{name}'")
        seen.add(name)
