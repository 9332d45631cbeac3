"""Aggregator Generator - generates a header that includes every generated header"""


class AggregatorGenerator:
    """Generates the aggregate include header for all compiled schemas

    Each include is guarded with __has_include so the header still
    compiles before flatc has produced the files.
    """

    def __init__(self, header_names: list[str]):
        self.header_names = header_names

    def generate(self) -> str:
        lines = [
            "#pragma once",
            "// Auto-generated aggregator of all FlatBuffer code",
            "// DO NOT manually edit this file; it is re-generated each build.",
            "",
        ]
        for header in self.header_names:
            lines.extend([
                f'#if __has_include("{header}")',
                f'#include "{header}"',
                "#endif",
                "",
            ])
        return "\n".join(lines)
