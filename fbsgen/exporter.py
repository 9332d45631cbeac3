"""Schema Exporter - writes one schema per annotated record and compiles it"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional

from .aggregator_generator import AggregatorGenerator
from .assembler import SchemaAssembler
from .compiler import GENERATED_SUFFIXES, FlatcCompiler
from .discovery import find_records
from .enum_collector import collect_enums
from .fbs_generator import render
from .reflection import ReflectedPackage

GENERATED_HEADER_SUFFIX = GENERATED_SUFFIXES['cpp']


@dataclass
class ExportConfig:
    """Settings for one generation run"""
    output_dir: Path
    flatc_path: Optional[Path] = None
    aggregator_path: Optional[Path] = None
    compile: bool = True
    languages: list[str] = field(default_factory=lambda: ['cpp'])
    extra_args: list[str] = field(default_factory=lambda: ['--gen-mutable'])
    timeout: Optional[float] = None
    schema_extension: str = 'fbs'


@dataclass
class ExportResult:
    schema_files: list[Path] = field(default_factory=list)
    generated_files: list[Path] = field(default_factory=list)
    aggregator_file: Optional[Path] = None


class SchemaExporter:
    """Runs a full generation pass over a reflected universe"""

    def __init__(self, config: ExportConfig,
                 compiler: Optional[FlatcCompiler] = None,
                 logger: Optional[logging.Logger] = None):
        self.config = config
        self.logger = logger or logging.getLogger(__name__)
        if compiler is None and config.compile:
            if config.flatc_path is None:
                raise ValueError("flatc_path is required when compile is enabled")
            compiler = FlatcCompiler(
                config.flatc_path,
                languages=config.languages,
                extra_args=config.extra_args,
                timeout=config.timeout,
                logger=self.logger,
            )
        self.compiler = compiler

    def export(self, universe: Iterable[ReflectedPackage]) -> ExportResult:
        try:
            return self._export(list(universe))
        except Exception:
            self.logger.exception("Error generating FlatBuffer schema or invoking flatc")
            raise

    def _export(self, universe: list[ReflectedPackage]) -> ExportResult:
        result = ExportResult()

        self.logger.info("Gathering FlatBuffer structs and enums...")
        records = find_records(universe)
        enums = collect_enums(universe)

        if not records:
            self.logger.info("No struct found with 'Category=FlatBuffer'. Nothing to do.")
            return result

        output_dir = Path(self.config.output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)

        compiler = self.compiler if self.config.compile else None
        if compiler is not None:
            # Fail before anything is written
            compiler.ensure_available()
            self.logger.info("Using flatc at: %s", compiler.flatc_path)
        self.logger.info("Output dir: %s", output_dir)

        assembler = SchemaAssembler(enums)
        for record in records:
            schema_path = output_dir / f"{record.record_name}.{self.config.schema_extension}"
            schema_path.write_text(render(assembler.assemble(record)))
            result.schema_files.append(schema_path)
            self.logger.info("Wrote: %s in %s", schema_path.name, output_dir)

            if compiler is not None:
                result.generated_files.extend(compiler.compile(schema_path, output_dir))

        if self.config.aggregator_path is not None:
            # Listed whether or not flatc ran; the includes are guarded
            headers = [f"{record.record_name}{GENERATED_HEADER_SUFFIX}" for record in records]
            result.aggregator_file = self._write_aggregator(headers)

        self.logger.info("FlatBuffer schema generation completed successfully.")
        return result

    def _write_aggregator(self, headers: list[str]) -> Path:
        path = Path(self.config.aggregator_path)
        self.logger.info("Creating aggregator header: %s", path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(AggregatorGenerator(headers).generate())
        self.logger.info("Wrote aggregator with %d includes.", len(headers))
        return path
