#!/usr/bin/env python3
"""
FlatBuffers Schema Generator

Reads a JSON dump of reflected types and generates:
  1. One .fbs schema per struct annotated with Category=FlatBuffer
  2. flatc output for each schema (unless --no-compile)
  3. An aggregate header including every generated header (optional)

Usage:
    python generate_schemas.py universe.json --output-dir generated/ --flatc ThirdParty/flatc
    python generate_schemas.py universe.json -o generated/ --no-compile
    python generate_schemas.py universe.json -o generated/ --flatc flatc --aggregator Source/FlatBufferAutoIncludes.h
"""

import argparse
import logging
import sys
import time
from pathlib import Path

# Add parent directory to path so fbsgen package can be found
sys.path.insert(0, str(Path(__file__).parent.parent))

from fbsgen import ExportConfig, FbsGenError, SchemaExporter, load_universe


def main(argv=None):
    start_time = time.perf_counter()

    parser = argparse.ArgumentParser(description="Generate FlatBuffers schemas from reflected types")
    parser.add_argument("universe", help="Path to reflected universe JSON")
    parser.add_argument("--output-dir", "-o", default="generated", help="Output directory")
    parser.add_argument("--flatc", default="", help="Path to the flatc binary")
    parser.add_argument("--no-compile", action="store_true", help="Only write .fbs files")
    parser.add_argument("--lang", action="append", default=[], help="flatc output language (repeatable, default cpp)")
    parser.add_argument("--flatc-arg", action="append", default=None, help="Extra flatc argument (repeatable)")
    parser.add_argument("--timeout", type=float, default=None, help="flatc timeout in seconds")
    parser.add_argument("--aggregator", default="", help="Aggregate header output path")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="[%(levelname)s] %(message)s",
    )

    if not args.no_compile and not args.flatc:
        parser.error("--flatc is required unless --no-compile is given")

    config = ExportConfig(
        output_dir=Path(args.output_dir),
        flatc_path=Path(args.flatc) if args.flatc else None,
        aggregator_path=Path(args.aggregator) if args.aggregator else None,
        compile=not args.no_compile,
        languages=args.lang or ['cpp'],
        extra_args=args.flatc_arg if args.flatc_arg is not None else ['--gen-mutable'],
        timeout=args.timeout,
    )

    try:
        universe = load_universe(Path(args.universe))
        result = SchemaExporter(config).export(universe)
    except (FbsGenError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    for path in result.schema_files + result.generated_files:
        print(f"Generated: {path}")
    if result.aggregator_file:
        print(f"Generated: {result.aggregator_file}")

    elapsed = time.perf_counter() - start_time
    print(f"Generation completed in {elapsed*1000:.2f} ms")
    return 0


if __name__ == "__main__":
    sys.exit(main())
