"""Invocation of the flatc schema compiler"""

import logging
import subprocess
from pathlib import Path
from typing import Callable, Optional, Sequence

from .errors import CompilerError, CompilerInvocationError, CompilerNotFoundError

# File name suffix flatc uses per output language
GENERATED_SUFFIXES = {
    'cpp': '_generated.h',
    'python': '_generated.py',
    'ts': '_generated.ts',
    'rust': '_generated.rs',
}


class FlatcCompiler:
    """Runs flatc on one schema file at a time

    The process runner is injectable; it must accept the same arguments
    as subprocess.run and return a CompletedProcess-like object.
    """

    def __init__(self, flatc_path: Path,
                 runner: Callable[..., subprocess.CompletedProcess] = subprocess.run,
                 languages: Sequence[str] = ('cpp',),
                 extra_args: Sequence[str] = ('--gen-mutable',),
                 timeout: Optional[float] = None,
                 logger: Optional[logging.Logger] = None):
        self.flatc_path = Path(flatc_path)
        self.runner = runner
        self.languages = list(languages)
        self.extra_args = list(extra_args)
        self.timeout = timeout
        self.logger = logger or logging.getLogger(__name__)

    def ensure_available(self):
        if not self.flatc_path.is_file():
            raise CompilerNotFoundError(self.flatc_path)

    def command(self, schema_path: Path, output_dir: Path) -> list[str]:
        cmd = [str(self.flatc_path)]
        cmd.extend(f'--{lang}' for lang in self.languages)
        cmd.extend(self.extra_args)
        cmd.extend(['-o', str(output_dir), str(schema_path)])
        return cmd

    def generated_files(self, schema_path: Path, output_dir: Path) -> list[Path]:
        """Files flatc is expected to produce for a schema"""
        stem = Path(schema_path).stem
        return [Path(output_dir) / f'{stem}{GENERATED_SUFFIXES[lang]}'
                for lang in self.languages if lang in GENERATED_SUFFIXES]

    def compile(self, schema_path: Path, output_dir: Path) -> list[Path]:
        """Compile one schema; raises CompilerError on a non-zero exit

        A timeout or a binary that cannot be executed raises
        CompilerInvocationError.
        """
        self.ensure_available()
        self.logger.info("Running flatc on '%s'...", schema_path)

        try:
            proc = self.runner(
                self.command(schema_path, output_dir),
                capture_output=True,
                text=True,
                cwd=str(output_dir),
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired as e:
            raise CompilerInvocationError(Path(schema_path), f"timed out after {e.timeout}s") from e
        except OSError as e:
            raise CompilerInvocationError(Path(schema_path), str(e)) from e

        if proc.stdout and proc.stdout.strip():
            self.logger.info("flatc stdout:\n%s", proc.stdout)
        if proc.stderr and proc.stderr.strip():
            self.logger.warning("flatc stderr:\n%s", proc.stderr)
        if proc.returncode != 0:
            raise CompilerError(Path(schema_path), proc.returncode,
                                proc.stdout or '', proc.stderr or '')

        self.logger.info("flatc generation finished for: %s", Path(schema_path).name)
        return self.generated_files(schema_path, output_dir)
