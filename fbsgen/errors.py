"""Exceptions raised by the schema generator"""

from pathlib import Path


class FbsGenError(Exception):
    """Base class for all schema generation failures"""


class SchemaError(FbsGenError):
    """An assembled document breaks one of its own invariants"""


class UniverseError(FbsGenError):
    """A reflected universe dump could not be read"""


class CompilerNotFoundError(FbsGenError):
    """The schema compiler binary does not exist"""

    def __init__(self, path: Path):
        super().__init__(f"Could not find flatc at: {path}")
        self.path = path


class CompilerError(FbsGenError):
    """The schema compiler exited with a non-zero status"""

    def __init__(self, schema_path: Path, returncode: int,
                 stdout: str = "", stderr: str = ""):
        message = f"flatc failed with exit code {returncode} for {schema_path}"
        if stderr.strip():
            message += f":\n{stderr.strip()}"
        super().__init__(message)
        self.schema_path = schema_path
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr


class CompilerInvocationError(FbsGenError):
    """The schema compiler could not be run to completion"""

    def __init__(self, schema_path: Path, reason: str):
        super().__init__(f"flatc could not be run for {schema_path}: {reason}")
        self.schema_path = schema_path
        self.reason = reason
