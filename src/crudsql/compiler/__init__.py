"""Statement compilation for crudsql."""

from crudsql.compiler.errors import (
    CompileError,
    EmptyBodyError,
    MissingIdentifierError,
    MissingTableError,
    UnsupportedMethodError,
)
from crudsql.compiler.pipeline import CompilationPipeline, CompilationResult, compile_request
from crudsql.compiler.statement import CompiledStatement, Operation, StatementCompiler

__all__ = [
    "CompilationPipeline",
    "CompilationResult",
    "CompileError",
    "CompiledStatement",
    "EmptyBodyError",
    "MissingIdentifierError",
    "MissingTableError",
    "Operation",
    "StatementCompiler",
    "UnsupportedMethodError",
    "compile_request",
]
