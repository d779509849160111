"""Dependency injection for FastAPI — CompilationPipeline singleton."""

from __future__ import annotations

from crudsql.compiler.pipeline import CompilationPipeline

_pipeline: CompilationPipeline | None = None
_default_dialect: str = "mysql"


def init_pipeline(pipeline: CompilationPipeline, *, default_dialect: str = "mysql") -> None:
    """Set the global CompilationPipeline (called by create_app)."""
    global _pipeline, _default_dialect  # noqa: PLW0603
    _pipeline = pipeline
    _default_dialect = default_dialect


def get_pipeline() -> CompilationPipeline:
    """FastAPI ``Depends`` provider for CompilationPipeline."""
    if _pipeline is None:
        raise RuntimeError("CompilationPipeline not initialised — call init_pipeline() first")
    return _pipeline


def get_default_dialect() -> str:
    return _default_dialect


def reset_pipeline() -> None:
    """Clear the global CompilationPipeline (for tests)."""
    global _pipeline, _default_dialect  # noqa: PLW0603
    _pipeline = None
    _default_dialect = "mysql"
