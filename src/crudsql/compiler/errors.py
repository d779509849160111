"""Fatal conditions raised by the statement compiler.

Every error carries a stable ``code`` so adapters can map it to a response
without parsing the message.
"""

from __future__ import annotations


class CompileError(Exception):
    """Base class for all compiler failures."""

    code = "COMPILE_ERROR"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class MissingTableError(CompileError):
    """No table could be resolved from the descriptor."""

    code = "MISSING_TABLE"

    def __init__(self) -> None:
        super().__init__(
            "Table name is required. Provide it in 'table' or in 'params.table'"
        )


class UnsupportedMethodError(CompileError):
    code = "UNSUPPORTED_METHOD"

    def __init__(self, method: str) -> None:
        self.method = method
        super().__init__(
            f"Unsupported HTTP method: {method}. Supported: GET, POST, PUT, PATCH, DELETE"
        )


class EmptyBodyError(CompileError):
    """A write request carried no body fields."""

    code = "EMPTY_BODY"

    def __init__(self, method: str) -> None:
        self.method = method
        super().__init__(f"{method} request requires body data with at least one field")


class MissingIdentifierError(CompileError):
    """An UPDATE or DELETE had no path parameters to bound its WHERE clause."""

    code = "MISSING_IDENTIFIER"

    def __init__(self, method: str) -> None:
        self.method = method
        super().__init__(
            f"{method} request requires path parameters (e.g., id) "
            "to identify the record"
        )
