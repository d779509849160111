"""Response shaping for rows produced by executing compiled statements."""

from crudsql.response.envelope import Envelope, ErrorBody, error_envelope, format_error, format_rows

__all__ = [
    "Envelope",
    "ErrorBody",
    "error_envelope",
    "format_error",
    "format_rows",
]
