"""SQL dialect plugin system for crudsql."""

# Import dialects to trigger registration
import crudsql.dialect.mysql as _mysql  # noqa: F401
import crudsql.dialect.postgres as _postgres  # noqa: F401
import crudsql.dialect.sqlite as _sqlite  # noqa: F401
from crudsql.dialect.base import Dialect
from crudsql.dialect.registry import DialectRegistry, UnsupportedDialectError

DEFAULT_DIALECT = "mysql"

__all__ = [
    "DEFAULT_DIALECT",
    "Dialect",
    "DialectRegistry",
    "UnsupportedDialectError",
]
