"""crudsql: compiles method-tagged CRUD request descriptors into SQL statements."""

__version__ = "0.1.0"
