"""REST API for crudsql."""
