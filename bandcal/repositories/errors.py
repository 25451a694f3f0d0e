"""Errors raised by the repository layer."""


class RepositoryError(Exception):
    """A query or mutation against the data store failed."""
