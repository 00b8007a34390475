"""portfolio_qa.errors

Central error types to keep error handling consistent.
"""


class AppError(Exception):
    """Base application error."""


class ConfigError(AppError):
    """Raised when required configuration is missing or invalid."""


class CatalogError(AppError):
    """Raised when an answer catalog file or record is malformed."""


class StorageError(AppError):
    """Raised when the storage backend fails (SQLite, file system)."""


class NotFoundError(AppError):
    """Raised when a question, answer or feedback id is unknown."""
