"""Custom exceptions for JDBC URL parsing."""

from typing import Optional


class JDBCUrlError(Exception):
    """Base exception for JDBC URL parsing errors.

    The offending URL is kept verbatim and appended to the message so the
    failure can be traced back to its input.
    """

    def __init__(self, url: Optional[str], message: str):
        self.url = url
        self.message = message
        super().__init__(f"{message} [URL: {url}]")


class InvalidJDBCUrlError(JDBCUrlError):
    """Raised when the URL is missing or blank."""
    pass


class UnsupportedDatabaseError(JDBCUrlError):
    """Raised when the URL does not name a supported database product."""
    pass


class MalformedJDBCUrlError(JDBCUrlError):
    """Raised when a URL violates the grammar of its database dialect."""
    pass
