"""Abstract interface for database URL dialects."""

from abc import ABC, abstractmethod
from typing import Dict, Optional

from .._primitives import parse_host
from ..exceptions import MalformedJDBCUrlError
from ..model import DatabaseProduct, Host, JDBCProperty, PropertySource


class UrlDialect(ABC):
    """Decomposes the URLs of one database product family."""

    name = "base"

    @abstractmethod
    def parse(self, url: str, product: DatabaseProduct):
        """
        Decompose a JDBC URL already detected as ``product``.

        Args:
            url: Full JDBC URL, verbatim
            product: Product detected from the URL prefix

        Returns:
            ParsedJDBCUrl for the URL

        Raises:
            MalformedJDBCUrlError: If the URL violates the dialect grammar
        """
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


def remove_protocol(url: str, product: DatabaseProduct) -> str:
    """Return the part of ``url`` after the product prefix."""
    prefix = product.url_prefix
    if not prefix or not url.lower().startswith(prefix):
        raise MalformedJDBCUrlError(url, f"URL does not start with expected protocol: {prefix}")
    return url[len(prefix):]


def require_host(url: str, host_string: Optional[str]) -> Host:
    """Parse a host that the dialect grammar makes mandatory."""
    if host_string is None or not host_string.strip():
        raise MalformedJDBCUrlError(url, "Missing host")
    try:
        return parse_host(host_string)
    except ValueError as exc:
        raise MalformedJDBCUrlError(url, f"Invalid host '{host_string}': {exc}") from exc


def add_derived(properties: Dict[str, JDBCProperty], key: str, value: str) -> None:
    properties[key] = JDBCProperty(PropertySource.DERIVED, value)


def add_descriptor(properties: Dict[str, JDBCProperty], key: str, value: str) -> None:
    properties[key] = JDBCProperty(PropertySource.DESCRIPTOR, value)
