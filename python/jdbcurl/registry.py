"""Dialect registry and the parsing facade built on it."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import FrozenSet, Optional, Tuple

from .dialects import (
    H2_DIALECT,
    HSQLDB_DIALECT,
    DerbyDialect,
    NetworkDialect,
    OracleDialect,
    SQLiteDialect,
    SQLServerDialect,
    UrlDialect,
)
from .exceptions import InvalidJDBCUrlError, JDBCUrlError, UnsupportedDatabaseError
from .model import JDBC_SCHEME, DatabaseProduct, ParsedJDBCUrl

logger = logging.getLogger("jdbcurl")


@dataclass(frozen=True)
class DialectBinding:
    products: FrozenSet[DatabaseProduct]
    dialect: UrlDialect

    def supports(self, product: DatabaseProduct) -> bool:
        return product in self.products


@dataclass(frozen=True)
class DialectRegistry:
    """Ordered, read-only product → dialect bindings.

    The first binding claiming a product wins. Instances are values: build
    one and hand it to ``JDBCUrlParser``; nothing here is mutated after
    construction, so a registry can be shared across threads.
    """

    bindings: Tuple[DialectBinding, ...]

    def find(self, product: DatabaseProduct) -> Optional[UrlDialect]:
        for binding in self.bindings:
            if binding.supports(product):
                return binding.dialect
        return None

    @property
    def products(self) -> FrozenSet[DatabaseProduct]:
        return frozenset(product for binding in self.bindings for product in binding.products)

    @classmethod
    def default(cls) -> "DialectRegistry":
        return _default_registry()


@lru_cache(maxsize=None)
def _default_registry() -> DialectRegistry:
    return DialectRegistry(
        bindings=(
            DialectBinding(frozenset({DatabaseProduct.MYSQL, DatabaseProduct.MARIADB}), NetworkDialect()),
            DialectBinding(frozenset({DatabaseProduct.POSTGRESQL}), NetworkDialect()),
            DialectBinding(frozenset({DatabaseProduct.ORACLE}), OracleDialect()),
            DialectBinding(frozenset({DatabaseProduct.SQLSERVER}), SQLServerDialect()),
            DialectBinding(frozenset({DatabaseProduct.H2}), H2_DIALECT),
            DialectBinding(frozenset({DatabaseProduct.HSQLDB}), HSQLDB_DIALECT),
            DialectBinding(frozenset({DatabaseProduct.DERBY}), DerbyDialect()),
            DialectBinding(frozenset({DatabaseProduct.SQLITE}), SQLiteDialect()),
        )
    )


class JDBCUrlParser:
    """
    Parse JDBC URLs with an explicit dialect registry.

    Args:
        registry: Registry to dispatch through; the default closed set of
            dialects when omitted
    """

    def __init__(self, registry: Optional[DialectRegistry] = None):
        self.registry = registry if registry is not None else DialectRegistry.default()

    def parse(self, url: Optional[str]) -> ParsedJDBCUrl:
        """
        Decompose a JDBC URL.

        Args:
            url: JDBC URL string starting with jdbc:

        Returns:
            ParsedJDBCUrl with product, hosts, database and properties

        Raises:
            InvalidJDBCUrlError: If the URL is None or blank
            UnsupportedDatabaseError: If no supported product matches
            MalformedJDBCUrlError: If the URL violates its dialect grammar
        """
        if url is None or not url.strip():
            raise InvalidJDBCUrlError(url, "JDBC URL cannot be None or blank")

        logger.debug(f"Parsing JDBC URL: {url}")

        if not self.is_jdbc_url(url):
            raise UnsupportedDatabaseError(url, f"Invalid JDBC URL: must start with '{JDBC_SCHEME}'")

        product = DatabaseProduct.from_url(url)
        if product is DatabaseProduct.UNKNOWN:
            raise UnsupportedDatabaseError(url, "Unknown or unsupported database type")

        logger.debug(f"Detected database type: {product.name}")

        dialect = self.registry.find(product)
        if dialect is None:
            raise UnsupportedDatabaseError(url, f"No parser available for database type: {product.name}")

        logger.debug(f"Using dialect: {dialect!r}")
        return dialect.parse(url, product)

    def try_parse(self, url: Optional[str]) -> Optional[ParsedJDBCUrl]:
        """Like ``parse`` but returns None when the URL cannot be parsed."""
        try:
            return self.parse(url)
        except JDBCUrlError as exc:
            logger.debug(f"Failed to parse JDBC URL: {exc}")
            return None

    @staticmethod
    def is_jdbc_url(url: Optional[str]) -> bool:
        return url is not None and url.lower().startswith(JDBC_SCHEME)

    @staticmethod
    def detect_product(url: Optional[str]) -> DatabaseProduct:
        return DatabaseProduct.from_url(url)


@lru_cache(maxsize=None)
def default_parser() -> JDBCUrlParser:
    return JDBCUrlParser(DialectRegistry.default())
