"""jdbcurl - decompose JDBC connection URLs without a driver or network.

Supported databases:
    ├── MySQL / MariaDB, PostgreSQL (standard network URLs)
    ├── Oracle (SID, service name, TNS descriptor)
    ├── Microsoft SQL Server (semicolon properties, named instances)
    ├── H2, HSQLDB (mem:, file:, res:, tcp://, hsql://, ...)
    ├── Apache Derby (embedded, memory, network client)
    └── SQLite (file, :memory:)

Usage:
    import jdbcurl

    url = jdbcurl.parse("jdbc:mysql://host1:3306,host2:3307/mydb?useSSL=true")
    url.product              # DatabaseProduct.MYSQL
    url.hosts                # (Host('host1', 3306), Host('host2', 3307))
    url.database             # 'mydb'
    url.property_value("useSSL")   # 'true'

    jdbcurl.try_parse("not a url")          # None
    jdbcurl.detect_product("jdbc:h2:mem:x") # DatabaseProduct.H2

Usage - explicit registry:
    from jdbcurl import DialectRegistry, JDBCUrlParser

    parser = JDBCUrlParser(DialectRegistry.default())
    parser.parse("jdbc:derby://localhost:1527/mydb")
"""

import logging
from typing import Optional

from ._config import ParserConfig, get_config, load_config
from .exceptions import (
    JDBCUrlError,
    InvalidJDBCUrlError,
    UnsupportedDatabaseError,
    MalformedJDBCUrlError,
)
from .model import DatabaseProduct, Host, JDBCProperty, ParsedJDBCUrl, PropertySource
from .redaction import mask_url, masked_properties
from .registry import DialectBinding, DialectRegistry, JDBCUrlParser, default_parser

__all__ = [
    # Facade
    "parse",
    "try_parse",
    "is_jdbc_url",
    "detect_product",
    "JDBCUrlParser",
    "DialectRegistry",
    "DialectBinding",

    # Model
    "DatabaseProduct",
    "Host",
    "JDBCProperty",
    "ParsedJDBCUrl",
    "PropertySource",

    # Masking and configuration
    "mask_url",
    "masked_properties",
    "ParserConfig",
    "load_config",

    # Exceptions
    "JDBCUrlError",
    "InvalidJDBCUrlError",
    "UnsupportedDatabaseError",
    "MalformedJDBCUrlError",
]

# Set up logging
logger = logging.getLogger("jdbcurl")
logger.setLevel(get_config().logging_level)

# Add console handler if not already added
if not logger.handlers:
    handler = logging.StreamHandler()
    handler.setLevel(logging.DEBUG)
    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def parse(url: Optional[str]) -> ParsedJDBCUrl:
    """
    Parse a JDBC URL with the default dialect registry.

    Args:
        url: JDBC URL (e.g., jdbc:postgresql://localhost:5432/mydb)

    Returns:
        ParsedJDBCUrl

    Raises:
        InvalidJDBCUrlError: If the URL is None or blank
        UnsupportedDatabaseError: If the database product is not supported
        MalformedJDBCUrlError: If the URL violates its dialect grammar
    """
    return default_parser().parse(url)


def try_parse(url: Optional[str]) -> Optional[ParsedJDBCUrl]:
    """Parse a JDBC URL, returning None instead of raising."""
    return default_parser().try_parse(url)


def is_jdbc_url(url: Optional[str]) -> bool:
    """True if the string starts with ``jdbc:`` (case-insensitive)."""
    return JDBCUrlParser.is_jdbc_url(url)


def detect_product(url: Optional[str]) -> DatabaseProduct:
    """Database product named by the URL prefix; UNKNOWN when none matches. Never raises."""
    return JDBCUrlParser.detect_product(url)
