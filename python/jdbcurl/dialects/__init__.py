"""Dialect implementations for JDBC URL decomposition.

Available dialects:
- NetworkDialect: MySQL, MariaDB, PostgreSQL
- OracleDialect: SID, service name and descriptor forms
- SQLServerDialect: semicolon properties, named instances
- H2_DIALECT / HSQLDB_DIALECT: scheme-token family (mem:, file:, tcp://, ...)
- DerbyDialect: embedded, in-memory and network client
- SQLiteDialect: file and in-memory databases
"""

from .base import UrlDialect
from .derby import DerbyDialect
from .embedded import H2_DIALECT, HSQLDB_DIALECT, EmbeddedDialect
from .network import NetworkDialect
from .oracle import OracleDialect
from .sqlite import SQLiteDialect
from .sqlserver import SQLServerDialect

__all__ = [
    "UrlDialect",
    "NetworkDialect",
    "OracleDialect",
    "SQLServerDialect",
    "EmbeddedDialect",
    "H2_DIALECT",
    "HSQLDB_DIALECT",
    "DerbyDialect",
    "SQLiteDialect",
]
