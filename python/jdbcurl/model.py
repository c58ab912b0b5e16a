"""Immutable value types describing a decomposed JDBC URL."""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple

JDBC_SCHEME = "jdbc:"


class DatabaseProduct(Enum):
    """Supported database products, keyed by their JDBC product indicator."""

    MYSQL = "mysql"
    MARIADB = "mariadb"
    POSTGRESQL = "postgresql"
    ORACLE = "oracle"
    SQLSERVER = "sqlserver"
    H2 = "h2"
    HSQLDB = "hsqldb"
    DERBY = "derby"
    SQLITE = "sqlite"
    UNKNOWN = ""

    @property
    def indicator(self) -> str:
        return self.value

    @property
    def url_prefix(self) -> str:
        """JDBC URL prefix for this product (e.g. ``jdbc:mysql:``)."""
        if self is DatabaseProduct.UNKNOWN:
            return ""
        return f"{JDBC_SCHEME}{self.value}:"

    @classmethod
    def from_url(cls, url: Optional[str]) -> "DatabaseProduct":
        """
        Detect the database product from a JDBC URL prefix.

        Args:
            url: JDBC URL to inspect (may be None)

        Returns:
            The matching product, or UNKNOWN if no prefix matches
        """
        if url is None or not url.strip():
            return cls.UNKNOWN

        lower_url = url.lower()
        for product in cls:
            if product is not cls.UNKNOWN and lower_url.startswith(product.url_prefix):
                return product
        return cls.UNKNOWN


class PropertySource(Enum):
    """Region of the URL a property was extracted from.

    QUERY properties follow ``?``; PATH properties are embedded in the path
    with ``;``; DERIVED properties are computed from the URL shape (e.g. the
    H2 ``MODE``); DESCRIPTOR properties come from a structured connection
    descriptor such as Oracle's ``(DESCRIPTION=...)``.
    """

    QUERY = "query"
    PATH = "path"
    DERIVED = "derived"
    DESCRIPTOR = "descriptor"


@dataclass(frozen=True)
class Host:
    """Database host with optional port and named instance."""

    hostname: str
    port: Optional[int] = None
    instance_name: Optional[str] = None

    def __post_init__(self):
        if self.hostname is None or not self.hostname.strip():
            raise ValueError("Hostname cannot be None or blank")

    def __str__(self) -> str:
        text = self.hostname
        if self.instance_name:
            text += f"\\{self.instance_name}"
        if self.port is not None:
            text += f":{self.port}"
        return text


@dataclass(frozen=True)
class JDBCProperty:
    """Property value together with the URL region it came from."""

    source: PropertySource
    value: str


@dataclass(frozen=True, eq=False)
class ParsedJDBCUrl:
    """Structured view of a JDBC URL.

    ``hosts`` keeps the order of appearance, which is the failover priority.
    ``properties`` keeps insertion order and the keys exactly as written.
    The file/network classification is derived from ``hosts`` on demand.
    """

    original_url: str
    product: DatabaseProduct
    protocol: str
    hosts: Tuple[Host, ...] = ()
    database: str = ""
    properties: Mapping[str, JDBCProperty] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "hosts", tuple(self.hosts or ()))
        object.__setattr__(self, "properties", MappingProxyType(dict(self.properties or {})))

    def __eq__(self, other):
        if not isinstance(other, ParsedJDBCUrl):
            return NotImplemented
        return (
            self.original_url == other.original_url
            and self.product is other.product
            and self.protocol == other.protocol
            and self.hosts == other.hosts
            and self.database == other.database
            and dict(self.properties) == dict(other.properties)
        )

    def __hash__(self):
        return hash((
            self.original_url,
            self.product,
            self.protocol,
            self.hosts,
            self.database,
            frozenset(self.properties.items()),
        ))

    @property
    def is_file_based(self) -> bool:
        return not self.hosts

    @property
    def is_network_based(self) -> bool:
        return bool(self.hosts)

    @property
    def primary_host(self) -> Optional[Host]:
        """First host in failover order, or None for file-based URLs."""
        return self.hosts[0] if self.hosts else None

    def get_property(self, key: str) -> Optional[JDBCProperty]:
        return self.properties.get(key)

    def property_value(self, key: str) -> Optional[str]:
        prop = self.properties.get(key)
        return prop.value if prop is not None else None

    def properties_by_source(self, source: PropertySource) -> Dict[str, str]:
        """
        Property values that originated from one URL region.

        Args:
            source: Region to filter by

        Returns:
            Ordered mapping of key to value for that region
        """
        return {key: prop.value for key, prop in self.properties.items() if prop.source is source}

    def property_values(self) -> Dict[str, str]:
        return {key: prop.value for key, prop in self.properties.items()}

    def __str__(self) -> str:
        hosts = ", ".join(str(host) for host in self.hosts)
        return (
            f"ParsedJDBCUrl(product={self.product.name}, protocol='{self.protocol}', "
            f"hosts=[{hosts}], database='{self.database}', "
            f"properties={len(self.properties)} entries)"
        )
