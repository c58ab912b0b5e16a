"""Microsoft SQL Server URLs.

Examples:
- jdbc:sqlserver://localhost:1433;databaseName=mydb
- jdbc:sqlserver://localhost\\SQLEXPRESS;databaseName=mydb
- jdbc:sqlserver://;serverName=dbhost;portNumber=1433;databaseName=mydb

SQL Server separates properties with ``;`` only; ``?`` has no special meaning.
"""

from typing import Dict

from .._primitives import parse_port, parse_properties, split_first
from ..exceptions import MalformedJDBCUrlError
from ..model import DatabaseProduct, Host, JDBCProperty, ParsedJDBCUrl, PropertySource
from .base import UrlDialect, remove_protocol, require_host

_DATABASE_KEYS = ("databaseName", "database")
_PORT_KEYS = ("portNumber", "port")


class SQLServerDialect(UrlDialect):
    name = "sqlserver"

    def parse(self, url: str, product: DatabaseProduct) -> ParsedJDBCUrl:
        remainder = remove_protocol(url, product)
        if remainder.startswith("//"):
            remainder = remainder[2:]

        host_part, props = split_first(remainder, ";")
        properties = parse_properties(props, PropertySource.PATH)

        if host_part.endswith("/"):
            host_part = host_part[:-1]

        if host_part.strip():
            host = require_host(url, host_part)
        else:
            host = self._host_from_properties(url, properties)

        database = ""
        for key in _DATABASE_KEYS:
            if key in properties:
                database = properties[key].value
                break

        return ParsedJDBCUrl(
            original_url=url,
            product=product,
            protocol=product.url_prefix,
            hosts=(host,),
            database=database,
            properties=properties,
        )

    def _host_from_properties(self, url: str, properties: Dict[str, JDBCProperty]) -> Host:
        """Recover the host from ``serverName``/``instanceName``/``portNumber``."""
        server = properties.get("serverName")
        if server is None or not server.value.strip():
            raise MalformedJDBCUrlError(url, "Missing host: no server in URL and no serverName property")

        host = require_host(url, server.value)

        instance = properties.get("instanceName")
        if host.instance_name is None and instance is not None and instance.value:
            host = Host(host.hostname, host.port, instance.value)

        if host.port is None:
            for key in _PORT_KEYS:
                port = parse_port(properties[key].value) if key in properties else None
                if port is not None:
                    host = Host(host.hostname, port, host.instance_name)
                    break
        return host
