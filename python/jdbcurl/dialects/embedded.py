"""Embedded-capable databases addressed by scheme tokens: H2 and HSQLDB.

Examples:
- jdbc:h2:mem:testdb;DB_CLOSE_DELAY=-1
- jdbc:h2:~/test (implied file)
- jdbc:h2:tcp://localhost:9092/~/testdb
- jdbc:hsqldb:res:/org/mydatabase/mydb
- jdbc:hsqldb:hsqls://dbserver:9002/production
"""

from typing import Dict, Mapping, Sequence

from .._primitives import parse_properties, split_first, split_first_of_either
from ..model import DatabaseProduct, JDBCProperty, ParsedJDBCUrl, PropertySource
from .base import UrlDialect, add_derived, remove_protocol, require_host

MODE = "MODE"


class EmbeddedDialect(UrlDialect):
    """
    ``scheme:[token]path-or-host[;props][?props]``.

    Args:
        name: Dialect name used in logs
        network_schemes: Tokens such as ``tcp`` that select network mode
            when followed by ``://``
        storage_tokens: Storage tokens (``mem:``, ``file:``, ...) mapped to
            the MODE they imply
    """

    def __init__(self, name: str, network_schemes: Sequence[str], storage_tokens: Mapping[str, str]):
        self.name = name
        self.network_schemes = tuple(network_schemes)
        self.storage_tokens = dict(storage_tokens)

    def parse(self, url: str, product: DatabaseProduct) -> ParsedJDBCUrl:
        remainder = remove_protocol(url, product)

        main_part, props = split_first_of_either(remainder, ";", "?")
        source = PropertySource.QUERY if "?" in remainder else PropertySource.PATH
        properties = parse_properties(props, source)

        for scheme in self.network_schemes:
            token = f"{scheme}://"
            if main_part.startswith(token):
                return self._parse_network(url, product, scheme, main_part[len(token):], properties)

        database = main_part
        mode = "FILE"
        for token, token_mode in self.storage_tokens.items():
            if main_part.startswith(token):
                database = main_part[len(token):]
                mode = token_mode
                break

        if MODE not in properties:
            add_derived(properties, MODE, mode)

        return ParsedJDBCUrl(
            original_url=url,
            product=product,
            protocol=product.url_prefix,
            hosts=(),
            database=database,
            properties=properties,
        )

    def _parse_network(
        self,
        url: str,
        product: DatabaseProduct,
        scheme: str,
        location: str,
        properties: Dict[str, JDBCProperty],
    ) -> ParsedJDBCUrl:
        host_string, database = split_first(location, "/")
        host = require_host(url, host_string)
        add_derived(properties, MODE, scheme.upper())

        return ParsedJDBCUrl(
            original_url=url,
            product=product,
            protocol=product.url_prefix,
            hosts=(host,),
            database=database or "",
            properties=properties,
        )

    def __repr__(self) -> str:
        return f"EmbeddedDialect(name={self.name!r})"


H2_DIALECT = EmbeddedDialect(
    "h2",
    network_schemes=("tcp", "ssl"),
    storage_tokens={"mem:": "MEMORY", "file:": "FILE"},
)

HSQLDB_DIALECT = EmbeddedDialect(
    "hsqldb",
    network_schemes=("hsqls", "hsql", "https", "http"),
    storage_tokens={"mem:": "MEMORY", "file:": "FILE", "res:": "RESOURCE"},
)
