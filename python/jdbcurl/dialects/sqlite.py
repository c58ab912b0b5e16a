"""SQLite URLs; always file-based.

Examples:
- jdbc:sqlite:/data/app.db?foreign_keys=true
- jdbc:sqlite:C:\\databases\\test.db (paths are kept verbatim)
- jdbc:sqlite::memory:
"""

from .._primitives import parse_properties, split_first
from ..model import DatabaseProduct, ParsedJDBCUrl, PropertySource
from .base import UrlDialect, add_derived, remove_protocol

MEMORY_DATABASE = ":memory:"


class SQLiteDialect(UrlDialect):
    name = "sqlite"

    def parse(self, url: str, product: DatabaseProduct) -> ParsedJDBCUrl:
        remainder = remove_protocol(url, product)

        database, query = split_first(remainder, "?")
        properties = parse_properties(query, PropertySource.QUERY)

        if database in (MEMORY_DATABASE, "memory:"):
            database = MEMORY_DATABASE
            add_derived(properties, "MODE", "MEMORY")
        else:
            add_derived(properties, "MODE", "FILE")

        return ParsedJDBCUrl(
            original_url=url,
            product=product,
            protocol=product.url_prefix,
            hosts=(),
            database=database,
            properties=properties,
        )
