"""Apache Derby URLs.

Examples:
- jdbc:derby:mydb;create=true (embedded)
- jdbc:derby:memory:testdb (in-memory)
- jdbc:derby://localhost:1527/mydb;user=app (network client)

Derby always separates properties with ``;``.
"""

from .._primitives import parse_properties, split_first
from ..model import DatabaseProduct, ParsedJDBCUrl, PropertySource
from .base import UrlDialect, add_derived, remove_protocol, require_host

_MEMORY_TOKEN = "memory:"


class DerbyDialect(UrlDialect):
    name = "derby"

    def parse(self, url: str, product: DatabaseProduct) -> ParsedJDBCUrl:
        remainder = remove_protocol(url, product)
        network = remainder.startswith("//")
        if network:
            remainder = remainder[2:]

        main_part, props = split_first(remainder, ";")
        properties = parse_properties(props, PropertySource.PATH)

        if network:
            host_string, database = split_first(main_part, "/")
            hosts = (require_host(url, host_string),)
            database = database or ""
            add_derived(properties, "MODE", "NETWORK")
        elif main_part.startswith(_MEMORY_TOKEN):
            hosts = ()
            database = main_part[len(_MEMORY_TOKEN):]
            add_derived(properties, "MODE", "MEMORY")
        else:
            hosts = ()
            database = main_part
            add_derived(properties, "MODE", "EMBEDDED")

        return ParsedJDBCUrl(
            original_url=url,
            product=product,
            protocol=product.url_prefix,
            hosts=hosts,
            database=database,
            properties=properties,
        )
