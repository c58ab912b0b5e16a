"""Standard network URLs: MySQL, MariaDB and PostgreSQL.

Examples:
- jdbc:mysql://localhost:3306/mydb
- jdbc:mysql://host1:3306,host2:3307/mydb?useSSL=true
- jdbc:mariadb://db.example.com/production
- jdbc:postgresql://localhost/mydb?currentSchema=public
"""

from .._primitives import parse_host_list, parse_properties, split_first
from ..exceptions import MalformedJDBCUrlError
from ..model import DatabaseProduct, ParsedJDBCUrl, PropertySource
from .base import UrlDialect, remove_protocol


class NetworkDialect(UrlDialect):
    """``scheme://host[,host...][/database][?properties]``."""

    name = "network"

    def parse(self, url: str, product: DatabaseProduct) -> ParsedJDBCUrl:
        remainder = remove_protocol(url, product)
        if remainder.startswith("//"):
            remainder = remainder[2:]

        main_part, query = split_first(remainder, "?")
        properties = parse_properties(query, PropertySource.QUERY)

        hosts_string, database = split_first(main_part, "/")
        try:
            hosts = parse_host_list(hosts_string)
        except ValueError as exc:
            raise MalformedJDBCUrlError(url, f"Invalid host list '{hosts_string}': {exc}") from exc

        return ParsedJDBCUrl(
            original_url=url,
            product=product,
            protocol=product.url_prefix,
            hosts=hosts,
            database=database or "",
            properties=properties,
        )
