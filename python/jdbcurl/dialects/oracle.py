"""Oracle URLs: ``jdbc:oracle:<driver_type>:<connection_info>``.

Connection info formats:
- @host:port:SID
- @//host:port/serviceName (also @host:port/serviceName)
- @(DESCRIPTION=(ADDRESS=(PROTOCOL=TCP)(HOST=host)(PORT=1521))(CONNECT_DATA=(SERVICE_NAME=svc)))
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from .._primitives import parse_port, split_first
from ..exceptions import MalformedJDBCUrlError
from ..model import DatabaseProduct, Host, JDBCProperty, ParsedJDBCUrl
from .base import UrlDialect, add_derived, add_descriptor, remove_protocol

logger = logging.getLogger("jdbcurl")

# @//host:port/serviceName or @host:port/serviceName; the port may be omitted
_SERVICE_PATTERN = re.compile(r"@/?/?([^/:]+)(?::(\d+))?/(.+)")

# @host:port:SID
_SID_PATTERN = re.compile(r"@([^:]+):(\d+):(.+)")

# @(DESCRIPTION=..., any case, whitespace allowed around the key
_DESCRIPTOR_MARKER = re.compile(r"@\(\s*description\s*=", re.IGNORECASE)


@dataclass
class _Group:
    key_start: int
    key: Optional[str] = None
    value_start: int = 0
    nested: bool = False
    leaves: Dict[str, str] = field(default_factory=dict)


@dataclass
class DescriptorSummary:
    """Values found in an Oracle connection descriptor.

    ``addresses`` lists ``(host, port)`` for every group that carries a
    ``HOST`` entry, in order of appearance. ``values`` maps each upper-cased
    leaf key to its first value.
    """

    addresses: List[Tuple[str, Optional[str]]] = field(default_factory=list)
    values: Dict[str, str] = field(default_factory=dict)


def scan_descriptor(text: str) -> DescriptorSummary:
    """
    Scan a ``(KEY=value)`` descriptor in a single pass.

    Every character is visited once; nesting is tracked with a stack of open
    groups, so the cost stays linear whatever the input looks like.
    Unbalanced closing parentheses are ignored.

    Args:
        text: Descriptor text, e.g. ``(DESCRIPTION=(ADDRESS=...))``

    Returns:
        DescriptorSummary with addresses and leaf values
    """
    summary = DescriptorSummary()
    stack: List[_Group] = []

    for index, char in enumerate(text):
        if char == "(":
            if stack:
                stack[-1].nested = True
            stack.append(_Group(key_start=index + 1))
        elif char == "=" and stack and stack[-1].key is None:
            group = stack[-1]
            group.key = text[group.key_start:index].strip().upper()
            group.value_start = index + 1
        elif char == ")" and stack:
            group = stack.pop()
            if group.key is None:
                continue
            if group.nested:
                _collect_address(summary, group)
            else:
                value = text[group.value_start:index].strip()
                summary.values.setdefault(group.key, value)
                if stack:
                    stack[-1].leaves.setdefault(group.key, value)

    # groups left open by a truncated descriptor
    for group in reversed(stack):
        _collect_address(summary, group)

    return summary


def _collect_address(summary: DescriptorSummary, group: _Group) -> None:
    host = group.leaves.get("HOST")
    if host:
        summary.addresses.append((host, group.leaves.get("PORT")))


class OracleDialect(UrlDialect):
    """Oracle thin/OCI URLs in SID, service-name or descriptor form."""

    name = "oracle"

    def parse(self, url: str, product: DatabaseProduct) -> ParsedJDBCUrl:
        remainder = remove_protocol(url, product)

        driver_type, connection_info = split_first(remainder, ":")
        if connection_info is None:
            raise MalformedJDBCUrlError(url, "Invalid Oracle URL format: missing driver type")

        properties: Dict[str, JDBCProperty] = {}
        add_derived(properties, "DRIVER_TYPE", driver_type)

        if _DESCRIPTOR_MARKER.match(connection_info):
            hosts, database = self._parse_descriptor(connection_info, properties)
        elif connection_info.startswith("@//"):
            hosts, database = self._parse_service_name(url, connection_info, properties)
        elif connection_info.startswith("@"):
            if _SERVICE_PATTERN.fullmatch(connection_info):
                hosts, database = self._parse_service_name(url, connection_info, properties)
            else:
                hosts, database = self._parse_sid(url, connection_info, properties)
        else:
            raise MalformedJDBCUrlError(url, "Unsupported Oracle connection format")

        return ParsedJDBCUrl(
            original_url=url,
            product=product,
            protocol=product.url_prefix,
            hosts=hosts,
            database=database,
            properties=properties,
        )

    def _parse_service_name(
        self, url: str, connection_info: str, properties: Dict[str, JDBCProperty]
    ) -> Tuple[List[Host], str]:
        match = _SERVICE_PATTERN.fullmatch(connection_info)
        if not match:
            raise MalformedJDBCUrlError(url, "Invalid Oracle service name format")

        hostname, port, service_name = match.groups()
        if not hostname.strip():
            raise MalformedJDBCUrlError(url, "Missing host")
        add_descriptor(properties, "SERVICE_NAME", service_name)
        return [Host(hostname, parse_port(port))], service_name

    def _parse_sid(
        self, url: str, connection_info: str, properties: Dict[str, JDBCProperty]
    ) -> Tuple[List[Host], str]:
        match = _SID_PATTERN.fullmatch(connection_info)
        if not match:
            raise MalformedJDBCUrlError(url, "Invalid Oracle SID or service name format")

        hostname, port, sid = match.groups()
        if not hostname.strip():
            raise MalformedJDBCUrlError(url, "Missing host")
        add_descriptor(properties, "SID", sid)
        return [Host(hostname, int(port))], sid

    def _parse_descriptor(
        self, connection_info: str, properties: Dict[str, JDBCProperty]
    ) -> Tuple[List[Host], str]:
        logger.debug(f"Parsing Oracle descriptor format: {connection_info}")

        summary = scan_descriptor(connection_info[1:])
        hosts = [Host(hostname, parse_port(port)) for hostname, port in summary.addresses]

        database = ""
        if summary.values.get("SERVICE_NAME"):
            database = summary.values["SERVICE_NAME"]
            add_descriptor(properties, "SERVICE_NAME", database)
        elif summary.values.get("SID"):
            database = summary.values["SID"]
            add_descriptor(properties, "SID", database)

        add_descriptor(properties, "DESCRIPTOR", connection_info)
        return hosts, database
