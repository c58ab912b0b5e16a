"""Shared parsing primitives used by every dialect."""
from __future__ import annotations

import logging
import re
from typing import Dict, List, Optional, Tuple

from .model import Host, JDBCProperty, PropertySource

logger = logging.getLogger("jdbcurl")

INSTANCE_DELIMITER = "\\"

_PROPERTY_SEPARATORS = re.compile(r"[&;]+")


def split_first(text: str, delimiter: str) -> Tuple[str, Optional[str]]:
    """Split at the first ``delimiter``; the tail is None when it is absent."""
    head, found, tail = text.partition(delimiter)
    return (head, tail) if found else (text, None)


def split_first_of_either(text: str, first: str, second: str) -> Tuple[str, Optional[str]]:
    """Split at whichever of two delimiters occurs earliest."""
    indexes = [index for index in (text.find(first), text.find(second)) if index >= 0]
    if not indexes:
        return text, None
    index = min(indexes)
    return text[:index], text[index + 1:]


def parse_properties(block: Optional[str], source: PropertySource) -> Dict[str, JDBCProperty]:
    """
    Parse a ``key=value`` block separated by ``&`` or ``;``.

    Segments without ``=`` are flags and get an empty value. Later keys
    overwrite earlier ones. The returned dict is a fresh mutable mapping so
    dialects can add derived entries.

    Args:
        block: Property text without its leading ``?`` or ``;``
        source: URL region the block was taken from

    Returns:
        Ordered mapping of key to JDBCProperty
    """
    properties: Dict[str, JDBCProperty] = {}
    if block is None or not block.strip():
        return properties

    for segment in _PROPERTY_SEPARATORS.split(block):
        if not segment.strip():
            continue
        equals = segment.find("=")
        if equals > 0:
            key = segment[:equals].strip()
            value = segment[equals + 1:].strip()
            properties[key] = JDBCProperty(source, value)
        else:
            properties[segment.strip()] = JDBCProperty(source, "")
    return properties


def parse_port(text: Optional[str]) -> Optional[int]:
    if text and text.isascii() and text.isdigit():
        return int(text)
    return None


def parse_host(host_string: str) -> Host:
    """
    Parse ``host[:port]`` or ``host\\instance[:port]`` into a Host.

    A tail after the last ``:`` that is not numeric means there is no
    port; the whole string is then the hostname.

    Raises:
        ValueError: If the host string is blank
    """
    if host_string is None or not host_string.strip():
        raise ValueError("Host string cannot be None or blank")

    if INSTANCE_DELIMITER in host_string:
        return parse_qualified_host(host_string)

    hostname, colon, tail = host_string.rpartition(":")
    if colon and hostname:
        port = parse_port(tail)
        if port is not None:
            return Host(hostname, port)
        logger.debug(f"Invalid port number in host string: {host_string}")
    return Host(host_string)


def parse_qualified_host(host_string: str) -> Host:
    """Parse ``hostname\\instance[:port]``; an unparsable port is dropped."""
    hostname, _, remainder = host_string.partition(INSTANCE_DELIMITER)
    instance_name, colon, port_text = remainder.partition(":")

    port = None
    if colon:
        port = parse_port(port_text)
        if port is None:
            logger.debug(f"Invalid port number in instance host string: {host_string}")

    return Host(hostname, port, instance_name or None)


def parse_host_list(hosts_string: Optional[str]) -> List[Host]:
    """Parse comma-separated hosts, keeping their order and skipping blanks."""
    if hosts_string is None or not hosts_string.strip():
        return []
    return [parse_host(part.strip()) for part in hosts_string.split(",") if part.strip()]
