"""Decompose many JDBC URLs into one Arrow table for inspection.

Usage:
    from jdbcurl.inventory import to_arrow_table

    table = to_arrow_table([
        "jdbc:postgresql://db1:5432/orders",
        "jdbc:sqlite:/var/lib/app.db",
    ])
    print(table.to_pandas())
"""

import logging
from typing import Any, Dict, Iterable, List, Optional

import pyarrow as pa

from ._config import ParserConfig, get_config
from .exceptions import JDBCUrlError
from .model import ParsedJDBCUrl
from .redaction import mask_url, masked_properties, redact_credentials, redact_hostname
from .registry import JDBCUrlParser, default_parser

logger = logging.getLogger("jdbcurl")

HOST_TYPE = pa.struct([
    ("hostname", pa.string()),
    ("port", pa.int64()),
    ("instance_name", pa.string()),
])

INVENTORY_SCHEMA = pa.schema([
    ("url", pa.string()),
    ("product", pa.string()),
    ("protocol", pa.string()),
    ("hosts", pa.list_(HOST_TYPE)),
    ("database", pa.string()),
    ("file_based", pa.bool_()),
    ("properties", pa.map_(pa.string(), pa.string())),
    ("error", pa.string()),
])


def _row(url: str, parsed: Optional[ParsedJDBCUrl], error: Optional[str], config: ParserConfig) -> Dict[str, Any]:
    if parsed is None:
        return {
            "url": redact_credentials(url, config.mask) if url is not None else None,
            "product": None,
            "protocol": None,
            "hosts": None,
            "database": None,
            "file_based": None,
            "properties": None,
            "error": error,
        }

    return {
        "url": mask_url(parsed, config),
        "product": parsed.product.name,
        "protocol": parsed.protocol,
        "hosts": [
            {
                "hostname": redact_hostname(host.hostname, config.mask),
                "port": host.port,
                "instance_name": host.instance_name,
            }
            for host in parsed.hosts
        ],
        "database": parsed.database,
        "file_based": parsed.is_file_based,
        "properties": list(masked_properties(parsed, config).items()),
        "error": None,
    }


def to_arrow_table(
    urls: Iterable[str],
    *,
    parser: Optional[JDBCUrlParser] = None,
    config: Optional[ParserConfig] = None,
    strict: bool = False,
) -> pa.Table:
    """
    Parse every URL and collect the results as rows of an Arrow table.

    Secrets are masked in the ``url`` and ``properties`` columns.

    Args:
        urls: JDBC URLs to inspect
        parser: Parser to use; the default parser when omitted
        config: Configuration for masking
        strict: Propagate the first parse failure instead of recording it

    Returns:
        pyarrow.Table with INVENTORY_SCHEMA

    Raises:
        JDBCUrlError: If ``strict`` is set and a URL cannot be parsed
    """
    parser = parser or default_parser()
    config = config or get_config()

    rows: List[Dict[str, Any]] = []
    failures = 0
    for url in urls:
        try:
            rows.append(_row(url, parser.parse(url), None, config))
        except JDBCUrlError as exc:
            if strict:
                raise
            failures += 1
            rows.append(_row(url, None, exc.message, config))

    if failures:
        logger.info(f"{failures} of {len(rows)} JDBC URL(s) could not be parsed")

    return pa.Table.from_pylist(rows, schema=INVENTORY_SCHEMA)
