"""Tests for Oracle URL parsing."""

import time

import pytest

from jdbcurl import parse
from jdbcurl.dialects.oracle import scan_descriptor
from jdbcurl.exceptions import MalformedJDBCUrlError
from jdbcurl.model import DatabaseProduct, Host, PropertySource


class TestOracleSidAndServiceName:
    """Test the SID and service-name formats."""

    def test_thin_with_sid(self):
        """Test @host:port:SID."""
        parsed = parse("jdbc:oracle:thin:@localhost:1521:ORCL")

        assert parsed.product is DatabaseProduct.ORACLE
        assert parsed.protocol == "jdbc:oracle:"
        assert parsed.hosts == (Host("localhost", 1521),)
        assert parsed.database == "ORCL"
        assert parsed.property_value("SID") == "ORCL"
        assert parsed.get_property("SID").source is PropertySource.DESCRIPTOR

    def test_thin_with_service_name(self):
        """Test @//host:port/service."""
        parsed = parse("jdbc:oracle:thin:@//localhost:1521/XEPDB1")

        assert parsed.hosts == (Host("localhost", 1521),)
        assert parsed.database == "XEPDB1"
        assert parsed.property_value("SERVICE_NAME") == "XEPDB1"
        assert parsed.property_value("SID") is None

    def test_service_name_without_slashes(self):
        """Test @host:port/service is tried before SID."""
        parsed = parse("jdbc:oracle:thin:@dbserver.example.com:1522/myservice")

        assert parsed.hosts == (Host("dbserver.example.com", 1522),)
        assert parsed.database == "myservice"

    def test_service_name_without_port(self):
        """Test the port of the service-name form is optional."""
        parsed = parse("jdbc:oracle:thin:@//dbhost/ORCLPDB")

        assert parsed.hosts == (Host("dbhost"),)
        assert parsed.database == "ORCLPDB"

    def test_driver_type_derived(self):
        """Test DRIVER_TYPE is recorded as derived."""
        parsed = parse("jdbc:oracle:oci:@//localhost:1521/mydb")

        assert parsed.property_value("DRIVER_TYPE") == "oci"
        assert parsed.get_property("DRIVER_TYPE").source is PropertySource.DERIVED
        assert parsed.database == "mydb"

    def test_property_order(self):
        """Test DRIVER_TYPE precedes the identifier property."""
        parsed = parse("jdbc:oracle:thin:@localhost:1521:ORCL")

        assert list(parsed.properties) == ["DRIVER_TYPE", "SID"]


class TestOracleDescriptor:
    """Test the TNS descriptor format."""

    def test_service_name_descriptor(self):
        """Test descriptor with SERVICE_NAME."""
        url = (
            "jdbc:oracle:thin:@(DESCRIPTION=(ADDRESS=(PROTOCOL=TCP)(HOST=localhost)(PORT=1521))"
            "(CONNECT_DATA=(SERVICE_NAME=myservice)))"
        )
        parsed = parse(url)

        assert parsed.hosts == (Host("localhost", 1521),)
        assert parsed.database == "myservice"
        assert parsed.property_value("SERVICE_NAME") == "myservice"
        assert parsed.property_value("DESCRIPTOR") == url[len("jdbc:oracle:thin:"):]
        assert parsed.get_property("DESCRIPTOR").source is PropertySource.DESCRIPTOR

    def test_sid_descriptor(self):
        """Test descriptor with SID."""
        parsed = parse(
            "jdbc:oracle:thin:@(DESCRIPTION=(ADDRESS=(PROTOCOL=TCP)(HOST=dbhost)(PORT=1521))"
            "(CONNECT_DATA=(SID=ORCL)))"
        )

        assert parsed.hosts == (Host("dbhost", 1521),)
        assert parsed.database == "ORCL"
        assert parsed.property_value("SID") == "ORCL"

    def test_case_insensitive(self):
        """Test lowercase descriptor keys."""
        parsed = parse(
            "jdbc:oracle:thin:@(description=(address=(protocol=TCP)(host=myhost)(port=1522))"
            "(connect_data=(service_name=PROD)))"
        )

        assert parsed.hosts == (Host("myhost", 1522),)
        assert parsed.database == "PROD"

    def test_whitespace_in_descriptor(self):
        """Test spaces around keys and values."""
        parsed = parse(
            "jdbc:oracle:thin:@(DESCRIPTION = (ADDRESS = (PROTOCOL = TCP)(HOST = db1 )(PORT = 1521))"
            "(CONNECT_DATA = (SERVICE_NAME = sales)))"
        )

        assert parsed.hosts == (Host("db1", 1521),)
        assert parsed.database == "sales"

    def test_spaces_inside_opening_group(self):
        """Test whitespace before the DESCRIPTION key."""
        url = "jdbc:oracle:thin:@( description =(address=(host=h1)(port=1521))(connect_data=(sid=XE)))"
        parsed = parse(url)

        assert parsed.hosts == (Host("h1", 1521),)
        assert parsed.database == "XE"
        assert parsed.property_value("DESCRIPTOR").startswith("@( description =")

    def test_address_list_keeps_order(self):
        """Test every address contributes a host in order."""
        parsed = parse(
            "jdbc:oracle:thin:@(DESCRIPTION=(ADDRESS_LIST=(LOAD_BALANCE=off)(FAILOVER=on)"
            "(ADDRESS=(PROTOCOL=TCP)(HOST=primary)(PORT=1521))"
            "(ADDRESS=(PROTOCOL=TCP)(HOST=standby)(PORT=1522)))"
            "(CONNECT_DATA=(SERVICE_NAME=orders)))"
        )

        assert list(parsed.hosts) == [Host("primary", 1521), Host("standby", 1522)]

    def test_missing_host(self):
        """Test a descriptor without HOST yields no hosts."""
        parsed = parse("jdbc:oracle:thin:@(DESCRIPTION=(CONNECT_DATA=(SERVICE_NAME=svc)))")

        assert parsed.hosts == ()
        assert parsed.database == "svc"

    def test_missing_port_and_database(self):
        """Test optional descriptor parts degrade to defaults."""
        parsed = parse("jdbc:oracle:thin:@(DESCRIPTION=(ADDRESS=(HOST=dbhost)(PORT=abc)))")

        assert parsed.hosts == (Host("dbhost"),)
        assert parsed.database == ""

    def test_pathological_nesting_is_linear(self):
        """Test deeply nested input is scanned quickly."""
        descriptor = "(DESCRIPTION=" + "(A=" * 50000 + ")" * 10 + "(HOST=x" * 1000
        start = time.perf_counter()
        parse("jdbc:oracle:thin:@" + descriptor)

        assert time.perf_counter() - start < 5


class TestOracleMalformed:
    """Test Oracle grammar violations."""

    @pytest.mark.parametrize("url", [
        "jdbc:oracle:thin",
        "jdbc:oracle:thin:localhost:1521:ORCL",
        "jdbc:oracle:thin:@localhost",
        "jdbc:oracle:thin:@localhost:abc:ORCL",
        "jdbc:oracle:thin:@//localhost:1521:ORCL",
    ])
    def test_malformed(self, url):
        """Test unmatched sub-formats raise MalformedJDBCUrlError."""
        with pytest.raises(MalformedJDBCUrlError) as excinfo:
            parse(url)

        assert url in str(excinfo.value)


class TestScanDescriptor:
    """Test the descriptor scanner directly."""

    def test_first_value_wins(self):
        """Test repeated keys keep the first value."""
        summary = scan_descriptor("(D=(SERVICE_NAME=a)(SERVICE_NAME=b))")

        assert summary.values["SERVICE_NAME"] == "a"

    def test_unbalanced_close_ignored(self):
        """Test stray closing parentheses."""
        summary = scan_descriptor("))(ADDRESS=(HOST=h)(PORT=1))")

        assert summary.addresses == [("h", "1")]

    def test_truncated_descriptor(self):
        """Test groups left open still report their host."""
        summary = scan_descriptor("(DESCRIPTION=(ADDRESS=(HOST=h)(PORT=2)")

        assert summary.addresses == [("h", "2")]
