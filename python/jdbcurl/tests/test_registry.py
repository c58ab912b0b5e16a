"""Tests for dialect registries."""

import pytest

from jdbcurl import DatabaseProduct, DialectBinding, DialectRegistry, JDBCUrlParser, UnsupportedDatabaseError
from jdbcurl.dialects import NetworkDialect, OracleDialect, SQLiteDialect


class TestDialectRegistry:
    """Test binding lookup."""

    def test_default_covers_all_products(self):
        """Test every known product has a dialect."""
        known = {product for product in DatabaseProduct if product is not DatabaseProduct.UNKNOWN}

        assert DialectRegistry.default().products == known

    def test_default_is_shared(self):
        """Test the default registry is built once."""
        assert DialectRegistry.default() is DialectRegistry.default()

    def test_find(self):
        """Test lookup returns the bound dialect."""
        registry = DialectRegistry.default()

        assert isinstance(registry.find(DatabaseProduct.MARIADB), NetworkDialect)
        assert isinstance(registry.find(DatabaseProduct.ORACLE), OracleDialect)
        assert registry.find(DatabaseProduct.UNKNOWN) is None

    def test_first_binding_wins(self):
        """Test earlier bindings shadow later ones."""
        first = NetworkDialect()
        registry = DialectRegistry(bindings=(
            DialectBinding(frozenset({DatabaseProduct.MYSQL}), first),
            DialectBinding(frozenset({DatabaseProduct.MYSQL}), NetworkDialect()),
        ))

        assert registry.find(DatabaseProduct.MYSQL) is first

    def test_registry_is_read_only(self):
        """Test registries cannot be rebound."""
        registry = DialectRegistry(bindings=())

        with pytest.raises(AttributeError):
            registry.bindings = ()


class TestCustomRegistry:
    """Test parsers built on a custom registry."""

    def test_missing_binding_is_unsupported(self):
        """Test a detected product without a dialect."""
        parser = JDBCUrlParser(DialectRegistry(bindings=(
            DialectBinding(frozenset({DatabaseProduct.SQLITE}), SQLiteDialect()),
        )))

        assert parser.parse("jdbc:sqlite:app.db").database == "app.db"
        with pytest.raises(UnsupportedDatabaseError):
            parser.parse("jdbc:mysql://localhost/db")

    def test_default_parser_registry(self):
        """Test omitting the registry uses the default one."""
        assert JDBCUrlParser().registry is DialectRegistry.default()
