"""Built-in dialect presets."""

from __future__ import annotations

from sqlaqt.dialect.base import Dialect
from sqlaqt.dialect.registry import DialectRegistry


@DialectRegistry.register("sql")
class AnsiDialect(Dialect):
    """ANSI SQL: double-quoted identifiers."""

    @property
    def name(self) -> str:
        return "ansi"

    @property
    def quote_chars(self) -> tuple[str, str]:
        return ('"', '"')

    @property
    def sqlglot_dialect(self) -> str | None:
        return None


@DialectRegistry.register("postgresql", "pg")
class PostgresDialect(Dialect):
    @property
    def name(self) -> str:
        return "postgres"

    @property
    def quote_chars(self) -> tuple[str, str]:
        return ('"', '"')


@DialectRegistry.register("sqlite3")
class SQLiteDialect(Dialect):
    @property
    def name(self) -> str:
        return "sqlite"

    @property
    def quote_chars(self) -> tuple[str, str]:
        return ('"', '"')


@DialectRegistry.register("mariadb")
class MySQLDialect(Dialect):
    """MySQL / MariaDB: backtick-quoted identifiers."""

    @property
    def name(self) -> str:
        return "mysql"

    @property
    def quote_chars(self) -> tuple[str, str]:
        return ("`", "`")


@DialectRegistry.register("mssql", "sqlserver")
class TSQLDialect(Dialect):
    """SQL Server: bracket-quoted identifiers with distinct open/close characters."""

    @property
    def name(self) -> str:
        return "tsql"

    @property
    def quote_chars(self) -> tuple[str, str]:
        return ("[", "]")
