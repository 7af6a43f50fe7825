"""Custom SQLAlchemy column types."""

from sqlalchemy import Text
from sqlalchemy.dialects import postgresql
from sqlalchemy.types import TypeDecorator

from app.db.arrays import format_array_literal, parse_array_literal


class TextArray(TypeDecorator):
    """List of strings stored as ``TEXT[]`` on PostgreSQL.

    Other engines (SQLite in development and tests) get a ``TEXT`` column
    holding the same array literal PostgreSQL prints for ``text[]``, so
    ``CAST(column AS TEXT)`` yields comparable text on every backend.
    """

    impl = Text
    cache_ok = True

    def load_dialect_impl(self, dialect):
        if dialect.name == "postgresql":
            return dialect.type_descriptor(postgresql.ARRAY(Text()))
        return dialect.type_descriptor(Text())

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        if dialect.name == "postgresql":
            return list(value)
        return format_array_literal(value)

    def process_result_value(self, value, dialect):
        if value is None:
            return []
        if isinstance(value, str):
            return parse_array_literal(value)
        return list(value)
