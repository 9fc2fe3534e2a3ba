"""Database package: SQLAlchemy declarative Base shared by all ORM models."""
