"""Persistence adapter: SQLAlchemy async engine, ORM models, repositories."""
