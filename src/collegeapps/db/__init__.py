"""Persistence layer: SQLAlchemy schema, sessions, and repository queries."""
