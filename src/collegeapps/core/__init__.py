"""Core application logic: duplicate guard and submission/lookup service.

- Reads and writes through an ApplicationStore passed in by the caller
- Forbidden: HTTP concerns, direct SQLAlchemy access
"""
