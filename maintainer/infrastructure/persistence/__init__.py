"""Persistence layer: engine, ORM models, repositories and migrations."""
