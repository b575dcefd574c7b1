"""Infrastructure: persistence (SQLAlchemy) and password hashing."""
