"""Infrastructure: persistence (SQLite via SQLAlchemy) and external API clients."""
