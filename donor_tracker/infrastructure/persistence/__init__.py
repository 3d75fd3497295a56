"""Persistence: database handle, ORM models, repositories, and the donor/task store."""
