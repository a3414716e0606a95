"""Persistence: engine, ORM models and stores."""
