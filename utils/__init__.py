"""Shared schemas and error kinds."""
