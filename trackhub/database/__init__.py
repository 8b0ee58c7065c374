"""Relational storage: models, lifecycle and seed data."""
