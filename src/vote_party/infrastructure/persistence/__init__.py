"""Persistence adapters backed by SQLite."""
