"""
Infrastructure Layer

Adapters implementing the domain's store and catalog interfaces:
- persistence/: SQLite stores via aiosqlite
- catalog/: JSON-file act catalog
"""
