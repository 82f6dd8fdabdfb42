"""Act catalog adapters."""

from vote_party.infrastructure.catalog.json_catalog import JsonActCatalog

__all__ = ["JsonActCatalog"]
