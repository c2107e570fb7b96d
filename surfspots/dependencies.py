"""Cached factories for the shared repository and store."""
from functools import lru_cache

from surfspots.data.spot_repository import SpotRepository
from surfspots.services.catalog_store import CatalogStore


@lru_cache()
def get_spot_repository() -> SpotRepository:
    """Get cached spot repository instance."""
    return SpotRepository()


@lru_cache()
def get_catalog_store() -> CatalogStore:
    """Get cached catalog store instance."""
    return CatalogStore(spot_repo=get_spot_repository())
