"""Exceptions raised by the spot catalog."""


class CatalogError(Exception):
    """Base class for catalog errors."""


class LoadFailure(CatalogError):
    """Populating the catalog or fetching conditions failed."""
