from fastapi import Request

from coursebuilder.config import settings
from coursebuilder.services.catalog_loader import CatalogSnapshot, load_catalog


def get_catalog(request: Request) -> CatalogSnapshot:
    """The snapshot loaded at startup; loaded on first use if lifespan never ran."""
    catalog = getattr(request.app.state, "catalog", None)
    if catalog is None:
        catalog = load_catalog(settings.data_dir)
        request.app.state.catalog = catalog
    return catalog
