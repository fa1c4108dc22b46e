from fastapi import APIRouter, Depends

from coursebuilder.dependencies import get_catalog
from coursebuilder.schemas.catalog import LearningPath
from coursebuilder.schemas.common import Envelope
from coursebuilder.services import catalog_service
from coursebuilder.services.catalog_loader import CatalogSnapshot

router = APIRouter(prefix="/api/learning-paths", tags=["learning-paths"])


@router.get("", response_model=Envelope[list[LearningPath]])
async def list_learning_paths(catalog: CatalogSnapshot = Depends(get_catalog)):
    return Envelope(data=catalog_service.list_learning_paths(catalog))


@router.get("/{path_id}", response_model=Envelope[LearningPath])
async def get_learning_path(
    path_id: str,
    catalog: CatalogSnapshot = Depends(get_catalog),
):
    return Envelope(data=catalog_service.get_learning_path(catalog, path_id=path_id))
