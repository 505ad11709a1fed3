"""
Learning hub endpoints.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from app.core.store import MemoryStore, get_store
from app.schemas.catalog import LearningLevel, LearningResourceResponse
from app.services.catalog_repository import LearningResourceRepository

router = APIRouter(prefix="/learning-resources", tags=["Learning Hub"])


@router.get("", response_model=List[LearningResourceResponse])
def get_learning_resources(
    level: Optional[LearningLevel] = Query(None),
    store: MemoryStore = Depends(get_store),
):
    return LearningResourceRepository.get_all(store, level)


@router.get("/recommended", response_model=List[LearningResourceResponse])
def get_recommended_learning_resources(store: MemoryStore = Depends(get_store)):
    return LearningResourceRepository.get_recommended(store)
