from typing import List
from fastapi import APIRouter, Query

from mei_dashboard.constants.categories import CATEGORIES_BY_GROUP, CategoryGroup

router = APIRouter(prefix="/categories", tags=["categories"])

@router.get("/", response_model=List[str])
def list_categories(type: CategoryGroup = Query(CategoryGroup.expense)):
    return list(CATEGORIES_BY_GROUP[type])
