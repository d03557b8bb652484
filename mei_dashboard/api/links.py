from typing import List
from fastapi import APIRouter

from mei_dashboard.constants.links import USEFUL_LINKS, UsefulLink

router = APIRouter(prefix="/links", tags=["links"])

@router.get("/", response_model=List[UsefulLink])
def list_useful_links():
    return list(USEFUL_LINKS)
