from uuid import UUID
from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session

from mei_dashboard.core.security import get_current_user
from mei_dashboard.database import get_session
from mei_dashboard.models.profile import Profile
from mei_dashboard.schemas.user import ProfileRead

router = APIRouter(prefix="/profile", tags=["profile"])

@router.get("/me", response_model=ProfileRead)
def get_my_profile(
    user_id: UUID = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    profile = session.get(Profile, user_id)
    if not profile:
        raise HTTPException(status_code=404, detail="Perfil não encontrado")
    return profile
