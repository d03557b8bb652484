import logging
from fastapi import APIRouter, HTTPException, Depends, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlmodel import Session, select
from mei_dashboard.models.user import User
from mei_dashboard.models.profile import Profile
from mei_dashboard.schemas.user import UserCreate, UserRead
from mei_dashboard.core.security import (
    get_password_hash,
    verify_password,
    create_access_token,
)
from mei_dashboard.database import get_session

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])

# Cadastro
@router.post("/register", response_model=UserRead)
def register(user_create: UserCreate, session: Session = Depends(get_session)):
    user_exists = session.exec(select(User).where(User.email == user_create.email)).first()
    if user_exists:
        raise HTTPException(status_code=400, detail="Email já cadastrado")

    hashed_pwd = get_password_hash(user_create.password)
    user = User(email=user_create.email, hashed_password=hashed_pwd)
    session.add(user)
    session.commit()
    session.refresh(user)

    # O perfil nasce junto com a conta e usa o mesmo id
    profile = Profile(id=user.id, full_name=user_create.full_name, cnpj=user_create.cnpj)
    session.add(profile)
    session.commit()

    logger.info("Usuário %s cadastrado", user.id)
    return UserRead(id=user.id, email=user.email)

# Login
@router.post("/login")
def login(form_data: OAuth2PasswordRequestForm = Depends(), session: Session = Depends(get_session)):
    user = session.exec(select(User).where(User.email == form_data.username)).first()
    if not user or not verify_password(form_data.password, user.hashed_password):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Credenciais incorretas")

    access_token = create_access_token(data={"sub": str(user.id)})
    return {"access_token": access_token, "token_type": "bearer"}
