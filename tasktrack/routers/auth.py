from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from tasktrack.core.auth import get_settings
from tasktrack.core.config import Settings
from tasktrack.core.database import get_db
from tasktrack.core.security import create_access_token
from tasktrack.schemas.user import UserCreate, UserResponse, LoginRequest, TokenResponse
from tasktrack.services.user_service import register_user, authenticate_user

router = APIRouter(prefix="/auth", tags=["auth"])

@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def register(user_data: UserCreate, db: Session = Depends(get_db)):
    """Créer un nouvel utilisateur"""
    return register_user(db, user_data.username, user_data.password, user_data.email)

@router.post("/login", response_model=TokenResponse)
def login(credentials: LoginRequest, db: Session = Depends(get_db), settings: Settings = Depends(get_settings)):
    """Se connecter et recevoir le token"""
    user = authenticate_user(db, credentials.username, credentials.password)
    token = create_access_token(user.id, user.username, settings)

    return {
        "token": token,
        "user": {"id": user.id, "username": user.username}
    }
