from datetime import datetime, timedelta
from jose import JWTError, jwt
from tasktrack.core.config import Settings, settings as default_settings
from tasktrack.core.database import MAX_ROW_ID

ALGORITHM = "HS256"

def create_access_token(user_id: int, username: str, settings: Settings = default_settings) -> str:
    #crée un token d'accès JWT (8h par défaut)
    payload = {
        "user_id": user_id,
        "username": username,
        "exp": datetime.utcnow() + timedelta(minutes=settings.JWT_EXPIRE_MIN),
        "type": "access"
    }
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=ALGORITHM)

def verify_token(token: str, settings: Settings = default_settings) -> dict | None:
    try:
        return jwt.decode(token, settings.JWT_SECRET, algorithms=[ALGORITHM])
    except JWTError:
        return None

def decode_token(token: str, settings: Settings = default_settings) -> int | None:
    payload = verify_token(token, settings)
    if payload is None or payload.get("type") != "access":
        return None
    user_id = payload.get("user_id")
    if not isinstance(user_id, int) or not 1 <= user_id <= MAX_ROW_ID:
        return None
    return user_id
