# virtual_art/api/deps.py
from fastapi import Depends, HTTPException
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from virtual_art.data.database import get_db
from virtual_art.data.models.user import UserModel
from virtual_art.repos.user_repo import UserRepo
from virtual_art.services.auth_service import decode_access_token

bearer_scheme = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> UserModel:
    if credentials is None or not credentials.credentials:
        raise HTTPException(status_code=401, detail="No token provided")

    try:
        user_id = decode_access_token(credentials.credentials)
    except ValueError:
        raise HTTPException(status_code=401, detail="Invalid token")

    user = UserRepo(db).get_user(user_id)
    if not user:
        raise HTTPException(status_code=401, detail="User not found")

    if user.status == "suspended":
        raise HTTPException(status_code=403, detail="Account suspended")

    return user


def require_admin(user: UserModel = Depends(get_current_user)) -> UserModel:
    if user.user_type != "admin":
        raise HTTPException(status_code=403, detail="Admin access required")
    return user
