from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import APIKeyHeader
from sqlalchemy.orm import Session

from smarteam.core.settings import settings
from smarteam.db.session import get_db
from smarteam.models.user import User, ROLE_ADMIN
from smarteam.security.jwt_tokens import InvalidToken, verify_token
from smarteam.services.users import find_by_id


_token_header = APIKeyHeader(name=settings.token_header_name, auto_error=False)


def get_current_user(
    token: Optional[str] = Depends(_token_header),
    db: Session = Depends(get_db),
) -> User:
    if not token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="No token, authorization denied")
    try:
        claims = verify_token(token)
    except InvalidToken:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Token is not valid")
    # Role comes from the store, not from the token
    user = find_by_id(db, claims.user_id)
    if not user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="User not found")
    return user


def require_admin(user: User = Depends(get_current_user)) -> User:
    if user.role != ROLE_ADMIN:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Admin required")
    return user
