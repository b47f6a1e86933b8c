import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from smarteam.db.session import get_db
from smarteam.models.user import User, ROLE_USER
from smarteam.schemas.auth import RegisterRequest, LoginRequest, TokenResponse, MeResponse
from smarteam.security.deps import get_current_user
from smarteam.security.jwt_tokens import issue_token
from smarteam.security.passwords import DUMMY_HASH, hash_password, verify_password
from smarteam.services.users import DuplicateKey, create_user, find_by_email

logger = logging.getLogger(__name__)

router = APIRouter()


# Plain `def` endpoints run on FastAPI's thread pool, so password hashing
# never blocks the event loop.


@router.post("/register", response_model=TokenResponse)
def register(payload: RegisterRequest, db: Session = Depends(get_db)) -> TokenResponse:
    try:
        user = create_user(db, email=payload.email, password_hash=hash_password(payload.password), role=ROLE_USER)
    except DuplicateKey:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="User already exists")

    logger.info("Registered user id=%s", user.id)
    return TokenResponse(token=issue_token(user.id, user.role), role=user.role)


@router.post("/login", response_model=TokenResponse)
def login(payload: LoginRequest, db: Session = Depends(get_db)) -> TokenResponse:
    user: Optional[User] = find_by_email(db, payload.email)
    if user is None:
        # Same hashing cost as a wrong password, so timing does not reveal the email
        verify_password(payload.password, DUMMY_HASH)
    if user is None or not verify_password(payload.password, user.hashed_password):
        logger.info("Failed login attempt")
        # 400 rather than 401 is the established contract for this endpoint
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid credentials")

    return TokenResponse(token=issue_token(user.id, user.role), role=user.role)


@router.get("/me", response_model=MeResponse)
def me(user: User = Depends(get_current_user)) -> MeResponse:
    return MeResponse.model_validate(user)
