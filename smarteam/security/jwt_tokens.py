import datetime as dt
from typing import Any, Dict, NamedTuple, Optional

import jwt

from smarteam.core.settings import settings
from smarteam.models.user import ROLES


class InvalidToken(Exception):
    """Raised when a session token fails signature, shape or expiry checks."""


class TokenClaims(NamedTuple):
    user_id: int
    role: str


def _utc_now() -> dt.datetime:
    return dt.datetime.now(tz=dt.timezone.utc)


def issue_token(user_id: int, role: str, now: Optional[dt.datetime] = None) -> str:
    issued_at = now or _utc_now()
    payload: Dict[str, Any] = {
        "sub": str(user_id),
        "role": role,
        "type": "access",
        "iat": issued_at,
        "exp": issued_at + dt.timedelta(minutes=settings.token_expires_minutes),
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str) -> TokenClaims:
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["exp", "sub"]},
        )
    except jwt.PyJWTError as exc:
        raise InvalidToken(str(exc)) from exc

    if payload.get("type") != "access":
        raise InvalidToken("Not an access token")
    role = payload.get("role")
    if role not in ROLES:
        raise InvalidToken("Missing or unknown role")
    try:
        user_id = int(payload["sub"])
    except (TypeError, ValueError) as exc:
        raise InvalidToken("Malformed subject") from exc
    return TokenClaims(user_id=user_id, role=role)
