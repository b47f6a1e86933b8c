from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from smarteam.db.session import get_db
from smarteam.models.user import User
from smarteam.security.deps import require_admin
from smarteam.schemas.auth import UserOut
from smarteam.services.users import list_users as list_all_users


router = APIRouter()


@router.get("/users", response_model=List[UserOut])
def list_users(_: User = Depends(require_admin), db: Session = Depends(get_db)) -> List[UserOut]:
    return list_all_users(db)
