from sqlalchemy import CheckConstraint, Column, Integer, String, DateTime, func

from smarteam.db.session import Base


ROLE_USER = "user"
ROLE_ADMIN = "admin"
ROLES = (ROLE_USER, ROLE_ADMIN)


class User(Base):
    __tablename__ = "users"
    __table_args__ = (
        CheckConstraint(
            "role IN ({})".format(", ".join(f"'{role}'" for role in ROLES)),
            name="ck_users_role",
        ),
    )

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, index=True, nullable=False)
    hashed_password = Column(String(255), nullable=False)
    role = Column(String(20), nullable=False, server_default=ROLE_USER, default=ROLE_USER)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
