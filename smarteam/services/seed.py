import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from smarteam.core.settings import Settings
from smarteam.models.user import User, ROLE_ADMIN
from smarteam.security.passwords import hash_password
from smarteam.services.users import DuplicateKey, create_user, find_admin, find_by_email


logger = logging.getLogger(__name__)


def seed_admin(db: Session, config: Settings) -> Optional[User]:
    """Make sure at least one administrator exists.

    Safe to run repeatedly. Storage failures are logged and swallowed so the
    API still comes up without a seeded admin.
    """
    try:
        admin = find_admin(db)
        if admin is not None:
            logger.info("Admin already exists.")
            return admin

        logger.info("No admin found, seeding default admin...")
        try:
            admin = create_user(
                db,
                email=config.admin_email,
                password_hash=hash_password(config.admin_password),
                role=ROLE_ADMIN,
            )
        except DuplicateKey:
            # Another process seeded first, or the address belongs to a plain user
            existing = find_by_email(db, config.admin_email)
            if existing is not None and existing.role == ROLE_ADMIN:
                logger.info("Admin already exists.")
                return existing
            logger.error("Seeding admin failed: %s is registered without the admin role", config.admin_email)
            return None
        logger.info("Admin seeded!")
        return admin
    except SQLAlchemyError:
        logger.exception("Seeding admin failed")
        return None
