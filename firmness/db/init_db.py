# firmness/db/init_db.py
"""Database initialization and identity seeding."""
import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from firmness.config.settings import Settings, settings
from firmness.core.constants import UserRole
from firmness.core.security.password_hasher import PasswordHasher
from firmness.db.base import Base
from firmness.models import Role, User

logger = logging.getLogger(__name__)

ROLE_DESCRIPTIONS = {
    UserRole.ADMIN: "Manages the catalogue",
    UserRole.CUSTOMER: "Browses the catalogue",
}


def seed_roles(db: Session) -> None:
    """Create the Admin and Customer roles when missing."""
    existing = set(db.execute(select(Role.name)).scalars().all())
    for role, description in ROLE_DESCRIPTIONS.items():
        if role.value not in existing:
            db.add(Role(name=role.value, description=description))
            logger.info(f"Seeded role {role.value}")
    db.commit()


def seed_admin(db: Session, email: str, password: str, hasher: PasswordHasher) -> None:
    """Create an administrator account unless the email is already taken."""
    email = email.strip().lower()
    if db.execute(select(User).where(User.email == email)).scalar_one_or_none():
        return

    admin_role = db.execute(
        select(Role).where(Role.name == UserRole.ADMIN.value)
    ).scalar_one()
    db.add(
        User(
            email=email,
            full_name="System Admin",
            password_hash=hasher.hash(password),
            roles=[admin_role],
        )
    )
    db.commit()
    logger.info(f"Seeded admin account {email}")


def init_db(
    engine: Optional[Engine] = None,
    config: Optional[Settings] = None,
) -> None:
    """
    Create tables and seed identity data.

    Note: This is suitable for development/testing only.
    """
    config = config or settings
    if engine is None:
        from firmness.db.session import engine as default_engine

        engine = default_engine

    Base.metadata.create_all(bind=engine)
    logger.info("Database tables ensured")

    factory = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
    with factory() as db:
        seed_roles(db)
        if config.SEED_ADMIN_EMAIL and config.SEED_ADMIN_PASSWORD:
            seed_admin(
                db,
                config.SEED_ADMIN_EMAIL,
                config.SEED_ADMIN_PASSWORD,
                PasswordHasher(rounds=config.PASSWORD_BCRYPT_ROUNDS),
            )


def drop_db(engine: Engine) -> None:
    """
    Drop all database tables.

    WARNING: This will delete all data! Only for development/testing purposes.
    """
    Base.metadata.drop_all(bind=engine)
    logger.warning("All database tables dropped")
