"""Auth Service — database engine, session helpers and the users table."""

import logging

from sqlalchemy import create_engine, Column, String
from sqlalchemy.orm import sessionmaker, declarative_base

from auth_service.config import DATABASE_PATH

logger = logging.getLogger(__name__)

DATABASE_URL = f"sqlite:///{DATABASE_PATH}"

engine = create_engine(DATABASE_URL, connect_args={"check_same_thread": False})
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


class DBUser(Base):
    __tablename__ = "users"

    id = Column(String, primary_key=True, index=True)
    email = Column(String, unique=True, nullable=False, index=True)
    password_hash = Column(String, nullable=False)
    full_name = Column(String, nullable=True)
    created_at = Column(String, nullable=False)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_session():
    """Returns a direct session, for use outside a request (init, scripts, tests)."""
    return SessionLocal()


def init_db():
    Base.metadata.create_all(bind=engine)
    logger.info("Database initialized at %s", DATABASE_PATH)
