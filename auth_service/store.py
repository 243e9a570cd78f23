"""Credential store — the users table behind the auth workflow.

Passwords are kept as salted bcrypt hashes; callers hand in the plaintext on
``save`` and ask ``verify_password`` at login, so the hash never leaves here.
Database failures surface as ``StorageError``.
"""

import base64
import hashlib
import uuid
from datetime import datetime, timezone
from typing import Optional

import bcrypt
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from auth_service.database import DBUser
from auth_service.exceptions import StorageError
from auth_service.models import UserRegister


def _password_bytes(password: str) -> bytes:
    """SHA-256 digest, base64 encoded, so bcrypt's 72-byte cap sees the whole password.

    Raises ``UnicodeEncodeError`` for strings that are not valid UTF-8 (lone surrogates).
    """
    return base64.b64encode(hashlib.sha256(password.encode()).digest())


def hash_password(password: str) -> str:
    return bcrypt.hashpw(_password_bytes(password), bcrypt.gensalt()).decode()


def check_password(password: str, hashed: str) -> bool:
    try:
        return bcrypt.checkpw(_password_bytes(password), hashed.encode())
    except (ValueError, TypeError):
        return False


class UserStore:
    def __init__(self, db: Session):
        self.db = db

    def exists_by_email(self, email: str) -> bool:
        try:
            return self.db.query(DBUser.id).filter(DBUser.email == email).first() is not None
        except UnicodeEncodeError:
            raise StorageError("Email could not be encoded")
        except SQLAlchemyError as e:
            raise StorageError(str(e))

    def find_by_email(self, email: str) -> Optional[DBUser]:
        try:
            return self.db.query(DBUser).filter(DBUser.email == email).first()
        except UnicodeEncodeError:
            raise StorageError("Email could not be encoded")
        except SQLAlchemyError as e:
            raise StorageError(str(e))

    def save(self, candidate: UserRegister) -> DBUser:
        try:
            password_hash = hash_password(candidate.password)
        except UnicodeEncodeError:
            raise StorageError("Password could not be encoded")

        user = DBUser(
            id=str(uuid.uuid4()),
            email=candidate.email,
            password_hash=password_hash,
            full_name=candidate.full_name,
            created_at=datetime.now(timezone.utc).isoformat(),
        )
        try:
            self.db.add(user)
            self.db.commit()
        except IntegrityError:
            # unique constraint on email; a concurrent register won the race
            self.db.rollback()
            raise StorageError("Email already exists")
        except UnicodeEncodeError:
            self.db.rollback()
            raise StorageError("Profile fields could not be encoded")
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StorageError(str(e))
        return user

    def verify_password(self, user: DBUser, password: str) -> bool:
        return check_password(password, user.password_hash)
