"""
Auth workflow — registration and login.

Every path returns an AuthResult; validation failures are results, not
exceptions, and collaborator errors (StorageError, TokenError) are caught
here and folded into the message.
"""

import logging
import re
from typing import Optional

from auth_service.exceptions import StorageError, TokenError
from auth_service.models import AuthResult, UserRegister

logger = logging.getLogger(__name__)

PASSWORD_PATTERN = re.compile(r"(?=.*[A-Z])(?=.*[a-z])(?=.*[0-9])(?=.*[@$!%*?&]).{8,}")

PASSWORD_RULES = (
    "Password must be at least 8 characters with 1 uppercase, 1 lowercase, "
    "1 number, and 1 special character"
)


# Control characters and space (U+0000..U+0020); other Unicode whitespace is content.
TRIM_CHARS = "".join(chr(c) for c in range(0x21))


def is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip(TRIM_CHARS)


def is_strong_password(password: str) -> bool:
    return PASSWORD_PATTERN.fullmatch(password) is not None


class AuthService:
    def __init__(self, store, issuer):
        self.store = store
        self.issuer = issuer

    def register(self, candidate: UserRegister) -> AuthResult:
        email = candidate.email
        if is_blank(email):
            return AuthResult(success=False, message="Email is required")

        try:
            exists = self.store.exists_by_email(email)
        except StorageError as e:
            logger.error("Error during registration: %s", e)
            return AuthResult(success=False, message=f"Registration failed: {e}")

        if exists:
            logger.warning("Attempted registration with duplicate email: %s", email)
            return AuthResult(success=False, message="Email already exists")

        if is_blank(candidate.password):
            return AuthResult(success=False, message="Password is required")

        if not is_strong_password(candidate.password):
            logger.warning("Weak password attempt for email: %s", email)
            return AuthResult(success=False, message=PASSWORD_RULES)

        try:
            self.store.save(candidate)
        except StorageError as e:
            logger.error("Error during registration: %s", e)
            return AuthResult(success=False, message=f"Registration failed: {e}")

        logger.info("User registered successfully: %s", email)
        return AuthResult(success=True, message="User Registered Successfully")

    def login(self, email: Optional[str], password: Optional[str]) -> AuthResult:
        if is_blank(email) or is_blank(password):
            return AuthResult(success=False, message="Email and password are required")

        try:
            user = self.store.find_by_email(email)
        except StorageError as e:
            logger.error("Error during login: %s", e)
            return AuthResult(success=False, message=f"Login failed: {e}")

        if user is None:
            logger.warning("Login attempt with non-existent email: %s", email)
            return AuthResult(success=False, message="Invalid credentials")

        if not self.store.verify_password(user, password):
            logger.warning("Failed login attempt for email: %s", email)
            return AuthResult(success=False, message="Invalid credentials")

        try:
            token = self.issuer.generate_token(email)
        except TokenError as e:
            logger.error("Error generating token: %s", e)
            return AuthResult(success=False, message=f"Token generation failed: {e}")

        logger.info("User logged in successfully: %s", email)
        return AuthResult(success=True, message="Login successful", token=token)
