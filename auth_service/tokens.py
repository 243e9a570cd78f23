"""JWT session tokens (PyJWT, HS256) keyed on the user's email."""

import time

import jwt

from auth_service.exceptions import TokenError


class TokenIssuer:
    """Signs and checks session tokens.

    Args:
        secret: HMAC key used for signing. An empty key refuses to sign.
        expiry_seconds: Token lifetime.
        algorithm: JWT signing algorithm (default HS256).
    """

    def __init__(self, secret: str, expiry_seconds: int = 86400, algorithm: str = "HS256"):
        self.secret = secret
        self.expiry_seconds = expiry_seconds
        self.algorithm = algorithm

    def generate_token(self, subject: str) -> str:
        if not self.secret:
            raise TokenError("signing key is not configured")
        now = int(time.time())
        payload = {
            "sub": subject,
            "iat": now,
            "exp": now + self.expiry_seconds,
        }
        try:
            return jwt.encode(payload, self.secret, algorithm=self.algorithm)
        except (jwt.PyJWTError, TypeError, ValueError) as e:
            raise TokenError(str(e))

    def verify_token(self, token: str) -> dict:
        """Decode a token (optionally ``Bearer``-prefixed) and return its claims.

        Raises ``TokenError`` when the token is expired, tampered with or malformed.
        """
        if token.startswith("Bearer "):
            token = token[7:]
        try:
            return jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                options={"require": ["sub", "exp"]},
            )
        except jwt.ExpiredSignatureError:
            raise TokenError("Token expired")
        except jwt.InvalidTokenError:
            raise TokenError("Invalid token")
