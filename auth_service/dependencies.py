from fastapi import Depends
from sqlalchemy.orm import Session

from auth_service.config import SECRET_KEY, TOKEN_EXPIRY_SECONDS
from auth_service.database import get_db
from auth_service.service import AuthService
from auth_service.store import UserStore
from auth_service.tokens import TokenIssuer


def get_token_issuer() -> TokenIssuer:
    return TokenIssuer(SECRET_KEY, expiry_seconds=TOKEN_EXPIRY_SECONDS)


def get_auth_service(
    db: Session = Depends(get_db),
    issuer: TokenIssuer = Depends(get_token_issuer),
) -> AuthService:
    return AuthService(UserStore(db), issuer)
